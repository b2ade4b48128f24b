import json

from flask import current_app

from scorecard import db
from scorecard.course import course_config
from scorecard.models import CourseSetting
from scorecard.services.games.errors import NotFoundError, ValidationError


def _require_course(course_type):
    if not course_config(course_type):
        raise NotFoundError('Course type not found')


def _optional_path(data, key):
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValidationError(f'{key} must be a string')
    return value or None


def get_settings(course_type) -> dict:
    _require_course(course_type)
    setting = db.session.get(CourseSetting, course_type)
    if setting is None:
        return CourseSetting(course_type=course_type).to_dict()
    return setting.to_dict()


def save_settings(course_type, data) -> CourseSetting:
    """Replace the stored settings for a course."""
    _require_course(course_type)
    coordinates = data.get('holeCoordinates') or []
    if not isinstance(coordinates, list):
        raise ValidationError('holeCoordinates must be a list')

    setting = db.session.get(CourseSetting, course_type)
    if setting is None:
        setting = CourseSetting(course_type=course_type)
        db.session.add(setting)
    setting.satellite_image_path = _optional_path(data, 'satelliteImagePath')
    setting.satellite_thumbnail_path = _optional_path(data, 'satelliteThumbnailPath')
    setting.hole_coordinates = json.dumps(coordinates)
    db.session.commit()
    current_app.logger.info(f"[course-settings] course={course_type} image={setting.satellite_image_path}")
    return setting
