from flask import Blueprint, jsonify
from scorecard.course import course_config
from scorecard.services import course_settings
from scorecard.validation import json_body


course = Blueprint('course', __name__)


@course.route('/<string:course_type>', methods=['GET'])
def get_course(course_type):
    cfg = course_config(course_type)
    if not cfg:
        return jsonify({'error': 'Course type not found'}), 404
    return jsonify(cfg)


@course.route('/<string:course_type>/settings', methods=['GET'])
def get_settings(course_type):
    return jsonify(course_settings.get_settings(course_type))


@course.route('/<string:course_type>/settings', methods=['PUT'])
def put_settings(course_type):
    data = json_body()
    setting = course_settings.save_settings(course_type, data)
    return jsonify(setting.to_dict())
