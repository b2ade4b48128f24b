import re

from flask import current_app, request

from scorecard.course import COURSE_TYPES
from scorecard.services.games.errors import ValidationError

_INT_RE = re.compile(r'-?[0-9]+')


def json_body():
    """The request's JSON object, or {} when there is no JSON body."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')
    return data


def require_int(data, key, label=None):
    value = data.get(key)
    label = label or key
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or value is None:
        raise ValidationError(f'{label} is required and must be an integer')
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INT_RE.fullmatch(value.strip()):
        return int(value.strip())
    raise ValidationError(f'{label} is required and must be an integer')


def optional_int(data, key, label=None):
    if data.get(key) is None:
        return None
    return require_int(data, key, label)


def clean_name(value, label='Player name'):
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f'{label} is required')
    name = value.strip()
    max_len = int(current_app.config.get('MAX_NAME_LENGTH', 50))
    if len(name) > max_len:
        raise ValidationError(f'{label} must be at most {max_len} characters')
    return name


def clean_course_type(value):
    if value not in COURSE_TYPES:
        raise ValidationError(f"courseType must be one of: {', '.join(COURSE_TYPES)}")
    return value
