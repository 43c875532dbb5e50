"""
Utility functions for the application.
"""
from typing import Optional

NAME_MAX_LENGTH = 200
AGE_MIN = 0
AGE_MAX = 150

TEXT_FIELDS = ('name', 'surname', 'phone_number')


def parse_integer(value, default: Optional[int] = None) -> Optional[int]:
    """
    Parse an integer from a JSON value.

    Accepts ints, floats without a fractional part and numeric strings.
    Booleans are rejected even though ``bool`` subclasses ``int``.

    Examples:
        >>> parse_integer('42')
        42
        >>> parse_integer(41.0)
        41
        >>> parse_integer(True)
        None
    """
    if value is None or isinstance(value, bool):
        return default

    if isinstance(value, int):
        return value

    if isinstance(value, float):
        return int(value) if value.is_integer() else default

    if isinstance(value, str):
        value = value.strip()
        if not value:
            return default
        try:
            return int(value)
        except ValueError:
            return default

    return default


def validate_record_payload(data):
    """
    Validate a create-record payload.

    Args:
        data: Decoded JSON object from the request body

    Returns:
        Tuple ``(values, errors)``. ``values`` holds cleaned fields ready for
        the store; ``errors`` maps each invalid field to a message and is
        empty when the payload is valid.
    """
    values = {}
    errors = {}

    if data.get('id') is not None:
        errors['id'] = 'The identifier is assigned by the server and must not be supplied.'

    for field in TEXT_FIELDS:
        raw = data.get(field)
        if raw is None:
            errors[field] = f'The {field} field is required.'
            continue
        if not isinstance(raw, str):
            errors[field] = f'The {field} field must be a string.'
            continue
        text = raw.strip()
        if not text:
            errors[field] = f'The {field} field is required.'
        elif len(text) > NAME_MAX_LENGTH:
            errors[field] = f'The {field} field must be at most {NAME_MAX_LENGTH} characters.'
        else:
            values[field] = text

    raw_age = data.get('age')
    if raw_age is None or (isinstance(raw_age, str) and not raw_age.strip()):
        errors['age'] = 'The age field is required.'
    else:
        age = parse_integer(raw_age)
        if age is None:
            errors['age'] = 'The age field must be an integer.'
        elif not AGE_MIN <= age <= AGE_MAX:
            errors['age'] = f'The age field must be between {AGE_MIN} and {AGE_MAX}.'
        else:
            values['age'] = age

    return values, errors
