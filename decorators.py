"""
Request decorators for the JSON API
"""
from functools import wraps
from flask import request, jsonify


def json_body_required(f):
    """
    Decorator rejecting requests whose body is not a JSON object.

    The decoded object is passed to the view as the ``payload`` keyword.

    Example:
        @json_body_required
        def create(payload):
            pass
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            return jsonify({'success': False, 'error': 'Request body must be a JSON object'}), 400
        return f(*args, payload=payload, **kwargs)
    return decorated_function
