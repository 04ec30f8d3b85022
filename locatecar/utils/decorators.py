from functools import wraps

from flask import jsonify, request

from locatecar.exceptions import LocateCarError, ValidationError


def json_errors(fn):
    """Render typed core failures as a JSON error with their status code."""
    @wraps(fn)
    def wrapper(*args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except LocateCarError as e:
            return jsonify(error=e.message, type=e.__class__.__name__), e.status_code

    return wrapper


def require_fields(*fields):
    """Reject a JSON body that misses any of `fields` (blank counts as missing)."""
    def deco(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            body = request.get_json(silent=True) or {}
            missing = [f for f in fields if not str(body.get(f) or "").strip()]
            if missing:
                err = ValidationError(f"Error: missing field(s): {', '.join(missing)}")
                return jsonify(error=err.message, type=err.__class__.__name__), err.status_code
            return fn(*args, **kwargs)

        return wrapper

    return deco
