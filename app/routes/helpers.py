from flask import jsonify, request
from marshmallow import ValidationError as SchemaValidationError

from app.errors import ServiceError, ValidationError
from app.services import auth_service


class InvalidBody(ServiceError):
    status_code = 400
    default_message = "Invalid JSON body"


def load_body(schema):
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidBody()

    try:
        return schema.load(data)
    except SchemaValidationError as e:
        raise ValidationError(_flatten_messages(e.messages)) from e


def _flatten_messages(messages):
    if isinstance(messages, dict):
        parts = []
        for field_name, errors in sorted(messages.items()):
            if isinstance(errors, (list, tuple)):
                errors = " ".join(str(err) for err in errors)
            parts.append(f"{field_name}: {errors}")
        return "; ".join(parts)
    return str(messages)


def current_identity(data):
    return auth_service.resolve_identity(data.get("user_id"), data.get("username"))


def current_actor(data, unknown_error=None):
    """Identity for operations keyed by userId alone; username is optional."""
    return auth_service.resolve_identity(
        data.get("user_id"),
        data.get("username"),
        require_username=False,
        unknown_error=unknown_error,
    )


def error_response(error: ServiceError):
    return jsonify({"error": str(error)}), error.status_code
