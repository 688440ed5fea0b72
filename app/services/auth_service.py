import logging

from werkzeug.security import generate_password_hash, check_password_hash

from app.errors import AuthError, ConflictError, ValidationError
from app.models.user_model import Identity
from app.repositories import user_repository


logger = logging.getLogger(__name__)


def _require_non_empty_string(value):
    return isinstance(value, str) and value.strip()


def register(username, password):
    if not _require_non_empty_string(username) or not _require_non_empty_string(password):
        raise ValidationError("Username and password are required")

    username = username.strip()

    def ensure_unique(users):
        if any(user.username == username for user in users):
            raise ConflictError("Username already exists")

    password_hash = generate_password_hash(password)
    user = user_repository.create_user(
        username=username,
        password_hash=password_hash,
        exists_check=ensure_unique,
    )

    logger.info("Registered user %s", user.id)
    return user.to_public_dict()


def login(username, password):
    if not _require_non_empty_string(username) or not _require_non_empty_string(password):
        raise ValidationError("Username and password are required")

    username = username.strip()

    user = user_repository.get_by_username(username)
    if not user or not user.password_hash or not check_password_hash(user.password_hash, password):
        raise AuthError("Invalid username or password")

    return user.to_public_dict()


def resolve_identity(user_id, username=None, require_username=True, unknown_error=None):
    """
    Check that an asserted identity names a registered user.

    When ``require_username`` is off the username may be omitted, but a
    supplied one must still match. ``unknown_error`` replaces the default
    AuthError for ids that do not name a user.
    """
    if not _require_non_empty_string(user_id):
        raise ValidationError("userId is required")
    if require_username and not _require_non_empty_string(username):
        raise ValidationError("userId and username are required")

    user = user_repository.get_by_id(user_id)
    if not user or (username is not None and user.username != username):
        raise unknown_error or AuthError("Unknown user")

    return Identity(user_id=user.id, username=user.username)
