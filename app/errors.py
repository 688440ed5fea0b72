class ServiceError(ValueError):
    """Base class for errors reported to the caller of a core operation."""

    status_code = 400
    default_message = "Request failed"

    def __init__(self, message=None):
        super().__init__(message or self.default_message)


class ValidationError(ServiceError):
    status_code = 400
    default_message = "Missing fields"


class AuthError(ServiceError):
    status_code = 401
    default_message = "Invalid username or password"


class AuthorizationError(ServiceError):
    status_code = 403
    default_message = "Not authorized"


class NotFoundError(ServiceError):
    status_code = 404
    default_message = "Not found"


class ConflictError(ServiceError):
    status_code = 409
    default_message = "Username already exists"


class StateConflictError(ServiceError):
    status_code = 409
    default_message = "Reaction conflict"


class StorageError(ServiceError):
    status_code = 503
    default_message = "Storage is unavailable"
