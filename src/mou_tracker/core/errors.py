"""
Service Error Taxonomy

Every error raised by the service layer carries a human-readable message,
a machine-readable error code and the HTTP status it maps to. The global
handlers in error_handlers.py turn these into the response envelope.
"""


class ServiceError(Exception):
    """Base exception for service errors."""

    def __init__(self, message: str, error_code: str, status_code: int = 400):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        super().__init__(message)


class ValidationError(ServiceError):
    """Missing or malformed input."""

    def __init__(self, message: str, error_code: str = "VALIDATION_ERROR"):
        super().__init__(message=message, error_code=error_code, status_code=400)


class ConflictError(ServiceError):
    """A unique business key or email is already taken."""

    def __init__(self, message: str, error_code: str = "CONFLICT"):
        super().__init__(message=message, error_code=error_code, status_code=409)


class NotFoundError(ServiceError):
    """A referenced entity does not exist."""

    def __init__(self, message: str, error_code: str = "NOT_FOUND"):
        super().__init__(message=message, error_code=error_code, status_code=404)


class AuthError(ServiceError):
    """Missing or bad credentials."""

    def __init__(self, message: str, error_code: str = "INVALID_CREDENTIALS", status_code: int = 401):
        super().__init__(message=message, error_code=error_code, status_code=status_code)


class ForbiddenError(AuthError):
    """A token was presented but is invalid or expired."""

    def __init__(
        self,
        message: str = "Invalid or expired authentication token.",
        error_code: str = "INVALID_TOKEN",
    ):
        super().__init__(message=message, error_code=error_code, status_code=403)


class DependencyError(ServiceError):
    """The store or the mail provider failed."""

    def __init__(self, message: str, error_code: str = "DEPENDENCY_FAILURE"):
        super().__init__(message=message, error_code=error_code, status_code=500)


__all__ = [
    "ServiceError",
    "ValidationError",
    "ConflictError",
    "NotFoundError",
    "AuthError",
    "ForbiddenError",
    "DependencyError",
]
