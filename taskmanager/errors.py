"""Service-layer exceptions mapped to HTTP responses.

Each exception carries an HTTP ``status_code`` and a stable ``error_code`` so
clients can branch on the kind of failure without parsing messages:

- validation_error (400)
- unauthorized (401)
- forbidden (403)
- not_found (404)
- conflict (409)
"""


class ServiceError(Exception):
    """Base class for service-layer exceptions."""

    status_code: int = 400
    error_code: str = "validation_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    """Request data is malformed or invalid (400)."""

    status_code = 400
    error_code = "validation_error"


class UnauthorizedError(ServiceError):
    """Missing, invalid or expired credentials (401)."""

    status_code = 401
    error_code = "unauthorized"


class ForbiddenError(ServiceError):
    """Valid identity, but not the owner of the resource (403)."""

    status_code = 403
    error_code = "forbidden"


class NotFoundError(ServiceError):
    """Requested resource not found (404)."""

    status_code = 404
    error_code = "not_found"


class ConflictError(ServiceError):
    """Uniqueness violation, e.g. duplicate email or task title (409)."""

    status_code = 409
    error_code = "conflict"


__all__ = [
    "ServiceError",
    "ValidationError",
    "UnauthorizedError",
    "ForbiddenError",
    "NotFoundError",
    "ConflictError",
]
