"""Service-level error kinds. The API layer maps each to a stable HTTP status."""


class ServiceError(Exception):
    """Base class for failures raised by the service layer."""

    status_code = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidArgumentError(ServiceError):
    """Missing or malformed input, detected before touching the store."""

    status_code = 400


class UnauthenticatedError(ServiceError):
    """Missing, malformed, invalid or expired credentials."""

    status_code = 401


class ForbiddenError(ServiceError):
    """Authenticated, but not the owner of the target resource."""

    status_code = 403


class NotFoundError(ServiceError):
    status_code = 404


class ConflictError(ServiceError):
    """Username or email already taken by another account."""

    status_code = 400


class InternalError(ServiceError):
    """Unexpected store or token-signing failure."""

    status_code = 500
