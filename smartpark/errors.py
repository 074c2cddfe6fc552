"""
Error taxonomy shared by the services, the HTTP layer and the client.

Every error carries a human-readable message that is sent to callers
verbatim as ``{"message": ...}`` together with its HTTP status.
"""
from typing import Dict, Type


class SmartParkError(Exception):
    """Base exception for SmartPark errors."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class ValidationError(SmartParkError):
    """Missing or malformed input."""

    status_code = 400


class AuthError(SmartParkError):
    """Bad credentials or no valid session."""

    status_code = 401


class NotFoundError(SmartParkError):
    """No row for the requested key."""

    status_code = 404


class ConflictError(SmartParkError):
    """Uniqueness or reference violation."""

    status_code = 409


class InternalError(SmartParkError):
    """Store or unexpected failure. The message never carries internals."""

    status_code = 500

    def __init__(self, message: str = "Server error"):
        super().__init__(message)


_BY_STATUS: Dict[int, Type[SmartParkError]] = {
    400: ValidationError,
    401: AuthError,
    404: NotFoundError,
    409: ConflictError,
    500: InternalError,
}


def error_for_status(status_code: int, message: str) -> SmartParkError:
    """Build the error matching an HTTP status, falling back to the base class."""
    error_cls = _BY_STATUS.get(status_code)
    if error_cls is None:
        return SmartParkError(message, status_code=status_code)
    return error_cls(message)
