"""Exception hierarchy for the admin API.

Each error carries the HTTP status it maps to, a message that is safe to show
to the client, and a short machine-readable code. Services raise these and the
exception handlers in ``looncamp.main`` turn them into the JSON envelope.
"""

from enum import Enum


class ErrorCode(str, Enum):
    MISSING_FIELD = "missing_field"
    DUPLICATE_SLUG = "duplicate_slug"
    DUPLICATE_EMAIL = "duplicate_email"
    INVALID_FIELD = "invalid_field"
    MISSING_TOKEN = "missing_token"
    INVALID_OR_EXPIRED = "invalid_or_expired"
    INVALID_CREDENTIALS = "invalid_credentials"
    NOT_FOUND = "not_found"
    STORAGE_ERROR = "storage_error"


class LoonCampError(Exception):
    """Base exception for all admin API errors."""

    status_code: int = 500
    default_message: str = "Internal server error."
    default_code: ErrorCode = ErrorCode.STORAGE_ERROR

    def __init__(self, message: str | None = None, code: ErrorCode | None = None) -> None:
        self.message = message or self.default_message
        self.code = code or self.default_code
        super().__init__(self.message)


class ValidationError(LoonCampError):
    """Raised for a missing required field, a duplicate unique key or an unknown field name."""

    status_code = 400
    default_message = "Invalid request."
    default_code = ErrorCode.MISSING_FIELD


class AuthError(LoonCampError):
    """Raised when a bearer token or a set of credentials is rejected."""

    status_code = 401
    default_message = "Invalid credentials."
    default_code = ErrorCode.INVALID_CREDENTIALS

    def __init__(self, message: str | None = None, code: ErrorCode | None = None) -> None:
        super().__init__(message, code)
        # An unverifiable token is a refusal, not a missing login.
        if self.code == ErrorCode.INVALID_OR_EXPIRED:
            self.status_code = 403


class NotFoundError(LoonCampError):
    """Raised when a referenced record does not exist."""

    status_code = 404
    default_message = "Property not found."
    default_code = ErrorCode.NOT_FOUND


class StorageError(LoonCampError):
    """Raised when the database is unreachable or a query fails."""

    status_code = 500
    default_message = "Internal server error."
    default_code = ErrorCode.STORAGE_ERROR


def missing_token() -> AuthError:
    return AuthError("Access denied. No token provided.", ErrorCode.MISSING_TOKEN)


def invalid_token() -> AuthError:
    return AuthError("Invalid or expired token.", ErrorCode.INVALID_OR_EXPIRED)


def duplicate_slug() -> ValidationError:
    return ValidationError("A property with this title already exists.", ErrorCode.DUPLICATE_SLUG)
