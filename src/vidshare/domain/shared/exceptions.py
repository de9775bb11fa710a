"""Domain error hierarchy and the error codes returned to API clients.

Repositories and commands raise these; the API maps each ``ErrorCode`` to an
HTTP status in one place.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for API clients.

    Clients branch on these values, so existing members never change.
    """

    # Validation Errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    REGISTRATION_DISABLED = "REGISTRATION_DISABLED"

    # Authentication / Authorization (401/403)
    AUTHENTICATION_REQUIRED = "AUTHENTICATION_REQUIRED"
    ADMIN_REQUIRED = "ADMIN_REQUIRED"

    # Not Found Errors (404)
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    VIDEO_NOT_FOUND = "VIDEO_NOT_FOUND"

    # Conflict Errors (409)
    CONFLICT = "CONFLICT"
    USER_ALREADY_EXISTS = "USER_ALREADY_EXISTS"

    # Persistence Errors (503)
    PERSISTENCE_UNAVAILABLE = "PERSISTENCE_UNAVAILABLE"

    # General Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base exception for all domain-related errors.

    Attributes
    ----------
    message
        Human-readable error message (safe for end users)
    code
        Stable error code for programmatic handling
    details
        Optional additional context (logged but not exposed to users)
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class EntityNotFoundError(DomainException):
    """Raised when a requested entity cannot be found."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.ENTITY_NOT_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class ConflictError(DomainException):
    """Raised when an operation conflicts with existing state."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFLICT,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class PersistenceUnavailableError(DomainException):
    """Raised when the data store cannot be reached."""

    def __init__(
        self,
        message: str = "The data store is currently unavailable",
        code: ErrorCode = ErrorCode.PERSISTENCE_UNAVAILABLE,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)
