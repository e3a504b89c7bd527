"""Domain error hierarchy.

Every expected API error derives from ``DomainException``.
The presentation layer maps the ``code`` to an HTTP status and sends
``message`` to the client; ``details`` only goes to the log.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Machine-readable error codes returned in the ``code`` field."""

    # Invalid input
    VALIDATION_ERROR = "VALIDATION_ERROR"
    MISSING_FIELDS = "MISSING_FIELDS"
    INVALID_USER_DATA = "INVALID_USER_DATA"
    USER_HAS_NOTES = "USER_HAS_NOTES"

    # Missing records and routes
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    NO_USERS_FOUND = "NO_USERS_FOUND"
    NOT_FOUND = "NOT_FOUND"

    HTTP_ERROR = "HTTP_ERROR"

    # Uniqueness
    CONFLICT = "CONFLICT"
    DUPLICATE_USERNAME = "DUPLICATE_USERNAME"

    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Root of the domain errors.

    Attributes
    ----------
    message
        Text shown to the client as is
    code
        One of ``ErrorCode``
    details
        Extra context for the log
    """

    default_code = ErrorCode.INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = dict(details) if details else {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, code={self.code.value})"


class ValidationError(DomainException):
    """The request is missing data or carries data of the wrong shape."""

    default_code = ErrorCode.VALIDATION_ERROR


class EntityNotFoundError(DomainException):
    """A referenced record does not exist."""

    default_code = ErrorCode.ENTITY_NOT_FOUND


class ConflictError(DomainException):
    """The change would clash with a record that already exists."""

    default_code = ErrorCode.CONFLICT
