"""User domain exceptions.

Every failure of the user lifecycle is one of three kinds: invalid input,
a username conflict, or a missing record. The messages are shown to API
clients verbatim.
"""

from notedesk.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class MissingUserFieldsError(ValidationError):
    """Required request fields are missing or malformed."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code=ErrorCode.MISSING_FIELDS)


class InvalidUserDataError(ValidationError):
    """The store refused the user record."""

    def __init__(self, message: str = "Invalid user data received") -> None:
        super().__init__(message, code=ErrorCode.INVALID_USER_DATA)


class UserHasNotesError(ValidationError):
    """User still has notes assigned and cannot be deleted."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            "User has assigned notes",
            code=ErrorCode.USER_HAS_NOTES,
            details={"user_id": user_id},
        )


class DuplicateUsernameError(ConflictError):
    """Username already taken (case-insensitive)."""

    def __init__(self, username: str, message: str = "Duplicate username") -> None:
        self.username = username
        super().__init__(
            message,
            code=ErrorCode.DUPLICATE_USERNAME,
            details={"username": username},
        )


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__(
            "User not found",
            code=ErrorCode.USER_NOT_FOUND,
            details={"user_id": user_id},
        )


class NoUsersFoundError(EntityNotFoundError):
    """The user listing is empty."""

    def __init__(self) -> None:
        super().__init__("No users found", code=ErrorCode.NO_USERS_FOUND)
