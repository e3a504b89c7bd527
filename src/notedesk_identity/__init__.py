"""notedesk identity - user management for the notes backend.

This package handles all user-related concerns:
- User aggregate and the repository interface
- Password hashing (bcrypt)
- The user lifecycle service (list, create, update, delete)

Notes only reference a user id; the notes domain lives in ``notedesk``.
"""

from notedesk_identity.application.dtos import (
    CreateUserInput,
    DeleteUserInput,
    UpdateUserInput,
    UserOperationResult,
)
from notedesk_identity.application.services import UserLifecycleService
from notedesk_identity.domain.user import (
    DEFAULT_ROLES,
    DuplicateUsernameError,
    InvalidUserDataError,
    MissingUserFieldsError,
    NoUsersFoundError,
    User,
    UserHasNotesError,
    UserNotFoundError,
    UserRepository,
    UserSummary,
)
from notedesk_identity.services import PasswordHashingService

__all__ = [
    # Domain - User
    "DEFAULT_ROLES",
    "DuplicateUsernameError",
    "InvalidUserDataError",
    "MissingUserFieldsError",
    "NoUsersFoundError",
    "User",
    "UserHasNotesError",
    "UserNotFoundError",
    "UserRepository",
    "UserSummary",
    # Services
    "PasswordHashingService",
    # Application
    "CreateUserInput",
    "DeleteUserInput",
    "UpdateUserInput",
    "UserLifecycleService",
    "UserOperationResult",
]
