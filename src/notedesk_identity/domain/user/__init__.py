"""User domain manages user identity only.

This domain handles:
- User aggregate (identity: id, username, password hash, roles, active flag)
- Case-insensitive username comparison
- The repository interface, implemented in infrastructure
"""

from notedesk_identity.domain.user.aggregates import User
from notedesk_identity.domain.user.exceptions import (
    DuplicateUsernameError,
    InvalidUserDataError,
    MissingUserFieldsError,
    NoUsersFoundError,
    UserHasNotesError,
    UserNotFoundError,
)
from notedesk_identity.domain.user.repositories import UserRepository
from notedesk_identity.domain.user.value_objects import (
    DEFAULT_ROLES,
    UserSummary,
    username_key,
)

__all__ = [
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
    "username_key",
]
