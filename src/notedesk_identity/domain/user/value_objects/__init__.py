from notedesk_identity.domain.user.value_objects.user_role import DEFAULT_ROLES
from notedesk_identity.domain.user.value_objects.user_summary import UserSummary
from notedesk_identity.domain.user.value_objects.username import username_key

__all__ = [
    "DEFAULT_ROLES",
    "UserSummary",
    "username_key",
]
