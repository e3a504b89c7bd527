from notedesk_identity.application.dtos.user_inputs import (
    CreateUserInput,
    DeleteUserInput,
    UpdateUserInput,
)
from notedesk_identity.application.dtos.user_results import UserOperationResult

__all__ = [
    "CreateUserInput",
    "DeleteUserInput",
    "UpdateUserInput",
    "UserOperationResult",
]
