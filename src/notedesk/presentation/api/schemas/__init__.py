from notedesk.presentation.api.schemas.users import (
    CreateUserRequest,
    DeleteUserRequest,
    MessageResponse,
    UpdateUserRequest,
    UserResponse,
)

__all__ = [
    "CreateUserRequest",
    "DeleteUserRequest",
    "MessageResponse",
    "UpdateUserRequest",
    "UserResponse",
]
