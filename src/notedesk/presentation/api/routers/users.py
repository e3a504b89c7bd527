import logging

from fastapi import APIRouter, status

from notedesk.presentation.api.dependencies import DBSession, UserService
from notedesk.presentation.api.schemas import (
    CreateUserRequest,
    DeleteUserRequest,
    MessageResponse,
    UpdateUserRequest,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["Users"])


@router.get(
    "",
    summary="List all users",
    responses={
        200: {"description": "List of all users (without passwords)"},
        400: {"description": "No users found"},
    },
)
async def list_users(service: UserService) -> list[UserResponse]:
    """List all users."""
    users = await service.list_users()
    return [UserResponse.model_validate(u) for u in users]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a new user",
    responses={
        201: {"description": "User created successfully"},
        400: {"description": "Missing fields or invalid user data"},
        409: {"description": "Duplicate username"},
    },
)
async def create_user(
    service: UserService,
    session: DBSession,
    request: CreateUserRequest | None = None,
) -> MessageResponse:
    """Create a new user."""
    request = request or CreateUserRequest()
    result = await service.create_user(
        username=request.username,
        password=request.password,
        roles=request.roles,
    )
    await session.commit()
    return MessageResponse(message=result.message)


@router.patch(
    "",
    summary="Update a user",
    responses={
        200: {"description": "User updated successfully"},
        400: {"description": "Missing fields or user not found"},
        409: {"description": "Duplicate username"},
    },
)
async def update_user(
    service: UserService,
    session: DBSession,
    request: UpdateUserRequest | None = None,
) -> MessageResponse:
    """Update a user's username, roles, active flag and optionally password."""
    request = request or UpdateUserRequest()
    result = await service.update_user(
        id=request.id,
        username=request.username,
        roles=request.roles,
        active=request.active,
        password=request.password,
    )
    await session.commit()
    return MessageResponse(message=result.message)


@router.delete(
    "",
    summary="Delete a user",
    responses={
        200: {"description": "User deleted; body is a confirmation string"},
        400: {"description": "Missing id, user has notes, or user not found"},
    },
)
async def delete_user(
    service: UserService,
    session: DBSession,
    request: DeleteUserRequest | None = None,
) -> str:
    """Delete a user that has no notes assigned."""
    request = request or DeleteUserRequest()
    result = await service.delete_user(id=request.id)
    await session.commit()
    return result.message
