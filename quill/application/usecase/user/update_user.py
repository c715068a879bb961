"""Update and delete user use cases.

Users may change or delete their own account; admins may change any.
"""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from quill.domain.error import NotAuthorizedError
from quill.domain.service import UserService
from quill.domain.value import UserId

from .common import UserResponse


async def ensure_can_manage(
    user_service: UserService, actor_id: UserId, target_id: UserId
) -> None:
    """Raise NotAuthorizedError unless the actor is the target or an admin."""
    if actor_id == target_id:
        return
    actor = await user_service.get_by_id(actor_id)
    if not actor.is_admin:
        logfire.warn(
            "Unauthorized user management attempt",
            actor_id=str(actor_id),
            target_id=str(target_id),
        )
        raise NotAuthorizedError("user", str(target_id), str(actor_id))


class UpdateUserRequest(BaseModel):
    """Update user request. Omitted fields stay unchanged."""

    user_id: str  # User being updated
    actor_id: str  # User ID from authenticated user
    username: str | None = Field(default=None, min_length=3, max_length=20)
    name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)
    bio: str | None = None


class UpdateUserUseCase:
    """Use case for editing a profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize update user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpdateUserRequest) -> UserResponse:
        """Execute update flow.

        Raises:
            NotAuthorizedError: If the actor may not edit this user
            NotFoundError: If the user does not exist
            ConflictError: If the new username is taken
        """
        target_id = UserId(UUID(request.user_id))
        await ensure_can_manage(
            self.user_service, UserId(UUID(request.actor_id)), target_id
        )
        user = await self.user_service.update_user(
            target_id,
            username=request.username,
            name=request.name,
            last_name=request.last_name,
            bio=request.bio,
        )
        return UserResponse.from_user(user)


class DeleteUserRequest(BaseModel):
    """Delete user request."""

    user_id: str
    actor_id: str  # User ID from authenticated user


class DeleteUserResponse(BaseModel):
    """Delete user response."""

    id: str
    deleted: bool


class DeleteUserUseCase:
    """Use case for deleting an account."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: DeleteUserRequest) -> DeleteUserResponse:
        """Raises NotAuthorizedError or NotFoundError."""
        target_id = UserId(UUID(request.user_id))
        await ensure_can_manage(
            self.user_service, UserId(UUID(request.actor_id)), target_id
        )
        await self.user_service.delete_user(target_id)
        return DeleteUserResponse(id=request.user_id, deleted=True)
