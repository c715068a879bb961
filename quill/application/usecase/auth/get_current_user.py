"""Get current user use case."""

from uuid import UUID

from pydantic import BaseModel

from quill.application.usecase.user.common import UserResponse
from quill.domain.service import UserService
from quill.domain.value import UserId


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    user_id: str  # User ID from the verified token


class GetCurrentUserUseCase:
    """Use case for getting the authenticated user."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> UserResponse:
        """Raises NotFoundError if the account was deleted after login."""
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        return UserResponse.from_user(user)
