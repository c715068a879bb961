"""Change password use case."""

from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from quill.domain.service import UserService
from quill.domain.value import UserId

from .common import check_password_bytes


class ChangePasswordRequest(BaseModel):
    """Change password request."""

    user_id: str  # User ID from authenticated user
    old_password: str
    new_password: str = Field(min_length=6, max_length=72)

    @field_validator("new_password")
    @classmethod
    def validate_new_password(cls, v: str) -> str:
        """Reject passwords bcrypt cannot hash."""
        return check_password_bytes(v)


class ChangePasswordResponse(BaseModel):
    """Change password response."""

    message: str


class ChangePasswordUseCase:
    """Use case for changing the current user's password."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: ChangePasswordRequest) -> ChangePasswordResponse:
        """Raises AuthenticationError if the old password does not match."""
        await self.user_service.change_password(
            UserId(UUID(request.user_id)), request.old_password, request.new_password
        )
        return ChangePasswordResponse(message="Password updated")
