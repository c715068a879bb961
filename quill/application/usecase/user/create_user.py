"""Create user use case."""

from pydantic import BaseModel, EmailStr, Field, field_validator

from quill.domain.service import UserService
from quill.domain.value import Role

from .common import UserResponse, check_password_bytes


class CreateUserRequest(BaseModel):
    """Create user request."""

    email: EmailStr
    username: str = Field(min_length=3, max_length=20)
    password: str = Field(min_length=6, max_length=72)
    name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)
    bio: str | None = None
    role: Role = Role.USER

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        """Reject passwords bcrypt cannot hash."""
        return check_password_bytes(v)


class CreateUserUseCase:
    """Use case for creating a user without signing in."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: CreateUserRequest) -> UserResponse:
        """Raises ConflictError if the email or username is already taken."""
        user = await self.user_service.create_user(
            email=str(request.email),
            username=request.username,
            password=request.password,
            name=request.name,
            last_name=request.last_name,
            bio=request.bio,
            role=request.role,
        )
        return UserResponse.from_user(user)
