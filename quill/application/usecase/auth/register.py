"""Register use case."""

import logfire
from pydantic import BaseModel, EmailStr, Field, field_validator

from quill.application.usecase.user.common import UserResponse, check_password_bytes
from quill.domain.service import JWTService, UserService


class RegisterRequest(BaseModel):
    """Register request."""

    email: EmailStr
    username: str = Field(min_length=3, max_length=20)
    password: str = Field(min_length=6, max_length=72)
    name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)
    bio: str | None = None

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        """Reject passwords bcrypt cannot hash."""
        return check_password_bytes(v)


class RegisterResponse(BaseModel):
    """Register response."""

    access_token: str
    token_type: str = "bearer"
    user: UserResponse


class RegisterUseCase:
    """Use case for creating an account and signing in."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize register use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Execute registration flow.

        Raises:
            ConflictError: If the email or username is already taken
        """
        with logfire.span("register.execute", username=request.username):
            user = await self.user_service.create_user(
                email=str(request.email),
                username=request.username,
                password=request.password,
                name=request.name,
                last_name=request.last_name,
                bio=request.bio,
            )
            token = self.jwt_service.create_token(str(user.id), user.email)
            return RegisterResponse(
                access_token=token, user=UserResponse.from_user(user)
            )
