"""Login use case."""

import logfire
from pydantic import BaseModel

from quill.application.usecase.user.common import UserResponse
from quill.domain.service import AuthService, JWTService


class LoginRequest(BaseModel):
    """Login request."""

    email: str
    password: str


class LoginResponse(BaseModel):
    """Login response with a bearer token."""

    access_token: str
    token_type: str = "bearer"
    user: UserResponse


class LoginUseCase:
    """Use case for exchanging credentials for a token."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            auth_service: Authentication domain service
            jwt_service: JWT token domain service
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Raises:
            AuthenticationError: If the email is unknown or the password wrong
        """
        with logfire.span("login.execute", email=request.email):
            user = await self.auth_service.authenticate(
                request.email, request.password
            )
            token = self.jwt_service.create_token(str(user.id), user.email)
            return LoginResponse(access_token=token, user=UserResponse.from_user(user))
