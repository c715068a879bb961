"""Authentication domain service."""

import logfire

from quill.domain.error import AuthenticationError
from quill.domain.model import User
from quill.domain.repository import UserRepository
from quill.util.password import verify_password

from .base import Service


class AuthService(Service):
    """Domain service for email and password authentication."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize auth service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def authenticate(self, email: str, password: str) -> User:
        """Check credentials and return the matching user.

        Unknown email and wrong password raise the same error so callers
        cannot probe which emails are registered.

        Raises:
            AuthenticationError: If the credentials are invalid
        """
        with logfire.span("auth_service.authenticate", email=email):
            user = await self.user_repository.find_by_email(email)
            if not user or not verify_password(password, user.password):
                logfire.warn("Login failed", email=email)
                raise AuthenticationError("Invalid credentials")

            logfire.info("Login succeeded", user_id=str(user.id))
            return user
