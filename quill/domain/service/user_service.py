"""User domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from quill.domain.error import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from quill.domain.model import User
from quill.domain.repository import UserRepository
from quill.domain.value import Role, UserId
from quill.util.password import (
    MAX_PASSWORD_BYTES,
    ensure_hashed,
    fits_bcrypt,
    is_hashed,
    verify_password,
)

from .base import Service

MIN_PASSWORD_LENGTH = 6


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def create_user(
        self,
        email: str,
        username: str,
        password: str,
        name: str | None = None,
        last_name: str | None = None,
        bio: str | None = None,
        role: Role = Role.USER,
    ) -> User:
        """Register a new user.

        Raises:
            ConflictError: If the email or username is already taken
        """
        with logfire.span("user_service.create_user", username=username):
            if await self.user_repository.find_by_email(email):
                logfire.warn("Email already registered", email=email)
                raise ConflictError("User", "email", email)
            if await self.user_repository.find_by_username(username):
                logfire.warn("Username already taken", username=username)
                raise ConflictError("User", "username", username)

            user = User(
                id=UserId(uuid4()),
                email=email,
                username=username,
                password=password,
                name=name,
                last_name=last_name,
                bio=bio,
                role=role,
            )
            created = await self.save(user)
            logfire.info("User created", user_id=str(created.id), username=username)
            return created

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_by_email(self, email: str) -> User:
        """Get user by email.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_email", email=email):
            user = await self.user_repository.find_by_email(email)
            if not user:
                logfire.warn("User not found", email=email)
                raise NotFoundError("User", email)
            return user

    async def get_by_username(self, username: str) -> User:
        """Get user by username.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_username", username=username):
            user = await self.user_repository.find_by_username(username)
            if not user:
                logfire.warn("User not found", username=username)
                raise NotFoundError("User", username)
            return user

    async def is_taken(self, identifier: str) -> bool:
        """Check whether an email or username is already in use."""
        with logfire.span("user_service.is_taken", identifier=identifier):
            if "@" in identifier:
                user = await self.user_repository.find_by_email(identifier)
            else:
                user = await self.user_repository.find_by_username(identifier)
            return user is not None

    async def list_users(self) -> list[User]:
        """List all users."""
        with logfire.span("user_service.list_users"):
            users = await self.user_repository.find_all()
            logfire.info("Users listed", count=len(users))
            return users

    async def update_user(
        self,
        user_id: UserId,
        username: str | None = None,
        name: str | None = None,
        last_name: str | None = None,
        bio: str | None = None,
    ) -> User:
        """Update profile fields. ``None`` leaves a field unchanged.

        Raises:
            NotFoundError: If user not found
            ConflictError: If the new username belongs to someone else
        """
        with logfire.span("user_service.update_user", user_id=str(user_id)):
            user = await self.get_by_id(user_id)

            if username is not None and username != user.username:
                existing = await self.user_repository.find_by_username(username)
                if existing and existing.id != user.id:
                    logfire.warn("Username already taken", username=username)
                    raise ConflictError("User", "username", username)

            changes = {
                field: value
                for field, value in {
                    "username": username,
                    "name": name,
                    "last_name": last_name,
                    "bio": bio,
                }.items()
                if value is not None
            }
            updated = user.model_copy(update={**changes, "updated_at": datetime.now()})
            saved = await self.save(updated)
            logfire.info(
                "User updated", user_id=str(user_id), fields=sorted(changes.keys())
            )
            return saved

    async def delete_user(self, user_id: UserId) -> None:
        """Delete a user.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.delete_user", user_id=str(user_id)):
            await self.get_by_id(user_id)
            await self.user_repository.delete(user_id)
            logfire.info("User deleted", user_id=str(user_id))

    async def change_password(
        self, user_id: UserId, old_password: str, new_password: str
    ) -> None:
        """Replace a user's password after checking the current one.

        Raises:
            NotFoundError: If user not found
            AuthenticationError: If the old password does not match
            ValidationError: If the new password is too short
        """
        with logfire.span("user_service.change_password", user_id=str(user_id)):
            user = await self.get_by_id(user_id)

            if not verify_password(old_password, user.password):
                logfire.warn("Wrong current password", user_id=str(user_id))
                raise AuthenticationError("Current password is incorrect")

            if len(new_password) < MIN_PASSWORD_LENGTH:
                raise ValidationError(
                    f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
                )

            await self.save(
                user.model_copy(
                    update={"password": new_password, "updated_at": datetime.now()}
                )
            )
            logfire.info("Password changed", user_id=str(user_id))

    async def save(self, user: User) -> User:
        """Save user (create or update), hashing a plain-text password.

        Raises:
            ValidationError: If a plain-text password is too long to hash
        """
        with logfire.span(
            "user_service.save", user_id=str(user.id), username=user.username
        ):
            if not is_hashed(user.password) and not fits_bcrypt(user.password):
                raise ValidationError(
                    f"Password must be at most {MAX_PASSWORD_BYTES} bytes"
                )
            hashed = ensure_hashed(user.password)
            if hashed != user.password:
                user = user.model_copy(update={"password": hashed})
            saved = await self.user_repository.save(user)
            logfire.info("User saved", user_id=str(saved.id))
            return saved
