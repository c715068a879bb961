"""User lookup use cases."""

from uuid import UUID

from pydantic import BaseModel, model_validator

from quill.domain.service import UserService
from quill.domain.value import UserId

from .common import UserResponse


class ListUsersResponse(BaseModel):
    """All users."""

    users: list[UserResponse]


class ListUsersUseCase:
    """Use case for listing users."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self) -> ListUsersResponse:
        users = await self.user_service.list_users()
        return ListUsersResponse(users=[UserResponse.from_user(u) for u in users])


class GetUserRequest(BaseModel):
    """Get user request.

    Accepts exactly one of user_id, email or username.
    """

    user_id: str | None = None
    email: str | None = None
    username: str | None = None

    @model_validator(mode="after")
    def exactly_one_key(self) -> "GetUserRequest":
        keys = [k for k in (self.user_id, self.email, self.username) if k]
        if len(keys) != 1:
            raise ValueError("Provide exactly one of user_id, email or username")
        return self


class GetUserUseCase:
    """Use case for looking up one user."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserRequest) -> UserResponse:
        """Execute lookup.

        Raises:
            NotFoundError: If no user matches
        """
        if request.user_id:
            user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        elif request.email:
            user = await self.user_service.get_by_email(request.email)
        else:
            user = await self.user_service.get_by_username(request.username or "")
        return UserResponse.from_user(user)
