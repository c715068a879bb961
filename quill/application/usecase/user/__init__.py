"""User use cases."""

from .change_password import (
    ChangePasswordRequest,
    ChangePasswordResponse,
    ChangePasswordUseCase,
)
from .check_availability import (
    CheckAvailabilityRequest,
    CheckAvailabilityResponse,
    CheckAvailabilityUseCase,
)
from .common import UserResponse
from .create_user import CreateUserRequest, CreateUserUseCase
from .get_user import GetUserRequest, GetUserUseCase, ListUsersResponse, ListUsersUseCase
from .update_user import (
    DeleteUserRequest,
    DeleteUserResponse,
    DeleteUserUseCase,
    UpdateUserRequest,
    UpdateUserUseCase,
)

__all__ = [
    "ChangePasswordRequest",
    "ChangePasswordResponse",
    "ChangePasswordUseCase",
    "CheckAvailabilityRequest",
    "CheckAvailabilityResponse",
    "CheckAvailabilityUseCase",
    "CreateUserRequest",
    "CreateUserUseCase",
    "DeleteUserRequest",
    "DeleteUserResponse",
    "DeleteUserUseCase",
    "GetUserRequest",
    "GetUserUseCase",
    "ListUsersResponse",
    "ListUsersUseCase",
    "UpdateUserRequest",
    "UpdateUserUseCase",
    "UserResponse",
]
