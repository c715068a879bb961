"""User routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel, Field

from quill.application.usecase.auth import GetCurrentUserRequest, GetCurrentUserUseCase
from quill.application.usecase.user import (
    ChangePasswordRequest,
    ChangePasswordResponse,
    ChangePasswordUseCase,
    CheckAvailabilityRequest,
    CheckAvailabilityResponse,
    CheckAvailabilityUseCase,
    CreateUserRequest,
    CreateUserUseCase,
    DeleteUserRequest,
    DeleteUserResponse,
    DeleteUserUseCase,
    GetUserRequest,
    GetUserUseCase,
    ListUsersResponse,
    ListUsersUseCase,
    UpdateUserRequest,
    UpdateUserUseCase,
    UserResponse,
)
from quill.domain.service import JWTService
from quill.domain.value import Role
from quill.interface.api.security import bearer_scheme, require_user_id

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateUserAPIRequest(BaseModel):
    """API request for editing a profile."""

    username: str | None = Field(default=None, min_length=3, max_length=20)
    name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)
    bio: str | None = None


class ChangePasswordAPIRequest(BaseModel):
    """API request for changing the caller's password."""

    old_password: str
    new_password: str = Field(min_length=6, max_length=72)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: CreateUserRequest,
    jwt_service: FromDishka[JWTService],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    create_user_use_case: FromDishka[CreateUserUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> UserResponse:
    """Create a user account on someone's behalf.

    Admin only; regular sign-up goes through ``POST /auth/register``.

    Raises:
        HTTPException: 403 if the caller is not an admin
        ConflictError: If the email or username is taken (409)
    """
    user_id = require_user_id(jwt_service, credentials)
    caller = await get_current_user_use_case.execute(
        GetCurrentUserRequest(user_id=user_id)
    )
    if caller.role != Role.ADMIN:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only admins can create users",
        )
    return await create_user_use_case.execute(request)


@router.get("", response_model=ListUsersResponse)
async def list_users(
    list_users_use_case: FromDishka[ListUsersUseCase],
) -> ListUsersResponse:
    """List all users."""
    return await list_users_use_case.execute()


@router.get("/me", response_model=UserResponse)
async def get_profile(
    jwt_service: FromDishka[JWTService],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> UserResponse:
    """Get the caller's profile."""
    user_id = require_user_id(jwt_service, credentials)
    return await get_current_user_use_case.execute(
        GetCurrentUserRequest(user_id=user_id)
    )


@router.patch("/me", response_model=UserResponse)
async def update_profile(
    request: UpdateUserAPIRequest,
    jwt_service: FromDishka[JWTService],
    update_user_use_case: FromDishka[UpdateUserUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> UserResponse:
    """Edit the caller's profile."""
    user_id = require_user_id(jwt_service, credentials)
    return await update_user_use_case.execute(
        UpdateUserRequest(
            user_id=user_id, actor_id=user_id, **request.model_dump(exclude_unset=True)
        )
    )


@router.patch("/me/password", response_model=ChangePasswordResponse)
async def change_password(
    request: ChangePasswordAPIRequest,
    jwt_service: FromDishka[JWTService],
    change_password_use_case: FromDishka[ChangePasswordUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> ChangePasswordResponse:
    """Change the caller's password.

    Raises:
        AuthenticationError: If the old password does not match (401)
    """
    user_id = require_user_id(jwt_service, credentials)
    return await change_password_use_case.execute(
        ChangePasswordRequest(
            user_id=user_id,
            old_password=request.old_password,
            new_password=request.new_password,
        )
    )


@router.get("/email/{email}", response_model=UserResponse)
async def get_user_by_email(
    email: str,
    get_user_use_case: FromDishka[GetUserUseCase],
) -> UserResponse:
    """Look a user up by email."""
    return await get_user_use_case.execute(GetUserRequest(email=email))


@router.get("/username/{username}", response_model=UserResponse)
async def get_user_by_username(
    username: str,
    get_user_use_case: FromDishka[GetUserUseCase],
) -> UserResponse:
    """Look a user up by username."""
    return await get_user_use_case.execute(GetUserRequest(username=username))


@router.get("/isvalid/{identifier}", response_model=CheckAvailabilityResponse)
async def check_availability(
    identifier: str,
    check_availability_use_case: FromDishka[CheckAvailabilityUseCase],
) -> CheckAvailabilityResponse:
    """Report whether an email or username is already registered."""
    return await check_availability_use_case.execute(
        CheckAvailabilityRequest(identifier=identifier)
    )


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: UUID,
    get_user_use_case: FromDishka[GetUserUseCase],
) -> UserResponse:
    """Get a user by ID."""
    return await get_user_use_case.execute(GetUserRequest(user_id=str(user_id)))


@router.patch("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: UUID,
    request: UpdateUserAPIRequest,
    jwt_service: FromDishka[JWTService],
    update_user_use_case: FromDishka[UpdateUserUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> UserResponse:
    """Edit a user. Allowed for the user themself or an admin.

    Raises:
        NotAuthorizedError: If the caller may not edit this user (403)
        ConflictError: If the new username is taken (409)
    """
    actor_id = require_user_id(jwt_service, credentials)
    return await update_user_use_case.execute(
        UpdateUserRequest(
            user_id=str(user_id),
            actor_id=actor_id,
            **request.model_dump(exclude_unset=True),
        )
    )


@router.delete("/{user_id}", response_model=DeleteUserResponse)
async def delete_user(
    user_id: UUID,
    jwt_service: FromDishka[JWTService],
    delete_user_use_case: FromDishka[DeleteUserUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> DeleteUserResponse:
    """Delete a user. Allowed for the user themself or an admin."""
    actor_id = require_user_id(jwt_service, credentials)
    return await delete_user_use_case.execute(
        DeleteUserRequest(user_id=str(user_id), actor_id=actor_id)
    )
