"""Authentication routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials

from quill.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginResponse,
    LoginUseCase,
    RegisterRequest,
    RegisterResponse,
    RegisterUseCase,
)
from quill.application.usecase.user import UserResponse
from quill.domain.service import JWTService
from quill.interface.api.security import bearer_scheme, require_user_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


@router.post(
    "/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    request: RegisterRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> RegisterResponse:
    """Create an account and sign it in.

    Args:
        request: Registration data
        register_use_case: Register use case from DI

    Returns:
        Bearer token and the new user

    Raises:
        ConflictError: If the email or username is taken (409)
    """
    result = await register_use_case.execute(request)
    logger.info(f"User registered: {result.user.username}")
    return result


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> LoginResponse:
    """Exchange email and password for a bearer token.

    Raises:
        AuthenticationError: If the credentials are wrong (401)
    """
    return await login_use_case.execute(request)


@router.get("/me", response_model=UserResponse)
async def get_me(
    jwt_service: FromDishka[JWTService],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> UserResponse:
    """Get the authenticated user."""
    user_id = require_user_id(jwt_service, credentials)
    return await get_current_user_use_case.execute(
        GetCurrentUserRequest(user_id=user_id)
    )
