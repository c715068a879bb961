"""Bearer token authentication helpers for routes."""

from fastapi import HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from quill.domain.service import JWTService

bearer_scheme = HTTPBearer(auto_error=False)


def require_user_id(
    jwt_service: JWTService,
    credentials: HTTPAuthorizationCredentials | None,
) -> str:
    """Return the authenticated user ID or reject the request.

    Args:
        jwt_service: JWT service from DI
        credentials: Parsed ``Authorization: Bearer`` header

    Returns:
        User ID carried by the token

    Raises:
        HTTPException: 401 if the header is missing
        JWTError: If the token is invalid or expired
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return jwt_service.verify_token(credentials.credentials).user_id


def optional_user_id(
    jwt_service: JWTService,
    credentials: HTTPAuthorizationCredentials | None,
) -> str | None:
    """Return the user ID when a valid token is present, otherwise None."""
    if credentials is None:
        return None
    return jwt_service.get_user_id_from_token(credentials.credentials)
