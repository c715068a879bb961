"""Notification routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel

from quill.application.usecase.notification import (
    DeleteNotificationRequest,
    DeleteNotificationResponse,
    DeleteNotificationUseCase,
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkReadRequest,
    MarkReadResponse,
    MarkReadUseCase,
)
from quill.domain.service import JWTService
from quill.interface.api.security import bearer_scheme, require_user_id

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


class MarkReadAPIRequest(BaseModel):
    """API request for marking notifications as read."""

    notification_ids: list[UUID]


@router.get("", response_model=ListNotificationsResponse)
async def list_notifications(
    jwt_service: FromDishka[JWTService],
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> ListNotificationsResponse:
    """List the caller's notifications, newest first."""
    user_id = require_user_id(jwt_service, credentials)
    return await list_notifications_use_case.execute(
        ListNotificationsRequest(user_id=user_id)
    )


@router.patch("/read", response_model=MarkReadResponse)
async def mark_read(
    request: MarkReadAPIRequest,
    jwt_service: FromDishka[JWTService],
    mark_read_use_case: FromDishka[MarkReadUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> MarkReadResponse:
    """Mark some of the caller's notifications as read.

    IDs belonging to other users are ignored.
    """
    user_id = require_user_id(jwt_service, credentials)
    return await mark_read_use_case.execute(
        MarkReadRequest(
            user_id=user_id,
            notification_ids=[str(n) for n in request.notification_ids],
        )
    )


@router.delete("/{notification_id}", response_model=DeleteNotificationResponse)
async def delete_notification(
    notification_id: UUID,
    jwt_service: FromDishka[JWTService],
    delete_notification_use_case: FromDishka[DeleteNotificationUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> DeleteNotificationResponse:
    """Delete one of the caller's notifications.

    Raises:
        NotFoundError: If it does not exist or belongs to someone else (404)
    """
    user_id = require_user_id(jwt_service, credentials)
    return await delete_notification_use_case.execute(
        DeleteNotificationRequest(
            user_id=user_id, notification_id=str(notification_id)
        )
    )
