"""Delete notification use case."""

from uuid import UUID

from pydantic import BaseModel

from quill.domain.service import NotificationService
from quill.domain.value import NotificationId, UserId


class DeleteNotificationRequest(BaseModel):
    """Delete notification request."""

    user_id: str  # User ID from authenticated user
    notification_id: str


class DeleteNotificationResponse(BaseModel):
    """Delete notification response."""

    id: str
    deleted: bool


class DeleteNotificationUseCase:
    """Use case for deleting one of the current user's notifications."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: DeleteNotificationRequest
    ) -> DeleteNotificationResponse:
        """Raises NotFoundError if the notification is not the user's."""
        await self.notification_service.remove(
            UserId(UUID(request.user_id)),
            NotificationId(UUID(request.notification_id)),
        )
        return DeleteNotificationResponse(id=request.notification_id, deleted=True)
