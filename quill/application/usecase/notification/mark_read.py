"""Mark notifications as read use case."""

from uuid import UUID

from pydantic import BaseModel

from quill.domain.service import NotificationService
from quill.domain.value import NotificationId, UserId


class MarkReadRequest(BaseModel):
    """Mark notifications as read request."""

    user_id: str  # User ID from authenticated user
    notification_ids: list[str]


class MarkReadResponse(BaseModel):
    """Mark notifications as read response."""

    updated_count: int
    message: str


class MarkReadUseCase:
    """Use case for marking notifications as read.

    IDs belonging to other users are silently ignored.
    """

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: MarkReadRequest) -> MarkReadResponse:
        updated = await self.notification_service.mark_as_read(
            UserId(UUID(request.user_id)),
            [NotificationId(UUID(i)) for i in request.notification_ids],
        )
        return MarkReadResponse(
            updated_count=updated,
            message=f"{updated} notification(s) marked as read",
        )
