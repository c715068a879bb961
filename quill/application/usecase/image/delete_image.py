"""Delete image use case."""

from uuid import UUID

from pydantic import BaseModel

from quill.domain.service import ImageService
from quill.domain.value import ImageId, UserId


class DeleteImageRequest(BaseModel):
    """Delete image request."""

    image_id: str
    user_id: str  # User ID from authenticated user


class DeleteImageResponse(BaseModel):
    """Delete image response."""

    id: str
    deleted: bool


class DeleteImageUseCase:
    """Use case for removing an image and its file."""

    def __init__(self, image_service: ImageService) -> None:
        self.image_service = image_service

    async def execute(self, request: DeleteImageRequest) -> DeleteImageResponse:
        """Raises NotFoundError or NotAuthorizedError."""
        await self.image_service.remove(
            ImageId(UUID(request.image_id)), UserId(UUID(request.user_id))
        )
        return DeleteImageResponse(id=request.image_id, deleted=True)
