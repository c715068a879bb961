"""Upload image use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from quill.application.usecase.article.common import ImageResponse
from quill.domain.service import ImageService
from quill.domain.value import NodeId, UserId


class UploadImageRequest(BaseModel):
    """Upload image request."""

    article_id: str
    user_id: str  # User ID from authenticated user
    filename: str
    mimetype: str
    data: bytes


class UploadImageUseCase:
    """Use case for attaching an image to an article."""

    def __init__(self, image_service: ImageService) -> None:
        """Initialize upload image use case.

        Args:
            image_service: Image domain service
        """
        self.image_service = image_service

    async def execute(self, request: UploadImageRequest) -> ImageResponse:
        """Execute upload flow.

        Raises:
            ValidationError: If the file type or size is not allowed
            NotFoundError: If the article does not exist
            NotAuthorizedError: If the user does not own the article
        """
        with logfire.span(
            "upload_image.execute",
            article_id=request.article_id,
            filename=request.filename,
        ):
            image = await self.image_service.upload(
                article_id=NodeId(UUID(request.article_id)),
                user_id=UserId(UUID(request.user_id)),
                original_filename=request.filename,
                mimetype=request.mimetype,
                data=request.data,
            )
            return ImageResponse.from_image(image)
