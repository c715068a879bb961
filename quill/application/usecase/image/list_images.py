"""Image lookup use cases."""

from uuid import UUID

from pydantic import BaseModel

from quill.application.usecase.article.common import ImageResponse
from quill.domain.service import ImageService
from quill.domain.value import ImageId, NodeId


class ListImagesRequest(BaseModel):
    """List images, optionally of one article."""

    article_id: str | None = None


class ListImagesResponse(BaseModel):
    """Images."""

    images: list[ImageResponse]


class ListImagesUseCase:
    """Use case for listing images."""

    def __init__(self, image_service: ImageService) -> None:
        self.image_service = image_service

    async def execute(self, request: ListImagesRequest) -> ListImagesResponse:
        article_id = NodeId(UUID(request.article_id)) if request.article_id else None
        images = await self.image_service.list_images(article_id)
        return ListImagesResponse(
            images=[ImageResponse.from_image(image) for image in images]
        )


class GetImageRequest(BaseModel):
    """Get image request."""

    image_id: str


class GetImageUseCase:
    """Use case for reading one image record."""

    def __init__(self, image_service: ImageService) -> None:
        self.image_service = image_service

    async def execute(self, request: GetImageRequest) -> ImageResponse:
        """Raises NotFoundError if the image does not exist."""
        image = await self.image_service.get_image(ImageId(UUID(request.image_id)))
        return ImageResponse.from_image(image)
