"""In-memory image repository for testing."""

from typing import Optional

from quill.domain.model.image import Image
from quill.domain.repository.image import ImageRepository
from quill.domain.value import ImageId, NodeId


class InMemoryImageRepository(ImageRepository):
    """In-memory implementation of ImageRepository for testing."""

    def __init__(self) -> None:
        self._images: dict[ImageId, Image] = {}

    async def find_by_id(self, image_id: ImageId) -> Optional[Image]:
        """Find an image by ID."""
        return self._images.get(image_id)

    async def find_all(self) -> list[Image]:
        """Find all images, newest first."""
        return sorted(self._images.values(), key=lambda i: i.created_at, reverse=True)

    async def find_by_article(self, article_id: NodeId) -> list[Image]:
        """Find the images attached to an article."""
        return [i for i in self._images.values() if i.article_id == article_id]

    async def save(self, image: Image) -> Image:
        """Save an image record."""
        self._images[image.id] = image
        return image

    async def delete(self, image_id: ImageId) -> None:
        """Delete an image record."""
        self._images.pop(image_id, None)
