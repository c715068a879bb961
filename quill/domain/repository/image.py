"""Image repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from quill.domain.model.image import Image
from quill.domain.value import ImageId, NodeId


class ImageRepository(ABC):
    """Repository for Image entity."""

    @abstractmethod
    async def find_by_id(self, image_id: ImageId) -> Optional[Image]:
        """Find an image by ID."""
        pass

    @abstractmethod
    async def find_all(self) -> List[Image]:
        """Find all images, newest first."""
        pass

    @abstractmethod
    async def find_by_article(self, article_id: NodeId) -> List[Image]:
        """Find the images attached to an article."""
        pass

    @abstractmethod
    async def save(self, image: Image) -> Image:
        """Save an image record."""
        pass

    @abstractmethod
    async def delete(self, image_id: ImageId) -> None:
        """Delete an image record."""
        pass
