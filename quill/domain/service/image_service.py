"""Image domain service."""

import random
import time
from pathlib import PurePath
from typing import Sequence
from uuid import uuid4

import logfire

from quill.config import UploadSettings
from quill.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from quill.domain.model import Image
from quill.domain.repository import ImageRepository, NodeRepository
from quill.domain.value import ImageId, NodeId, UserId

from .base import Service


class ImageStorage:
    """Generic storage interface for uploaded image files."""

    async def save(self, filename: str, data: bytes) -> str:
        """Write a file.

        Returns:
            Path the file was written to
        """
        raise NotImplementedError

    async def delete(self, path: str) -> None:
        """Delete a file.

        Raises:
            OSError: If the file exists but could not be removed
        """
        raise NotImplementedError


def generate_filename(original_filename: str) -> str:
    """Build a unique name for a stored file, keeping the extension."""
    extension = PurePath(original_filename).suffix.lower()
    timestamp = int(time.time() * 1000)
    suffix = random.randint(0, 10**9)
    return f"file-{timestamp}-{suffix}{extension}"


class ImageService(Service):
    """Domain service for image uploads."""

    def __init__(
        self,
        image_repository: ImageRepository,
        node_repository: NodeRepository,
        storage: ImageStorage,
        upload_settings: UploadSettings,
    ) -> None:
        """Initialize image service.

        Args:
            image_repository: Image repository
            node_repository: Node repository
            storage: File storage backend
            upload_settings: Size and type limits
        """
        self.image_repository = image_repository
        self.node_repository = node_repository
        self.storage = storage
        self.upload_settings = upload_settings

    async def upload(
        self,
        article_id: NodeId,
        user_id: UserId,
        original_filename: str,
        mimetype: str,
        data: bytes,
    ) -> Image:
        """Store an image and attach it to an article the user owns.

        Raises:
            ValidationError: If the file type or size is not allowed
            NotFoundError: If the article does not exist
            NotAuthorizedError: If the user does not own the article
        """
        with logfire.span(
            "image_service.upload",
            article_id=str(article_id),
            user_id=str(user_id),
            mimetype=mimetype,
            size=len(data),
        ):
            if mimetype not in self.upload_settings.allowed_mimetypes:
                logfire.warn("Rejected image type", mimetype=mimetype)
                raise ValidationError(f"Unsupported image type: {mimetype}")
            if len(data) > self.upload_settings.max_size_bytes:
                logfire.warn("Rejected oversized image", size=len(data))
                raise ValidationError(
                    f"Image exceeds maximum size of "
                    f"{self.upload_settings.max_size_bytes} bytes"
                )

            article = await self.node_repository.find_by_id(article_id)
            if not article:
                raise NotFoundError("Article", str(article_id))
            if article.author_id != user_id:
                raise NotAuthorizedError("article", str(article_id), str(user_id))

            filename = generate_filename(original_filename)
            path = await self.storage.save(filename, data)

            image = Image(
                id=ImageId(uuid4()),
                filename=filename,
                original_filename=original_filename,
                path=path,
                mimetype=mimetype,
                size=len(data),
                article_id=article_id,
            )
            saved = await self.image_repository.save(image)
            logfire.info("Image uploaded", image_id=str(saved.id), path=path)
            return saved

    async def list_images(self, article_id: NodeId | None = None) -> list[Image]:
        """List all images, or only those of one article."""
        with logfire.span(
            "image_service.list_images",
            article_id=str(article_id) if article_id else None,
        ):
            if article_id is not None:
                return await self.image_repository.find_by_article(article_id)
            return await self.image_repository.find_all()

    async def get_image(self, image_id: ImageId) -> Image:
        """Get an image record.

        Raises:
            NotFoundError: If the image does not exist
        """
        with logfire.span("image_service.get_image", image_id=str(image_id)):
            image = await self.image_repository.find_by_id(image_id)
            if not image:
                raise NotFoundError("Image", str(image_id))
            return image

    async def remove(self, image_id: ImageId, user_id: UserId) -> None:
        """Delete an image record and its file.

        Raises:
            NotFoundError: If the image does not exist
            NotAuthorizedError: If the user does not own the article
        """
        with logfire.span(
            "image_service.remove", image_id=str(image_id), user_id=str(user_id)
        ):
            image = await self.get_image(image_id)
            article = await self.node_repository.find_by_id(image.article_id)
            if article and article.author_id != user_id:
                raise NotAuthorizedError("image", str(image_id), str(user_id))

            await self._delete_file(image)
            await self.image_repository.delete(image_id)
            logfire.info("Image deleted", image_id=str(image_id))

    async def remove_files(self, images: Sequence[Image]) -> int:
        """Delete the stored files of images whose rows are already gone.

        Files that cannot be removed are logged and skipped.

        Returns:
            Number of files handled
        """
        with logfire.span("image_service.remove_files", count=len(images)):
            for image in images:
                await self._delete_file(image)
            return len(images)

    async def _delete_file(self, image: Image) -> None:
        try:
            await self.storage.delete(image.path)
        except OSError as e:
            logfire.warn(
                "Failed to delete image file",
                image_id=str(image.id),
                path=image.path,
                error=str(e),
            )
