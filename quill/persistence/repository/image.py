"""PostgreSQL implementation of Image repository."""

from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from quill.domain.model import Image
from quill.domain.repository import ImageRepository
from quill.domain.value import ImageId, NodeId
from quill.persistence.mappers import image_to_dict, row_to_image
from quill.persistence.tables import images_table


class PostgresImageRepository(ImageRepository):
    """PostgreSQL implementation of ImageRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, image_id: ImageId) -> Optional[Image]:
        """Find an image by ID."""
        stmt = select(images_table).where(images_table.c.id == image_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_image(dict(row)) if row else None

    async def find_all(self) -> List[Image]:
        """Find all images, newest first."""
        stmt = select(images_table).order_by(images_table.c.created_at.desc())
        result = await self.session.execute(stmt)
        return [row_to_image(dict(row)) for row in result.mappings().all()]

    async def find_by_article(self, article_id: NodeId) -> List[Image]:
        """Find the images attached to an article."""
        stmt = (
            select(images_table)
            .where(images_table.c.article_id == article_id)
            .order_by(images_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_image(dict(row)) for row in result.mappings().all()]

    async def save(self, image: Image) -> Image:
        """Save an image record."""
        stmt = images_table.insert().values(**image_to_dict(image))
        await self.session.execute(stmt)
        await self.session.flush()
        return image

    async def delete(self, image_id: ImageId) -> None:
        """Delete an image record."""
        stmt = delete(images_table).where(images_table.c.id == image_id)
        await self.session.execute(stmt)
        await self.session.flush()
