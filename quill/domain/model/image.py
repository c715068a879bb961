"""Image entity."""

from datetime import datetime

from pydantic import Field

from quill.domain.model.common import DomainModel
from quill.domain.value import ImageId, NodeId


class Image(DomainModel):
    """Image uploaded to an article."""

    id: ImageId
    filename: str  # Name on disk
    original_filename: str
    path: str
    mimetype: str
    size: int = Field(ge=0)
    article_id: NodeId
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
