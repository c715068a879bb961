"""Response models shared by article and comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from quill.domain.model import Image, Node
from quill.domain.service import CommentTreeNode


class NodeResponse(BaseModel):
    """An article or comment."""

    id: str
    title: str
    content: str
    author_id: str
    author_username: str
    parent_id: str | None
    depth: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_node(cls, node: Node) -> "NodeResponse":
        return cls(
            id=str(node.id),
            title=node.title,
            content=node.content,
            author_id=str(node.author_id),
            author_username=node.author_username,
            parent_id=str(node.parent_id) if node.parent_id else None,
            depth=node.depth,
            created_at=node.created_at,
            updated_at=node.updated_at,
        )


class CommentTreeResponse(NodeResponse):
    """A node with its vote counts and nested comments."""

    upvotes: int
    downvotes: int
    vote_score: int
    comments: list["CommentTreeResponse"]

    @classmethod
    def from_tree(cls, entry: CommentTreeNode) -> "CommentTreeResponse":
        return cls(
            **NodeResponse.from_node(entry.node).model_dump(),
            upvotes=entry.upvotes,
            downvotes=entry.downvotes,
            vote_score=entry.vote_score,
            comments=[cls.from_tree(child) for child in entry.comments],
        )


CommentTreeResponse.model_rebuild()


class ImageResponse(BaseModel):
    """Image metadata."""

    id: str
    filename: str
    original_filename: str
    path: str
    mimetype: str
    size: int
    article_id: str
    created_at: datetime

    @classmethod
    def from_image(cls, image: Image) -> "ImageResponse":
        return cls(
            id=str(image.id),
            filename=image.filename,
            original_filename=image.original_filename,
            path=image.path,
            mimetype=image.mimetype,
            size=image.size,
            article_id=str(image.article_id),
            created_at=image.created_at,
        )
