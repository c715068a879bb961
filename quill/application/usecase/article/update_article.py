"""Update article use case."""

from uuid import UUID

from pydantic import BaseModel, Field, model_validator

from quill.domain.service import NodeService
from quill.domain.value import NodeId, UserId

from .common import NodeResponse


class UpdateArticleRequest(BaseModel):
    """Update article request. Only title and content can change."""

    article_id: str
    user_id: str  # User ID from authenticated user
    title: str | None = Field(default=None, min_length=3, max_length=300)
    content: str | None = Field(default=None, min_length=1)

    @model_validator(mode="after")
    def require_a_change(self) -> "UpdateArticleRequest":
        if self.title is None and self.content is None:
            raise ValueError("Provide a title or content to update")
        return self


class UpdateArticleUseCase:
    """Use case for editing an article or comment."""

    def __init__(self, node_service: NodeService) -> None:
        """Initialize update article use case.

        Args:
            node_service: Node domain service
        """
        self.node_service = node_service

    async def execute(self, request: UpdateArticleRequest) -> NodeResponse:
        """Execute update flow.

        Raises:
            NotFoundError: If the node does not exist
            NotAuthorizedError: If the user is not the author
        """
        node = await self.node_service.update_node(
            node_id=NodeId(UUID(request.article_id)),
            user_id=UserId(UUID(request.user_id)),
            title=request.title,
            content=request.content,
        )
        return NodeResponse.from_node(node)
