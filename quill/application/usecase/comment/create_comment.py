"""Create comment use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from quill.application.usecase.article.common import NodeResponse
from quill.domain.service import NodeService, UserService
from quill.domain.value import NodeId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request.

    ``parent_id`` may point at an article or at another comment.
    """

    parent_id: str
    content: str = Field(min_length=1)
    title: str | None = Field(default=None, min_length=1, max_length=300)
    author_id: str  # User ID from authenticated user


class CreateCommentUseCase:
    """Use case for commenting on an article or replying to a comment."""

    def __init__(self, node_service: NodeService, user_service: UserService) -> None:
        """Initialize create comment use case.

        Args:
            node_service: Node domain service
            user_service: User domain service
        """
        self.node_service = node_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> NodeResponse:
        """Execute create comment flow.

        Raises:
            NotFoundError: If the parent or the author does not exist
        """
        author = await self.user_service.get_by_id(UserId(UUID(request.author_id)))

        with logfire.span(
            "create_comment.execute",
            parent_id=request.parent_id,
            author=author.username,
        ):
            comment = await self.node_service.create_comment(
                author_id=author.id,
                author_username=author.username,
                parent_id=NodeId(UUID(request.parent_id)),
                content=request.content,
                title=request.title,
            )
            return NodeResponse.from_node(comment)
