"""Create article use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from quill.domain.service import NodeService, UserService
from quill.domain.value import UserId

from .common import NodeResponse


class CreateArticleRequest(BaseModel):
    """Create article request."""

    title: str = Field(min_length=3, max_length=300)
    content: str = Field(min_length=10)
    author_id: str  # User ID from authenticated user


class CreateArticleUseCase:
    """Use case for publishing a new article."""

    def __init__(self, node_service: NodeService, user_service: UserService) -> None:
        """Initialize create article use case.

        Args:
            node_service: Node domain service
            user_service: User domain service
        """
        self.node_service = node_service
        self.user_service = user_service

    async def execute(self, request: CreateArticleRequest) -> NodeResponse:
        """Execute create article flow.

        Raises:
            NotFoundError: If the author no longer exists
        """
        author = await self.user_service.get_by_id(UserId(UUID(request.author_id)))

        with logfire.span("create_article.execute", author=author.username):
            article = await self.node_service.create_article(
                author_id=author.id,
                author_username=author.username,
                title=request.title,
                content=request.content,
            )
            return NodeResponse.from_node(article)
