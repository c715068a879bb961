"""List and search article use cases."""

from uuid import UUID

from pydantic import BaseModel, Field

from quill.domain.service import NodeService
from quill.domain.value import SortField, SortOrder, UserId

from .common import NodeResponse


class ListArticlesResponse(BaseModel):
    """All articles, newest first."""

    articles: list[NodeResponse]


class ListArticlesUseCase:
    """Use case for listing every article."""

    def __init__(self, node_service: NodeService) -> None:
        self.node_service = node_service

    async def execute(self) -> ListArticlesResponse:
        articles = await self.node_service.list_articles()
        return ListArticlesResponse(
            articles=[NodeResponse.from_node(article) for article in articles]
        )


class SearchArticlesRequest(BaseModel):
    """Search articles request."""

    q: str | None = None
    author_id: str | None = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)
    sort_by: SortField = SortField.CREATED_AT
    sort_order: SortOrder = SortOrder.DESC


class SearchArticlesResponse(BaseModel):
    """One page of search results."""

    data: list[NodeResponse]
    total: int
    page: int
    limit: int


class SearchArticlesUseCase:
    """Use case for searching articles with pagination."""

    def __init__(self, node_service: NodeService) -> None:
        """Initialize search articles use case.

        Args:
            node_service: Node domain service
        """
        self.node_service = node_service

    async def execute(self, request: SearchArticlesRequest) -> SearchArticlesResponse:
        """Execute search flow."""
        articles, total = await self.node_service.search_articles(
            query=request.q or None,
            author_id=UserId(UUID(request.author_id)) if request.author_id else None,
            sort_by=request.sort_by,
            sort_order=request.sort_order,
            page=request.page,
            limit=request.limit,
        )
        return SearchArticlesResponse(
            data=[NodeResponse.from_node(article) for article in articles],
            total=total,
            page=request.page,
            limit=request.limit,
        )
