"""Delete article use case."""

from uuid import UUID

from pydantic import BaseModel

from quill.domain.service import NodeService
from quill.domain.value import NodeId, UserId


class DeleteArticleRequest(BaseModel):
    """Delete article request."""

    article_id: str
    user_id: str  # User ID from authenticated user


class DeleteArticleResponse(BaseModel):
    """Delete article response."""

    id: str
    deleted: bool


class DeleteArticleUseCase:
    """Use case for deleting an article (or comment) and its thread."""

    def __init__(self, node_service: NodeService) -> None:
        self.node_service = node_service

    async def execute(self, request: DeleteArticleRequest) -> DeleteArticleResponse:
        """Execute delete flow.

        Raises:
            NotFoundError: If the node does not exist
            NotAuthorizedError: If the user is not the author
        """
        await self.node_service.delete_node(
            NodeId(UUID(request.article_id)), UserId(UUID(request.user_id))
        )
        return DeleteArticleResponse(id=request.article_id, deleted=True)
