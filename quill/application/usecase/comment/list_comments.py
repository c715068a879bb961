"""List comments use case."""

from uuid import UUID

from pydantic import BaseModel

from quill.application.usecase.article.common import NodeResponse
from quill.domain.service import NodeService
from quill.domain.value import NodeId


class ListCommentsRequest(BaseModel):
    """List the direct comments of a node."""

    node_id: str


class ListCommentsResponse(BaseModel):
    """Direct comments, newest first."""

    comments: list[NodeResponse]


class ListCommentsUseCase:
    """Use case for listing one level of comments."""

    def __init__(self, node_service: NodeService) -> None:
        self.node_service = node_service

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Raises NotFoundError if the node does not exist."""
        comments = await self.node_service.list_comments(NodeId(UUID(request.node_id)))
        return ListCommentsResponse(
            comments=[NodeResponse.from_node(comment) for comment in comments]
        )
