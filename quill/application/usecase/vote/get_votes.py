"""Get votes use case."""

from uuid import UUID

from pydantic import BaseModel

from quill.domain.service import VoteService
from quill.domain.value import NodeId, UserId, VoteDirection


class GetVotesRequest(BaseModel):
    """Get votes request."""

    node_id: str
    user_id: str | None = None  # Current user ID (if authenticated)


class GetVotesResponse(BaseModel):
    """Vote counts and the caller's vote."""

    node_id: str
    upvotes: int
    downvotes: int
    vote_score: int
    user_vote: VoteDirection | None


class GetVotesUseCase:
    """Use case for reading the votes on a node."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: GetVotesRequest) -> GetVotesResponse:
        """Raises NotFoundError if the node does not exist."""
        status = await self.vote_service.get_votes(
            NodeId(UUID(request.node_id)),
            UserId(UUID(request.user_id)) if request.user_id else None,
        )
        return GetVotesResponse(
            node_id=request.node_id,
            upvotes=status.tally.upvotes,
            downvotes=status.tally.downvotes,
            vote_score=status.tally.score,
            user_vote=status.user_vote,
        )
