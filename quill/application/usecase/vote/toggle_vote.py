"""Toggle vote use case."""

from uuid import UUID

from pydantic import BaseModel

from quill.domain.service import VoteService
from quill.domain.value import NodeId, UserId, VoteDirection


class ToggleVoteRequest(BaseModel):
    """Upvote or downvote request."""

    node_id: str
    user_id: str  # User ID from authenticated user
    direction: VoteDirection


class ToggleVoteResponse(BaseModel):
    """Vote state after the toggle."""

    node_id: str
    direction: VoteDirection
    active: bool  # Whether the user now holds a vote in ``direction``
    upvotes: int
    downvotes: int
    vote_score: int


class ToggleVoteUseCase:
    """Use case for upvoting or downvoting an article or comment."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize toggle vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: ToggleVoteRequest) -> ToggleVoteResponse:
        """Execute vote flow.

        Raises:
            NotFoundError: If the node does not exist
        """
        result = await self.vote_service.toggle(
            NodeId(UUID(request.node_id)),
            UserId(UUID(request.user_id)),
            request.direction,
        )
        return ToggleVoteResponse(
            node_id=request.node_id,
            direction=result.direction,
            active=result.active,
            upvotes=result.upvotes,
            downvotes=result.downvotes,
            vote_score=result.tally.score,
        )
