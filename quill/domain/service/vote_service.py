"""Vote domain service.

Each (node, user) pair is in one of three states: no vote, upvoted or
downvoted. Voting in the direction already held removes the vote; voting
in the other direction switches it.
"""

from dataclasses import dataclass

import logfire

from quill.domain.error import NotFoundError
from quill.domain.repository import NodeRepository, VoteRepository
from quill.domain.value import NodeId, UserId, VoteDirection, VoteTally

from .base import Service
from .notification_service import NotificationService


@dataclass(frozen=True)
class VoteResult:
    """Outcome of an upvote or downvote call."""

    direction: VoteDirection
    active: bool  # Whether the user now holds a vote in ``direction``
    tally: VoteTally

    @property
    def upvotes(self) -> int:
        return self.tally.upvotes

    @property
    def downvotes(self) -> int:
        return self.tally.downvotes


@dataclass(frozen=True)
class VoteStatus:
    """Vote counts on a node and, if known, the caller's vote."""

    tally: VoteTally
    user_vote: VoteDirection | None = None


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        node_repository: NodeRepository,
        notification_service: NotificationService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            node_repository: Node repository
            notification_service: Notification domain service
        """
        self.vote_repository = vote_repository
        self.node_repository = node_repository
        self.notification_service = notification_service

    async def upvote(self, node_id: NodeId, user_id: UserId) -> VoteResult:
        """Toggle an upvote."""
        return await self.toggle(node_id, user_id, VoteDirection.UP)

    async def downvote(self, node_id: NodeId, user_id: UserId) -> VoteResult:
        """Toggle a downvote."""
        return await self.toggle(node_id, user_id, VoteDirection.DOWN)

    async def toggle(
        self, node_id: NodeId, user_id: UserId, direction: VoteDirection
    ) -> VoteResult:
        """Apply a vote transition and notify the author of new votes.

        Raises:
            NotFoundError: If the node does not exist
        """
        with logfire.span(
            "vote_service.toggle",
            node_id=str(node_id),
            user_id=str(user_id),
            direction=direction.value,
        ):
            node = await self.node_repository.find_by_id(node_id)
            if not node:
                logfire.warn("Vote on non-existent node", node_id=str(node_id))
                raise NotFoundError("Node", str(node_id))

            previous = await self.vote_repository.toggle(node_id, user_id, direction)
            active = previous is not direction
            tally = await self.vote_repository.tally(node_id)

            logfire.info(
                "Vote toggled",
                node_id=str(node_id),
                user_id=str(user_id),
                previous=previous.value if previous else None,
                active=active,
                upvotes=tally.upvotes,
                downvotes=tally.downvotes,
            )

            if active:
                await self.notification_service.notify_vote(node, user_id, direction)

            return VoteResult(direction=direction, active=active, tally=tally)

    async def get_votes(
        self, node_id: NodeId, user_id: UserId | None = None
    ) -> VoteStatus:
        """Get vote counts on a node and the given user's vote.

        Raises:
            NotFoundError: If the node does not exist
        """
        with logfire.span("vote_service.get_votes", node_id=str(node_id)):
            if not await self.node_repository.find_by_id(node_id):
                raise NotFoundError("Node", str(node_id))

            tally = await self.vote_repository.tally(node_id)
            user_vote = None
            if user_id is not None:
                user_vote = await self.vote_repository.find_direction(node_id, user_id)
            return VoteStatus(tally=tally, user_vote=user_vote)
