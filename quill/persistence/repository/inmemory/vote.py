"""In-memory vote repository for testing."""

from typing import Optional, Sequence

from quill.domain.repository.vote import VoteRepository
from quill.domain.value import NodeId, UserId, VoteDirection, VoteTally


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    Keyed by (node, user) like the primary key of the votes table.
    """

    def __init__(self) -> None:
        self._votes: dict[tuple[NodeId, UserId], VoteDirection] = {}

    async def find_direction(
        self, node_id: NodeId, user_id: UserId
    ) -> Optional[VoteDirection]:
        """Find a user's current vote on a node."""
        return self._votes.get((node_id, user_id))

    async def toggle(
        self, node_id: NodeId, user_id: UserId, direction: VoteDirection
    ) -> Optional[VoteDirection]:
        """Remove the vote if it matches ``direction``, else set it."""
        key = (node_id, user_id)
        previous = self._votes.get(key)
        if previous is direction:
            del self._votes[key]
        else:
            self._votes[key] = direction
        return previous

    async def add(
        self, node_id: NodeId, user_id: UserId, direction: VoteDirection
    ) -> None:
        """Set the user's vote on a node."""
        self._votes[(node_id, user_id)] = direction

    async def remove(self, node_id: NodeId, user_id: UserId) -> bool:
        """Remove the user's vote on a node."""
        return self._votes.pop((node_id, user_id), None) is not None

    async def tally(self, node_id: NodeId) -> VoteTally:
        """Count votes on a node."""
        return (await self.tally_many([node_id]))[node_id]

    async def tally_many(self, node_ids: Sequence[NodeId]) -> dict[NodeId, VoteTally]:
        """Count votes on several nodes."""
        counts = {node_id: [0, 0] for node_id in node_ids}
        for (node_id, _), direction in self._votes.items():
            if node_id in counts:
                counts[node_id][0 if direction is VoteDirection.UP else 1] += 1
        return {
            node_id: VoteTally(upvotes=up, downvotes=down)
            for node_id, (up, down) in counts.items()
        }
