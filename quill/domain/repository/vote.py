"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, Optional, Sequence

from quill.domain.value import NodeId, UserId, VoteDirection, VoteTally


class VoteRepository(ABC):
    """Repository for votes on nodes.

    A user holds at most one vote per node, so the upvoter and downvoter
    sets of a node are always disjoint.
    """

    @abstractmethod
    async def find_direction(
        self, node_id: NodeId, user_id: UserId
    ) -> Optional[VoteDirection]:
        """Find a user's current vote on a node.

        Returns:
            The vote direction, or None if the user has not voted
        """
        pass

    @abstractmethod
    async def toggle(
        self, node_id: NodeId, user_id: UserId, direction: VoteDirection
    ) -> Optional[VoteDirection]:
        """Apply a vote as one atomic transition.

        If the user already voted in ``direction`` the vote is removed;
        otherwise the user's vote is set to ``direction``.

        Args:
            node_id: Node being voted on
            user_id: Voter
            direction: Requested direction

        Returns:
            The direction held before the call, or None if there was no vote
        """
        pass

    @abstractmethod
    async def add(
        self, node_id: NodeId, user_id: UserId, direction: VoteDirection
    ) -> None:
        """Set the user's vote on a node, replacing any existing vote."""
        pass

    @abstractmethod
    async def remove(self, node_id: NodeId, user_id: UserId) -> bool:
        """Remove the user's vote on a node.

        Returns:
            True if a vote was removed, False if none existed
        """
        pass

    @abstractmethod
    async def tally(self, node_id: NodeId) -> VoteTally:
        """Count votes on a node."""
        pass

    @abstractmethod
    async def tally_many(
        self, node_ids: Sequence[NodeId]
    ) -> Dict[NodeId, VoteTally]:
        """Count votes on several nodes (batch query).

        Returns:
            Mapping of node ID to tally; nodes without votes map to an
            empty tally
        """
        pass
