"""PostgreSQL implementation of Vote repository."""

from typing import Dict, Optional, Sequence

from sqlalchemy import and_, delete, exists, func, literal, select
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from quill.domain.repository import VoteRepository
from quill.domain.value import NodeId, UserId, VoteDirection, VoteTally
from quill.persistence.tables import vote_direction, votes_table

_upvotes = func.count().filter(votes_table.c.direction == VoteDirection.UP.value)
_downvotes = func.count().filter(votes_table.c.direction == VoteDirection.DOWN.value)


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _match(self, node_id: NodeId, user_id: UserId):
        return and_(votes_table.c.node_id == node_id, votes_table.c.user_id == user_id)

    async def find_direction(
        self, node_id: NodeId, user_id: UserId
    ) -> Optional[VoteDirection]:
        """Find a user's current vote on a node."""
        stmt = select(votes_table.c.direction).where(self._match(node_id, user_id))
        result = await self.session.execute(stmt)
        direction = result.scalar_one_or_none()
        return VoteDirection(direction) if direction else None

    async def toggle(
        self, node_id: NodeId, user_id: UserId, direction: VoteDirection
    ) -> Optional[VoteDirection]:
        """Apply a vote transition in a single statement.

        Roughly:

            WITH previous AS (SELECT direction FROM votes WHERE <match>),
                 removed AS (DELETE FROM votes
                             WHERE <match> AND direction = :direction
                             RETURNING node_id),
                 upserted AS (INSERT INTO votes (node_id, user_id, direction)
                              SELECT :node, :user, :direction
                              WHERE NOT EXISTS (SELECT 1 FROM removed)
                              ON CONFLICT (node_id, user_id)
                              DO UPDATE SET direction = excluded.direction
                              RETURNING node_id)
            SELECT direction FROM previous

        All CTEs see the same snapshot, so ``previous`` is the state before
        the transition.
        """
        match = self._match(node_id, user_id)

        previous = select(votes_table.c.direction).where(match).cte("previous")

        removed = (
            delete(votes_table)
            .where(match, votes_table.c.direction == direction.value)
            .returning(votes_table.c.node_id)
            .cte("removed")
        )

        insert_stmt = pg_insert(votes_table).from_select(
            ["node_id", "user_id", "direction"],
            select(
                literal(node_id, UUID),
                literal(user_id, UUID),
                literal(direction.value, vote_direction),
            ).where(~exists(select(removed.c.node_id))),
        )
        upserted = (
            insert_stmt.on_conflict_do_update(
                index_elements=[votes_table.c.node_id, votes_table.c.user_id],
                set_={"direction": insert_stmt.excluded.direction},
            )
            .returning(votes_table.c.node_id)
            .cte("upserted")
        )

        stmt = select(previous.c.direction).add_cte(removed, upserted)
        result = await self.session.execute(stmt)
        await self.session.flush()
        before = result.scalar_one_or_none()
        return VoteDirection(before) if before else None

    async def add(
        self, node_id: NodeId, user_id: UserId, direction: VoteDirection
    ) -> None:
        """Set the user's vote on a node, replacing any existing vote."""
        stmt = pg_insert(votes_table).values(
            node_id=node_id, user_id=user_id, direction=direction.value
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[votes_table.c.node_id, votes_table.c.user_id],
            set_={"direction": stmt.excluded.direction},
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def remove(self, node_id: NodeId, user_id: UserId) -> bool:
        """Remove the user's vote on a node."""
        stmt = delete(votes_table).where(self._match(node_id, user_id))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def tally(self, node_id: NodeId) -> VoteTally:
        """Count votes on a node."""
        stmt = select(
            _upvotes.label("upvotes"), _downvotes.label("downvotes")
        ).where(votes_table.c.node_id == node_id)
        row = (await self.session.execute(stmt)).one()
        return VoteTally(upvotes=row.upvotes, downvotes=row.downvotes)

    async def tally_many(
        self, node_ids: Sequence[NodeId]
    ) -> Dict[NodeId, VoteTally]:
        """Count votes on several nodes (batch query)."""
        if not node_ids:
            return {}

        stmt = (
            select(
                votes_table.c.node_id,
                _upvotes.label("upvotes"),
                _downvotes.label("downvotes"),
            )
            .where(votes_table.c.node_id.in_(node_ids))
            .group_by(votes_table.c.node_id)
        )
        result = await self.session.execute(stmt)
        tallies = {node_id: VoteTally() for node_id in node_ids}
        for row in result.all():
            tallies[NodeId(row.node_id)] = VoteTally(
                upvotes=row.upvotes, downvotes=row.downvotes
            )
        return tallies
