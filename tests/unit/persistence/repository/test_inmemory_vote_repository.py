"""Unit tests for the in-memory vote repository."""

from uuid import uuid4

import pytest

from quill.domain.value import NodeId, UserId, VoteDirection
from quill.persistence.repository.inmemory.vote import InMemoryVoteRepository


class TestInMemoryVoteRepository:
    """The toggle must behave like the single-statement SQL version."""

    @pytest.mark.asyncio
    async def test_toggle_reports_previous_direction(self):
        repo = InMemoryVoteRepository()
        node_id, user_id = NodeId(uuid4()), UserId(uuid4())

        assert await repo.toggle(node_id, user_id, VoteDirection.UP) is None
        assert await repo.find_direction(node_id, user_id) is VoteDirection.UP

        assert (
            await repo.toggle(node_id, user_id, VoteDirection.DOWN)
            is VoteDirection.UP
        )
        assert await repo.find_direction(node_id, user_id) is VoteDirection.DOWN

        assert (
            await repo.toggle(node_id, user_id, VoteDirection.DOWN)
            is VoteDirection.DOWN
        )
        assert await repo.find_direction(node_id, user_id) is None

    @pytest.mark.asyncio
    async def test_tally_many_includes_nodes_without_votes(self):
        repo = InMemoryVoteRepository()
        voted, unvoted = NodeId(uuid4()), NodeId(uuid4())
        await repo.add(voted, UserId(uuid4()), VoteDirection.UP)
        await repo.add(voted, UserId(uuid4()), VoteDirection.UP)
        await repo.add(voted, UserId(uuid4()), VoteDirection.DOWN)

        tallies = await repo.tally_many([voted, unvoted])

        assert tallies[voted].upvotes == 2
        assert tallies[voted].downvotes == 1
        assert tallies[voted].score == 1
        assert tallies[unvoted].score == 0

    @pytest.mark.asyncio
    async def test_remove(self):
        repo = InMemoryVoteRepository()
        node_id, user_id = NodeId(uuid4()), UserId(uuid4())
        await repo.add(node_id, user_id, VoteDirection.DOWN)

        assert await repo.remove(node_id, user_id) is True
        assert await repo.remove(node_id, user_id) is False
