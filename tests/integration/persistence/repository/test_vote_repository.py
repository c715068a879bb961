"""Integration tests for PostgresVoteRepository.

These tests need a migrated PostgreSQL database (see ``alembic.ini``) and are
deselected by default. Run them with ``pytest -m integration``.
"""

from uuid import uuid4

import pytest

from quill.domain.repository import NodeRepository, UserRepository, VoteRepository
from quill.domain.value import VoteDirection
from tests.conftest import make_node, make_user
from tests.harness import create_env_fixture

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})

pytestmark = pytest.mark.integration


async def _seed(env):
    """Store an author, a voter and an article; return (article, voter)."""
    user_repo = await env.get(UserRepository)
    node_repo = await env.get(NodeRepository)

    suffix = uuid4().hex[:8]
    author = await user_repo.save(make_user(username=f"a{suffix}"))
    voter = await user_repo.save(make_user(username=f"v{suffix}"))
    article = await node_repo.save(make_node(author))
    return article, voter


class TestVoteRepositoryIntegration:
    """The single-statement toggle against a real database."""

    @pytest.mark.asyncio
    async def test_toggle_state_machine(self, integration_env):
        # Arrange
        vote_repo = await integration_env.get(VoteRepository)
        article, voter = await _seed(integration_env)

        # Act / Assert: none -> up
        assert await vote_repo.toggle(article.id, voter.id, VoteDirection.UP) is None
        assert await vote_repo.find_direction(article.id, voter.id) is VoteDirection.UP

        # up -> down
        previous = await vote_repo.toggle(article.id, voter.id, VoteDirection.DOWN)
        assert previous is VoteDirection.UP
        tally = await vote_repo.tally(article.id)
        assert (tally.upvotes, tally.downvotes) == (0, 1)

        # down -> none
        previous = await vote_repo.toggle(article.id, voter.id, VoteDirection.DOWN)
        assert previous is VoteDirection.DOWN
        assert await vote_repo.find_direction(article.id, voter.id) is None

    @pytest.mark.asyncio
    async def test_tally_many(self, integration_env):
        vote_repo = await integration_env.get(VoteRepository)
        article, voter = await _seed(integration_env)
        other, _ = await _seed(integration_env)
        await vote_repo.add(article.id, voter.id, VoteDirection.UP)

        tallies = await vote_repo.tally_many([article.id, other.id])

        assert tallies[article.id].score == 1
        assert tallies[other.id].score == 0
