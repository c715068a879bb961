"""Unit tests for NodeService."""

from unittest.mock import AsyncMock, patch
from uuid import uuid4

import pytest

from quill.adapter.realtime import ConnectionRegistry
from quill.adapter.storage import InMemoryImageStorage
from quill.domain.error import NotAuthorizedError, NotFoundError
from quill.domain.repository import NodeRepository
from quill.domain.service import ImageService, NodeService
from quill.domain.service.events import article_room
from quill.domain.service.node_service import reply_title
from quill.domain.value import NodeId, SortField, SortOrder, UserId
from tests.conftest import FakeSocket, make_node, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


class TestCreate:
    """Tests for create_article and create_comment."""

    @pytest.mark.asyncio
    async def test_article_has_depth_zero_and_is_broadcast(self, unit_env):
        node_service = await unit_env.get(NodeService)
        registry = await unit_env.get(ConnectionRegistry)
        socket = FakeSocket()
        registry.connect(str(uuid4()), socket)
        author_id = UserId(uuid4())

        article = await node_service.create_article(
            author_id, "alice", "Hello world", "An introduction to everything"
        )

        assert article.depth == 0
        assert article.parent_id is None
        assert article.author_username == "alice"
        assert socket.events() == ["articleCreated"]
        assert socket.sent[0]["data"]["id"] == str(article.id)

    @pytest.mark.asyncio
    async def test_comment_depth_is_parent_depth_plus_one(self, unit_env):
        node_service = await unit_env.get(NodeService)
        author_id = UserId(uuid4())
        article = await node_service.create_article(
            author_id, "alice", "Hello world", "An introduction to everything"
        )

        comment = await node_service.create_comment(
            author_id, "alice", article.id, "Nice"
        )
        reply = await node_service.create_comment(
            author_id, "alice", comment.id, "Thanks"
        )

        assert comment.depth == 1
        assert reply.depth == 2
        assert reply.parent_id == comment.id

    @pytest.mark.asyncio
    async def test_comment_title_defaults_to_reply_title(self, unit_env):
        node_service = await unit_env.get(NodeService)
        author_id = UserId(uuid4())
        article = await node_service.create_article(
            author_id, "alice", "Hello world", "An introduction to everything"
        )

        comment = await node_service.create_comment(
            author_id, "alice", article.id, "Nice"
        )
        titled = await node_service.create_comment(
            author_id, "alice", article.id, "Nice", title="My own title"
        )

        assert comment.title == "Re: Hello world"
        assert titled.title == "My own title"

    def test_reply_title_is_truncated(self):
        assert len(reply_title("x" * 300)) == 300

    @pytest.mark.asyncio
    async def test_comment_on_missing_parent_raises_not_found(self, unit_env):
        node_service = await unit_env.get(NodeService)

        with pytest.raises(NotFoundError):
            await node_service.create_comment(
                UserId(uuid4()), "alice", NodeId(uuid4()), "Hello?"
            )

    @pytest.mark.asyncio
    async def test_comment_is_sent_to_the_root_article_room(self, unit_env):
        """Followers of the article see replies at any depth."""
        node_service = await unit_env.get(NodeService)
        registry = await unit_env.get(ConnectionRegistry)
        author_id = UserId(uuid4())
        article = await node_service.create_article(
            author_id, "alice", "Hello world", "An introduction to everything"
        )
        comment = await node_service.create_comment(
            author_id, "alice", article.id, "Nice"
        )
        follower, other = FakeSocket(), FakeSocket()
        registry.connect(str(uuid4()), follower)
        registry.connect(str(uuid4()), other)
        registry.join(article_room(article.id), follower)

        reply = await node_service.create_comment(
            author_id, "alice", comment.id, "Deep reply"
        )

        assert follower.events() == ["commentCreated"]
        assert follower.sent[0]["data"]["id"] == str(reply.id)
        assert follower.sent[0]["data"]["article_id"] == str(article.id)
        assert other.sent == []


class TestQueries:
    """Tests for listing and searching."""

    @pytest.mark.asyncio
    async def test_list_articles_newest_first_without_comments(self, unit_env):
        node_service = await unit_env.get(NodeService)
        node_repo = await unit_env.get(NodeRepository)
        author = make_user()
        older = await node_repo.save(make_node(author, minutes=1))
        newer = await node_repo.save(make_node(author, minutes=2))
        await node_repo.save(make_node(author, parent=older, minutes=3))

        articles = await node_service.list_articles()

        assert [a.id for a in articles] == [newer.id, older.id]

    @pytest.mark.asyncio
    async def test_list_comments_of_missing_node_raises_not_found(self, unit_env):
        node_service = await unit_env.get(NodeService)

        with pytest.raises(NotFoundError):
            await node_service.list_comments(NodeId(uuid4()))

    @pytest.mark.asyncio
    async def test_search_filters_sorts_and_paginates(self, unit_env):
        node_service = await unit_env.get(NodeService)
        node_repo = await unit_env.get(NodeRepository)
        alice, bob = make_user("alice"), make_user("bob")
        await node_repo.save(make_node(alice, title="Python tips", minutes=1))
        await node_repo.save(make_node(alice, title="Rust notes", minutes=2))
        await node_repo.save(
            make_node(bob, title="Cooking", content="python recipes", minutes=3)
        )
        await node_repo.save(make_node(bob, title="Gardening", minutes=4))

        matches, total = await node_service.search_articles(query="PYTHON")
        assert total == 2
        assert [n.title for n in matches] == ["Cooking", "Python tips"]

        by_author, total = await node_service.search_articles(author_id=alice.id)
        assert total == 2
        assert {n.author_id for n in by_author} == {alice.id}

        page, total = await node_service.search_articles(
            sort_by=SortField.TITLE, sort_order=SortOrder.ASC, page=2, limit=3
        )
        assert total == 4
        assert [n.title for n in page] == ["Rust notes"]


class TestUpdateAndDelete:
    """Tests for update_node and delete_node."""

    @pytest.mark.asyncio
    async def test_owner_can_update_and_event_is_broadcast(self, unit_env):
        node_service = await unit_env.get(NodeService)
        registry = await unit_env.get(ConnectionRegistry)
        socket = FakeSocket()
        registry.connect(str(uuid4()), socket)
        author_id = UserId(uuid4())
        article = await node_service.create_article(
            author_id, "alice", "Hello world", "An introduction to everything"
        )

        updated = await node_service.update_node(
            article.id, author_id, content="Rewritten content"
        )

        assert updated.content == "Rewritten content"
        assert updated.title == "Hello world"
        assert socket.events() == ["articleCreated", "articleUpdated"]

    @pytest.mark.asyncio
    async def test_non_owner_cannot_update(self, unit_env):
        node_service = await unit_env.get(NodeService)
        article = await node_service.create_article(
            UserId(uuid4()), "alice", "Hello world", "An introduction to everything"
        )

        with pytest.raises(NotAuthorizedError):
            await node_service.update_node(article.id, UserId(uuid4()), title="Mine")

    @pytest.mark.asyncio
    async def test_non_owner_cannot_delete(self, unit_env):
        node_service = await unit_env.get(NodeService)
        article = await node_service.create_article(
            UserId(uuid4()), "alice", "Hello world", "An introduction to everything"
        )

        with pytest.raises(NotAuthorizedError):
            await node_service.delete_node(article.id, UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_delete_removes_subtree_and_files(self, unit_env):
        node_service = await unit_env.get(NodeService)
        image_service = await unit_env.get(ImageService)
        storage = await unit_env.get(InMemoryImageStorage)
        registry = await unit_env.get(ConnectionRegistry)
        socket = FakeSocket()
        registry.connect(str(uuid4()), socket)
        author_id = UserId(uuid4())
        article = await node_service.create_article(
            author_id, "alice", "Hello world", "An introduction to everything"
        )
        comment = await node_service.create_comment(
            author_id, "alice", article.id, "Nice"
        )
        image = await image_service.upload(
            article.id, author_id, "photo.png", "image/png", PNG
        )

        await node_service.delete_node(article.id, author_id)

        with pytest.raises(NotFoundError):
            await node_service.get_node(article.id)
        with pytest.raises(NotFoundError):
            await node_service.get_node(comment.id)
        assert image.path not in storage.files
        assert socket.events()[-1] == "articleDeleted"
        assert socket.sent[-1]["data"] == {"id": str(article.id)}

    @pytest.mark.asyncio
    async def test_delete_survives_file_removal_failure(self, unit_env):
        """A file that cannot be deleted is logged and skipped."""
        node_service = await unit_env.get(NodeService)
        image_service = await unit_env.get(ImageService)
        storage = await unit_env.get(InMemoryImageStorage)
        author_id = UserId(uuid4())
        article = await node_service.create_article(
            author_id, "alice", "Hello world", "An introduction to everything"
        )
        image = await image_service.upload(
            article.id, author_id, "photo.png", "image/png", PNG
        )
        storage.undeletable.add(image.path)

        await node_service.delete_node(article.id, author_id)

        with pytest.raises(NotFoundError):
            await node_service.get_node(article.id)
        assert image.path in storage.files

    @pytest.mark.asyncio
    async def test_files_are_kept_when_row_delete_fails(self, unit_env):
        """Image files are only removed after the node rows are gone."""
        node_service = await unit_env.get(NodeService)
        image_service = await unit_env.get(ImageService)
        node_repo = await unit_env.get(NodeRepository)
        storage = await unit_env.get(InMemoryImageStorage)
        author_id = UserId(uuid4())
        article = await node_service.create_article(
            author_id, "alice", "Hello world", "An introduction to everything"
        )
        image = await image_service.upload(
            article.id, author_id, "photo.png", "image/png", PNG
        )

        with patch.object(
            node_repo, "delete", AsyncMock(side_effect=RuntimeError("database down"))
        ):
            with pytest.raises(RuntimeError):
                await node_service.delete_node(article.id, author_id)

        assert image.path in storage.files
        assert await node_service.get_node(article.id) == article
