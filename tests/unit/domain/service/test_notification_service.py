"""Unit tests for NotificationService and the comment/vote notification flow."""

from uuid import uuid4

import pytest

from quill.adapter.realtime import ConnectionRegistry
from quill.domain.error import NotFoundError
from quill.domain.repository import NodeRepository, UserRepository
from quill.domain.service import NodeService, NotificationService, VoteService
from quill.domain.value import (
    NotificationId,
    NotificationTargetType,
    NotificationType,
    UserId,
)
from tests.conftest import FakeSocket, make_node, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateNotification:
    """Tests for create_notification."""

    @pytest.mark.asyncio
    async def test_skips_when_actor_is_recipient(self, unit_env):
        """Nobody is notified about their own actions."""
        service = await unit_env.get(NotificationService)
        user_id = UserId(uuid4())

        result = await service.create_notification(
            recipient_id=user_id,
            actor_id=user_id,
            type=NotificationType.COMMENT,
            target_type=NotificationTargetType.ARTICLE,
        )

        assert result is None
        assert await service.list_for_user(user_id) == []

    @pytest.mark.asyncio
    async def test_skips_without_recipient(self, unit_env):
        service = await unit_env.get(NotificationService)

        result = await service.create_notification(
            recipient_id=None,
            actor_id=UserId(uuid4()),
            type=NotificationType.UPVOTE,
            target_type=NotificationTargetType.ARTICLE,
        )

        assert result is None

    @pytest.mark.asyncio
    async def test_pushes_to_every_live_connection_of_recipient(self, unit_env):
        """The stored notification is sent with the actor's username."""
        service = await unit_env.get(NotificationService)
        registry = await unit_env.get(ConnectionRegistry)
        user_repo = await unit_env.get(UserRepository)
        actor = await user_repo.save(make_user("actor"))
        recipient = UserId(uuid4())
        laptop, phone, stranger = FakeSocket(), FakeSocket(), FakeSocket()
        registry.connect(str(recipient), laptop)
        registry.connect(str(recipient), phone)
        registry.connect(str(uuid4()), stranger)

        saved = await service.create_notification(
            recipient_id=recipient,
            actor_id=actor.id,
            type=NotificationType.UPVOTE,
            target_type=NotificationTargetType.ARTICLE,
        )

        assert saved is not None
        assert laptop.events() == ["notification"]
        assert phone.events() == ["notification"]
        assert stranger.sent == []
        payload = laptop.sent[0]["data"]
        assert payload["id"] == str(saved.id)
        assert payload["type"] == "upvote"
        assert payload["actor"] == {"id": str(actor.id), "username": "actor"}


class TestResolveRootArticle:
    """Tests for resolve_root_article_id."""

    @pytest.mark.asyncio
    async def test_walks_to_top_of_thread(self, unit_env):
        service = await unit_env.get(NotificationService)
        node_repo = await unit_env.get(NodeRepository)
        author = make_user()
        article = await node_repo.save(make_node(author))
        comment = await node_repo.save(make_node(author, parent=article))
        reply = await node_repo.save(make_node(author, parent=comment))
        deep = await node_repo.save(make_node(author, parent=reply))

        assert await service.resolve_root_article_id(deep) == article.id
        assert await service.resolve_root_article_id(article) == article.id


class TestNotificationScenario:
    """Comment, reply and vote notifications across three users."""

    @pytest.mark.asyncio
    async def test_comment_reply_and_vote_flow(self, unit_env):
        node_service = await unit_env.get(NodeService)
        vote_service = await unit_env.get(VoteService)
        notifications = await unit_env.get(NotificationService)
        user_repo = await unit_env.get(UserRepository)
        u1 = await user_repo.save(make_user("user1"))
        u2 = await user_repo.save(make_user("user2"))
        u3 = await user_repo.save(make_user("user3"))

        # U1 creates article A
        article = await node_service.create_article(
            u1.id, u1.username, "Article A", "Body of article A"
        )

        # U2 comments C1 on A -> U1 gets a comment notification
        c1 = await node_service.create_comment(
            u2.id, u2.username, article.id, "First comment"
        )
        u1_notes = await notifications.list_for_user(u1.id)
        assert len(u1_notes) == 1
        assert u1_notes[0].type is NotificationType.COMMENT
        assert u1_notes[0].target_type is NotificationTargetType.ARTICLE
        assert u1_notes[0].article_id == article.id
        assert u1_notes[0].comment_id == c1.id
        assert u1_notes[0].actor_id == u2.id

        # U1 replies R1 to C1 -> U2 gets a reply notification
        await node_service.create_comment(u1.id, u1.username, c1.id, "A reply")
        u2_notes = await notifications.list_for_user(u2.id)
        assert len(u2_notes) == 1
        assert u2_notes[0].type is NotificationType.REPLY
        assert u2_notes[0].target_type is NotificationTargetType.COMMENT
        assert u2_notes[0].article_id == article.id
        assert u2_notes[0].comment_id == c1.id

        # U3 upvotes C1 -> U2 gets an upvote notification
        await vote_service.upvote(c1.id, u3.id)
        u2_notes = await notifications.list_for_user(u2.id)
        assert [n.type for n in u2_notes].count(NotificationType.UPVOTE) == 1
        upvote_note = next(n for n in u2_notes if n.type is NotificationType.UPVOTE)
        assert upvote_note.article_id == article.id
        assert upvote_note.comment_id == c1.id

        # U3 upvotes C1 again -> vote removed, nothing new
        result = await vote_service.upvote(c1.id, u3.id)
        assert result.active is False
        assert len(await notifications.list_for_user(u2.id)) == 2

        # U1 never got notified about their own reply
        assert len(await notifications.list_for_user(u1.id)) == 1


class TestManageNotifications:
    """Tests for mark_as_read and remove."""

    async def _notify(self, service: NotificationService, recipient: UserId):
        return await service.create_notification(
            recipient_id=recipient,
            actor_id=UserId(uuid4()),
            type=NotificationType.COMMENT,
            target_type=NotificationTargetType.ARTICLE,
        )

    @pytest.mark.asyncio
    async def test_mark_as_read_only_touches_own_notifications(self, unit_env):
        service = await unit_env.get(NotificationService)
        alice, bob = UserId(uuid4()), UserId(uuid4())
        mine = await self._notify(service, alice)
        theirs = await self._notify(service, bob)

        updated = await service.mark_as_read(alice, [mine.id, theirs.id])

        assert updated == 1
        assert (await service.list_for_user(alice))[0].is_read is True
        assert (await service.list_for_user(bob))[0].is_read is False

    @pytest.mark.asyncio
    async def test_mark_as_read_with_no_ids_is_noop(self, unit_env):
        service = await unit_env.get(NotificationService)

        assert await service.mark_as_read(UserId(uuid4()), []) == 0

    @pytest.mark.asyncio
    async def test_remove_someone_elses_notification_raises_not_found(
        self, unit_env
    ):
        service = await unit_env.get(NotificationService)
        alice, bob = UserId(uuid4()), UserId(uuid4())
        theirs = await self._notify(service, bob)

        with pytest.raises(NotFoundError):
            await service.remove(alice, theirs.id)
        assert len(await service.list_for_user(bob)) == 1

    @pytest.mark.asyncio
    async def test_remove_deletes_notification(self, unit_env):
        service = await unit_env.get(NotificationService)
        alice = UserId(uuid4())
        mine = await self._notify(service, alice)

        await service.remove(alice, mine.id)

        assert await service.list_for_user(alice) == []
        with pytest.raises(NotFoundError):
            await service.remove(alice, NotificationId(uuid4()))
