"""Node domain service.

Covers both articles and comments, which share one entity.
"""

from datetime import datetime
from typing import Any
from uuid import uuid4

import logfire

from quill.domain.error import NotAuthorizedError, NotFoundError
from quill.domain.model import Node
from quill.domain.repository import NodeRepository
from quill.domain.value import NodeId, SortField, SortOrder, UserId

from .base import Service
from .events import (
    ARTICLE_CREATED,
    ARTICLE_DELETED,
    ARTICLE_UPDATED,
    COMMENT_CREATED,
    EventPublisher,
    article_room,
)
from .image_service import ImageService
from .notification_service import NotificationService

MAX_TITLE_LENGTH = 300


def reply_title(parent_title: str) -> str:
    """Default title for a comment on ``parent_title``."""
    return f"Re: {parent_title}"[:MAX_TITLE_LENGTH]


def node_payload(node: Node) -> dict[str, Any]:
    """Serialize a node for real-time events."""
    return node.model_dump(mode="json")


class NodeService(Service):
    """Domain service for article and comment operations."""

    def __init__(
        self,
        node_repository: NodeRepository,
        notification_service: NotificationService,
        image_service: ImageService,
        publisher: EventPublisher,
    ) -> None:
        """Initialize node service.

        Args:
            node_repository: Node repository
            notification_service: Notification domain service
            image_service: Image domain service, for file cleanup on delete
            publisher: Real-time event publisher
        """
        self.node_repository = node_repository
        self.notification_service = notification_service
        self.image_service = image_service
        self.publisher = publisher

    async def create_article(
        self, author_id: UserId, author_username: str, title: str, content: str
    ) -> Node:
        """Create a top-level article and announce it to every client."""
        with logfire.span(
            "node_service.create_article", author_id=str(author_id), title=title
        ):
            article = Node(
                id=NodeId(uuid4()),
                title=title,
                content=content,
                author_id=author_id,
                author_username=author_username,
                parent_id=None,
                depth=0,
            )
            saved = await self.node_repository.save(article)
            logfire.info("Article created", article_id=str(saved.id))

            await self.publisher.publish(ARTICLE_CREATED, node_payload(saved))
            return saved

    async def create_comment(
        self,
        author_id: UserId,
        author_username: str,
        parent_id: NodeId,
        content: str,
        title: str | None = None,
    ) -> Node:
        """Create a comment under any node.

        The depth is always one more than the parent's. Followers of the
        thread's article receive the comment and the parent's author is
        notified.

        Raises:
            NotFoundError: If the parent does not exist
        """
        with logfire.span(
            "node_service.create_comment",
            author_id=str(author_id),
            parent_id=str(parent_id),
        ):
            parent = await self.node_repository.find_by_id(parent_id)
            if not parent:
                logfire.warn("Comment on non-existent node", parent_id=str(parent_id))
                raise NotFoundError("Node", str(parent_id))

            comment = Node(
                id=NodeId(uuid4()),
                title=title or reply_title(parent.title),
                content=content,
                author_id=author_id,
                author_username=author_username,
                parent_id=parent.id,
                depth=parent.depth + 1,
            )
            saved = await self.node_repository.save(comment)

            root_article_id = await self.notification_service.resolve_root_article_id(
                saved
            )
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                parent_id=str(parent.id),
                article_id=str(root_article_id),
                depth=saved.depth,
            )

            await self.publisher.publish_to_room(
                article_room(root_article_id),
                COMMENT_CREATED,
                {**node_payload(saved), "article_id": str(root_article_id)},
            )
            await self.notification_service.notify_comment(
                saved, parent, root_article_id
            )
            return saved

    async def get_node(self, node_id: NodeId) -> Node:
        """Get a node by ID.

        Raises:
            NotFoundError: If the node does not exist
        """
        with logfire.span("node_service.get_node", node_id=str(node_id)):
            node = await self.node_repository.find_by_id(node_id)
            if not node:
                logfire.warn("Node not found", node_id=str(node_id))
                raise NotFoundError("Node", str(node_id))
            return node

    async def list_articles(self) -> list[Node]:
        """List all articles, newest first."""
        with logfire.span("node_service.list_articles"):
            articles = await self.node_repository.find_top_level()
            logfire.info("Articles listed", count=len(articles))
            return articles

    async def search_articles(
        self,
        query: str | None = None,
        author_id: UserId | None = None,
        sort_by: SortField = SortField.CREATED_AT,
        sort_order: SortOrder = SortOrder.DESC,
        page: int = 1,
        limit: int = 10,
    ) -> tuple[list[Node], int]:
        """Search articles with pagination.

        Returns:
            Tuple of (articles on the page, total matches)
        """
        with logfire.span(
            "node_service.search_articles",
            query=query,
            author_id=str(author_id) if author_id else None,
            page=page,
            limit=limit,
        ):
            articles, total = await self.node_repository.search(
                query=query,
                author_id=author_id,
                sort_by=sort_by,
                sort_order=sort_order,
                limit=limit,
                offset=(page - 1) * limit,
            )
            logfire.info("Articles searched", total=total, returned=len(articles))
            return articles, total

    async def list_comments(self, node_id: NodeId) -> list[Node]:
        """List the direct comments of a node, newest first.

        Raises:
            NotFoundError: If the node does not exist
        """
        with logfire.span("node_service.list_comments", node_id=str(node_id)):
            await self.get_node(node_id)
            return await self.node_repository.find_children(node_id)

    async def update_node(
        self,
        node_id: NodeId,
        user_id: UserId,
        title: str | None = None,
        content: str | None = None,
    ) -> Node:
        """Edit the title or content of a node the user owns.

        Raises:
            NotFoundError: If the node does not exist
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "node_service.update_node", node_id=str(node_id), user_id=str(user_id)
        ):
            node = await self.get_node(node_id)
            if node.author_id != user_id:
                logfire.warn(
                    "Unauthorized edit attempt",
                    node_id=str(node_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError("node", str(node_id), str(user_id))

            changes: dict[str, Any] = {"updated_at": datetime.now()}
            if title is not None:
                changes["title"] = title
            if content is not None:
                changes["content"] = content

            # model_copy skips validation, so re-validate the edited fields
            updated = Node.model_validate({**node.model_dump(), **changes})
            saved = await self.node_repository.save(updated)
            logfire.info("Node updated", node_id=str(node_id))

            await self.publisher.publish(ARTICLE_UPDATED, node_payload(saved))
            return saved

    async def delete_node(self, node_id: NodeId, user_id: UserId) -> None:
        """Delete a node the user owns, with all of its comments.

        Raises:
            NotFoundError: If the node does not exist
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "node_service.delete_node", node_id=str(node_id), user_id=str(user_id)
        ):
            node = await self.get_node(node_id)
            if node.author_id != user_id:
                logfire.warn(
                    "Unauthorized delete attempt",
                    node_id=str(node_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError("node", str(node_id), str(user_id))

            # Rows cascade with the node; files are removed only once that succeeded
            images = await self.image_service.list_images(node_id)
            await self.node_repository.delete(node_id)
            removed_files = await self.image_service.remove_files(images)
            logfire.info(
                "Node deleted", node_id=str(node_id), removed_files=removed_files
            )

            await self.publisher.publish(ARTICLE_DELETED, {"id": str(node_id)})
