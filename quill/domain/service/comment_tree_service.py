"""Comment tree domain service."""

from dataclasses import dataclass, field

import logfire

from quill.config import CommentSettings
from quill.domain.error import NotFoundError
from quill.domain.model import Node
from quill.domain.repository import NodeRepository, VoteRepository
from quill.domain.value import NodeId, VoteTally

from .base import Service


@dataclass
class CommentTreeNode:
    """Node in a comment tree, with its vote counts and loaded replies."""

    node: Node
    tally: VoteTally
    comments: list["CommentTreeNode"] = field(default_factory=list)

    @property
    def upvotes(self) -> int:
        return self.tally.upvotes

    @property
    def downvotes(self) -> int:
        return self.tally.downvotes

    @property
    def vote_score(self) -> int:
        return self.tally.score


def _sort_key(entry: CommentTreeNode) -> tuple:
    return (entry.vote_score, entry.node.created_at)


class CommentTreeService(Service):
    """Loads depth-bounded comment subtrees."""

    def __init__(
        self,
        node_repository: NodeRepository,
        vote_repository: VoteRepository,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize comment tree service.

        Args:
            node_repository: Node repository
            vote_repository: Vote repository
            comment_settings: Default and maximum tree depth
        """
        self.node_repository = node_repository
        self.vote_repository = vote_repository
        self.comment_settings = comment_settings

    def clamp_depth(self, depth: int | None) -> int:
        """Resolve a requested depth to the range the service will load."""
        if depth is None:
            depth = self.comment_settings.default_depth
        return max(0, min(depth, self.comment_settings.max_depth))

    async def load_replies(
        self, node_id: NodeId, depth: int | None = None
    ) -> list[CommentTreeNode]:
        """Load the comments under a node, ``depth`` levels deep.

        Siblings are ordered by vote score (highest first), ties by creation
        time (newest first). Comments on the last loaded level have an empty
        ``comments`` list.

        Raises:
            NotFoundError: If the node does not exist
        """
        with logfire.span(
            "comment_tree_service.load_replies", node_id=str(node_id), depth=depth
        ):
            node = await self._get_node(node_id)
            return await self._load_subtree(node, self.clamp_depth(depth))

    async def load_full_article(
        self, node_id: NodeId, depth: int | None = None
    ) -> CommentTreeNode:
        """Load a node with its own vote counts and its comment subtree.

        Raises:
            NotFoundError: If the node does not exist
        """
        with logfire.span(
            "comment_tree_service.load_full_article", node_id=str(node_id), depth=depth
        ):
            node = await self._get_node(node_id)
            tally = await self.vote_repository.tally(node.id)
            replies = await self._load_subtree(node, self.clamp_depth(depth))
            return CommentTreeNode(node=node, tally=tally, comments=replies)

    async def _get_node(self, node_id: NodeId) -> Node:
        node = await self.node_repository.find_by_id(node_id)
        if not node:
            logfire.warn("Node not found", node_id=str(node_id))
            raise NotFoundError("Node", str(node_id))
        return node

    async def _load_subtree(self, root: Node, depth: int) -> list[CommentTreeNode]:
        """Load the tree one level at a time.

        Each level costs one children query and one vote tally query,
        however many nodes the level holds.
        """
        top_level: list[CommentTreeNode] = []
        # parent id -> list its children are appended to
        frontier: dict[NodeId, list[CommentTreeNode]] = {root.id: top_level}
        loaded = 0

        for _ in range(depth):
            children = await self.node_repository.find_children_of_many(
                list(frontier.keys())
            )
            if not children:
                break

            tallies = await self.vote_repository.tally_many(
                [child.id for child in children]
            )

            next_frontier: dict[NodeId, list[CommentTreeNode]] = {}
            for child in children:
                entry = CommentTreeNode(
                    node=child, tally=tallies.get(child.id, VoteTally())
                )
                frontier[child.parent_id].append(entry)
                next_frontier[child.id] = entry.comments

            for siblings in frontier.values():
                siblings.sort(key=_sort_key, reverse=True)

            loaded += len(children)
            frontier = next_frontier

        logfire.info("Comment tree loaded", node_id=str(root.id), count=loaded)
        return top_level
