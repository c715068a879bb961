"""In-memory node repository for testing."""

from typing import Optional, Sequence

from quill.domain.model.node import Node
from quill.domain.repository.node import NodeRepository
from quill.domain.value import NodeId, SortField, SortOrder, UserId


class InMemoryNodeRepository(NodeRepository):
    """In-memory implementation of NodeRepository for testing."""

    def __init__(self) -> None:
        self._nodes: dict[NodeId, Node] = {}

    async def find_by_id(self, node_id: NodeId) -> Optional[Node]:
        """Find a node by ID."""
        return self._nodes.get(node_id)

    async def find_children(self, parent_id: NodeId) -> list[Node]:
        """Find the direct children of a node, newest first."""
        children = [n for n in self._nodes.values() if n.parent_id == parent_id]
        return sorted(children, key=lambda n: n.created_at, reverse=True)

    async def find_children_of_many(self, parent_ids: Sequence[NodeId]) -> list[Node]:
        """Find the direct children of several nodes."""
        wanted = set(parent_ids)
        return [n for n in self._nodes.values() if n.parent_id in wanted]

    async def find_top_level(self) -> list[Node]:
        """Find all articles, newest first."""
        articles = [n for n in self._nodes.values() if n.parent_id is None]
        return sorted(articles, key=lambda n: n.created_at, reverse=True)

    async def search(
        self,
        query: Optional[str] = None,
        author_id: Optional[UserId] = None,
        sort_by: SortField = SortField.CREATED_AT,
        sort_order: SortOrder = SortOrder.DESC,
        limit: int = 10,
        offset: int = 0,
    ) -> tuple[list[Node], int]:
        """Search articles."""
        matches = [n for n in self._nodes.values() if n.parent_id is None]
        if query:
            needle = query.lower()
            matches = [
                n
                for n in matches
                if needle in n.title.lower() or needle in n.content.lower()
            ]
        if author_id:
            matches = [n for n in matches if n.author_id == author_id]

        matches.sort(
            key=lambda n: getattr(n, sort_by.value),
            reverse=sort_order == SortOrder.DESC,
        )
        return matches[offset : offset + limit], len(matches)

    async def save(self, node: Node) -> Node:
        """Save a node."""
        self._nodes[node.id] = node
        return node

    async def delete(self, node_id: NodeId) -> None:
        """Delete a node and its descendants, like the cascading foreign key."""
        doomed = {node_id}
        frontier = [node_id]
        while frontier:
            parent = frontier.pop()
            for node in self._nodes.values():
                if node.parent_id == parent and node.id not in doomed:
                    doomed.add(node.id)
                    frontier.append(node.id)
        for doomed_id in doomed:
            self._nodes.pop(doomed_id, None)
