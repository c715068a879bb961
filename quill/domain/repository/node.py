"""Node repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple

from quill.domain.model.node import Node
from quill.domain.value import NodeId, SortField, SortOrder, UserId


class NodeRepository(ABC):
    """Repository for Node aggregate (articles and comments).

    Defines the contract for node persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, node_id: NodeId) -> Optional[Node]:
        """Find a node by ID.

        Args:
            node_id: The node's unique identifier

        Returns:
            The node if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_children(self, parent_id: NodeId) -> List[Node]:
        """Find the direct children of a node, newest first.

        Args:
            parent_id: ID of the parent node

        Returns:
            List of child nodes
        """
        pass

    @abstractmethod
    async def find_children_of_many(
        self, parent_ids: Sequence[NodeId]
    ) -> List[Node]:
        """Find the direct children of several nodes in one query.

        Args:
            parent_ids: IDs of the parent nodes

        Returns:
            All children of the given parents, in no particular order
        """
        pass

    @abstractmethod
    async def find_top_level(self) -> List[Node]:
        """Find all articles (nodes without a parent), newest first."""
        pass

    @abstractmethod
    async def search(
        self,
        query: Optional[str] = None,
        author_id: Optional[UserId] = None,
        sort_by: SortField = SortField.CREATED_AT,
        sort_order: SortOrder = SortOrder.DESC,
        limit: int = 10,
        offset: int = 0,
    ) -> Tuple[List[Node], int]:
        """Search articles.

        Args:
            query: Case-insensitive substring matched against title or content
            author_id: Restrict to one author
            sort_by: Column to order by
            sort_order: Ascending or descending
            limit: Maximum number of articles to return
            offset: Number of articles to skip

        Returns:
            Tuple of (page of articles, total number of matches)
        """
        pass

    @abstractmethod
    async def save(self, node: Node) -> Node:
        """Save a node (create or update).

        Args:
            node: The node to save

        Returns:
            The saved node
        """
        pass

    @abstractmethod
    async def delete(self, node_id: NodeId) -> None:
        """Delete a node and, through cascading, all of its descendants.

        Args:
            node_id: The node ID to delete
        """
        pass
