"""PostgreSQL implementation of Node repository."""

from typing import List, Optional, Sequence, Tuple

from sqlalchemy import delete, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from quill.domain.model import Node
from quill.domain.repository import NodeRepository
from quill.domain.value import NodeId, SortField, SortOrder, UserId
from quill.persistence.mappers import node_to_dict, row_to_node
from quill.persistence.tables import nodes_table


class PostgresNodeRepository(NodeRepository):
    """PostgreSQL implementation of NodeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, node_id: NodeId) -> Optional[Node]:
        """Find a node by ID."""
        stmt = select(nodes_table).where(nodes_table.c.id == node_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_node(dict(row)) if row else None

    async def find_children(self, parent_id: NodeId) -> List[Node]:
        """Find the direct children of a node, newest first."""
        stmt = (
            select(nodes_table)
            .where(nodes_table.c.parent_id == parent_id)
            .order_by(nodes_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_node(dict(row)) for row in result.mappings().all()]

    async def find_children_of_many(
        self, parent_ids: Sequence[NodeId]
    ) -> List[Node]:
        """Find the direct children of several nodes in one query."""
        if not parent_ids:
            return []

        stmt = select(nodes_table).where(nodes_table.c.parent_id.in_(parent_ids))
        result = await self.session.execute(stmt)
        return [row_to_node(dict(row)) for row in result.mappings().all()]

    async def find_top_level(self) -> List[Node]:
        """Find all articles, newest first."""
        stmt = (
            select(nodes_table)
            .where(nodes_table.c.parent_id.is_(None))
            .order_by(nodes_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_node(dict(row)) for row in result.mappings().all()]

    async def search(
        self,
        query: Optional[str] = None,
        author_id: Optional[UserId] = None,
        sort_by: SortField = SortField.CREATED_AT,
        sort_order: SortOrder = SortOrder.DESC,
        limit: int = 10,
        offset: int = 0,
    ) -> Tuple[List[Node], int]:
        """Search articles, returning one page and the total match count."""
        conditions = [nodes_table.c.parent_id.is_(None)]
        if query:
            conditions.append(
                or_(
                    nodes_table.c.title.icontains(query, autoescape=True),
                    nodes_table.c.content.icontains(query, autoescape=True),
                )
            )
        if author_id:
            conditions.append(nodes_table.c.author_id == author_id)

        count_stmt = select(func.count()).select_from(nodes_table).where(*conditions)
        total = (await self.session.execute(count_stmt)).scalar_one()

        column = nodes_table.c[sort_by.value]
        order = column.asc() if sort_order == SortOrder.ASC else column.desc()
        stmt = (
            select(nodes_table)
            .where(*conditions)
            .order_by(order, nodes_table.c.id)
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        nodes = [row_to_node(dict(row)) for row in result.mappings().all()]
        return nodes, total

    async def save(self, node: Node) -> Node:
        """Save a node (create or update)."""
        existing = await self.find_by_id(node.id)

        node_dict = node_to_dict(node)

        if existing:
            stmt = (
                nodes_table.update()
                .where(nodes_table.c.id == node.id)
                .values(
                    title=node.title,
                    content=node.content,
                    updated_at=node.updated_at,
                )
            )
        else:
            stmt = nodes_table.insert().values(**node_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return node

    async def delete(self, node_id: NodeId) -> None:
        """Delete a node; foreign keys cascade to its descendants."""
        stmt = delete(nodes_table).where(nodes_table.c.id == node_id)
        await self.session.execute(stmt)
        await self.session.flush()
