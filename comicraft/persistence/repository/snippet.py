"""PostgreSQL implementation of CommunitySnippet repository."""

from typing import List, Optional

from sqlalchemy import and_, delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from comicraft.domain.model import CommunitySnippet
from comicraft.domain.repository import SnippetRepository
from comicraft.domain.value import CommunityId, UserId
from comicraft.persistence.mappers import row_to_snippet, snippet_to_dict
from comicraft.persistence.tables import community_snippets_table


class PostgresSnippetRepository(SnippetRepository):
    """PostgreSQL implementation of SnippetRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find(
        self, user_id: UserId, community_id: CommunityId
    ) -> Optional[CommunitySnippet]:
        """Find a user's snippet for one community."""
        stmt = select(community_snippets_table).where(
            and_(
                community_snippets_table.c.user_id == user_id,
                community_snippets_table.c.community_id == community_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_snippet(row._asdict()) if row else None

    async def find_by_user(self, user_id: UserId) -> List[CommunitySnippet]:
        """Find all of a user's snippets."""
        stmt = (
            select(community_snippets_table)
            .where(community_snippets_table.c.user_id == user_id)
            .order_by(community_snippets_table.c.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_snippet(row._asdict()) for row in result.fetchall()]

    async def add(self, snippet: CommunitySnippet) -> CommunitySnippet:
        """Insert a snippet.

        Raises:
            IntegrityError: If the user already has a snippet for the community
        """
        stmt = insert(community_snippets_table).values(**snippet_to_dict(snippet))
        await self.session.execute(stmt)
        await self.session.flush()
        return snippet

    async def delete(self, user_id: UserId, community_id: CommunityId) -> bool:
        """Delete a user's snippet for one community."""
        stmt = delete(community_snippets_table).where(
            and_(
                community_snippets_table.c.user_id == user_id,
                community_snippets_table.c.community_id == community_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
