"""PostgreSQL implementation of Community repository."""

from typing import List, Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from comicraft.domain.model import Community
from comicraft.domain.repository import CommunityRepository
from comicraft.domain.value import CommunityId
from comicraft.persistence.mappers import community_to_dict, row_to_community
from comicraft.persistence.tables import communities_table


class PostgresCommunityRepository(CommunityRepository):
    """PostgreSQL implementation of CommunityRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, community_id: CommunityId) -> Optional[Community]:
        """Find a community by ID."""
        stmt = select(communities_table).where(communities_table.c.id == community_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_community(row._asdict()) if row else None

    async def find_top_by_members(self, limit: int = 5) -> List[Community]:
        """Find communities with the most members."""
        stmt = (
            select(communities_table)
            .order_by(
                communities_table.c.number_of_members.desc(),
                communities_table.c.created_at.asc(),
            )
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_community(row._asdict()) for row in result.fetchall()]

    async def add(self, community: Community) -> Community:
        """Insert a new community.

        Raises:
            IntegrityError: If a community with the same ID exists
        """
        stmt = insert(communities_table).values(**community_to_dict(community))
        await self.session.execute(stmt)
        await self.session.flush()
        return community

    async def increment_members(self, community_id: CommunityId) -> None:
        """Increment the member count by one."""
        stmt = (
            update(communities_table)
            .where(communities_table.c.id == community_id)
            .values(number_of_members=communities_table.c.number_of_members + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def decrement_members(self, community_id: CommunityId) -> None:
        """Decrement the member count by one, never below zero."""
        stmt = (
            update(communities_table)
            .where(
                communities_table.c.id == community_id,
                communities_table.c.number_of_members > 0,
            )
            .values(number_of_members=communities_table.c.number_of_members - 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def update_image_url(
        self, community_id: CommunityId, image_url: str | None
    ) -> Optional[Community]:
        """Set or clear the community image reference."""
        stmt = (
            update(communities_table)
            .where(communities_table.c.id == community_id)
            .values(image_url=image_url)
            .returning(*communities_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_community(row._asdict()) if row else None
