"""PostgreSQL implementation of PostVote repository."""

from typing import List, Optional

from sqlalchemy import and_, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from comicraft.domain.model import PostVote
from comicraft.domain.repository import VoteRepository
from comicraft.domain.value import CommunityId, PostId, UserId, VoteId, VoteValue
from comicraft.persistence.mappers import row_to_vote, vote_to_dict
from comicraft.persistence.tables import post_votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_post(
        self, user_id: UserId, post_id: PostId
    ) -> Optional[PostVote]:
        """Find a user's vote on a post."""
        stmt = select(post_votes_table).where(
            and_(
                post_votes_table.c.user_id == user_id,
                post_votes_table.c.post_id == post_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_user_and_community(
        self, user_id: UserId, community_id: CommunityId
    ) -> List[PostVote]:
        """Find a user's votes on posts of one community."""
        stmt = select(post_votes_table).where(
            and_(
                post_votes_table.c.user_id == user_id,
                post_votes_table.c.community_id == community_id,
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def save(self, vote: PostVote) -> PostVote:
        """Insert a vote."""
        stmt = insert(post_votes_table).values(**vote_to_dict(vote))
        await self.session.execute(stmt)
        await self.session.flush()
        return vote

    async def update_value(self, vote_id: VoteId, value: VoteValue) -> Optional[PostVote]:
        """Change the value of an existing vote."""
        stmt = (
            update(post_votes_table)
            .where(post_votes_table.c.id == vote_id)
            .values(vote_value=int(value))
            .returning(*post_votes_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_vote(row._asdict()) if row else None

    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote."""
        stmt = delete(post_votes_table).where(post_votes_table.c.id == vote_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete all votes on a post."""
        stmt = delete(post_votes_table).where(post_votes_table.c.post_id == post_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
