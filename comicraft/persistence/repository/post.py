"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from comicraft.domain.error import NotFoundError
from comicraft.domain.model import Post
from comicraft.domain.repository import PostRepository
from comicraft.domain.value import CommunityId, PostId
from comicraft.persistence.mappers import post_to_dict, row_to_post
from comicraft.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def find_by_community(
        self,
        community_id: CommunityId,
        limit: int = 30,
        offset: int = 0,
    ) -> List[Post]:
        """Find a community's posts, newest first."""
        stmt = (
            select(posts_table)
            .where(posts_table.c.community_id == community_id)
            .order_by(posts_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def save(self, post: Post) -> Post:
        """Save a post (upsert on ID)."""
        post_dict = post_to_dict(post)
        stmt = insert(posts_table).values(**post_dict)
        stmt = stmt.on_conflict_do_update(
            index_elements=[posts_table.c.id],
            set_={
                "title": stmt.excluded.title,
                "body": stmt.excluded.body,
                "number_of_comments": stmt.excluded.number_of_comments,
                "vote_status": stmt.excluded.vote_status,
                "image_url": stmt.excluded.image_url,
                "community_image_url": stmt.excluded.community_image_url,
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return post

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post."""
        stmt = delete(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def update_image_url(
        self, post_id: PostId, image_url: str | None
    ) -> Optional[Post]:
        """Set or clear the post image reference."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(image_url=image_url)
            .returning(*posts_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_post(row._asdict()) if row else None

    async def adjust_vote_status(self, post_id: PostId, delta: int) -> int:
        """Add ``delta`` to the vote tally in one statement.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(vote_status=posts_table.c.vote_status + delta)
            .returning(posts_table.c.vote_status)
        )
        result = await self.session.execute(stmt)
        tally = result.scalar_one_or_none()
        await self.session.flush()
        if tally is None:
            raise NotFoundError("Post", str(post_id))
        return tally
