"""In-memory post repository for testing."""

from typing import Optional

from comicraft.domain.error import NotFoundError
from comicraft.domain.model import Post
from comicraft.domain.repository import PostRepository
from comicraft.domain.value import CommunityId, PostId

from .base import Snapshottable


class InMemoryPostRepository(Snapshottable, PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._rows: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._rows.get(post_id)

    async def find_by_community(
        self,
        community_id: CommunityId,
        limit: int = 30,
        offset: int = 0,
    ) -> list[Post]:
        """Find a community's posts, newest first."""
        posts = [p for p in self._rows.values() if p.community_id == community_id]
        posts.sort(key=lambda p: p.created_at, reverse=True)
        return posts[offset : offset + limit]

    async def save(self, post: Post) -> Post:
        """Save a post."""
        self._rows[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post."""
        return self._rows.pop(post_id, None) is not None

    async def update_image_url(
        self, post_id: PostId, image_url: str | None
    ) -> Optional[Post]:
        post = self._rows.get(post_id)
        if not post:
            return None
        updated = post.model_copy(update={"image_url": image_url})
        self._rows[post_id] = updated
        return updated

    async def adjust_vote_status(self, post_id: PostId, delta: int) -> int:
        post = self._rows.get(post_id)
        if not post:
            raise NotFoundError("Post", str(post_id))
        updated = post.model_copy(update={"vote_status": post.vote_status + delta})
        self._rows[post_id] = updated
        return updated.vote_status
