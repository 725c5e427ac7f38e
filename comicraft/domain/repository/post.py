"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from comicraft.domain.model.post import Post
from comicraft.domain.value import CommunityId, PostId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_community(
        self,
        community_id: CommunityId,
        limit: int = 30,
        offset: int = 0,
    ) -> List[Post]:
        """Find a community's posts, newest first.

        Args:
            community_id: The community ID
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of posts
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (hard delete).

        Args:
            post_id: The post ID to delete

        Returns:
            True if a post was deleted
        """
        pass

    @abstractmethod
    async def update_image_url(
        self, post_id: PostId, image_url: str | None
    ) -> Optional[Post]:
        """Set or clear the post's image reference.

        Args:
            post_id: The post ID
            image_url: Download URL of the uploaded image

        Returns:
            Updated post, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def adjust_vote_status(self, post_id: PostId, delta: int) -> int:
        """Atomically add ``delta`` to the vote tally.

        Uses SQL-level arithmetic to avoid lost updates.

        Args:
            post_id: The post ID
            delta: Signed change to apply

        Returns:
            The new tally
        """
        pass
