"""Post vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from comicraft.domain.model.vote import PostVote
from comicraft.domain.value import CommunityId, PostId, UserId, VoteId, VoteValue


class VoteRepository(ABC):
    """Repository for PostVote entity."""

    @abstractmethod
    async def find_by_user_and_post(
        self, user_id: UserId, post_id: PostId
    ) -> Optional[PostVote]:
        """Find a user's vote on a post.

        Args:
            user_id: The user's ID
            post_id: The post ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_and_community(
        self, user_id: UserId, community_id: CommunityId
    ) -> List[PostVote]:
        """Find a user's votes on posts of one community.

        Args:
            user_id: The user's ID
            community_id: The community ID

        Returns:
            List of votes
        """
        pass

    @abstractmethod
    async def save(self, vote: PostVote) -> PostVote:
        """Insert a vote.

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            IntegrityError: If the user already voted on the post
        """
        pass

    @abstractmethod
    async def update_value(self, vote_id: VoteId, value: VoteValue) -> Optional[PostVote]:
        """Change the value of an existing vote.

        Args:
            vote_id: The vote ID
            value: New vote value

        Returns:
            The updated vote, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote.

        Args:
            vote_id: The vote ID

        Returns:
            True if a vote was deleted
        """
        pass

    @abstractmethod
    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete all votes on a post.

        Args:
            post_id: The post ID

        Returns:
            Number of votes deleted
        """
        pass
