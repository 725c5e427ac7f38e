"""Community snippet repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from comicraft.domain.model.community import CommunitySnippet
from comicraft.domain.value import CommunityId, UserId


class SnippetRepository(ABC):
    """Repository for per-user membership snippets."""

    @abstractmethod
    async def find(
        self, user_id: UserId, community_id: CommunityId
    ) -> Optional[CommunitySnippet]:
        """Find a user's snippet for a community.

        Args:
            user_id: The user's ID
            community_id: The community ID

        Returns:
            The snippet if the user is a member, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> List[CommunitySnippet]:
        """Find all snippets of a user.

        Args:
            user_id: The user's ID

        Returns:
            List of the user's snippets
        """
        pass

    @abstractmethod
    async def add(self, snippet: CommunitySnippet) -> CommunitySnippet:
        """Insert a snippet.

        Args:
            snippet: The snippet to insert

        Returns:
            The saved snippet

        Raises:
            IntegrityError: If the user already has a snippet for the community
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId, community_id: CommunityId) -> bool:
        """Delete a user's snippet for a community.

        Args:
            user_id: The user's ID
            community_id: The community ID

        Returns:
            True if a snippet was deleted, False if none existed
        """
        pass
