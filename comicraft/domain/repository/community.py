"""Community repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from comicraft.domain.model.community import Community
from comicraft.domain.value import CommunityId


class CommunityRepository(ABC):
    """Repository for Community aggregate.

    Defines the contract for community persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, community_id: CommunityId) -> Optional[Community]:
        """Find a community by ID (its name).

        Args:
            community_id: The community's name

        Returns:
            The community if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_top_by_members(self, limit: int = 5) -> List[Community]:
        """Find communities ordered by member count, largest first.

        Args:
            limit: Maximum number of communities to return

        Returns:
            List of communities
        """
        pass

    @abstractmethod
    async def add(self, community: Community) -> Community:
        """Insert a new community.

        Args:
            community: The community to insert

        Returns:
            The saved community

        Raises:
            IntegrityError: If a community with this name already exists
        """
        pass

    @abstractmethod
    async def increment_members(self, community_id: CommunityId) -> None:
        """Atomically increment the member count by 1.

        Args:
            community_id: The community ID
        """
        pass

    @abstractmethod
    async def decrement_members(self, community_id: CommunityId) -> None:
        """Atomically decrement the member count by 1 (minimum 0).

        Args:
            community_id: The community ID
        """
        pass

    @abstractmethod
    async def update_image_url(
        self, community_id: CommunityId, image_url: str | None
    ) -> Optional[Community]:
        """Set or clear the community image reference.

        Args:
            community_id: The community ID
            image_url: Download URL of the stored image

        Returns:
            Updated community, or None if it doesn't exist
        """
        pass
