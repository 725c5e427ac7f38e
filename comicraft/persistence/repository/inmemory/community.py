"""In-memory community repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from comicraft.domain.model import Community
from comicraft.domain.repository import CommunityRepository
from comicraft.domain.value import CommunityId

from .base import Snapshottable


class InMemoryCommunityRepository(Snapshottable, CommunityRepository):
    """In-memory implementation of CommunityRepository for testing."""

    def __init__(self) -> None:
        self._rows: dict[CommunityId, Community] = {}

    async def find_by_id(self, community_id: CommunityId) -> Optional[Community]:
        """Find a community by ID."""
        return self._rows.get(community_id)

    async def find_top_by_members(self, limit: int = 5) -> list[Community]:
        """Find communities with the most members."""
        ranked = sorted(
            self._rows.values(),
            key=lambda c: (-c.number_of_members, c.created_at),
        )
        return ranked[:limit]

    async def add(self, community: Community) -> Community:
        """Insert a community.

        Raises:
            IntegrityError: If the ID is taken
        """
        if community.id in self._rows:
            raise IntegrityError("Duplicate community", None, Exception())
        self._rows[community.id] = community
        return community

    async def increment_members(self, community_id: CommunityId) -> None:
        community = self._rows.get(community_id)
        if community:
            self._rows[community_id] = community.model_copy(
                update={"number_of_members": community.number_of_members + 1}
            )

    async def decrement_members(self, community_id: CommunityId) -> None:
        community = self._rows.get(community_id)
        if community and community.number_of_members > 0:
            self._rows[community_id] = community.model_copy(
                update={"number_of_members": community.number_of_members - 1}
            )

    async def update_image_url(
        self, community_id: CommunityId, image_url: str | None
    ) -> Optional[Community]:
        community = self._rows.get(community_id)
        if not community:
            return None
        updated = community.model_copy(update={"image_url": image_url})
        self._rows[community_id] = updated
        return updated
