"""In-memory snippet repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from comicraft.domain.model import CommunitySnippet
from comicraft.domain.repository import SnippetRepository
from comicraft.domain.value import CommunityId, UserId

from .base import Snapshottable


class InMemorySnippetRepository(Snapshottable, SnippetRepository):
    """In-memory implementation of SnippetRepository for testing.

    Keyed by (user_id, community_id), mirroring the table's primary key.
    """

    def __init__(self) -> None:
        self._rows: dict[tuple[UserId, CommunityId], CommunitySnippet] = {}

    async def find(
        self, user_id: UserId, community_id: CommunityId
    ) -> Optional[CommunitySnippet]:
        return self._rows.get((user_id, community_id))

    async def find_by_user(self, user_id: UserId) -> list[CommunitySnippet]:
        """Find all of a user's snippets, in join order."""
        return [s for (uid, _), s in self._rows.items() if uid == user_id]

    async def add(self, snippet: CommunitySnippet) -> CommunitySnippet:
        """Insert a snippet.

        Raises:
            IntegrityError: If the user already has a snippet for the community
        """
        key = (snippet.user_id, snippet.community_id)
        if key in self._rows:
            raise IntegrityError("Duplicate snippet", None, Exception())
        self._rows[key] = snippet
        return snippet

    async def delete(self, user_id: UserId, community_id: CommunityId) -> bool:
        return self._rows.pop((user_id, community_id), None) is not None
