"""In-memory vote repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from comicraft.domain.model import PostVote
from comicraft.domain.repository import VoteRepository
from comicraft.domain.value import CommunityId, PostId, UserId, VoteId, VoteValue

from .base import Snapshottable


class InMemoryVoteRepository(Snapshottable, VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._rows: dict[VoteId, PostVote] = {}

    async def find_by_user_and_post(
        self, user_id: UserId, post_id: PostId
    ) -> Optional[PostVote]:
        """Find a user's vote on a post."""
        for vote in self._rows.values():
            if vote.user_id == user_id and vote.post_id == post_id:
                return vote
        return None

    async def find_by_user_and_community(
        self, user_id: UserId, community_id: CommunityId
    ) -> list[PostVote]:
        """Find a user's votes on posts of one community."""
        return [
            v
            for v in self._rows.values()
            if v.user_id == user_id and v.community_id == community_id
        ]

    async def save(self, vote: PostVote) -> PostVote:
        """Save a vote.

        Raises:
            IntegrityError: If the user already voted on the post
        """
        if await self.find_by_user_and_post(vote.user_id, vote.post_id):
            raise IntegrityError("Duplicate vote", None, Exception())
        self._rows[vote.id] = vote
        return vote

    async def update_value(self, vote_id: VoteId, value: VoteValue) -> Optional[PostVote]:
        vote = self._rows.get(vote_id)
        if not vote:
            return None
        updated = vote.model_copy(update={"vote_value": value})
        self._rows[vote_id] = updated
        return updated

    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote by ID."""
        return self._rows.pop(vote_id, None) is not None

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete all votes on a post."""
        doomed = [vid for vid, v in self._rows.items() if v.post_id == post_id]
        for vote_id in doomed:
            del self._rows[vote_id]
        return len(doomed)
