"""Vote on post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from comicraft.domain.service import VoteService
from comicraft.domain.value import CommunityId, CurrentUser, PostId, VoteValue


class VotePostRequest(BaseModel):
    """Vote request."""

    post_id: str  # UUID string
    value: VoteValue  # 1 or -1
    community_id: str | None = None
    user: CurrentUser


class VotePostResponse(BaseModel):
    """Vote response."""

    post_id: str
    vote_status: int  # New tally
    user_vote_value: int  # +1, -1, or 0 when the action removed the vote
    vote_id: str | None = None  # None when the action removed the vote


class VotePostUseCase:
    """Use case for up- or downvoting a post.

    Repeating the same vote removes it; voting the other way flips it.
    """

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: VotePostRequest) -> VotePostResponse:
        """Execute vote flow.

        Raises:
            NotFoundError: If the post doesn't exist
            ValidationError: If the post is not in the given community
        """
        with logfire.span(
            "vote_post.execute",
            post_id=request.post_id,
            value=int(request.value),
        ):
            outcome = await self.vote_service.vote(
                PostId(UUID(request.post_id)),
                request.user,
                request.value,
                community_id=CommunityId(request.community_id)
                if request.community_id
                else None,
            )
            return VotePostResponse(
                post_id=str(outcome.post_id),
                vote_status=outcome.vote_status,
                user_vote_value=outcome.user_vote_value,
                vote_id=str(outcome.vote.id) if outcome.vote else None,
            )
