"""Get post use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from comicraft.domain.repository import PostRepository, VoteRepository
from comicraft.domain.value import PostId, UserId

from .common import PostItem


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str  # UUID string
    user_id: str | None = None  # Current user ID (if authenticated)


class GetPostResponse(BaseModel):
    """Get post response."""

    post: PostItem
    user_vote_value: int  # +1, -1, or 0 if the user hasn't voted


class GetPostUseCase:
    """Use case for retrieving a post by ID."""

    def __init__(
        self, post_repository: PostRepository, vote_repository: VoteRepository
    ) -> None:
        """Initialize get post use case.

        Args:
            post_repository: Post repository
            vote_repository: Vote repository
        """
        self.post_repository = post_repository
        self.vote_repository = vote_repository

    async def execute(self, request: GetPostRequest) -> Optional[GetPostResponse]:
        """Execute get post flow.

        Returns:
            Post details if found, None otherwise
        """
        post_id = PostId(UUID(request.post_id))
        post = await self.post_repository.find_by_id(post_id)
        if not post:
            return None

        user_vote_value = 0
        if request.user_id:
            vote = await self.vote_repository.find_by_user_and_post(
                UserId(request.user_id), post_id
            )
            if vote:
                user_vote_value = int(vote.vote_value)

        return GetPostResponse(
            post=PostItem.from_domain(post),
            user_vote_value=user_vote_value,
        )
