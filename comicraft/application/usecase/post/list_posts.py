"""List posts use case."""

import logfire
from pydantic import BaseModel, Field

from comicraft.domain.service import PostService
from comicraft.domain.value import CommunityId, CurrentUser

from .common import PostItem


class ListPostsRequest(BaseModel):
    """List a community's posts."""

    community_id: str
    limit: int = Field(default=30, ge=1, le=100)
    offset: int = Field(default=0, ge=0)
    user: CurrentUser | None = None  # Current user (if authenticated)


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostItem]
    limit: int
    offset: int


class ListPostsUseCase:
    """Use case for listing a community's posts, newest first."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Raises:
            NotFoundError: If the community doesn't exist
            NotMemberError: If the community is private and the user is not a member
        """
        with logfire.span(
            "list_posts.execute",
            community_id=request.community_id,
            limit=request.limit,
            offset=request.offset,
        ):
            posts = await self.post_service.list_community_posts(
                CommunityId(request.community_id),
                viewer=request.user,
                limit=request.limit,
                offset=request.offset,
            )
            return ListPostsResponse(
                posts=[PostItem.from_domain(p) for p in posts],
                limit=request.limit,
                offset=request.offset,
            )
