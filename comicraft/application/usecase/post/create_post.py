"""Create post use case."""

import logfire
from pydantic import BaseModel, Field

from comicraft.application.usecase.base import BaseUseCase
from comicraft.domain.service import PostService
from comicraft.domain.value import CommunityId, CurrentUser, ImageData

from .common import PostItem


class CreatePostRequest(BaseModel):
    """Create post request."""

    community_id: str
    title: str = Field(min_length=1, max_length=300)
    body: str = Field(default="", max_length=40000)
    image: ImageData | None = None
    user: CurrentUser  # Authenticated author


class CreatePostResponse(BaseModel):
    """Create post response."""

    post: PostItem


class CreatePostUseCase(BaseUseCase):
    """Use case for submitting a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Args:
            request: Post content, optional image and author

        Returns:
            The created post, with its image reference when an image was sent

        Raises:
            NotFoundError: If the community doesn't exist
            NotMemberError: If the community only accepts posts from members
            PostImageUploadError: If the image could not be stored
        """
        with logfire.span(
            "create_post.execute",
            community_id=request.community_id,
            user_id=request.user.user_id,
        ):
            post = await self.post_service.create_post(
                community_id=CommunityId(request.community_id),
                author=request.user,
                title=request.title,
                body=request.body,
                image=request.image,
            )
            return CreatePostResponse(post=PostItem.from_domain(post))
