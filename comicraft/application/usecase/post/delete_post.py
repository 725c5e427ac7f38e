"""Delete post use case."""

from uuid import UUID

from pydantic import BaseModel

from comicraft.domain.service import PostService
from comicraft.domain.value import CurrentUser, PostId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str  # UUID string
    user: CurrentUser


class DeletePostResponse(BaseModel):
    """Delete post response."""

    post_id: str
    success: bool


class DeletePostUseCase:
    """Use case for deleting one's own post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the user is not the post's creator
        """
        success = await self.post_service.delete_post(
            PostId(UUID(request.post_id)), request.user
        )
        return DeletePostResponse(post_id=request.post_id, success=success)
