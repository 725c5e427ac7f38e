"""Update community image use case."""

from pydantic import BaseModel

from comicraft.domain.service import CommunityService
from comicraft.domain.value import CommunityId, CurrentUser, ImageData

from .common import CommunityItem


class UpdateCommunityImageRequest(BaseModel):
    """Update community image request."""

    community_id: str
    image: ImageData
    user: CurrentUser


class UpdateCommunityImageResponse(BaseModel):
    """Update community image response."""

    community: CommunityItem


class UpdateCommunityImageUseCase:
    """Use case for changing a community's image."""

    def __init__(self, community_service: CommunityService) -> None:
        """Initialize update community image use case.

        Args:
            community_service: Community domain service
        """
        self.community_service = community_service

    async def execute(
        self, request: UpdateCommunityImageRequest
    ) -> UpdateCommunityImageResponse:
        """Execute update image flow.

        Raises:
            NotFoundError: If the community doesn't exist
            NotAuthorizedError: If the user is not the creator
            StorageError: If the upload fails
        """
        community = await self.community_service.update_image(
            CommunityId(request.community_id), request.user, request.image
        )
        return UpdateCommunityImageResponse(community=CommunityItem.from_domain(community))
