"""Create community use case."""

import logfire
from pydantic import BaseModel

from comicraft.application.usecase.base import BaseUseCase
from comicraft.domain.service import CommunityService
from comicraft.domain.value import CurrentUser, PrivacyType

from .common import CommunityItem


class CreateCommunityRequest(BaseModel):
    """Create community request."""

    name: str
    privacy_type: PrivacyType = PrivacyType.PUBLIC
    user: CurrentUser  # Authenticated creator


class CreateCommunityResponse(BaseModel):
    """Create community response."""

    community: CommunityItem


class CreateCommunityUseCase(BaseUseCase):
    """Use case for creating a community."""

    def __init__(self, community_service: CommunityService) -> None:
        """Initialize create community use case.

        Args:
            community_service: Community domain service
        """
        self.community_service = community_service

    async def execute(self, request: CreateCommunityRequest) -> CreateCommunityResponse:
        """Execute create community flow.

        Args:
            request: Community name, privacy type and creator

        Returns:
            The created community

        Raises:
            InvalidCommunityNameError: If the name breaks the naming rules
            CommunityAlreadyExistsError: If the name is taken
        """
        with logfire.span(
            "create_community.execute",
            name=request.name,
            privacy_type=request.privacy_type.value,
        ):
            community = await self.community_service.create_community(
                name=request.name,
                creator=request.user,
                privacy_type=request.privacy_type,
            )
            return CreateCommunityResponse(community=CommunityItem.from_domain(community))
