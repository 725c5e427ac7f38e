"""Community registry domain service."""

import logfire
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError

from comicraft.adapter.error import StorageError
from comicraft.domain.error import (
    CommunityAlreadyExistsError,
    InvalidCommunityNameError,
    NotAuthorizedError,
    NotFoundError,
)
from comicraft.domain.model.common import utcnow
from comicraft.domain.model.community import Community, CommunitySnippet
from comicraft.domain.repository import (
    CommunityRepository,
    SnippetRepository,
    UnitOfWork,
)
from comicraft.domain.value import (
    CommunityId,
    CommunityName,
    CurrentUser,
    ImageData,
    PrivacyType,
)

from .base import Service
from .image_storage import ImageStorage, community_image_key


class CommunityService(Service):
    """Domain service for creating and looking up communities."""

    def __init__(
        self,
        community_repository: CommunityRepository,
        snippet_repository: SnippetRepository,
        unit_of_work: UnitOfWork,
        image_storage: ImageStorage,
    ) -> None:
        """Initialize community service.

        Args:
            community_repository: Community repository
            snippet_repository: Snippet repository
            unit_of_work: Atomic scope for compound writes
            image_storage: Storage for community images
        """
        self.community_repository = community_repository
        self.snippet_repository = snippet_repository
        self.unit_of_work = unit_of_work
        self.image_storage = image_storage

    async def create_community(
        self,
        name: str,
        creator: CurrentUser,
        privacy_type: PrivacyType = PrivacyType.PUBLIC,
    ) -> Community:
        """Create a community and make its creator a moderator member.

        The existence check, the community insert and the moderator snippet
        are one atomic unit. A concurrent create with the same name loses on
        the primary-key constraint and is reported as a conflict too.

        Args:
            name: Community name (doubles as its ID)
            creator: Authenticated creator
            privacy_type: Privacy mode

        Returns:
            Created community (member count 1)

        Raises:
            InvalidCommunityNameError: If the name breaks the naming rules
            CommunityAlreadyExistsError: If the name is taken
        """
        # Validate before touching storage
        try:
            community_name = CommunityName(name)
        except PydanticValidationError:
            logfire.info("Rejected community name", name=name)
            raise InvalidCommunityNameError(name)

        community_id = CommunityId(community_name.root)

        with logfire.span(
            "community_service.create_community",
            community_id=community_id,
            creator_id=creator.user_id,
            privacy_type=privacy_type.value,
        ):
            community = Community(
                id=community_id,
                creator_id=creator.user_id,
                number_of_members=1,
                privacy_type=privacy_type,
                created_at=utcnow(),
            )
            snippet = CommunitySnippet(
                user_id=creator.user_id,
                community_id=community_id,
                is_moderator=True,
            )

            try:
                async with self.unit_of_work.transaction():
                    existing = await self.community_repository.find_by_id(community_id)
                    if existing:
                        raise CommunityAlreadyExistsError(community_id)

                    saved = await self.community_repository.add(community)
                    await self.snippet_repository.add(snippet)
            except IntegrityError:
                logfire.warn("Concurrent community create lost", community_id=community_id)
                raise CommunityAlreadyExistsError(community_id)
            except CommunityAlreadyExistsError:
                logfire.warn("Community already exists", community_id=community_id)
                raise

            logfire.info(
                "Community created",
                community_id=community_id,
                creator_id=creator.user_id,
            )
            return saved

    async def find_community(self, community_id: CommunityId) -> Community | None:
        """Find a community by ID.

        Args:
            community_id: Community ID

        Returns:
            Community if found, None otherwise
        """
        with logfire.span(
            "community_service.find_community", community_id=community_id
        ):
            community = await self.community_repository.find_by_id(community_id)
            if not community:
                logfire.info("Community not found", community_id=community_id)
            return community

    async def get_community(self, community_id: CommunityId) -> Community:
        """Get a community by ID.

        Raises:
            NotFoundError: If the community doesn't exist
        """
        community = await self.find_community(community_id)
        if not community:
            raise NotFoundError("Community", community_id)
        return community

    async def list_top_communities(self, limit: int = 5) -> list[Community]:
        """List communities with the most members.

        Args:
            limit: Maximum number of communities

        Returns:
            Communities ordered by descending member count
        """
        with logfire.span("community_service.list_top_communities", limit=limit):
            return await self.community_repository.find_top_by_members(limit)

    async def update_image(
        self, community_id: CommunityId, user: CurrentUser, image: ImageData
    ) -> Community:
        """Upload a new community image. Only the creator may do this.

        Args:
            community_id: Community ID
            user: Authenticated user
            image: Image to store

        Returns:
            Updated community

        Raises:
            NotFoundError: If the community doesn't exist
            NotAuthorizedError: If the user is not the creator
            StorageError: If the upload fails
        """
        with logfire.span(
            "community_service.update_image",
            community_id=community_id,
            user_id=user.user_id,
        ):
            community = await self.get_community(community_id)
            if not community.is_creator(user.user_id):
                raise NotAuthorizedError(
                    "change the image of", "community", community_id, user.user_id
                )

            key = community_image_key(community_id)
            try:
                image_url = await self.image_storage.upload(key, image)
            except StorageError as e:
                logfire.error(
                    "Community image upload failed",
                    community_id=community_id,
                    error=str(e),
                )
                raise

            updated = await self.community_repository.update_image_url(
                community_id, image_url
            )
            if not updated:
                raise NotFoundError("Community", community_id)

            logfire.info("Community image updated", community_id=community_id)
            return updated
