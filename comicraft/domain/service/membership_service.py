"""Membership domain service."""

import logfire
from sqlalchemy.exc import IntegrityError

from comicraft.domain.error import AlreadyMemberError, NotFoundError, NotMemberError
from comicraft.domain.model.community import CommunitySnippet
from comicraft.domain.repository import (
    CommunityRepository,
    SnippetRepository,
    UnitOfWork,
)
from comicraft.domain.value import CommunityId, CurrentUser, UserId

from .base import Service


class MembershipService(Service):
    """Domain service for joining and leaving communities.

    The snippet write and the member count change always happen in the same
    unit of work, so the count stays equal to the number of snippets.
    """

    def __init__(
        self,
        community_repository: CommunityRepository,
        snippet_repository: SnippetRepository,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize membership service.

        Args:
            community_repository: Community repository
            snippet_repository: Snippet repository
            unit_of_work: Atomic scope for compound writes
        """
        self.community_repository = community_repository
        self.snippet_repository = snippet_repository
        self.unit_of_work = unit_of_work

    async def join(self, community_id: CommunityId, user: CurrentUser) -> CommunitySnippet:
        """Join a community.

        Creates the user's snippet and increments the member count by one.

        Args:
            community_id: Community to join
            user: Authenticated user

        Returns:
            The new snippet

        Raises:
            NotFoundError: If the community doesn't exist
            AlreadyMemberError: If the user is already a member
        """
        with logfire.span(
            "membership_service.join",
            community_id=community_id,
            user_id=user.user_id,
        ):
            community = await self.community_repository.find_by_id(community_id)
            if not community:
                logfire.warn("Join on non-existent community", community_id=community_id)
                raise NotFoundError("Community", community_id)

            snippet = CommunitySnippet(
                user_id=user.user_id,
                community_id=community_id,
                is_moderator=community.is_creator(user.user_id),
                image_url=community.image_url,
            )

            try:
                async with self.unit_of_work.transaction():
                    saved = await self.snippet_repository.add(snippet)
                    await self.community_repository.increment_members(community_id)
            except IntegrityError:
                logfire.warn(
                    "Duplicate join attempt",
                    community_id=community_id,
                    user_id=user.user_id,
                )
                raise AlreadyMemberError(community_id, user.user_id)

            logfire.info("Joined community", community_id=community_id, user_id=user.user_id)
            return saved

    async def leave(self, community_id: CommunityId, user: CurrentUser) -> None:
        """Leave a community.

        Deletes the user's snippet and decrements the member count by one.

        Args:
            community_id: Community to leave
            user: Authenticated user

        Raises:
            NotMemberError: If the user is not a member
        """
        with logfire.span(
            "membership_service.leave",
            community_id=community_id,
            user_id=user.user_id,
        ):
            async with self.unit_of_work.transaction():
                deleted = await self.snippet_repository.delete(user.user_id, community_id)
                if not deleted:
                    logfire.warn(
                        "Leave without membership",
                        community_id=community_id,
                        user_id=user.user_id,
                    )
                    raise NotMemberError(community_id, user.user_id)

                await self.community_repository.decrement_members(community_id)

            logfire.info("Left community", community_id=community_id, user_id=user.user_id)

    async def join_or_leave(
        self, community_id: CommunityId, user: CurrentUser, is_joined: bool
    ) -> CommunitySnippet | None:
        """Toggle membership from the caller's view of it.

        Returns:
            The new snippet after a join, None after a leave
        """
        if is_joined:
            await self.leave(community_id, user)
            return None
        return await self.join(community_id, user)

    async def list_snippets(self, user_id: UserId) -> list[CommunitySnippet]:
        """List all of a user's snippets."""
        with logfire.span("membership_service.list_snippets", user_id=user_id):
            snippets = await self.snippet_repository.find_by_user(user_id)
            logfire.info("Snippets fetched", user_id=user_id, count=len(snippets))
            return snippets

    async def is_member(self, user_id: UserId, community_id: CommunityId) -> bool:
        """Check whether a user belongs to a community."""
        return await self.snippet_repository.find(user_id, community_id) is not None
