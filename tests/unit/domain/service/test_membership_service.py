"""Tests for membership service."""

import asyncio

import pytest

from comicraft.domain.error import AlreadyMemberError, NotFoundError, NotMemberError
from comicraft.domain.model import CommunitySnippet
from comicraft.domain.repository import CommunityRepository, SnippetRepository
from comicraft.domain.service import CommunityService, MembershipService
from comicraft.domain.value import CommunityId
from tests.factories import make_community, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestMembershipService:
    """Tests for MembershipService."""

    @pytest.mark.asyncio
    async def test_join_increments_members(self, unit_env):
        """Joining should add a snippet and bump the count by one."""
        # Arrange
        community_service = await unit_env.get(CommunityService)
        service = await unit_env.get(MembershipService)
        await community_service.create_community("Comics", make_user("alice"))
        bob = make_user("bob")

        # Act
        snippet = await service.join(CommunityId("Comics"), bob)

        # Assert
        assert snippet.user_id == bob.user_id
        assert snippet.community_id == "Comics"
        assert snippet.is_moderator is False

        community = await community_service.get_community(CommunityId("Comics"))
        assert community.number_of_members == 2
        assert await service.is_member(bob.user_id, CommunityId("Comics"))

    @pytest.mark.asyncio
    async def test_join_copies_community_image(self, unit_env):
        """The snippet should carry the community's current image."""
        # Arrange
        community_repo = await unit_env.get(CommunityRepository)
        service = await unit_env.get(MembershipService)
        await community_repo.add(make_community("Comics"))
        await community_repo.update_image_url(CommunityId("Comics"), "https://img/c.png")

        # Act
        snippet = await service.join(CommunityId("Comics"), make_user("bob"))

        # Assert
        assert snippet.image_url == "https://img/c.png"

    @pytest.mark.asyncio
    async def test_join_missing_community(self, unit_env):
        service = await unit_env.get(MembershipService)

        with pytest.raises(NotFoundError):
            await service.join(CommunityId("Nowhere"), make_user("bob"))

    @pytest.mark.asyncio
    async def test_join_twice_rejected(self, unit_env):
        """A second join should fail and leave the count unchanged."""
        # Arrange
        community_service = await unit_env.get(CommunityService)
        service = await unit_env.get(MembershipService)
        await community_service.create_community("Comics", make_user("alice"))
        bob = make_user("bob")
        await service.join(CommunityId("Comics"), bob)

        # Act & Assert
        with pytest.raises(AlreadyMemberError):
            await service.join(CommunityId("Comics"), bob)

        community = await community_service.get_community(CommunityId("Comics"))
        assert community.number_of_members == 2

    @pytest.mark.asyncio
    async def test_concurrent_joins_counted_once(self, unit_env):
        """Racing joins by the same user should count one membership."""
        # Arrange
        community_service = await unit_env.get(CommunityService)
        service = await unit_env.get(MembershipService)
        await community_service.create_community("Comics", make_user("alice"))
        bob = make_user("bob")

        # Act
        results = await asyncio.gather(
            service.join(CommunityId("Comics"), bob),
            service.join(CommunityId("Comics"), bob),
            return_exceptions=True,
        )

        # Assert
        assert sum(isinstance(r, AlreadyMemberError) for r in results) == 1
        community = await community_service.get_community(CommunityId("Comics"))
        assert community.number_of_members == 2

    @pytest.mark.asyncio
    async def test_leave_decrements_members(self, unit_env):
        """Leaving should delete the snippet and drop the count by one."""
        # Arrange
        community_service = await unit_env.get(CommunityService)
        service = await unit_env.get(MembershipService)
        await community_service.create_community("Comics", make_user("alice"))
        bob = make_user("bob")
        await service.join(CommunityId("Comics"), bob)

        # Act
        await service.leave(CommunityId("Comics"), bob)

        # Assert
        community = await community_service.get_community(CommunityId("Comics"))
        assert community.number_of_members == 1
        assert not await service.is_member(bob.user_id, CommunityId("Comics"))

    @pytest.mark.asyncio
    async def test_leave_without_membership(self, unit_env):
        """Leaving a community the user never joined should change nothing."""
        # Arrange
        community_service = await unit_env.get(CommunityService)
        service = await unit_env.get(MembershipService)
        await community_service.create_community("Comics", make_user("alice"))

        # Act & Assert
        with pytest.raises(NotMemberError):
            await service.leave(CommunityId("Comics"), make_user("bob"))

        community = await community_service.get_community(CommunityId("Comics"))
        assert community.number_of_members == 1

    @pytest.mark.asyncio
    async def test_join_then_leave_restores_count(self, unit_env):
        """Count after join and leave should equal the count before."""
        # Arrange
        community_repo = await unit_env.get(CommunityRepository)
        service = await unit_env.get(MembershipService)
        await community_repo.add(make_community("Comics", number_of_members=7))
        bob = make_user("bob")

        # Act
        await service.join(CommunityId("Comics"), bob)
        await service.leave(CommunityId("Comics"), bob)

        # Assert
        community = await community_repo.find_by_id(CommunityId("Comics"))
        assert community.number_of_members == 7

    @pytest.mark.asyncio
    async def test_count_never_negative(self, unit_env):
        """Leaving with a stale zero count should floor at zero."""
        # Arrange
        community_repo = await unit_env.get(CommunityRepository)
        snippet_repo = await unit_env.get(SnippetRepository)
        service = await unit_env.get(MembershipService)
        await community_repo.add(make_community("Comics", number_of_members=0))
        bob = make_user("bob")
        await snippet_repo.add(
            CommunitySnippet(user_id=bob.user_id, community_id=CommunityId("Comics"))
        )

        # Act
        await service.leave(CommunityId("Comics"), bob)

        # Assert
        community = await community_repo.find_by_id(CommunityId("Comics"))
        assert community.number_of_members == 0

    @pytest.mark.asyncio
    async def test_join_or_leave_toggles(self, unit_env):
        """The toggle should join when not joined and leave when joined."""
        # Arrange
        community_service = await unit_env.get(CommunityService)
        service = await unit_env.get(MembershipService)
        await community_service.create_community("Comics", make_user("alice"))
        bob = make_user("bob")

        # Act
        joined = await service.join_or_leave(CommunityId("Comics"), bob, is_joined=False)
        left = await service.join_or_leave(CommunityId("Comics"), bob, is_joined=True)

        # Assert
        assert joined is not None
        assert left is None
        assert not await service.is_member(bob.user_id, CommunityId("Comics"))

    @pytest.mark.asyncio
    async def test_list_snippets(self, unit_env):
        """A user's snippets should list every community they belong to."""
        # Arrange
        community_service = await unit_env.get(CommunityService)
        service = await unit_env.get(MembershipService)
        alice, bob = make_user("alice"), make_user("bob")
        await community_service.create_community("Comics", alice)
        await community_service.create_community("Manga", bob)
        await service.join(CommunityId("Manga"), alice)

        # Act
        snippets = await service.list_snippets(alice.user_id)

        # Assert
        by_community = {s.community_id: s for s in snippets}
        assert set(by_community) == {"Comics", "Manga"}
        assert by_community["Comics"].is_moderator is True
        assert by_community["Manga"].is_moderator is False
