"""Tests for community use cases."""

import pytest

from comicraft.adapter.storage import MockImageStorage
from comicraft.application.usecase.community import (
    CreateCommunityRequest,
    CreateCommunityUseCase,
    GetCommunityRequest,
    GetCommunityUseCase,
    JoinCommunityRequest,
    JoinCommunityUseCase,
    JoinOrLeaveCommunityRequest,
    JoinOrLeaveCommunityUseCase,
    LeaveCommunityRequest,
    LeaveCommunityUseCase,
    ListSnippetsRequest,
    ListSnippetsUseCase,
    ListTopCommunitiesRequest,
    ListTopCommunitiesUseCase,
    UpdateCommunityImageRequest,
    UpdateCommunityImageUseCase,
)
from comicraft.domain.error import CommunityAlreadyExistsError, NotMemberError
from comicraft.domain.repository import CommunityRepository
from comicraft.domain.value import ImageData, PrivacyType
from tests.factories import make_community, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestCreateCommunityUseCase:
    """Tests for CreateCommunityUseCase."""

    @pytest.mark.asyncio
    async def test_create_community(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateCommunityUseCase)
        alice = make_user("alice")

        # Act
        response = await use_case.execute(
            CreateCommunityRequest(
                name="Comics", privacy_type=PrivacyType.PRIVATE, user=alice
            )
        )

        # Assert
        assert response.community.community_id == "Comics"
        assert response.community.creator_id == alice.user_id
        assert response.community.number_of_members == 1
        assert response.community.privacy_type == PrivacyType.PRIVATE
        assert response.community.image_url is None

    @pytest.mark.asyncio
    async def test_create_duplicate(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateCommunityUseCase)
        await use_case.execute(CreateCommunityRequest(name="Comics", user=make_user("a")))

        # Act & Assert
        with pytest.raises(CommunityAlreadyExistsError):
            await use_case.execute(CreateCommunityRequest(name="Comics", user=make_user("b")))


class TestGetCommunityUseCase:
    """Tests for GetCommunityUseCase."""

    @pytest.mark.asyncio
    async def test_get_community_with_membership(self, unit_env):
        """Membership should be reported for the requesting user."""
        # Arrange
        create = await unit_env.get(CreateCommunityUseCase)
        use_case = await unit_env.get(GetCommunityUseCase)
        alice = make_user("alice")
        await create.execute(CreateCommunityRequest(name="Comics", user=alice))

        # Act
        as_member = await use_case.execute(
            GetCommunityRequest(community_id="Comics", user_id=alice.user_id)
        )
        as_stranger = await use_case.execute(
            GetCommunityRequest(community_id="Comics", user_id="uid-bob")
        )
        anonymous = await use_case.execute(GetCommunityRequest(community_id="Comics"))

        # Assert
        assert as_member.is_member is True
        assert as_stranger.is_member is False
        assert anonymous.is_member is False
        assert anonymous.community.community_id == "Comics"

    @pytest.mark.asyncio
    async def test_get_missing_community(self, unit_env):
        use_case = await unit_env.get(GetCommunityUseCase)

        assert await use_case.execute(GetCommunityRequest(community_id="Nowhere")) is None


class TestListTopCommunitiesUseCase:
    @pytest.mark.asyncio
    async def test_default_limit_is_five(self, unit_env):
        # Arrange
        community_repo = await unit_env.get(CommunityRepository)
        use_case = await unit_env.get(ListTopCommunitiesUseCase)
        for i in range(7):
            await community_repo.add(make_community(f"Club{i}", number_of_members=i))

        # Act
        response = await use_case.execute(ListTopCommunitiesRequest())

        # Assert
        assert [c.community_id for c in response.communities] == [
            "Club6",
            "Club5",
            "Club4",
            "Club3",
            "Club2",
        ]


class TestMembershipUseCases:
    """Tests for join, leave and snippet listing use cases."""

    @pytest.mark.asyncio
    async def test_join_returns_snippet_and_count(self, unit_env):
        # Arrange
        create = await unit_env.get(CreateCommunityUseCase)
        join = await unit_env.get(JoinCommunityUseCase)
        await create.execute(CreateCommunityRequest(name="Comics", user=make_user("alice")))

        # Act
        response = await join.execute(
            JoinCommunityRequest(community_id="Comics", user=make_user("bob"))
        )

        # Assert
        assert response.snippet.community_id == "Comics"
        assert response.snippet.is_moderator is False
        assert response.community.number_of_members == 2

    @pytest.mark.asyncio
    async def test_leave_returns_updated_count(self, unit_env):
        # Arrange
        create = await unit_env.get(CreateCommunityUseCase)
        join = await unit_env.get(JoinCommunityUseCase)
        leave = await unit_env.get(LeaveCommunityUseCase)
        bob = make_user("bob")
        await create.execute(CreateCommunityRequest(name="Comics", user=make_user("alice")))
        await join.execute(JoinCommunityRequest(community_id="Comics", user=bob))

        # Act
        response = await leave.execute(LeaveCommunityRequest(community_id="Comics", user=bob))

        # Assert
        assert response.community_id == "Comics"
        assert response.community.number_of_members == 1

    @pytest.mark.asyncio
    async def test_leave_without_membership(self, unit_env):
        # Arrange
        create = await unit_env.get(CreateCommunityUseCase)
        leave = await unit_env.get(LeaveCommunityUseCase)
        await create.execute(CreateCommunityRequest(name="Comics", user=make_user("alice")))

        # Act & Assert
        with pytest.raises(NotMemberError):
            await leave.execute(
                LeaveCommunityRequest(community_id="Comics", user=make_user("bob"))
            )

    @pytest.mark.asyncio
    async def test_join_or_leave(self, unit_env):
        """The toggle should follow the caller's view of the membership."""
        # Arrange
        create = await unit_env.get(CreateCommunityUseCase)
        toggle = await unit_env.get(JoinOrLeaveCommunityUseCase)
        bob = make_user("bob")
        await create.execute(CreateCommunityRequest(name="Comics", user=make_user("alice")))

        # Act
        joined = await toggle.execute(
            JoinOrLeaveCommunityRequest(community_id="Comics", is_joined=False, user=bob)
        )
        left = await toggle.execute(
            JoinOrLeaveCommunityRequest(community_id="Comics", is_joined=True, user=bob)
        )

        # Assert
        assert joined.is_joined is True
        assert joined.community.number_of_members == 2
        assert left.is_joined is False
        assert left.snippet is None
        assert left.community.number_of_members == 1

    @pytest.mark.asyncio
    async def test_list_snippets(self, unit_env):
        # Arrange
        create = await unit_env.get(CreateCommunityUseCase)
        join = await unit_env.get(JoinCommunityUseCase)
        use_case = await unit_env.get(ListSnippetsUseCase)
        alice = make_user("alice")
        await create.execute(CreateCommunityRequest(name="Comics", user=alice))
        await create.execute(CreateCommunityRequest(name="Manga", user=make_user("bob")))
        await join.execute(JoinCommunityRequest(community_id="Manga", user=alice))

        # Act
        response = await use_case.execute(ListSnippetsRequest(user_id=alice.user_id))

        # Assert
        assert {s.community_id for s in response.snippets} == {"Comics", "Manga"}


class TestUpdateCommunityImageUseCase:
    @pytest.mark.asyncio
    async def test_update_image(self, unit_env):
        # Arrange
        create = await unit_env.get(CreateCommunityUseCase)
        use_case = await unit_env.get(UpdateCommunityImageUseCase)
        storage = await unit_env.get(MockImageStorage)
        alice = make_user("alice")
        await create.execute(CreateCommunityRequest(name="Comics", user=alice))

        # Act
        response = await use_case.execute(
            UpdateCommunityImageRequest(
                community_id="Comics",
                image=ImageData(content=b"png", content_type="image/png"),
                user=alice,
            )
        )

        # Assert
        assert response.community.image_url == "https://images.test/communities/Comics/image"
        assert "communities/Comics/image" in storage.objects
