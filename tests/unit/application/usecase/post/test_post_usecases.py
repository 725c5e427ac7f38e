"""Tests for post use cases."""

from uuid import uuid4

import pytest

from comicraft.application.usecase.community import (
    CreateCommunityRequest,
    CreateCommunityUseCase,
)
from comicraft.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
)
from comicraft.application.usecase.vote import VotePostRequest, VotePostUseCase
from comicraft.domain.error import NotAuthorizedError
from comicraft.domain.value import ImageData, VoteValue
from tests.factories import make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


async def _create_community(unit_env, name="Comics", user=None):
    create = await unit_env.get(CreateCommunityUseCase)
    await create.execute(CreateCommunityRequest(name=name, user=user or make_user("alice")))


class TestCreatePostUseCase:
    """Tests for CreatePostUseCase."""

    @pytest.mark.asyncio
    async def test_create_post(self, unit_env):
        # Arrange
        alice = make_user("alice")
        await _create_community(unit_env, user=alice)
        use_case = await unit_env.get(CreatePostUseCase)

        # Act
        response = await use_case.execute(
            CreatePostRequest(community_id="Comics", title="Hello", body="World", user=alice)
        )

        # Assert
        assert response.post.title == "Hello"
        assert response.post.body == "World"
        assert response.post.community_id == "Comics"
        assert response.post.creator_display_name == "alice"
        assert response.post.image_url is None

    @pytest.mark.asyncio
    async def test_create_post_with_image(self, unit_env):
        # Arrange
        alice = make_user("alice")
        await _create_community(unit_env, user=alice)
        use_case = await unit_env.get(CreatePostUseCase)

        # Act
        response = await use_case.execute(
            CreatePostRequest(
                community_id="Comics",
                title="Cover",
                image=ImageData(content=b"jpeg"),
                user=alice,
            )
        )

        # Assert
        assert response.post.image_url.endswith(f"posts/{response.post.post_id}/image")

    def test_title_required(self):
        """Empty titles should fail request validation."""
        with pytest.raises(ValueError):
            CreatePostRequest(community_id="Comics", title="", user=make_user())


class TestGetPostUseCase:
    """Tests for GetPostUseCase."""

    @pytest.mark.asyncio
    async def test_get_post_with_user_vote(self, unit_env):
        # Arrange
        alice, bob = make_user("alice"), make_user("bob")
        await _create_community(unit_env, user=alice)
        create = await unit_env.get(CreatePostUseCase)
        vote = await unit_env.get(VotePostUseCase)
        use_case = await unit_env.get(GetPostUseCase)
        created = await create.execute(
            CreatePostRequest(community_id="Comics", title="Hello", user=alice)
        )
        await vote.execute(
            VotePostRequest(post_id=created.post.post_id, value=VoteValue.DOWN, user=bob)
        )

        # Act
        response = await use_case.execute(
            GetPostRequest(post_id=created.post.post_id, user_id=bob.user_id)
        )

        # Assert
        assert response.post.post_id == created.post.post_id
        assert response.post.vote_status == -1
        assert response.user_vote_value == -1

    @pytest.mark.asyncio
    async def test_get_missing_post(self, unit_env):
        use_case = await unit_env.get(GetPostUseCase)

        assert await use_case.execute(GetPostRequest(post_id=str(uuid4()))) is None


class TestListPostsUseCase:
    @pytest.mark.asyncio
    async def test_list_posts(self, unit_env):
        # Arrange
        alice = make_user("alice")
        await _create_community(unit_env, user=alice)
        create = await unit_env.get(CreatePostUseCase)
        use_case = await unit_env.get(ListPostsUseCase)
        for title in ["One", "Two", "Three"]:
            await create.execute(CreatePostRequest(community_id="Comics", title=title, user=alice))

        # Act
        response = await use_case.execute(ListPostsRequest(community_id="Comics", limit=2))

        # Assert
        assert len(response.posts) == 2
        assert response.limit == 2
        assert response.offset == 0


class TestDeletePostUseCase:
    @pytest.mark.asyncio
    async def test_delete_post(self, unit_env):
        # Arrange
        alice = make_user("alice")
        await _create_community(unit_env, user=alice)
        create = await unit_env.get(CreatePostUseCase)
        use_case = await unit_env.get(DeletePostUseCase)
        get = await unit_env.get(GetPostUseCase)
        created = await create.execute(
            CreatePostRequest(community_id="Comics", title="Bye", user=alice)
        )

        # Act
        response = await use_case.execute(
            DeletePostRequest(post_id=created.post.post_id, user=alice)
        )

        # Assert
        assert response.success is True
        assert await get.execute(GetPostRequest(post_id=created.post.post_id)) is None

    @pytest.mark.asyncio
    async def test_delete_someone_elses_post(self, unit_env):
        # Arrange
        alice = make_user("alice")
        await _create_community(unit_env, user=alice)
        create = await unit_env.get(CreatePostUseCase)
        use_case = await unit_env.get(DeletePostUseCase)
        created = await create.execute(
            CreatePostRequest(community_id="Comics", title="Mine", user=alice)
        )

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                DeletePostRequest(post_id=created.post.post_id, user=make_user("bob"))
            )
