"""Integration tests for the PostgreSQL repositories.

Assumes a migrated database is reachable at ``DATABASE__URL``. Enable with
``COMICRAFT_INTEGRATION=1``.
"""

import os
from datetime import timedelta
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from comicraft.domain.error import CommunityAlreadyExistsError
from comicraft.domain.model import CommunitySnippet
from comicraft.domain.repository import (
    CommunityRepository,
    PostRepository,
    SnippetRepository,
    UnitOfWork,
)
from comicraft.domain.service import CommunityService, MembershipService, PostService
from comicraft.domain.value import CommunityId
from tests.factories import make_community, make_post, make_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.getenv("COMICRAFT_INTEGRATION"), reason="needs a running PostgreSQL"
)

# Integration test fixture - real persistence
integration_env = create_env_fixture(unmock={"persistence"})


def _unique_name() -> str:
    return f"it{uuid4().hex[:12]}"


class TestPostgresRepositories:
    """Integration tests for repository SQL."""

    @pytest.mark.asyncio
    async def test_community_round_trip(self, integration_env):
        """A created community should read back with its creator and privacy type."""
        # Arrange
        service = await integration_env.get(CommunityService)
        name = _unique_name()
        alice = make_user("alice")

        # Act
        created = await service.create_community(name, alice)
        fetched = await service.get_community(CommunityId(name))

        # Assert
        assert fetched.creator_id == alice.user_id
        assert fetched.privacy_type == created.privacy_type
        assert fetched.number_of_members == 1

    @pytest.mark.asyncio
    async def test_duplicate_community_conflicts(self, integration_env):
        service = await integration_env.get(CommunityService)
        name = _unique_name()
        await service.create_community(name, make_user("alice"))

        with pytest.raises(CommunityAlreadyExistsError):
            await service.create_community(name, make_user("bob"))

    @pytest.mark.asyncio
    async def test_savepoint_rolls_back_failed_block(self, integration_env):
        """A duplicate snippet inside a unit of work should undo the count change."""
        # Arrange
        community_repo = await integration_env.get(CommunityRepository)
        snippet_repo = await integration_env.get(SnippetRepository)
        uow = await integration_env.get(UnitOfWork)
        community = await community_repo.add(make_community(_unique_name()))
        snippet = CommunitySnippet(user_id="uid-bob", community_id=community.id)
        await snippet_repo.add(snippet)

        # Act
        with pytest.raises(IntegrityError):
            async with uow.transaction():
                await community_repo.increment_members(community.id)
                await snippet_repo.add(snippet)

        # Assert
        stored = await community_repo.find_by_id(community.id)
        assert stored.number_of_members == community.number_of_members

    @pytest.mark.asyncio
    async def test_join_and_leave(self, integration_env):
        # Arrange
        community_service = await integration_env.get(CommunityService)
        service = await integration_env.get(MembershipService)
        name = _unique_name()
        bob = make_user("bob")
        await community_service.create_community(name, make_user("alice"))

        # Act & Assert
        await service.join(CommunityId(name), bob)
        assert (await community_service.get_community(CommunityId(name))).number_of_members == 2

        await service.leave(CommunityId(name), bob)
        assert (await community_service.get_community(CommunityId(name))).number_of_members == 1

    @pytest.mark.asyncio
    async def test_post_round_trip_and_tally(self, integration_env):
        # Arrange
        community_service = await integration_env.get(CommunityService)
        post_service = await integration_env.get(PostService)
        post_repo = await integration_env.get(PostRepository)
        name = _unique_name()
        alice = make_user("alice")
        await community_service.create_community(name, alice)

        # Act
        post = await post_service.create_post(CommunityId(name), alice, "Hello")
        tally = await post_repo.adjust_vote_status(post.id, -1)

        # Assert
        fetched = await post_repo.find_by_id(post.id)
        assert fetched.title == "Hello"
        assert fetched.image_url is None
        assert tally == -1
        assert fetched.vote_status == -1

    @pytest.mark.asyncio
    async def test_posts_newest_first(self, integration_env):
        # Arrange
        community_repo = await integration_env.get(CommunityRepository)
        post_repo = await integration_env.get(PostRepository)
        community = await community_repo.add(make_community(_unique_name()))
        older = await post_repo.save(make_post(community.id, age=timedelta(hours=1)))
        newer = await post_repo.save(make_post(community.id))

        # Act
        posts = await post_repo.find_by_community(community.id)

        # Assert
        assert [p.id for p in posts] == [newer.id, older.id]
