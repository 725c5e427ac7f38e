"""Tests for vote service."""

import asyncio
from uuid import uuid4

import pytest

from comicraft.domain.error import NotFoundError, ValidationError
from comicraft.domain.repository import PostRepository, VoteRepository
from comicraft.domain.service import VoteService
from comicraft.domain.value import CommunityId, PostId, VoteValue
from tests.factories import make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestVoteService:
    """Tests for VoteService toggle semantics."""

    @pytest.mark.asyncio
    async def test_first_upvote(self, unit_env):
        """A first upvote should record the vote and add one."""
        # Arrange
        service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post("Comics"))
        voter = make_user("bob")

        # Act
        outcome = await service.vote(post.id, voter, VoteValue.UP)

        # Assert
        assert outcome.vote_status == 1
        assert outcome.user_vote_value == 1
        assert outcome.vote is not None
        assert outcome.vote.community_id == "Comics"
        assert (await post_repo.find_by_id(post.id)).vote_status == 1

    @pytest.mark.asyncio
    async def test_first_downvote(self, unit_env):
        # Arrange
        service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post("Comics"))

        # Act
        outcome = await service.vote(post.id, make_user("bob"), VoteValue.DOWN)

        # Assert
        assert outcome.vote_status == -1
        assert outcome.user_vote_value == -1

    @pytest.mark.asyncio
    async def test_same_vote_again_removes_it(self, unit_env):
        """Repeating a vote should remove it and restore the tally."""
        # Arrange
        service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        vote_repo = await unit_env.get(VoteRepository)
        post = await post_repo.save(make_post("Comics", vote_status=4))
        voter = make_user("bob")
        await service.vote(post.id, voter, VoteValue.UP)

        # Act
        outcome = await service.vote(post.id, voter, VoteValue.UP)

        # Assert
        assert outcome.vote_status == 4
        assert outcome.user_vote_value == 0
        assert outcome.vote is None
        assert await vote_repo.find_by_user_and_post(voter.user_id, post.id) is None

    @pytest.mark.asyncio
    async def test_opposite_vote_flips_it(self, unit_env):
        """Voting the other way should move the tally by two."""
        # Arrange
        service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post("Comics"))
        voter = make_user("bob")
        first = await service.vote(post.id, voter, VoteValue.UP)

        # Act
        outcome = await service.vote(post.id, voter, VoteValue.DOWN)

        # Assert
        assert outcome.vote_status == -1
        assert outcome.user_vote_value == -1
        assert outcome.vote.id == first.vote.id

    @pytest.mark.asyncio
    async def test_votes_from_several_users(self, unit_env):
        """The tally should be the sum of every user's vote."""
        # Arrange
        service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post("Comics"))

        # Act
        await service.vote(post.id, make_user("a"), VoteValue.UP)
        await service.vote(post.id, make_user("b"), VoteValue.UP)
        outcome = await service.vote(post.id, make_user("c"), VoteValue.DOWN)

        # Assert
        assert outcome.vote_status == 1

    @pytest.mark.asyncio
    async def test_concurrent_votes_keep_tally_consistent(self, unit_env):
        """Simultaneous votes from one user should net out like sequential ones."""
        # Arrange
        service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post("Comics"))
        voter = make_user("bob")

        # Act
        await asyncio.gather(
            service.vote(post.id, voter, VoteValue.UP),
            service.vote(post.id, voter, VoteValue.UP),
        )

        # Assert
        assert (await post_repo.find_by_id(post.id)).vote_status == 0

    @pytest.mark.asyncio
    async def test_vote_missing_post(self, unit_env):
        service = await unit_env.get(VoteService)

        with pytest.raises(NotFoundError):
            await service.vote(PostId(uuid4()), make_user(), VoteValue.UP)

    @pytest.mark.asyncio
    async def test_vote_with_wrong_community(self, unit_env):
        """A community that doesn't match the post's should be rejected."""
        # Arrange
        service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post("Comics"))

        # Act & Assert
        with pytest.raises(ValidationError, match="does not belong"):
            await service.vote(
                post.id, make_user(), VoteValue.UP, community_id=CommunityId("Manga")
            )

        assert (await post_repo.find_by_id(post.id)).vote_status == 0

    @pytest.mark.asyncio
    async def test_list_user_votes(self, unit_env):
        """A user's votes should be filtered by community."""
        # Arrange
        service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        comics = await post_repo.save(make_post("Comics"))
        manga = await post_repo.save(make_post("Manga"))
        bob = make_user("bob")
        await service.vote(comics.id, bob, VoteValue.UP)
        await service.vote(manga.id, bob, VoteValue.DOWN)
        await service.vote(comics.id, make_user("carol"), VoteValue.DOWN)

        # Act
        votes = await service.list_user_votes(bob.user_id, CommunityId("Comics"))

        # Assert
        assert [(v.post_id, v.vote_value) for v in votes] == [(comics.id, VoteValue.UP)]
