"""Vote domain service."""

from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from comicraft.domain.error import BusinessRuleViolationError, NotFoundError, ValidationError
from comicraft.domain.model.common import DomainModel, utcnow
from comicraft.domain.model.vote import PostVote
from comicraft.domain.repository import PostRepository, UnitOfWork, VoteRepository
from comicraft.domain.value import CommunityId, CurrentUser, PostId, UserId, VoteId, VoteValue

from .base import Service


class VoteOutcome(DomainModel):
    """Result of a vote action."""

    post_id: PostId
    vote_status: int  # New tally of the post
    user_vote_value: int  # +1, -1, or 0 when the vote was removed
    vote: PostVote | None = None


class VoteService(Service):
    """Domain service for vote operations.

    A vote action toggles the user's vote:
    - no vote yet: record it, tally += value
    - same value again: remove it, tally -= value
    - opposite value: flip it, tally += 2 * value
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        post_repository: PostRepository,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            post_repository: Post repository
            unit_of_work: Atomic scope for compound writes
        """
        self.vote_repository = vote_repository
        self.post_repository = post_repository
        self.unit_of_work = unit_of_work

    async def vote(
        self,
        post_id: PostId,
        user: CurrentUser,
        value: VoteValue,
        community_id: CommunityId | None = None,
    ) -> VoteOutcome:
        """Apply a vote action on a post.

        Args:
            post_id: Post ID
            user: Authenticated voter
            value: +1 (up) or -1 (down)
            community_id: Community the caller believes the post belongs to

        Returns:
            The new tally and the user's current vote

        Raises:
            NotFoundError: If the post doesn't exist
            ValidationError: If the post is not in ``community_id``
        """
        with logfire.span(
            "vote_service.vote",
            post_id=str(post_id),
            user_id=user.user_id,
            value=int(value),
        ):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Vote on non-existent post", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            if community_id is not None and community_id != post.community_id:
                raise ValidationError(
                    f"Post {post_id} does not belong to c/{community_id}"
                )

            try:
                async with self.unit_of_work.transaction():
                    existing = await self.vote_repository.find_by_user_and_post(
                        user.user_id, post_id
                    )

                    if existing is None:
                        current = await self.vote_repository.save(
                            PostVote(
                                id=VoteId(uuid4()),
                                user_id=user.user_id,
                                post_id=post_id,
                                community_id=post.community_id,
                                vote_value=value,
                                created_at=utcnow(),
                            )
                        )
                        delta = int(value)
                    elif existing.vote_value == value:
                        await self.vote_repository.delete(existing.id)
                        current = None
                        delta = -int(value)
                    else:
                        current = await self.vote_repository.update_value(
                            existing.id, value
                        )
                        delta = 2 * int(value)

                    tally = await self.post_repository.adjust_vote_status(post_id, delta)
            except IntegrityError:
                logfire.warn(
                    "Concurrent vote on same post",
                    user_id=user.user_id,
                    post_id=str(post_id),
                )
                raise BusinessRuleViolationError("Vote already being recorded for this post")

            logfire.info(
                "Vote applied",
                post_id=str(post_id),
                user_id=user.user_id,
                delta=delta,
                vote_status=tally,
            )

            return VoteOutcome(
                post_id=post_id,
                vote_status=tally,
                user_vote_value=int(current.vote_value) if current else 0,
                vote=current,
            )

    async def list_user_votes(
        self, user_id: UserId, community_id: CommunityId
    ) -> list[PostVote]:
        """List a user's votes on posts of a community."""
        with logfire.span(
            "vote_service.list_user_votes", user_id=user_id, community_id=community_id
        ):
            return await self.vote_repository.find_by_user_and_community(
                user_id, community_id
            )
