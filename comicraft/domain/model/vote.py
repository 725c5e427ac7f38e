"""Post vote entity."""

from datetime import datetime

from pydantic import Field

from comicraft.domain.model.common import DomainModel, utcnow
from comicraft.domain.value import CommunityId, PostId, UserId, VoteId, VoteValue


class PostVote(DomainModel):
    """One user's vote on one post.

    Business rules:
    - One vote per user per post (unique constraint)
    - ``vote_value`` is +1 or -1; removing a vote deletes the record
    - ``community_id`` is denormalized so a community's votes can be
      fetched in one query
    """

    id: VoteId
    user_id: UserId
    post_id: PostId
    community_id: CommunityId
    vote_value: VoteValue
    created_at: datetime = Field(default_factory=utcnow)
