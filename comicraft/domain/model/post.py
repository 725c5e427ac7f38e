"""Post aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from comicraft.domain.model.common import DomainModel, utcnow
from comicraft.domain.value import CommunityId, PostId, UserId


class Post(DomainModel):
    """Post submitted to a community.

    ``vote_status`` is the signed vote tally and can go below zero.
    ``image_url`` stays unset until an uploaded image is attached.
    """

    id: PostId
    community_id: CommunityId
    creator_id: UserId
    creator_display_name: str = Field(min_length=1, max_length=255)
    title: str = Field(min_length=1, max_length=300)
    body: str = Field(default="", max_length=40000)
    number_of_comments: int = Field(default=0, ge=0)
    vote_status: int = 0
    image_url: Optional[str] = None
    community_image_url: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
