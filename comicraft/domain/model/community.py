"""Community aggregate and membership snippets.

Communities are identified by their name. Membership is recorded per user
as a snippet; the community keeps a denormalized member count that is only
changed together with a snippet.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from comicraft.domain.model.common import DomainModel, utcnow
from comicraft.domain.value import CommunityId, PrivacyType, UserId


class Community(DomainModel):
    """Community aggregate root."""

    id: CommunityId
    creator_id: UserId
    number_of_members: int = Field(default=0, ge=0)
    privacy_type: PrivacyType = PrivacyType.PUBLIC
    created_at: datetime = Field(default_factory=utcnow)
    image_url: Optional[str] = None

    def is_creator(self, user_id: UserId) -> bool:
        return self.creator_id == user_id


class CommunitySnippet(DomainModel):
    """A user's membership in one community.

    Business rules:
    - At most one snippet per (user, community)
    - Created on join (or community creation), deleted on leave
    - The creator's snippet carries the moderator flag
    """

    user_id: UserId
    community_id: CommunityId
    is_moderator: bool = False
    image_url: Optional[str] = None
