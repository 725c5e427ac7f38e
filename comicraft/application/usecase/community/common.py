"""Response items shared by community use cases."""

from datetime import datetime

from pydantic import BaseModel

from comicraft.domain.model import Community, CommunitySnippet
from comicraft.domain.value import PrivacyType


class CommunityItem(BaseModel):
    """Community in responses."""

    community_id: str
    creator_id: str
    number_of_members: int
    privacy_type: PrivacyType
    image_url: str | None
    created_at: datetime

    @classmethod
    def from_domain(cls, community: Community) -> "CommunityItem":
        return cls(
            community_id=community.id,
            creator_id=community.creator_id,
            number_of_members=community.number_of_members,
            privacy_type=community.privacy_type,
            image_url=community.image_url,
            created_at=community.created_at,
        )


class SnippetItem(BaseModel):
    """Membership snippet in responses."""

    community_id: str
    is_moderator: bool
    image_url: str | None

    @classmethod
    def from_domain(cls, snippet: CommunitySnippet) -> "SnippetItem":
        return cls(
            community_id=snippet.community_id,
            is_moderator=snippet.is_moderator,
            image_url=snippet.image_url,
        )
