"""Domain value objects for ComiCraft."""

from comicraft.domain.value.identifiers import (
    CommunityId,
    PostId,
    UserId,
    VoteId,
)
from comicraft.domain.value.types import (
    CommunityName,
    CurrentUser,
    ImageData,
    PrivacyType,
    VoteValue,
)

__all__ = [
    # Identifiers
    "UserId",
    "CommunityId",
    "PostId",
    "VoteId",
    # Types
    "CommunityName",
    "CurrentUser",
    "ImageData",
    "PrivacyType",
    "VoteValue",
]
