"""Strongly typed identifiers for ComiCraft domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Opaque user ID issued by the external identity provider
UserId = NewType("UserId", str)

# Community name, which doubles as its identifier
CommunityId = NewType("CommunityId", str)

PostId = NewType("PostId", UUID)
VoteId = NewType("VoteId", UUID)
