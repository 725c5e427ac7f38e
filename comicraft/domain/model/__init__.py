"""Domain model entities for ComiCraft."""

from comicraft.domain.model.community import Community, CommunitySnippet
from comicraft.domain.model.post import Post
from comicraft.domain.model.vote import PostVote

__all__ = [
    "Community",
    "CommunitySnippet",
    "Post",
    "PostVote",
]
