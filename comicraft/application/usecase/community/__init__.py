"""Community use cases."""

from .common import CommunityItem, SnippetItem
from .create_community import (
    CreateCommunityRequest,
    CreateCommunityResponse,
    CreateCommunityUseCase,
)
from .get_community import GetCommunityRequest, GetCommunityResponse, GetCommunityUseCase
from .join_community import JoinCommunityRequest, JoinCommunityResponse, JoinCommunityUseCase
from .join_or_leave_community import (
    JoinOrLeaveCommunityRequest,
    JoinOrLeaveCommunityResponse,
    JoinOrLeaveCommunityUseCase,
)
from .leave_community import (
    LeaveCommunityRequest,
    LeaveCommunityResponse,
    LeaveCommunityUseCase,
)
from .list_snippets import ListSnippetsRequest, ListSnippetsResponse, ListSnippetsUseCase
from .list_top_communities import (
    ListTopCommunitiesRequest,
    ListTopCommunitiesResponse,
    ListTopCommunitiesUseCase,
)
from .update_community_image import (
    UpdateCommunityImageRequest,
    UpdateCommunityImageResponse,
    UpdateCommunityImageUseCase,
)

__all__ = [
    "CommunityItem",
    "SnippetItem",
    "CreateCommunityRequest",
    "CreateCommunityResponse",
    "CreateCommunityUseCase",
    "GetCommunityRequest",
    "GetCommunityResponse",
    "GetCommunityUseCase",
    "JoinCommunityRequest",
    "JoinCommunityResponse",
    "JoinCommunityUseCase",
    "JoinOrLeaveCommunityRequest",
    "JoinOrLeaveCommunityResponse",
    "JoinOrLeaveCommunityUseCase",
    "LeaveCommunityRequest",
    "LeaveCommunityResponse",
    "LeaveCommunityUseCase",
    "ListSnippetsRequest",
    "ListSnippetsResponse",
    "ListSnippetsUseCase",
    "ListTopCommunitiesRequest",
    "ListTopCommunitiesResponse",
    "ListTopCommunitiesUseCase",
    "UpdateCommunityImageRequest",
    "UpdateCommunityImageResponse",
    "UpdateCommunityImageUseCase",
]
