"""Domain services."""

from .base import Service
from .community_service import CommunityService
from .image_storage import ImageStorage, community_image_key, post_image_key
from .jwt_service import JWTService
from .membership_service import MembershipService
from .post_service import PostService
from .vote_service import VoteOutcome, VoteService

__all__ = [
    "CommunityService",
    "ImageStorage",
    "JWTService",
    "MembershipService",
    "PostService",
    "Service",
    "VoteOutcome",
    "VoteService",
    "community_image_key",
    "post_image_key",
]
