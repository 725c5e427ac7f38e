"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from comicraft.domain.model import Community, CommunitySnippet, Post, PostVote
from comicraft.domain.value import (
    CommunityId,
    PostId,
    PrivacyType,
    UserId,
    VoteId,
    VoteValue,
)


def _as_uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_community(row: Dict[str, Any]) -> Community:
    """Convert database row to Community domain model.

    Args:
        row: Database row as dict

    Returns:
        Community domain model
    """
    return Community(
        id=CommunityId(row["id"]),
        creator_id=UserId(row["creator_id"]),
        number_of_members=row["number_of_members"],
        privacy_type=PrivacyType(row["privacy_type"]),
        image_url=row.get("image_url"),
        created_at=row["created_at"],
    )


def community_to_dict(community: Community) -> Dict[str, Any]:
    """Convert Community domain model to database dict."""
    data = community.model_dump()
    data["privacy_type"] = community.privacy_type.value
    return data


def row_to_snippet(row: Dict[str, Any]) -> CommunitySnippet:
    """Convert database row to CommunitySnippet domain model."""
    return CommunitySnippet(
        user_id=UserId(row["user_id"]),
        community_id=CommunityId(row["community_id"]),
        is_moderator=row["is_moderator"],
        image_url=row.get("image_url"),
    )


def snippet_to_dict(snippet: CommunitySnippet) -> Dict[str, Any]:
    """Convert CommunitySnippet domain model to database dict."""
    return snippet.model_dump()


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_as_uuid(row["id"])),
        community_id=CommunityId(row["community_id"]),
        creator_id=UserId(row["creator_id"]),
        creator_display_name=row["creator_display_name"],
        title=row["title"],
        body=row.get("body") or "",
        number_of_comments=row["number_of_comments"],
        vote_status=row["vote_status"],
        image_url=row.get("image_url"),
        community_image_url=row.get("community_image_url"),
        created_at=row["created_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    return post.model_dump()


def row_to_vote(row: Dict[str, Any]) -> PostVote:
    """Convert database row to PostVote domain model."""
    return PostVote(
        id=VoteId(_as_uuid(row["id"])),
        user_id=UserId(row["user_id"]),
        post_id=PostId(_as_uuid(row["post_id"])),
        community_id=CommunityId(row["community_id"]),
        vote_value=VoteValue(row["vote_value"]),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: PostVote) -> Dict[str, Any]:
    """Convert PostVote domain model to database dict."""
    data = vote.model_dump()
    data["vote_value"] = int(vote.vote_value)
    return data
