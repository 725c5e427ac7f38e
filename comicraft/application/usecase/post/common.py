"""Response items shared by post use cases."""

from datetime import datetime

from pydantic import BaseModel

from comicraft.domain.model import Post


class PostItem(BaseModel):
    """Post in responses."""

    post_id: str
    community_id: str
    creator_id: str
    creator_display_name: str
    title: str
    body: str
    number_of_comments: int
    vote_status: int
    image_url: str | None
    community_image_url: str | None
    created_at: datetime

    @classmethod
    def from_domain(cls, post: Post) -> "PostItem":
        return cls(
            post_id=str(post.id),
            community_id=post.community_id,
            creator_id=post.creator_id,
            creator_display_name=post.creator_display_name,
            title=post.title,
            body=post.body,
            number_of_comments=post.number_of_comments,
            vote_status=post.vote_status,
            image_url=post.image_url,
            community_image_url=post.community_image_url,
            created_at=post.created_at,
        )
