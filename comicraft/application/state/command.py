"""Commands dispatched to the store."""

from pydantic import BaseModel, ConfigDict, Field

from comicraft.domain.value import CurrentUser, ImageData, PrivacyType, VoteValue


class Command(BaseModel):
    """Base command."""

    model_config = ConfigDict(frozen=True)


class FetchSnippets(Command):
    user: CurrentUser


class FetchCommunity(Command):
    community_id: str
    user: CurrentUser | None = None


class CreateCommunity(Command):
    name: str
    privacy_type: PrivacyType = PrivacyType.PUBLIC
    user: CurrentUser


class JoinCommunity(Command):
    community_id: str
    user: CurrentUser


class LeaveCommunity(Command):
    community_id: str
    user: CurrentUser


class FetchPosts(Command):
    community_id: str
    user: CurrentUser | None = None
    limit: int = Field(default=30, ge=1, le=100)


class SubmitPost(Command):
    community_id: str
    title: str
    body: str = ""
    image: ImageData | None = None
    user: CurrentUser


class DeletePost(Command):
    post_id: str
    user: CurrentUser


class VotePost(Command):
    post_id: str
    value: VoteValue
    community_id: str | None = None
    user: CurrentUser


class FetchVotes(Command):
    community_id: str
    user: CurrentUser


class SelectPost(Command):
    """Select one of the loaded posts, or clear the selection with None."""

    post_id: str | None = None


class SignOut(Command):
    """Forget everything tied to the signed-in user."""
