"""Application state.

Immutable snapshots of what a client session knows: the user's community
memberships, the community being viewed, and the posts and votes loaded
for it. Every change produces a new snapshot.
"""

from pydantic import BaseModel, ConfigDict

from comicraft.application.usecase.community import CommunityItem, SnippetItem
from comicraft.application.usecase.post import PostItem
from comicraft.application.usecase.vote import VoteItem


class StateModel(BaseModel):
    """Base for state snapshots."""

    model_config = ConfigDict(frozen=True)


class CommunityState(StateModel):
    """Membership and current-community state."""

    my_snippets: tuple[SnippetItem, ...] = ()
    current_community: CommunityItem | None = None
    snippets_fetched: bool = False

    def is_member(self, community_id: str) -> bool:
        return any(s.community_id == community_id for s in self.my_snippets)


class PostState(StateModel):
    """Posts and votes of the community being viewed."""

    selected_post: PostItem | None = None
    posts: tuple[PostItem, ...] = ()
    post_votes: tuple[VoteItem, ...] = ()

    def vote_value(self, post_id: str) -> int:
        """The user's vote on a post, 0 if none."""
        for vote in self.post_votes:
            if vote.post_id == post_id:
                return vote.vote_value
        return 0


class AppState(StateModel):
    """Whole application state."""

    community: CommunityState = CommunityState()
    post: PostState = PostState()
    loading: bool = False
    error: str | None = None
