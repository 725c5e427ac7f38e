"""Application state store."""

from .command import (
    Command,
    CreateCommunity,
    DeletePost,
    FetchCommunity,
    FetchPosts,
    FetchSnippets,
    FetchVotes,
    JoinCommunity,
    LeaveCommunity,
    SelectPost,
    SignOut,
    SubmitPost,
    VotePost,
)
from .state import AppState, CommunityState, PostState
from .store import Store

__all__ = [
    "AppState",
    "CommunityState",
    "PostState",
    "Store",
    "Command",
    "CreateCommunity",
    "DeletePost",
    "FetchCommunity",
    "FetchPosts",
    "FetchSnippets",
    "FetchVotes",
    "JoinCommunity",
    "LeaveCommunity",
    "SelectPost",
    "SignOut",
    "SubmitPost",
    "VotePost",
]
