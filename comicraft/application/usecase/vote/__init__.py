"""Vote use cases."""

from .list_votes import ListVotesRequest, ListVotesResponse, ListVotesUseCase, VoteItem
from .vote_post import VotePostRequest, VotePostResponse, VotePostUseCase

__all__ = [
    "VoteItem",
    "ListVotesRequest",
    "ListVotesResponse",
    "ListVotesUseCase",
    "VotePostRequest",
    "VotePostResponse",
    "VotePostUseCase",
]
