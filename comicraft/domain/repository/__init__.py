"""Repository interfaces for ComiCraft domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from comicraft.domain.repository.community import CommunityRepository
from comicraft.domain.repository.post import PostRepository
from comicraft.domain.repository.snippet import SnippetRepository
from comicraft.domain.repository.unit_of_work import UnitOfWork
from comicraft.domain.repository.vote import VoteRepository

__all__ = [
    "CommunityRepository",
    "PostRepository",
    "SnippetRepository",
    "UnitOfWork",
    "VoteRepository",
]
