"""Unit of work interface.

Compound operations (join, leave, create community, vote, submit post)
must apply all of their writes or none of them. Services wrap those writes
in ``transaction()``; the implementation decides how atomicity is achieved.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class UnitOfWork(ABC):
    """Atomic scope spanning several repositories."""

    @abstractmethod
    def transaction(self) -> AbstractAsyncContextManager[None]:
        """Open an atomic scope.

        Writes made through the repositories inside the ``async with`` block
        are discarded if the block raises; the exception propagates.
        """
        pass
