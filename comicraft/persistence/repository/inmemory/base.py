"""Snapshot support shared by in-memory repositories."""

from typing import Any


class Snapshottable:
    """In-memory repository whose state can be captured and put back.

    Subclasses keep all of their state in ``_rows``.
    """

    _rows: dict[Any, Any]

    def snapshot(self) -> dict[Any, Any]:
        # Stored models are frozen, so a shallow copy is a full snapshot
        return dict(self._rows)

    def restore(self, rows: dict[Any, Any]) -> None:
        self._rows = rows
