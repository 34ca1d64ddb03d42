# landing_builder/domain/history.py
from typing import List, Optional

from landing_builder.domain.document import Document

HISTORY_LIMIT = 50


class HistoryManager:
    """
    Bounded, linear undo/redo over whole-document snapshots.

    Documents are immutable, so snapshots are stored by reference. A push
    after an undo discards the redo branch.
    """

    def __init__(self, initial: Optional[Document] = None, limit: int = HISTORY_LIMIT):
        if limit < 1:
            raise ValueError("History limit must be at least 1")
        self.limit = limit
        self._history: List[Document] = []
        self._cursor = -1
        if initial is not None:
            self.push(initial)

    def __len__(self) -> int:
        return len(self._history)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def current(self) -> Optional[Document]:
        if self._cursor < 0:
            return None
        return self._history[self._cursor]

    @property
    def can_undo(self) -> bool:
        return self._cursor > 0

    @property
    def can_redo(self) -> bool:
        return self._cursor < len(self._history) - 1

    def push(self, document: Document) -> None:
        del self._history[self._cursor + 1:]
        self._history.append(document)
        self._cursor = len(self._history) - 1

        if len(self._history) > self.limit:
            del self._history[0]
            self._cursor -= 1

    def undo(self) -> Optional[Document]:
        """Step back one snapshot. Returns None when there is nothing to undo."""
        if not self.can_undo:
            return None
        self._cursor -= 1
        return self._history[self._cursor]

    def redo(self) -> Optional[Document]:
        """Step forward one snapshot. Returns None when there is nothing to redo."""
        if not self.can_redo:
            return None
        self._cursor += 1
        return self._history[self._cursor]

    def clear(self, document: Optional[Document] = None) -> None:
        self._history = []
        self._cursor = -1
        if document is not None:
            self.push(document)
