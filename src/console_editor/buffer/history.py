"""Single-slot undo/redo history."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class HistorySlots:
    """One undo snapshot and one redo snapshot, never a stack.

    ``None`` means the slot is empty. An empty string is a real snapshot: it
    is what undoing the first edit of a fresh document restores.
    """

    undo_slot: Optional[str] = None
    redo_slot: Optional[str] = None

    def record(self, before: str) -> None:
        """Remember ``before`` as the state preceding a new mutation.

        The redo slot is left alone.
        """

        self.undo_slot = before

    def can_undo(self) -> bool:
        return self.undo_slot is not None

    def can_redo(self) -> bool:
        return self.redo_slot is not None

    def undo(self, current: str) -> Optional[str]:
        """Swap ``current`` into the redo slot and hand back the undo snapshot."""

        if self.undo_slot is None:
            return None
        restored = self.undo_slot
        self.redo_slot = current
        self.undo_slot = None
        return restored

    def redo(self, current: str) -> Optional[str]:
        if self.redo_slot is None:
            return None
        restored = self.redo_slot
        self.undo_slot = current
        self.redo_slot = None
        return restored
