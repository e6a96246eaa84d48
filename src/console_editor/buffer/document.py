"""Flat document storage for the editor buffer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class BufferDocument:
    """Document text plus a change counter.

    ``version`` moves forward on every mutation, undo and redo included.
    ``dirty`` tracks whether the text changed since the last successful save.
    """

    text: str = ""
    version: int = 0
    dirty: bool = False

    @classmethod
    def from_text(cls, text: str) -> "BufferDocument":
        return cls(text=text, version=0, dirty=False)

    def __len__(self) -> int:
        return len(self.text)

    def replace(self, text: str) -> "BufferDocument":
        """Return a new document holding ``text`` with the version bumped."""

        return BufferDocument(text=text, version=self.version + 1, dirty=True)

    def splice(self, start: int, end: int, insert: str = "") -> "BufferDocument":
        """Return a document with ``[start:end]`` replaced by ``insert``."""

        return self.replace(self.text[:start] + insert + self.text[end:])

    def slice(self, start: int, end: int) -> str:
        return self.text[start:end]

    def mark_saved(self) -> None:
        self.dirty = False
