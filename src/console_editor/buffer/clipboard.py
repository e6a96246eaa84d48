"""Single-slot clipboard shared by cut, copy and paste."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Clipboard:
    """Holds the most recently cut or copied text.

    Every yank overwrites the slot; paste reads it without clearing.
    """

    text: str = ""

    def yank(self, text: str) -> None:
        self.text = text

    def peek(self) -> str:
        return self.text
