"""Boundary types exchanged between the buffer and its frontends."""

from __future__ import annotations

from dataclasses import dataclass

from .outcome import ErrorKind


@dataclass(slots=True, frozen=True)
class BufferMirror:
    """Read-only view of the buffer a frontend can render."""

    text: str
    version: int
    dirty: bool
    clipboard: str
    can_undo: bool
    can_redo: bool

    @property
    def empty(self) -> bool:
        return not self.text


class BufferValidationError(ValueError):
    """Raised by the bounds checks when an argument falls outside the document."""

    def __init__(self, message: str, *, kind: ErrorKind) -> None:
        super().__init__(message)
        self.kind = kind
