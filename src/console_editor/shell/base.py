"""Shared types for the interactive shell."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from console_editor.buffer import ErrorKind, Outcome, TextBuffer


@dataclass(slots=True)
class ShellResult:
    """What the shell hands back for one submitted line."""

    consumed: bool
    status: str = "ok"
    lines: Tuple[str, ...] = ()
    outcome: Optional[Outcome] = None
    error: Optional[ErrorKind] = None
    exit: bool = False


@dataclass(slots=True)
class ShellContext:
    """Services every command handler can reach."""

    buffer: TextBuffer
    bus: "ShellBus"


class ShellBus:
    """Minimal event bus so frontends can follow buffer and session changes."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)
