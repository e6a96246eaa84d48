"""Tagged results returned by every buffer operation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    INVALID_RANGE = "invalid_range"
    INVALID_POSITION = "invalid_position"
    NOTHING_TO_UNDO = "nothing_to_undo"
    NOTHING_TO_REDO = "nothing_to_redo"
    NOT_FOUND = "not_found"
    IO_FAILURE = "io_failure"
    INVALID_INPUT = "invalid_input"


@dataclass(slots=True, frozen=True)
class Outcome:
    """Success with an optional value, or a failure naming its ``ErrorKind``."""

    ok: bool
    operation: str
    value: object | None = None
    error: Optional[ErrorKind] = None
    detail: Optional[str] = None
    empty: bool = False

    @classmethod
    def success(
        cls, operation: str, value: object | None = None, *, empty: bool = False
    ) -> "Outcome":
        return cls(ok=True, operation=operation, value=value, empty=empty)

    @classmethod
    def failure(
        cls, operation: str, error: ErrorKind, detail: Optional[str] = None
    ) -> "Outcome":
        return cls(ok=False, operation=operation, error=error, detail=detail)

    def __bool__(self) -> bool:
        return self.ok
