"""Bounds checks shared by the buffer operations."""

from __future__ import annotations

from .document import BufferDocument
from .outcome import ErrorKind
from .sync import BufferValidationError


def ensure_range(document: BufferDocument, start: int, end: int) -> tuple[int, int]:
    """Accept a half-open range only when ``0 <= start < end <= len``."""

    if start < 0 or end > len(document) or start >= end:
        raise BufferValidationError(
            f"Range [{start}, {end}) is outside 0..{len(document)} or empty",
            kind=ErrorKind.INVALID_RANGE,
        )
    return start, end


def ensure_position(document: BufferDocument, position: int) -> int:
    if position < 0 or position > len(document):
        raise BufferValidationError(
            f"Position {position} is outside 0..{len(document)}",
            kind=ErrorKind.INVALID_POSITION,
        )
    return position
