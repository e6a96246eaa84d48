"""Text buffer, clipboard, single-slot history and operation outcomes."""

from .buffer import EMPTY_DOCUMENT, TextBuffer, Transaction
from .clipboard import Clipboard
from .document import BufferDocument
from .history import HistorySlots
from .outcome import ErrorKind, Outcome
from .sync import BufferMirror, BufferValidationError
from .validation import ensure_position, ensure_range

__all__ = [
    "EMPTY_DOCUMENT",
    "BufferDocument",
    "BufferMirror",
    "BufferValidationError",
    "Clipboard",
    "ErrorKind",
    "HistorySlots",
    "Outcome",
    "TextBuffer",
    "Transaction",
    "ensure_position",
    "ensure_range",
]
