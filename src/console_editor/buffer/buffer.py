"""TextBuffer: document, clipboard and single-slot history behind one façade."""

from __future__ import annotations

import os
from contextlib import AbstractContextManager
from typing import ContextManager, Optional, Union

from console_editor.runtime import telemetry

from .clipboard import Clipboard
from .document import BufferDocument
from .history import HistorySlots
from .outcome import ErrorKind, Outcome
from .sync import BufferMirror, BufferValidationError
from .validation import ensure_position, ensure_range

EMPTY_DOCUMENT = "[Empty Document]"

PathArg = Union[str, "os.PathLike[str]"]


class TextBuffer:
    """In-memory document with cut/copy/paste, find-and-replace and undo/redo.

    Every public operation returns an :class:`Outcome` and either applies all
    of its effects or none of them. Validation failures and write errors are
    reported through the outcome and never raised.
    """

    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[BufferDocument] = None,
        clipboard: Optional[Clipboard] = None,
        history: Optional[HistorySlots] = None,
        logger_name: Optional[str] = None,
    ) -> None:
        self.name = name
        self.document = document or BufferDocument()
        self.clipboard = clipboard or Clipboard()
        self.history = history or HistorySlots()
        self.logger_name = logger_name or "console_editor.buffer"

    @classmethod
    def from_text(cls, text: str, *, name: str = "default") -> "TextBuffer":
        return cls(name=name, document=BufferDocument.from_text(text))

    @property
    def text(self) -> str:
        return self.document.text

    @property
    def length(self) -> int:
        return len(self.document)

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo()

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo()

    def mirror(self) -> BufferMirror:
        return BufferMirror(
            text=self.document.text,
            version=self.document.version,
            dirty=self.document.dirty,
            clipboard=self.clipboard.peek(),
            can_undo=self.can_undo,
            can_redo=self.can_redo,
        )

    def display(self) -> Outcome:
        if not self.document.text:
            return Outcome.success("display", EMPTY_DOCUMENT, empty=True)
        return Outcome.success("display", self.document.text)

    def add_text(self, text: str) -> Outcome:
        with Transaction(self, "add_text") as tx:
            tx.commit(self.document.replace(self.document.text + text))
        return Outcome.success("add_text", text)

    def cut_text(self, start: int, end: int) -> Outcome:
        with Transaction(self, "cut_text") as tx:
            try:
                start, end = ensure_range(self.document, start, end)
            except BufferValidationError as exc:
                return tx.reject(exc)
            removed = self.document.slice(start, end)
            tx.commit(self.document.splice(start, end))
            self.clipboard.yank(removed)
        return Outcome.success("cut_text", removed)

    def copy_text(self, start: int, end: int) -> Outcome:
        with Transaction(self, "copy_text") as tx:
            try:
                start, end = ensure_range(self.document, start, end)
            except BufferValidationError as exc:
                return tx.reject(exc)
            copied = self.document.slice(start, end)
            self.clipboard.yank(copied)
        return Outcome.success("copy_text", copied)

    def paste_text(self, position: int) -> Outcome:
        with Transaction(self, "paste_text") as tx:
            try:
                position = ensure_position(self.document, position)
            except BufferValidationError as exc:
                return tx.reject(exc)
            pasted = self.clipboard.peek()
            tx.commit(self.document.splice(position, position, pasted))
        return Outcome.success("paste_text", pasted)

    def undo(self) -> Outcome:
        with Transaction(self, "undo") as tx:
            restored = self.history.undo(self.document.text)
            if restored is None:
                return tx.refuse(ErrorKind.NOTHING_TO_UNDO, "Undo slot is empty")
            tx.restore(restored)
        return Outcome.success("undo", restored)

    def redo(self) -> Outcome:
        with Transaction(self, "redo") as tx:
            restored = self.history.redo(self.document.text)
            if restored is None:
                return tx.refuse(ErrorKind.NOTHING_TO_REDO, "Redo slot is empty")
            tx.restore(restored)
        return Outcome.success("redo", restored)

    def find_and_replace(self, find: str, replace: str) -> Outcome:
        """Replace every literal occurrence of ``find``, scanning left to right.

        Matching resumes after each match, so a ``replace`` that contains
        ``find`` is never rescanned. Returns the number of replacements.
        """

        with Transaction(self, "find_and_replace") as tx:
            current = self.document.text
            if find not in current:
                return tx.refuse(ErrorKind.NOT_FOUND, f"{find!r} does not occur")
            count = current.count(find)
            tx.commit(self.document.replace(current.replace(find, replace)))
        return Outcome.success("find_and_replace", count)

    def save_to_file(self, path: PathArg) -> Outcome:
        """Write the document verbatim to ``path``, overwriting it.

        Text is encoded as UTF-8 before the file is opened, so content that
        cannot be encoded leaves an existing file untouched. No newline
        translation happens: the file's bytes decode back to exactly the
        current content. Bad paths and encoding errors come back as
        ``IO_FAILURE``.
        """

        target = os.fspath(path)
        with Transaction(self, "save_to_file") as tx:
            try:
                data = self.document.text.encode("utf-8")
                with open(target, "wb") as handle:
                    handle.write(data)
            except (OSError, ValueError) as exc:
                return tx.refuse(ErrorKind.IO_FAILURE, f"{target}: {exc}")
            self.document.mark_saved()
        return Outcome.success("save_to_file", target)


class Transaction(AbstractContextManager["Transaction"]):
    """Scope of one buffer operation, traced as ``buffer::<label>``."""

    def __init__(self, buffer: TextBuffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[telemetry.SpanHandle]] = None
        self._handle: Optional[telemetry.SpanHandle] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            f"buffer::{self.label}",
            logger_name=self.buffer.logger_name,
            component="buffer",
            metadata={
                "buffer": self.buffer.name,
                "version": self.buffer.document.version,
            },
        )
        self._handle = self._span_cm.__enter__()
        return self

    def commit(self, document: BufferDocument) -> None:
        """Snapshot the current text into the undo slot, then install ``document``."""

        self.buffer.history.record(self.buffer.document.text)
        self.buffer.document = document

    def restore(self, text: str) -> None:
        """Install ``text`` without touching history; undo and redo swap slots first."""

        self.buffer.document = self.buffer.document.replace(text)

    def reject(self, error: BufferValidationError) -> Outcome:
        return self.refuse(error.kind, str(error))

    def refuse(self, kind: ErrorKind, detail: str) -> Outcome:
        if self._handle is not None:
            self._handle.add_metadata("error", kind.value)
            self._handle.reject(detail)
        telemetry.record_event(
            "buffer.rejected",
            level="warning",
            data={"operation": self.label, "error": kind.value, "detail": detail},
            logger_name=self.buffer.logger_name,
        )
        return Outcome.failure(self.label, kind, detail)

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False
