"""Adapter that wires a MenuSession into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Tuple

from console_editor.buffer import BufferMirror
from console_editor.shell import MenuSession, ShellResult


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks the adapter invokes to update Textual widgets."""

    update_buffer: Callable[[BufferMirror], None]
    update_prompt: Callable[[str], None] = _noop
    show_output: Callable[[Tuple[str, ...]], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Feeds submitted lines to the session and pushes the results to hooks."""

    EVENTS = ("buffer.changed", "command.error", "session.exit")

    def __init__(self, session: MenuSession, hooks: TextualUIHooks) -> None:
        self.session = session
        self.hooks = hooks
        self._subscribe_events()
        self._refresh_buffer()
        self.hooks.show_output(self.session.render_menu())
        self._refresh_prompt()

    @property
    def finished(self) -> bool:
        return self.session.finished

    def submit_line(self, line: str) -> ShellResult:
        self._log_state("line ->", line=line)
        result = self.session.submit(line)
        if result.lines:
            self.hooks.show_output(result.lines)
        if self.session.awaiting_choice:
            self.hooks.show_output(self.session.render_menu())
        self._refresh_buffer()
        self._refresh_prompt()
        self._log_state(
            "result <-",
            status=result.status,
            error=result.error.value if result.error else None,
            exit=result.exit or None,
        )
        return result

    def _subscribe_events(self) -> None:
        bus = self.session.context.bus
        for event in self.EVENTS:
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)
        if name == "buffer.changed" and isinstance(payload, BufferMirror):
            self.hooks.update_buffer(payload)

    def _refresh_buffer(self) -> None:
        self.hooks.update_buffer(self.session.buffer.mirror())

    def _refresh_prompt(self) -> None:
        prompt = "" if self.session.finished else self.session.prompt
        self.hooks.update_prompt(prompt)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix, *(f"{key}={value!r}" for key, value in snapshot.items())]
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        buffer = self.session.buffer
        pending = self.session.pending_item
        return {
            "buffer": buffer.name,
            "version": buffer.document.version,
            "length": buffer.length,
            "pending": pending.command if pending else None,
        }


__all__ = ["TextualEditorAdapter", "TextualUIHooks"]
