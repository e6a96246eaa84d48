"""Textual app hosting the menu-driven editor."""

from __future__ import annotations

from typing import Any, Optional, Tuple

try:  # pragma: no cover - imported only when the TUI is requested
    from textual.app import App, ComposeResult
    from textual.containers import Horizontal, Vertical
    from textual.widgets import Footer, Header, Input, Log, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use console_editor.adapters.textual.app"
    ) from exc

from console_editor.buffer import EMPTY_DOCUMENT, BufferMirror
from console_editor.shell import MenuSession

from .controller import TextualEditorAdapter, TextualUIHooks


class ConsoleEditorApp(App[None]):
    """Document view on top, menu transcript below, one input line."""

    CSS = """
    Screen {
        layout: vertical;
    }

    #buffer-view {
        height: 1fr;
        border: round $accent;
        padding: 0 1;
        overflow: auto;
    }

    #transcript {
        height: 1fr;
        border: round $surface-lighten-2;
    }

    #prompt-row {
        height: 3;
    }

    #prompt-label {
        width: auto;
        padding: 1 1 0 1;
    }

    #command-input {
        width: 1fr;
    }
    """

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, *, session: Optional[MenuSession] = None) -> None:
        super().__init__()
        self.session = session or MenuSession.create()
        self.adapter: TextualEditorAdapter | None = None
        self._buffer_widget: Static | None = None
        self._transcript: Log | None = None
        self._prompt_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical():
            self._buffer_widget = Static("", id="buffer-view", markup=False)
            yield self._buffer_widget
            self._transcript = Log(id="transcript")
            yield self._transcript
            with Horizontal(id="prompt-row"):
                self._prompt_widget = Static("", id="prompt-label", markup=False)
                yield self._prompt_widget
                yield Input(id="command-input")
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_prompt=self._update_prompt,
            show_output=self._show_output,
            handle_event=self._handle_event,
        )
        self.adapter = TextualEditorAdapter(self.session, hooks)
        self.query_one("#command-input", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if not self.adapter:
            return
        self.adapter.submit_line(event.value)
        event.input.value = ""
        if self.adapter.finished:
            self.exit()

    def _update_buffer(self, mirror: BufferMirror) -> None:
        if self._buffer_widget:
            self._buffer_widget.update(mirror.text or EMPTY_DOCUMENT)
            marker = "*" if mirror.dirty else ""
            self._buffer_widget.border_title = f"document v{mirror.version}{marker}"

    def _update_prompt(self, prompt: str) -> None:
        if self._prompt_widget:
            self._prompt_widget.update(prompt)

    def _show_output(self, lines: Tuple[str, ...]) -> None:
        if self._transcript:
            self._transcript.write_lines(lines)

    def _handle_event(self, name: str, payload: Any | None) -> None:
        if name == "command.error" and isinstance(payload, dict):
            self.sub_title = f"last error: {payload.get('error')}"
        elif name == "buffer.changed":
            self.sub_title = ""


def run_app(session: Optional[MenuSession] = None) -> int:
    ConsoleEditorApp(session=session).run()
    return 0


__all__ = ["ConsoleEditorApp", "run_app"]
