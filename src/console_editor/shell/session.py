"""Prompt-driven menu session shared by the console and Textual frontends."""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from console_editor.buffer import ErrorKind, TextBuffer
from console_editor.runtime import telemetry

from .base import ShellBus, ShellContext, ShellResult
from .commands import ERROR_MESSAGES, InvalidArgument, get_handler, parse_argument
from .menu import Menu, MenuItem, Prompt, load_default_menu

CHOICE_PROMPT = "Enter your choice: "


class MenuSession:
    """Walks one menu selection at a time: choice, then each argument prompt.

    The session never reads or writes a stream. A frontend shows ``prompt``,
    passes each line to :meth:`submit` and renders ``ShellResult.lines``.
    Malformed numbers drop back to the menu without reaching the buffer.
    """

    def __init__(
        self,
        context: ShellContext,
        *,
        menu: Optional[Menu] = None,
        logger_name: Optional[str] = None,
    ) -> None:
        self.context = context
        self.menu = menu or load_default_menu()
        self.logger_name = logger_name or "console_editor.shell"
        self._pending: Optional[MenuItem] = None
        self._args: Dict[str, object] = {}
        self._finished = False

    @classmethod
    def create(cls, buffer: Optional[TextBuffer] = None) -> "MenuSession":
        context = ShellContext(buffer=buffer or TextBuffer(), bus=ShellBus())
        return cls(context)

    @property
    def buffer(self) -> TextBuffer:
        return self.context.buffer

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def awaiting_choice(self) -> bool:
        return self._pending is None and not self._finished

    @property
    def pending_item(self) -> Optional[MenuItem]:
        return self._pending

    @property
    def prompt(self) -> str:
        current = self._current_prompt()
        return current.text if current is not None else CHOICE_PROMPT

    def render_menu(self) -> Tuple[str, ...]:
        return self.menu.render()

    def submit(self, line: str) -> ShellResult:
        if self._finished:
            return ShellResult(consumed=False, status="finished")
        if self._pending is None:
            return self._select(line)
        return self._collect(line)

    def cancel(self) -> None:
        """Abandon a half-collected command and return to the menu."""

        self._reset()

    def _current_prompt(self) -> Optional[Prompt]:
        if self._pending is None:
            return None
        return self._pending.prompts[len(self._args)]

    def _select(self, line: str) -> ShellResult:
        try:
            choice = int(line.strip())
        except ValueError:
            return self._invalid_input(
                "choice", line, ERROR_MESSAGES[ErrorKind.INVALID_INPUT]
            )

        item = self.menu.get(choice)
        if item is None:
            low, high = self.menu.bounds()
            return self._invalid_input(
                "choice",
                line,
                f"Error: Invalid choice! Please enter a number between {low} and {high}.",
                status="invalid_choice",
            )

        if item.prompts:
            self._pending = item
            self._args = {}
            return ShellResult(consumed=True, status="prompt")
        return self._dispatch(item, {})

    def _collect(self, line: str) -> ShellResult:
        item = self._pending
        prompt = self._current_prompt()
        assert item is not None and prompt is not None
        try:
            self._args[prompt.key] = parse_argument(prompt, line)
        except InvalidArgument as exc:
            self._reset()
            return self._invalid_input(prompt.key, line, exc.message)

        if len(self._args) < len(item.prompts):
            return ShellResult(consumed=True, status="prompt")

        args = dict(self._args)
        self._reset()
        return self._dispatch(item, args)

    def _dispatch(self, item: MenuItem, args: Dict[str, object]) -> ShellResult:
        handler = get_handler(item.command)
        buffer = self.context.buffer
        version = buffer.document.version
        with telemetry.span(
            f"shell::{item.command}",
            logger_name=self.logger_name,
            component="shell",
            metadata={"choice": item.choice, "buffer": buffer.name},
        ) as handle:
            result = handler(self.context, args)
            handle.add_metadata("status", result.status)

        bus = self.context.bus
        if buffer.document.version != version:
            bus.emit("buffer.changed", buffer.mirror())
        if result.error is not None:
            bus.emit(
                "command.error",
                {"command": item.command, "error": result.error.value},
            )
        if result.exit:
            self._finished = True
            telemetry.record_event(
                "session.exit",
                data={"dirty": buffer.document.dirty},
                logger_name=self.logger_name,
            )
            bus.emit("session.exit", None)
        return result

    def _invalid_input(
        self, field: str, raw: str, message: str, *, status: str = "invalid_input"
    ) -> ShellResult:
        telemetry.record_event(
            "shell.invalid_input",
            level="warning",
            data={"field": field, "raw": raw},
            logger_name=self.logger_name,
        )
        self.context.bus.emit(
            "command.error", {"command": field, "error": ErrorKind.INVALID_INPUT.value}
        )
        return ShellResult(
            consumed=True,
            status=status,
            lines=(message,),
            error=ErrorKind.INVALID_INPUT,
        )

    def _reset(self) -> None:
        self._pending = None
        self._args = {}


__all__ = ["CHOICE_PROMPT", "MenuSession"]
