"""Command handlers that turn menu selections into buffer operations."""

from __future__ import annotations

from typing import Callable, Dict, Mapping, Tuple, cast

from console_editor.buffer import ErrorKind, Outcome

from .base import ShellContext, ShellResult
from .menu import Prompt

CommandHandler = Callable[[ShellContext, Mapping[str, object]], ShellResult]

SUCCESS_MESSAGES: Dict[str, str] = {
    "add_text": "Text added successfully.",
    "cut_text": "Text cut successfully.",
    "copy_text": "Text copied to clipboard.",
    "paste_text": "Text pasted successfully.",
    "undo": "Undo successful.",
    "redo": "Redo successful.",
    "find_and_replace": "Text replaced successfully.",
}

ERROR_MESSAGES: Dict[ErrorKind, str] = {
    ErrorKind.INVALID_RANGE: "Error: Invalid range! Please enter valid indices.",
    ErrorKind.INVALID_POSITION: "Error: Invalid position! Please enter a valid position.",
    ErrorKind.NOTHING_TO_UNDO: "Error: Nothing to undo!",
    ErrorKind.NOTHING_TO_REDO: "Error: Nothing to redo!",
    ErrorKind.NOT_FOUND: "Error: Text to find not found in the document.",
    ErrorKind.IO_FAILURE: "Error: Unable to save content to file.",
    ErrorKind.INVALID_INPUT: "Error: Invalid input! Please enter a number.",
}

ARGUMENT_ERRORS: Dict[str, str] = {
    "indices": "Error: Invalid indices! Please enter valid numbers.",
    "position": "Error: Invalid position! Please enter a valid number.",
}

GOODBYE = "Exiting Text Editor. Goodbye!"


class InvalidArgument(ValueError):
    """Raised when a numeric prompt receives something that is not a number."""

    def __init__(self, prompt: Prompt, raw: str) -> None:
        super().__init__(f"Prompt '{prompt.key}' expected {prompt.kind}, got {raw!r}")
        self.prompt = prompt
        self.raw = raw

    @property
    def message(self) -> str:
        return ARGUMENT_ERRORS.get(self.prompt.kind, ERROR_MESSAGES[ErrorKind.INVALID_INPUT])


def parse_argument(prompt: Prompt, raw: str) -> object:
    if prompt.kind == "text":
        return raw
    parts = raw.split()
    try:
        numbers = tuple(int(part) for part in parts)
    except ValueError as exc:
        raise InvalidArgument(prompt, raw) from exc
    if prompt.kind == "position":
        if len(numbers) != 1:
            raise InvalidArgument(prompt, raw)
        return numbers[0]
    if len(numbers) != 2:
        raise InvalidArgument(prompt, raw)
    return numbers


def render_outcome(outcome: Outcome) -> str:
    if not outcome.ok:
        assert outcome.error is not None
        return ERROR_MESSAGES[outcome.error]
    if outcome.operation == "save_to_file":
        return f"Content saved to file {outcome.value} successfully."
    return SUCCESS_MESSAGES.get(outcome.operation, str(outcome.value or ""))


def _result(command: str, outcome: Outcome) -> ShellResult:
    return ShellResult(
        consumed=True,
        status=command if outcome.ok else f"{command}_error",
        lines=(render_outcome(outcome),),
        outcome=outcome,
        error=outcome.error,
    )


def _handle_display(context: ShellContext, args: Mapping[str, object]) -> ShellResult:
    del args
    outcome = context.buffer.display()
    return ShellResult(
        consumed=True,
        status="display_empty" if outcome.empty else "display",
        lines=("", "--- Current Content ---", str(outcome.value)),
        outcome=outcome,
    )


def _handle_add(context: ShellContext, args: Mapping[str, object]) -> ShellResult:
    return _result("add", context.buffer.add_text(str(args["text"])))


def _handle_cut(context: ShellContext, args: Mapping[str, object]) -> ShellResult:
    start, end = cast(Tuple[int, int], args["range"])
    return _result("cut", context.buffer.cut_text(start, end))


def _handle_copy(context: ShellContext, args: Mapping[str, object]) -> ShellResult:
    start, end = cast(Tuple[int, int], args["range"])
    return _result("copy", context.buffer.copy_text(start, end))


def _handle_paste(context: ShellContext, args: Mapping[str, object]) -> ShellResult:
    return _result("paste", context.buffer.paste_text(cast(int, args["position"])))


def _handle_undo(context: ShellContext, args: Mapping[str, object]) -> ShellResult:
    del args
    return _result("undo", context.buffer.undo())


def _handle_redo(context: ShellContext, args: Mapping[str, object]) -> ShellResult:
    del args
    return _result("redo", context.buffer.redo())


def _handle_replace(context: ShellContext, args: Mapping[str, object]) -> ShellResult:
    outcome = context.buffer.find_and_replace(str(args["find"]), str(args["replace"]))
    return _result("replace", outcome)


def _handle_save(context: ShellContext, args: Mapping[str, object]) -> ShellResult:
    return _result("save", context.buffer.save_to_file(str(args["path"])))


def _handle_exit(context: ShellContext, args: Mapping[str, object]) -> ShellResult:
    del context, args
    return ShellResult(consumed=True, status="exit", lines=(GOODBYE,), exit=True)


COMMAND_HANDLERS: Dict[str, CommandHandler] = {
    "display": _handle_display,
    "add": _handle_add,
    "cut": _handle_cut,
    "copy": _handle_copy,
    "paste": _handle_paste,
    "undo": _handle_undo,
    "redo": _handle_redo,
    "replace": _handle_replace,
    "save": _handle_save,
    "exit": _handle_exit,
}


def get_handler(command: str) -> CommandHandler:
    try:
        return COMMAND_HANDLERS[command]
    except KeyError as exc:
        raise KeyError(f"No handler registered for command '{command}'") from exc


__all__ = [
    "ARGUMENT_ERRORS",
    "COMMAND_HANDLERS",
    "CommandHandler",
    "ERROR_MESSAGES",
    "GOODBYE",
    "InvalidArgument",
    "SUCCESS_MESSAGES",
    "get_handler",
    "parse_argument",
    "render_outcome",
]
