"""Menu model, command handlers and the interactive session."""

from .base import ShellBus, ShellContext, ShellResult
from .commands import (
    COMMAND_HANDLERS,
    ERROR_MESSAGES,
    InvalidArgument,
    parse_argument,
    render_outcome,
)
from .console import run_console
from .menu import Menu, MenuConflictError, MenuItem, Prompt, load_default_menu
from .session import CHOICE_PROMPT, MenuSession

__all__ = [
    "CHOICE_PROMPT",
    "COMMAND_HANDLERS",
    "ERROR_MESSAGES",
    "InvalidArgument",
    "Menu",
    "MenuConflictError",
    "MenuItem",
    "MenuSession",
    "Prompt",
    "ShellBus",
    "ShellContext",
    "ShellResult",
    "load_default_menu",
    "parse_argument",
    "render_outcome",
    "run_console",
]
