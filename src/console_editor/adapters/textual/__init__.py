"""Textual frontend: hook adapter plus the ``ConsoleEditorApp`` in ``.app``."""

from .controller import TextualEditorAdapter, TextualUIHooks

__all__ = ["TextualEditorAdapter", "TextualUIHooks"]
