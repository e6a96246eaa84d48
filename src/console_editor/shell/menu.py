"""Numbered menu entries and the prompts each one collects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Literal, Optional, Tuple

PromptKind = Literal["text", "indices", "position"]


@dataclass(slots=True, frozen=True)
class Prompt:
    """One line of input a command needs before it can run.

    ``text`` prompts keep the line verbatim, ``indices`` expects two integers
    separated by whitespace, ``position`` a single integer.
    """

    key: str
    text: str
    kind: PromptKind = "text"


@dataclass(slots=True, frozen=True)
class MenuItem:
    choice: int
    label: str
    command: str
    prompts: Tuple[Prompt, ...] = ()

    def render(self) -> str:
        return f"{self.choice}. {self.label}"


class MenuConflictError(ValueError):
    """Raised when a new entry reuses a choice number or command id."""

    def __init__(self, item: MenuItem, existing: MenuItem) -> None:
        super().__init__(
            f"Menu entry '{item.command}' ({item.choice}) conflicts with "
            f"'{existing.command}' ({existing.choice})"
        )
        self.item = item
        self.existing = existing


class Menu:
    """Ordered collection of menu entries keyed by choice number."""

    title = "Text Editor Menu"

    def __init__(self, items: Iterable[MenuItem] = ()) -> None:
        self._items: Dict[int, MenuItem] = {}
        for item in items:
            self.register(item)

    def register(self, item: MenuItem, *, replace: bool = False) -> MenuItem:
        for existing in self._items.values():
            same_slot = existing.choice == item.choice or existing.command == item.command
            if same_slot and not replace:
                raise MenuConflictError(item, existing)
        if replace:
            self._items = {
                choice: existing
                for choice, existing in self._items.items()
                if existing.command != item.command
            }
        self._items[item.choice] = item
        return item

    def get(self, choice: int) -> Optional[MenuItem]:
        return self._items.get(choice)

    def find(self, command: str) -> Optional[MenuItem]:
        return next((item for item in self if item.command == command), None)

    def bounds(self) -> Tuple[int, int]:
        if not self._items:
            return (0, 0)
        return (min(self._items), max(self._items))

    def render(self) -> Tuple[str, ...]:
        return ("", f"--- {self.title} ---", *(item.render() for item in self))

    def __iter__(self) -> Iterator[MenuItem]:
        return iter(sorted(self._items.values(), key=lambda item: item.choice))

    def __len__(self) -> int:
        return len(self._items)


def _indices(verb: str) -> Prompt:
    return Prompt(
        "range",
        f"Enter start and end index to {verb} (space-separated): ",
        "indices",
    )


DEFAULT_ITEMS: Tuple[MenuItem, ...] = (
    MenuItem(1, "Display Content", "display"),
    MenuItem(2, "Add Text", "add", (Prompt("text", "Enter text to add: "),)),
    MenuItem(3, "Cut Text", "cut", (_indices("cut"),)),
    MenuItem(4, "Copy Text", "copy", (_indices("copy"),)),
    MenuItem(
        5,
        "Paste Text",
        "paste",
        (Prompt("position", "Enter position to paste: ", "position"),),
    ),
    MenuItem(6, "Undo", "undo"),
    MenuItem(7, "Redo", "redo"),
    MenuItem(
        8,
        "Find and Replace",
        "replace",
        (
            Prompt("find", "Enter text to find: "),
            Prompt("replace", "Enter text to replace: "),
        ),
    ),
    MenuItem(9, "Save to File", "save", (Prompt("path", "Enter filename to save: "),)),
    MenuItem(10, "Exit", "exit"),
)


def load_default_menu(menu: Optional[Menu] = None) -> Menu:
    target = menu if menu is not None else Menu()
    for item in DEFAULT_ITEMS:
        target.register(item)
    return target


__all__ = [
    "DEFAULT_ITEMS",
    "Menu",
    "MenuConflictError",
    "MenuItem",
    "Prompt",
    "PromptKind",
    "load_default_menu",
]
