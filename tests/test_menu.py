import pytest

from console_editor.shell import (
    Menu,
    MenuConflictError,
    MenuItem,
    Prompt,
    InvalidArgument,
    load_default_menu,
    parse_argument,
)


def test_default_menu_matches_numbered_layout() -> None:
    menu = load_default_menu()

    assert len(menu) == 10
    assert menu.bounds() == (1, 10)
    assert [item.command for item in menu] == [
        "display",
        "add",
        "cut",
        "copy",
        "paste",
        "undo",
        "redo",
        "replace",
        "save",
        "exit",
    ]
    assert menu.render()[1] == "--- Text Editor Menu ---"
    assert menu.render()[-1] == "10. Exit"


def test_register_rejects_duplicate_choice() -> None:
    menu = load_default_menu()

    with pytest.raises(MenuConflictError):
        menu.register(MenuItem(3, "Another", "another"))


def test_register_rejects_duplicate_command() -> None:
    menu = load_default_menu()

    with pytest.raises(MenuConflictError):
        menu.register(MenuItem(11, "Display Again", "display"))


def test_register_replace_moves_command() -> None:
    menu = load_default_menu()

    menu.register(MenuItem(11, "Show", "display"), replace=True)

    assert menu.get(1) is None
    assert menu.find("display") == MenuItem(11, "Show", "display")


def test_empty_menu_bounds() -> None:
    assert Menu().bounds() == (0, 0)


def test_parse_text_prompt_keeps_line_verbatim() -> None:
    prompt = Prompt("text", "Enter text: ")

    assert parse_argument(prompt, "  spaced out  ") == "  spaced out  "


def test_parse_indices_prompt() -> None:
    prompt = Prompt("range", "Enter range: ", "indices")

    assert parse_argument(prompt, " 2   7 ") == (2, 7)
    assert parse_argument(prompt, "5 -1") == (5, -1)


@pytest.mark.parametrize("raw", ["", "3", "a b", "1 2 3", "1.5 2"])
def test_parse_indices_prompt_rejects_malformed_input(raw: str) -> None:
    prompt = Prompt("range", "Enter range: ", "indices")

    with pytest.raises(InvalidArgument) as excinfo:
        parse_argument(prompt, raw)

    assert excinfo.value.message == "Error: Invalid indices! Please enter valid numbers."


@pytest.mark.parametrize("raw", ["", "x", "1 2"])
def test_parse_position_prompt_rejects_malformed_input(raw: str) -> None:
    prompt = Prompt("position", "Enter position: ", "position")

    with pytest.raises(InvalidArgument):
        parse_argument(prompt, raw)
