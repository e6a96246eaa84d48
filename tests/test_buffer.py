from __future__ import annotations

from pathlib import Path

import pytest

from console_editor.buffer import EMPTY_DOCUMENT, ErrorKind, TextBuffer


def make_buffer(text: str = "") -> TextBuffer:
    return TextBuffer.from_text(text)


def test_display_reports_empty_document() -> None:
    outcome = make_buffer().display()

    assert outcome.ok
    assert outcome.empty is True
    assert outcome.value == EMPTY_DOCUMENT


def test_display_returns_content_without_touching_history() -> None:
    buffer = make_buffer("Hello")

    outcome = buffer.display()

    assert outcome.value == "Hello"
    assert outcome.empty is False
    assert buffer.can_undo is False


def test_add_text_appends_and_records_undo() -> None:
    buffer = make_buffer("Hello")

    outcome = buffer.add_text(", world")

    assert outcome.ok
    assert buffer.text == "Hello, world"
    assert buffer.history.undo_slot == "Hello"


def test_add_empty_text_still_counts_as_mutation() -> None:
    buffer = make_buffer("abc")

    buffer.add_text("")

    assert buffer.text == "abc"
    assert buffer.can_undo is True


def test_cut_paste_scenario() -> None:
    buffer = TextBuffer()

    buffer.add_text("Hello")
    assert buffer.display().value == "Hello"

    cut = buffer.cut_text(0, 5)
    assert cut.ok
    assert cut.value == "Hello"
    assert buffer.display().value == EMPTY_DOCUMENT
    assert buffer.clipboard.peek() == "Hello"

    buffer.paste_text(0)
    assert buffer.display().value == "Hello"


@pytest.mark.parametrize("start,end", [(0, 1), (2, 5), (0, 11), (10, 11), (4, 7)])
def test_cut_then_paste_at_start_restores_content(start: int, end: int) -> None:
    buffer = make_buffer("hello world")

    buffer.cut_text(start, end)
    buffer.paste_text(start)

    assert buffer.text == "hello world"


@pytest.mark.parametrize("start,end", [(5, 2), (3, 3), (-1, 2), (0, 12), (20, 30)])
def test_cut_rejects_invalid_range_without_mutation(start: int, end: int) -> None:
    buffer = make_buffer("hello world")
    buffer.copy_text(0, 5)
    version = buffer.document.version

    outcome = buffer.cut_text(start, end)

    assert not outcome.ok
    assert outcome.error is ErrorKind.INVALID_RANGE
    assert buffer.text == "hello world"
    assert buffer.clipboard.peek() == "hello"
    assert buffer.can_undo is False
    assert buffer.document.version == version


def test_copy_sets_clipboard_only() -> None:
    buffer = make_buffer("hello world")

    outcome = buffer.copy_text(6, 11)

    assert outcome.value == "world"
    assert buffer.clipboard.peek() == "world"
    assert buffer.text == "hello world"
    assert buffer.can_undo is False


def test_copy_does_not_disturb_pending_undo() -> None:
    buffer = make_buffer("abc")
    buffer.add_text("def")

    buffer.copy_text(0, 3)
    outcome = buffer.undo()

    assert outcome.ok
    assert buffer.text == "abc"


def test_copy_rejects_invalid_range() -> None:
    buffer = make_buffer("abc")

    outcome = buffer.copy_text(2, 1)

    assert outcome.error is ErrorKind.INVALID_RANGE
    assert buffer.clipboard.peek() == ""


@pytest.mark.parametrize("position", [-1, 4, 100])
def test_paste_rejects_out_of_bounds_position(position: int) -> None:
    buffer = make_buffer("abc")
    buffer.copy_text(0, 1)

    outcome = buffer.paste_text(position)

    assert outcome.error is ErrorKind.INVALID_POSITION
    assert buffer.text == "abc"
    assert buffer.can_undo is False


def test_paste_at_end_is_allowed() -> None:
    buffer = make_buffer("abc")
    buffer.copy_text(0, 1)

    buffer.paste_text(3)

    assert buffer.text == "abca"


def test_paste_with_empty_clipboard_records_undo() -> None:
    buffer = make_buffer("abc")

    outcome = buffer.paste_text(1)

    assert outcome.ok
    assert buffer.text == "abc"
    assert buffer.history.undo_slot == "abc"


def test_undo_restores_pre_operation_content_once() -> None:
    buffer = make_buffer("abc")
    buffer.find_and_replace("b", "XYZ")

    first = buffer.undo()
    second = buffer.undo()

    assert first.ok
    assert buffer.text == "abc"
    assert second.error is ErrorKind.NOTHING_TO_UNDO
    assert buffer.text == "abc"


def test_undo_first_edit_of_empty_document() -> None:
    buffer = TextBuffer()
    buffer.add_text("Hello")

    outcome = buffer.undo()

    assert outcome.ok
    assert buffer.text == ""
    assert buffer.display().empty is True


def test_undo_on_fresh_buffer_fails() -> None:
    outcome = TextBuffer().undo()

    assert outcome.error is ErrorKind.NOTHING_TO_UNDO


def test_redo_after_undo_restores_pre_undo_content_once() -> None:
    buffer = make_buffer("one")
    buffer.add_text(" two")
    buffer.undo()

    first = buffer.redo()
    second = buffer.redo()

    assert first.ok
    assert buffer.text == "one two"
    assert second.error is ErrorKind.NOTHING_TO_REDO
    assert buffer.text == "one two"


def test_redo_makes_undo_available_again() -> None:
    buffer = make_buffer("one")
    buffer.add_text(" two")
    buffer.undo()
    buffer.redo()

    buffer.undo()

    assert buffer.text == "one"


def test_mutation_leaves_stale_redo_in_place() -> None:
    buffer = make_buffer("a")
    buffer.add_text("b")
    buffer.undo()

    buffer.add_text("c")

    assert buffer.history.redo_slot == "ab"
    buffer.redo()
    assert buffer.text == "ab"


def test_only_last_mutation_is_undoable() -> None:
    buffer = TextBuffer()
    buffer.add_text("a")
    buffer.add_text("b")
    buffer.add_text("c")

    buffer.undo()

    assert buffer.text == "ab"
    assert buffer.undo().error is ErrorKind.NOTHING_TO_UNDO


def test_find_and_replace_replaces_every_occurrence() -> None:
    buffer = make_buffer("aaa")

    outcome = buffer.find_and_replace("a", "bb")

    assert outcome.ok
    assert outcome.value == 3
    assert buffer.text == "bbbbbb"


def test_find_and_replace_does_not_overlap_matches() -> None:
    buffer = make_buffer("aaaa")

    buffer.find_and_replace("aa", "b")

    assert buffer.text == "bb"


def test_find_and_replace_with_replacement_containing_find() -> None:
    buffer = make_buffer("cat cat")

    buffer.find_and_replace("cat", "catcat")

    assert buffer.text == "catcat catcat"


def test_find_and_replace_missing_text_fails() -> None:
    buffer = make_buffer("hello")

    outcome = buffer.find_and_replace("xyz", "abc")

    assert outcome.error is ErrorKind.NOT_FOUND
    assert buffer.text == "hello"
    assert buffer.can_undo is False


def test_find_and_replace_is_literal() -> None:
    buffer = make_buffer("a.c abc")

    buffer.find_and_replace(".", "-")

    assert buffer.text == "a-c abc"


def test_save_to_file_writes_content_verbatim(tmp_path: Path) -> None:
    buffer = make_buffer("line one\r\nline two\nünïcode")
    target = tmp_path / "out.txt"
    target.write_text("previous contents that are longer", encoding="utf-8")

    outcome = buffer.save_to_file(target)

    assert outcome.ok
    assert outcome.value == str(target)
    assert target.read_bytes() == buffer.text.encode("utf-8")
    assert buffer.document.dirty is False


def test_save_failure_reports_io_error(tmp_path: Path) -> None:
    buffer = make_buffer("keep me")
    buffer.add_text("!")

    outcome = buffer.save_to_file(tmp_path / "missing" / "out.txt")

    assert outcome.error is ErrorKind.IO_FAILURE
    assert buffer.text == "keep me!"
    assert buffer.history.undo_slot == "keep me"
    assert buffer.document.dirty is True


def test_save_to_directory_fails(tmp_path: Path) -> None:
    outcome = make_buffer("x").save_to_file(tmp_path)

    assert outcome.error is ErrorKind.IO_FAILURE


def test_save_to_path_with_null_byte_fails(tmp_path: Path) -> None:
    buffer = make_buffer("abc")

    outcome = buffer.save_to_file(str(tmp_path / "a\x00b.txt"))

    assert outcome.error is ErrorKind.IO_FAILURE
    assert buffer.text == "abc"
    assert list(tmp_path.iterdir()) == []


def test_save_unencodable_content_keeps_existing_file(tmp_path: Path) -> None:
    buffer = make_buffer("bad \udcff")
    target = tmp_path / "out.txt"
    target.write_text("previous contents", encoding="utf-8")

    outcome = buffer.save_to_file(target)

    assert outcome.error is ErrorKind.IO_FAILURE
    assert target.read_text(encoding="utf-8") == "previous contents"
    assert buffer.text == "bad \udcff"


def test_mirror_tracks_version_and_flags() -> None:
    buffer = TextBuffer()
    buffer.add_text("abc")
    buffer.copy_text(0, 2)

    mirror = buffer.mirror()

    assert mirror.text == "abc"
    assert mirror.version == 1
    assert mirror.dirty is True
    assert mirror.clipboard == "ab"
    assert mirror.can_undo is True
    assert mirror.can_redo is False


def test_buffers_are_independent() -> None:
    first = TextBuffer()
    second = TextBuffer()

    first.add_text("one")
    first.copy_text(0, 3)

    assert second.text == ""
    assert second.clipboard.peek() == ""
    assert second.can_undo is False
