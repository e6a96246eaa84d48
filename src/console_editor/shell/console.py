"""Line-oriented console frontend for :class:`MenuSession`."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, TextIO

from .session import MenuSession


def _strip_newline(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def _write_lines(stream: TextIO, lines: Iterable[str]) -> None:
    for line in lines:
        stream.write(f"{line}\n")


def run_console(
    session: Optional[MenuSession] = None,
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """Drive ``session`` from ``stdin`` until Exit is chosen or input runs out."""

    session = session or MenuSession.create()
    reader = stdin or sys.stdin
    writer = stdout or sys.stdout

    while not session.finished:
        if session.awaiting_choice:
            _write_lines(writer, session.render_menu())
        writer.write(session.prompt)
        writer.flush()

        raw = reader.readline()
        if raw == "":
            writer.write("\n")
            break
        result = session.submit(_strip_newline(raw))
        _write_lines(writer, result.lines)

    writer.flush()
    return 0


__all__ = ["run_console"]
