"""Command line entry point: ``console-editor`` / ``python -m console_editor``."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from console_editor.runtime import telemetry
from console_editor.shell import MenuSession, run_console


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="console-editor",
        description="Menu-driven in-memory text editor.",
    )
    parser.add_argument(
        "--tui",
        action="store_true",
        help="Run the Textual interface instead of the plain console menu",
    )
    parser.add_argument(
        "--log-preset",
        choices=telemetry.PRESETS,
        default=None,
        help="Telemetry preset (default: configured from CONSOLE_EDITOR_* env vars)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)

    session = MenuSession.create()
    if args.tui:
        from console_editor.adapters.textual.app import run_app

        return run_app(session)
    return run_console(session)


if __name__ == "__main__":  # pragma: no cover - manual entry point
    raise SystemExit(main())
