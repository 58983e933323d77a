"""Command-line front door for tfm.

Parses CLI options, validates the start directory, and configures logging.
Then dispatches into the interactive browser runtime.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from .file_model import read_directory
from .render.theme import available_theme_names
from .runtime import run_browser

LOG_FILE_ENV = "TFM_LOG_FILE"
LOG_LEVEL_ENV = "TFM_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(log_file: str | None) -> None:
    """Send ``tfm`` logs to ``log_file`` when given; stay silent otherwise.

    The terminal belongs to the TUI, so nothing is ever logged to stderr.
    """
    package_logger = logging.getLogger("tfm")
    if not log_file:
        package_logger.addHandler(logging.NullHandler())
        return
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(os.environ.get(LOG_LEVEL_ENV, "INFO").upper())
    package_logger.propagate = False


def resolve_start_directory(raw_path: str | None, default_path: Path | None = None) -> Path:
    """Return absolute start directory or exit with a message."""
    if raw_path is None:
        path = default_path if default_path is not None else Path.cwd()
    else:
        path = Path(raw_path).expanduser()
    path = Path(os.path.abspath(path))
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if not path.is_dir():
        raise SystemExit(f"Not a directory: {path}")
    if not os.access(path, os.R_OK | os.X_OK):
        raise SystemExit(f"Cannot read directory: {path}")
    return path


def format_listing(path: Path, show_hidden: bool) -> str:
    """Render a plain directory snapshot, directories first with a trailing slash."""
    lines = [f"{entry.name}/" if entry.is_dir else entry.name for entry in read_directory(path, show_hidden)]
    return "".join(f"{line}\n" for line in lines)


def main(default_path: Path | None = None, argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch tfm on a directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    parser = argparse.ArgumentParser(
        prog="tfm",
        description="Browse directories in the terminal with copy/cut/paste, trash-backed delete and undo.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Start directory. Defaults to current directory.")
    parser.add_argument("--style", default=None, help="Pygments style name for file previews.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--show-hidden",
        action="store_true",
        default=None,
        help="List dot-files (overrides the saved preference).",
    )
    parser.add_argument("--list", action="store_true", help="Print the directory listing and exit.")
    parser.add_argument(
        "--log-file",
        default=os.environ.get(LOG_FILE_ENV),
        help=f"Write debug log to this file (default: ${LOG_FILE_ENV}).",
    )
    args = parser.parse_args(argv)

    configure_logging(args.log_file)
    path = resolve_start_directory(args.path, default_path)

    if args.list:
        sys.stdout.write(format_listing(path, bool(args.show_hidden)))
        return

    if not sys.stdin.isatty() or not sys.stdout.isatty():
        raise SystemExit("tfm needs an interactive terminal (use --list for plain output).")

    run_browser(path, args.style, args.no_color, args.theme, args.show_hidden)


if __name__ == "__main__":
    main()
