"""Preview column content for the entry under the cursor.

Directories list their first children; text files are highlighted with
Pygments (Markdown included) and cut to the available height; files with NUL
bytes are reported as binary.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from ..file_model import Entry, is_probably_binary, read_directory
from .ansi import sanitize_terminal_text
from .theme import UITheme

logger = logging.getLogger(__name__)

PREVIEW_ENTRY_LIMIT = 10
MAX_PREVIEW_BYTES = 256 * 1024
FALLBACK_STYLE = "monokai"
EMPTY_DIR_MESSAGE = "Empty directory"
NO_SELECTION_MESSAGE = "No item selected"
READ_ERROR_MESSAGE = "Error reading file"
BINARY_MESSAGE = "[Binary file]"
TRUNCATION_MARKER = "..."

_FORMATTERS: dict[str, Terminal256Formatter] = {}


def _formatter_for_style(style: str) -> Terminal256Formatter:
    """Return cached formatter for ``style``, falling back to the default style."""
    formatter = _FORMATTERS.get(style)
    if formatter is not None:
        return formatter
    try:
        get_style_by_name(style)
        resolved = style
    except ClassNotFound:
        logger.debug("unknown pygments style %r, using %s", style, FALLBACK_STYLE)
        resolved = FALLBACK_STYLE
    formatter = Terminal256Formatter(style=resolved)
    _FORMATTERS[style] = formatter
    return formatter


def highlight_source(source: str, filename: str, style: str = FALLBACK_STYLE) -> str:
    """Return ANSI-highlighted ``source`` using the lexer matching ``filename``."""
    try:
        lexer = get_lexer_for_filename(filename, source)
    except ClassNotFound:
        lexer = TextLexer()
    return highlight(source, lexer, _formatter_for_style(style))


def decode_preview_bytes(data: bytes) -> str:
    """Decode preview bytes tolerantly (UTF-8, UTF-8 with BOM, then latin-1)."""
    for encoding in ("utf-8", "utf-8-sig"):
        try:
            return data.decode(encoding)
        except UnicodeDecodeError:
            continue
    # latin-1 maps every byte, so this cannot fail.
    return data.decode("latin-1")


def _limit_rows(lines: list[str], max_rows: int) -> list[str]:
    if max_rows <= 0:
        return []
    if len(lines) > max_rows:
        return lines[: max(0, max_rows - 1)] + [TRUNCATION_MARKER]
    return lines


def render_directory_preview(
    path: Path,
    theme: UITheme,
    show_hidden: bool = False,
    list_directory: Callable[[Path, bool], list[Entry]] = read_directory,
) -> list[str]:
    entries = list_directory(path, show_hidden)
    if not entries:
        return [EMPTY_DIR_MESSAGE]
    lines: list[str] = []
    for entry in entries[:PREVIEW_ENTRY_LIMIT]:
        if entry.is_dir:
            lines.append(f"{theme.directory}{entry.name}/{theme.reset}")
        else:
            lines.append(entry.name)
    if len(entries) > PREVIEW_ENTRY_LIMIT:
        lines.append(TRUNCATION_MARKER)
    return lines


def render_file_preview(
    path: Path,
    max_rows: int,
    style: str = FALLBACK_STYLE,
    no_color: bool = False,
) -> list[str]:
    try:
        with path.open("rb") as handle:
            data = handle.read(MAX_PREVIEW_BYTES)
    except OSError as exc:
        logger.debug("cannot read preview for %s: %s", path, exc)
        return [READ_ERROR_MESSAGE]

    if not data or is_probably_binary(data):
        return [BINARY_MESSAGE] if data else []

    source = sanitize_terminal_text(decode_preview_bytes(data))
    # Highlight only what can be shown.
    source_lines = source.splitlines()[: max(1, max_rows) + 1]
    visible_source = "\n".join(source_lines)
    if not no_color:
        visible_source = highlight_source(visible_source, path.name, style)
    return _limit_rows(visible_source.rstrip("\n").split("\n"), max_rows)


def render_entry_preview(
    entry: Entry | None,
    has_entries: bool,
    max_rows: int,
    theme: UITheme,
    *,
    style: str = FALLBACK_STYLE,
    no_color: bool = False,
    show_hidden: bool = False,
    list_directory: Callable[[Path, bool], list[Entry]] = read_directory,
) -> list[str]:
    """Return preview lines for ``entry`` clipped to ``max_rows``."""
    if not has_entries:
        return [EMPTY_DIR_MESSAGE]
    if entry is None:
        return [NO_SELECTION_MESSAGE]
    if entry.is_dir:
        return _limit_rows(
            render_directory_preview(entry.path, theme, show_hidden, list_directory),
            max_rows,
        )
    return render_file_preview(entry.path, max_rows, style=style, no_color=no_color)


__all__ = [
    "PREVIEW_ENTRY_LIMIT",
    "EMPTY_DIR_MESSAGE",
    "NO_SELECTION_MESSAGE",
    "READ_ERROR_MESSAGE",
    "BINARY_MESSAGE",
    "highlight_source",
    "decode_preview_bytes",
    "render_directory_preview",
    "render_file_preview",
    "render_entry_preview",
]
