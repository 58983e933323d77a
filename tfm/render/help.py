"""Which-key panel content per input mode.

Presentation-only and side-effect free.
"""

from __future__ import annotations

from ..input.modes import Mode
from .ansi import fit_ansi_line
from .theme import UITheme

WHICH_KEY_SHORTCUTS: dict[Mode, tuple[tuple[str, str], ...]] = {
    Mode.NORMAL: (
        ("dd", "cut file"),
        ("dD or DD", "delete file"),
        ("yy", "copy file"),
        ("pp", "paste file"),
        ("u", "undo"),
        ("a", "rename file"),
        ("/", "search"),
        ("z", "jump to directory"),
        ("gg", "go to first"),
        ("G", "go to last"),
        ("S", "open terminal"),
        (".", "show/hide hidden files"),
        ("?", "show/hide shortcuts"),
        ("q", "quit"),
        ("l, enter", "open file"),
    ),
    Mode.SEARCH: (
        ("enter", "confirm search"),
        ("esc", "cancel search"),
    ),
    Mode.RENAME: (
        ("enter", "confirm rename"),
        ("esc", "cancel rename"),
    ),
    Mode.JUMP: (
        ("enter", "navigate to directory"),
        ("esc", "cancel navigation"),
    ),
}

KEY_COLUMN_WIDTH = 10
DESCRIPTION_COLUMN_WIDTH = 24


def which_key_lines(mode: Mode, theme: UITheme, width: int) -> list[str]:
    """Return full-width panel rows listing shortcuts for ``mode``."""
    rows: list[str] = []
    for keys, description in WHICH_KEY_SHORTCUTS[mode]:
        key_cell = f"{theme.which_key_key}{keys.ljust(KEY_COLUMN_WIDTH)}{theme.reset}"
        description_cell = f"{theme.which_key_panel}{description.ljust(DESCRIPTION_COLUMN_WIDTH)}"
        rows.append(fit_ansi_line(f"{theme.which_key_panel}  {key_cell}{description_cell}", width))
    return rows


__all__ = ["WHICH_KEY_SHORTCUTS", "which_key_lines"]
