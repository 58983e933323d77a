"""Rendering engine for the three-column browser view.

Composes full ANSI frames from a read-only ``ViewSnapshot``; nothing here
mutates session state. Theme and preview style are passed in at construction.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from ..file_model import Entry, read_directory
from ..input.modes import Mode
from ..ops.clipboard import ClipOperation
from ..runtime.state import ViewSnapshot
from .ansi import fit_ansi_line
from .help import which_key_lines
from .preview import EMPTY_DIR_MESSAGE, NO_SELECTION_MESSAGE, render_entry_preview
from .status import describe_path
from .theme import UITheme

PARENT_COLUMN_PERCENT = 20
CURRENT_COLUMN_PERCENT = 30
ROOT_LABEL = "System root"
EMPTY_DIR_HINT = "Use h to go back to parent directory"
PROMPT_CURSOR = "█"
PROMPT_LABELS: dict[Mode, str] = {
    Mode.SEARCH: "Search: ",
    Mode.RENAME: "Rename: ",
    Mode.JUMP: "z ",
}


def column_widths(width: int) -> tuple[int, int, int]:
    """Split ``width`` into parent/current/preview columns around two dividers."""
    usable = max(3, width - 2)
    left = max(1, usable * PARENT_COLUMN_PERCENT // 100)
    middle = max(1, usable * CURRENT_COLUMN_PERCENT // 100)
    right = max(1, usable - left - middle)
    return left, middle, right


def visible_window(cursor: int, total: int, rows: int) -> tuple[int, int]:
    """Return ``[start, end)`` of listing rows keeping the cursor near the middle."""
    rows = max(1, rows)
    start = max(0, cursor - rows // 2)
    start = min(start, max(0, total - rows))
    return start, min(total, start + rows)


def build_status_line(left_text: str, width: int, right_text: str = "") -> str:
    usable = max(1, width)
    if not right_text:
        return left_text[:usable].ljust(usable)
    if usable <= len(right_text):
        return right_text[-usable:]
    left_limit = max(0, usable - len(right_text) - 1)
    left = left_text[:left_limit]
    gap = " " * (usable - len(left) - len(right_text))
    return f"{left}{gap}{right_text}"


class ScreenRenderer:
    """Turn a ``ViewSnapshot`` into terminal rows."""

    def __init__(
        self,
        theme: UITheme,
        *,
        style: str = "monokai",
        no_color: bool = False,
        list_directory: Callable[[Path, bool], list[Entry]] = read_directory,
        describe: Callable[[Path], str] = describe_path,
    ) -> None:
        self.theme = theme
        self.style = style
        self.no_color = no_color
        self._list_directory = list_directory
        self._describe = describe

    def _entry_label(self, entry: Entry) -> str:
        if entry.is_dir:
            return f"{self.theme.directory}{entry.name}/{self.theme.reset}"
        return entry.name

    def _marked(self, label: str, selected: bool) -> str:
        if selected:
            return f"{self.theme.selected}> {label}{self.theme.reset}"
        return f"  {label}"

    def parent_column(self, view: ViewSnapshot, rows: int) -> list[str]:
        current = view.current_path
        parent = current.parent
        if parent == current:
            return [ROOT_LABEL]
        entries = self._list_directory(parent, view.show_hidden)
        selected_idx = next((idx for idx, entry in enumerate(entries) if entry.name == current.name), 0)
        start, end = visible_window(selected_idx, len(entries), rows)
        return [
            self._marked(self._entry_label(entry), entry.name == current.name)
            for entry in entries[start:end]
        ]

    def current_column(self, view: ViewSnapshot, rows: int) -> list[str]:
        if not view.entries:
            return [EMPTY_DIR_MESSAGE, "", f"{self.theme.empty_hint}{EMPTY_DIR_HINT}{self.theme.reset}"]
        start, end = visible_window(view.cursor, len(view.entries), rows)
        return [
            self._marked(self._entry_label(view.entries[idx]), idx == view.cursor)
            for idx in range(start, end)
        ]

    def preview_column(self, view: ViewSnapshot, rows: int) -> list[str]:
        return render_entry_preview(
            view.current_entry(),
            bool(view.entries),
            rows,
            self.theme,
            style=self.style,
            no_color=self.no_color,
            show_hidden=view.show_hidden,
            list_directory=self._list_directory,
        )

    def clipboard_label(self, view: ViewSnapshot) -> str:
        clip = view.clipboard
        if clip.entry is None or clip.operation is None:
            return ""
        verb = "cut" if clip.operation is ClipOperation.CUT else "copy"
        return f"[{verb}] {clip.entry.name}"

    def status_line(self, view: ViewSnapshot, width: int) -> str:
        entry = view.current_entry()
        if view.status_message:
            left = view.status_message
        elif entry is not None:
            left = self._describe(entry.path)
        else:
            left = NO_SELECTION_MESSAGE
        right_parts = [part for part in (self.clipboard_label(view), "? help") if part]
        text = build_status_line(f"  {left}", width, "  ".join(right_parts) + " ")
        return f"{self.theme.status_bar}{text}{self.theme.reset}"

    def prompt_line(self, view: ViewSnapshot, width: int) -> str:
        label = PROMPT_LABELS.get(view.mode)
        if label is None:
            return " " * max(0, width)
        text = f"  {label}{view.active_buffer}{PROMPT_CURSOR}"
        return f"{self.theme.prompt_bar}{fit_ansi_line(text, width)}{self.theme.reset}"

    def compose(self, view: ViewSnapshot, width: int, height: int) -> list[str]:
        """Return exactly ``height`` rows of at most ``width`` columns."""
        width = max(10, width)
        height = max(4, height)
        content_rows = height - 3
        left_w, mid_w, right_w = column_widths(width)
        divider = f"{self.theme.divider}│{self.theme.reset}"

        columns = (
            self.parent_column(view, content_rows),
            self.current_column(view, content_rows),
            self.preview_column(view, content_rows),
        )
        rows: list[str] = [
            fit_ansi_line(f"{self.theme.path_header}  {view.current_path}{self.theme.reset}", width)
        ]
        for row_idx in range(content_rows):
            cells = [
                fit_ansi_line(column[row_idx] if row_idx < len(column) else "", cell_width)
                for column, cell_width in zip(columns, (left_w, mid_w, right_w))
            ]
            rows.append(divider.join(cells))

        if view.which_key_visible:
            panel = which_key_lines(view.mode, self.theme, width)[:content_rows]
            first = 1 + content_rows - len(panel)
            rows[first : first + len(panel)] = panel

        rows.append(self.status_line(view, width))
        rows.append(self.prompt_line(view, width))
        return rows

    def render_frame(self, view: ViewSnapshot, width: int, height: int) -> str:
        """Return a full-screen frame string ready to write in raw mode."""
        return "\033[H\033[J" + "\r\n".join(self.compose(view, width, height))


__all__ = [
    "ScreenRenderer",
    "column_widths",
    "visible_window",
    "build_status_line",
]
