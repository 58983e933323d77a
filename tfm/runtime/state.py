"""Mutable session state and the read-only view handed to the renderer."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..file_model import Entry
from ..input.modes import Mode, ModeState
from ..ops.clipboard import ClipboardState


@dataclass(frozen=True)
class ViewSnapshot:
    """Everything the presentation layer may read after an event."""

    current_path: Path
    entries: tuple[Entry, ...]
    cursor: int
    mode: Mode
    active_buffer: str
    clipboard: ClipboardState
    which_key_visible: bool
    show_hidden: bool = False
    undo_depth: int = 0
    status_message: str = ""

    def current_entry(self) -> Entry | None:
        if 0 <= self.cursor < len(self.entries):
            return self.entries[self.cursor]
        return None


@dataclass
class AppState:
    current_path: Path
    entries: list[Entry] = field(default_factory=list)
    cursor: int = 0
    mode_state: ModeState = field(default_factory=ModeState)
    show_hidden: bool = False
    show_which_key: bool = False
    dirty: bool = True
    status_message: str = ""

    def current_entry(self) -> Entry | None:
        """Return entry under the cursor, or ``None`` for empty/invalid cursor."""
        if 0 <= self.cursor < len(self.entries):
            return self.entries[self.cursor]
        return None

    def clamp_cursor(self) -> None:
        """Keep cursor inside ``[0, len(entries) - 1]`` (``0`` when empty)."""
        if not self.entries:
            self.cursor = 0
            return
        self.cursor = max(0, min(self.cursor, len(self.entries) - 1))

    def view(self, clipboard: ClipboardState, undo_depth: int = 0) -> ViewSnapshot:
        return ViewSnapshot(
            current_path=self.current_path,
            entries=tuple(self.entries),
            cursor=self.cursor,
            mode=self.mode_state.mode,
            active_buffer=self.mode_state.buffer,
            clipboard=clipboard,
            which_key_visible=self.show_which_key,
            show_hidden=self.show_hidden,
            undo_depth=undo_depth,
            status_message=self.status_message,
        )
