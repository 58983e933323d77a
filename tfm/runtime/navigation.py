"""Directory navigation: cursor movement, descend/ascend, search and jump.

Collaborators (listing provider, default opener, jump lookup) are injected so
that navigation logic runs against temporary directories in tests.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from ..errors import ExternalToolUnavailable
from ..file_model import Entry, index_of_name, read_directory
from .external import DEFAULT_JUMP_COMMAND, lookup_directory, open_with_default_app
from .state import AppState

logger = logging.getLogger(__name__)


def find_first_match(entries: Sequence[Entry], query: str) -> int | None:
    """Return index of the first entry whose name contains ``query`` (case-insensitive)."""
    if not query:
        return None
    folded = query.casefold()
    for idx, entry in enumerate(entries):
        if folded in entry.name.casefold():
            return idx
    return None


class Navigator:
    """Apply navigation operations to ``state``; each returns ``True`` on change."""

    def __init__(
        self,
        state: AppState,
        *,
        list_directory: Callable[[Path, bool], list[Entry]] = read_directory,
        open_file: Callable[[Path], str | None] = open_with_default_app,
        lookup: Callable[[str, Sequence[str]], str] = lookup_directory,
        jump_command: Sequence[str] = DEFAULT_JUMP_COMMAND,
    ) -> None:
        self.state = state
        self._list_directory = list_directory
        self._open_file = open_file
        self._lookup = lookup
        self._jump_command = tuple(jump_command)

    def reload(self, preferred_name: str | None = None) -> None:
        """Re-read the current directory and keep the cursor in range.

        When ``preferred_name`` is listed the cursor moves onto it; otherwise the
        cursor index is kept and clamped.
        """
        state = self.state
        state.entries = self._list_directory(state.current_path, state.show_hidden)
        if preferred_name is not None:
            idx = index_of_name(state.entries, preferred_name)
            if idx is not None:
                state.cursor = idx
        state.clamp_cursor()
        state.dirty = True

    def _change_directory(self, path: Path, preferred_name: str | None = None) -> None:
        state = self.state
        state.current_path = path
        state.cursor = 0
        self.reload(preferred_name=preferred_name)

    def move(self, delta: int) -> bool:
        state = self.state
        if not state.entries:
            return False
        prev = state.cursor
        state.cursor = max(0, min(len(state.entries) - 1, state.cursor + delta))
        return state.cursor != prev

    def jump_first(self) -> bool:
        prev = self.state.cursor
        self.state.cursor = 0
        return self.state.cursor != prev

    def jump_last(self) -> bool:
        prev = self.state.cursor
        self.state.cursor = max(0, len(self.state.entries) - 1)
        return self.state.cursor != prev

    def descend(self) -> bool:
        """Enter the directory under the cursor or open a file externally."""
        entry = self.state.current_entry()
        if entry is None:
            return False
        if entry.is_dir:
            self._change_directory(entry.path)
            return True
        error = self._open_file(entry.path)
        if error is not None:
            logger.debug("open ignored for %s: %s", entry.path, error)
        return False

    def ascend(self) -> bool:
        """Go to the parent directory with the cursor on the directory just left."""
        current = self.state.current_path
        parent = current.parent
        if parent == current:
            return False
        self._change_directory(parent, preferred_name=current.name)
        return True

    def search(self, query: str) -> bool:
        idx = find_first_match(self.state.entries, query)
        if idx is None:
            return False
        prev = self.state.cursor
        self.state.cursor = idx
        return idx != prev

    def jump_to_query(self, query: str) -> bool:
        """Resolve ``query`` through the jump lookup tool and enter the result."""
        if not query.strip():
            return False
        try:
            answer = self._lookup(query, self._jump_command)
        except ExternalToolUnavailable as exc:
            logger.info("jump lookup unavailable: %s", exc)
            return False
        answer = answer.strip()
        if not answer:
            return False
        target = Path(answer).expanduser()
        if not target.is_absolute():
            target = self.state.current_path / target
        if not target.is_dir():
            logger.debug("jump target is not a directory: %s", target)
            return False
        self._change_directory(target)
        return True

    def toggle_hidden(self) -> bool:
        state = self.state
        current = state.current_entry()
        state.show_hidden = not state.show_hidden
        self.reload(preferred_name=current.name if current is not None else None)
        return True


__all__ = ["Navigator", "find_first_match"]
