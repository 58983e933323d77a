"""File operation engine: copy/cut/paste/delete/rename/undo.

Every operation acts on the entry under the cursor and is a no-op when the
listing is empty. Filesystem failures are logged and absorbed; the undo
ledger is only pushed after the filesystem call has succeeded, so it never
references a path the engine did not create or move.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

from ..errors import classify_os_error
from ..file_model import Entry
from .clipboard import ClipOperation, Clipboard
from .fs_ops import copy_destination, copy_path, move_path, numbered_destination, path_exists, remove_path
from .trash import TrashStore
from .undo import (
    CopyAction,
    CutAction,
    DeleteAction,
    MoveAction,
    RenameAction,
    UndoAction,
    UndoLedger,
)

if TYPE_CHECKING:
    from ..runtime.state import AppState

logger = logging.getLogger(__name__)


def _same_directory(left: Path, right: Path) -> bool:
    """Compare directories by identity, falling back to path equality."""
    try:
        return os.path.samefile(left, right)
    except OSError:
        return Path(left) == Path(right)


def is_valid_new_name(name: str) -> bool:
    """Reject empty names, ``.``/``..`` and anything containing a separator."""
    if not name or name in {".", ".."}:
        return False
    if os.sep in name or (os.altsep is not None and os.altsep in name):
        return False
    return "\x00" not in name


class FileOperationEngine:
    """Execute file operations against the session state.

    ``reload`` refreshes the directory snapshot; it accepts an optional
    ``preferred_name`` to reposition the cursor after the refresh.
    """

    def __init__(
        self,
        state: AppState,
        reload: Callable[..., None],
        clipboard: Clipboard | None = None,
        ledger: UndoLedger | None = None,
        trash: TrashStore | None = None,
    ) -> None:
        self.state = state
        self.reload = reload
        self.clipboard = clipboard if clipboard is not None else Clipboard()
        self.ledger = ledger if ledger is not None else UndoLedger()
        self.trash = trash if trash is not None else TrashStore()

    def _log_failure(self, action: str, path: Path, exc: OSError) -> None:
        error = classify_os_error(exc)
        logger.info("%s failed for %s: %s: %s", action, path, type(error).__name__, error)

    def copy_mark(self) -> bool:
        """Remember the current entry for a later copy-paste."""
        entry = self.state.current_entry()
        if entry is None:
            return False
        self.clipboard.set_copy(entry)
        return True

    def cut_mark(self) -> bool:
        """Remember the current entry for a later move and hide it from the listing.

        The file itself is untouched until paste. A ``CutAction`` is recorded so
        that undo can bring the entry back into view.
        """
        entry = self.state.current_entry()
        if entry is None:
            return False
        self.clipboard.set_cut(entry)
        self.ledger.push(CutAction(origin=entry.path, entry=entry))
        cursor = self.state.cursor
        self.state.entries = self.state.entries[:cursor] + self.state.entries[cursor + 1 :]
        self.state.clamp_cursor()
        return True

    def paste(self) -> bool:
        """Materialize the clipboard in the current directory."""
        entry = self.clipboard.entry
        if entry is None:
            return False
        if self.clipboard.operation is ClipOperation.CUT:
            return self._paste_cut(entry)
        return self._paste_copy(entry)

    def _paste_cut(self, entry: Entry) -> bool:
        current = self.state.current_path
        if _same_directory(entry.path.parent, current):
            # Pasting where it was cut from just cancels the visual cut.
            self.clipboard.clear()
            self.reload()
            return True

        destination = numbered_destination(current, entry.name)
        try:
            move_path(entry.path, destination)
        except OSError as exc:
            self._log_failure("move", entry.path, exc)
            return True
        finally:
            self.clipboard.clear()

        self.ledger.push(MoveAction(origin=entry.path, destination=destination, entry=entry))
        logger.debug("moved %s -> %s", entry.path, destination)
        self.reload(preferred_name=destination.name)
        return True

    def _paste_copy(self, entry: Entry) -> bool:
        destination = copy_destination(self.state.current_path, entry.name)
        try:
            copy_path(entry.path, destination)
        except OSError as exc:
            self._log_failure("copy", entry.path, exc)
            return False

        self.ledger.push(CopyAction(destination=destination, entry=entry))
        logger.debug("copied %s -> %s", entry.path, destination)
        self.reload(preferred_name=destination.name)
        return True

    def delete(self) -> bool:
        """Move the current entry into the session trash."""
        entry = self.state.current_entry()
        if entry is None:
            return False
        try:
            trash_path = self.trash.destination_for(entry.name)
            move_path(entry.path, trash_path)
        except OSError as exc:
            self._log_failure("delete", entry.path, exc)
            return False

        self.ledger.push(DeleteAction(origin=entry.path, trash_path=trash_path, entry=entry))
        logger.debug("trashed %s -> %s", entry.path, trash_path)
        self.reload()
        return True

    def rename(self, new_name: str) -> bool:
        """Rename the current entry in place and keep the cursor on it."""
        entry = self.state.current_entry()
        if entry is None or new_name == entry.name or not is_valid_new_name(new_name):
            return False

        new_path = self.state.current_path / new_name
        if path_exists(new_path) and not _is_same_file(entry.path, new_path):
            logger.info("rename refused, %s already exists", new_path)
            return False
        try:
            os.rename(entry.path, new_path)
        except OSError as exc:
            self._log_failure("rename", entry.path, exc)
            return False

        self.ledger.push(RenameAction(origin=entry.path, destination=new_path, entry=entry))
        self.reload(preferred_name=new_name)
        return True

    def undo(self) -> bool:
        """Reverse the most recent action.

        Failed reversals of delete/move/rename put the record back on the
        ledger so the undo can be retried. Removing a pasted copy is best
        effort and is not retried.
        """
        action = self.ledger.pop()
        if action is None:
            return False

        if isinstance(action, CutAction):
            self.clipboard.clear()
            self.reload(preferred_name=action.entry.name)
            return True

        if isinstance(action, CopyAction):
            try:
                remove_path(action.destination)
            except OSError as exc:
                self._log_failure("undo copy", action.destination, exc)
            self.reload()
            return True

        source, target = _reversal_paths(action)
        try:
            move_path(source, target)
        except OSError as exc:
            self.ledger.push(action)
            self._log_failure("undo", source, exc)
            return False

        logger.debug("restored %s -> %s", source, target)
        preferred = target.name if _same_directory(target.parent, self.state.current_path) else None
        self.reload(preferred_name=preferred)
        return True

    def teardown(self) -> None:
        """Release session resources (the trash directory)."""
        self.trash.purge()


def _is_same_file(left: Path, right: Path) -> bool:
    try:
        return os.path.samefile(left, right)
    except OSError:
        return False


def _reversal_paths(action: UndoAction) -> tuple[Path, Path]:
    """Return ``(current location, original location)`` for movable records."""
    if isinstance(action, DeleteAction):
        return action.trash_path, action.origin
    if isinstance(action, (MoveAction, RenameAction)):
        return action.destination, action.origin
    raise TypeError(f"action is not reversible by move: {action!r}")


__all__ = ["FileOperationEngine", "is_valid_new_name"]
