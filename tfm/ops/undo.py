"""Undo records and the ledger (stack) that holds them.

Each record kind carries only the paths that its reversal needs:

- ``CutAction``: visual removal of a cut entry; undo only clears the clipboard.
- ``DeleteAction``: entry moved into the trash store; undo moves it back.
- ``MoveAction``: cut entry pasted elsewhere; undo moves it back.
- ``CopyAction``: new path created by a paste; undo removes it.
- ``RenameAction``: in-place rename; undo renames back.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..file_model import Entry


@dataclass(frozen=True)
class CutAction:
    origin: Path
    entry: Entry


@dataclass(frozen=True)
class DeleteAction:
    origin: Path
    trash_path: Path
    entry: Entry


@dataclass(frozen=True)
class MoveAction:
    origin: Path
    destination: Path
    entry: Entry


@dataclass(frozen=True)
class CopyAction:
    destination: Path
    entry: Entry


@dataclass(frozen=True)
class RenameAction:
    origin: Path
    destination: Path
    entry: Entry


UndoAction = CutAction | DeleteAction | MoveAction | CopyAction | RenameAction


class UndoLedger:
    """Append-only stack of reversible actions, consumed from the top."""

    def __init__(self) -> None:
        self._actions: list[UndoAction] = []

    def __len__(self) -> int:
        return len(self._actions)

    def __bool__(self) -> bool:
        return bool(self._actions)

    def push(self, action: UndoAction) -> None:
        self._actions.append(action)

    def pop(self) -> UndoAction | None:
        """Remove and return the most recent action, or ``None`` when empty."""
        if not self._actions:
            return None
        return self._actions.pop()

    def peek(self) -> UndoAction | None:
        return self._actions[-1] if self._actions else None

    def actions(self) -> tuple[UndoAction, ...]:
        """Return recorded actions oldest first."""
        return tuple(self._actions)


__all__ = [
    "CutAction",
    "DeleteAction",
    "MoveAction",
    "CopyAction",
    "RenameAction",
    "UndoAction",
    "UndoLedger",
]
