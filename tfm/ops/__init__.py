"""Clipboard, undo ledger, trash store and the file operation engine."""

from __future__ import annotations

from .clipboard import ClipboardState, ClipOperation, Clipboard
from .engine import FileOperationEngine, is_valid_new_name
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

__all__ = [
    "Clipboard",
    "ClipboardState",
    "ClipOperation",
    "FileOperationEngine",
    "is_valid_new_name",
    "TrashStore",
    "UndoLedger",
    "UndoAction",
    "CutAction",
    "DeleteAction",
    "MoveAction",
    "CopyAction",
    "RenameAction",
]
