"""Domain datatype for one directory listing row."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Entry:
    """One visible child of a directory snapshot.

    Entries are regenerated wholesale on every directory read; nothing holds on
    to an ``Entry`` across navigations except the clipboard and undo records,
    which keep it as an immutable snapshot of what was acted on.
    """

    name: str
    path: Path
    is_dir: bool


__all__ = ["Entry"]
