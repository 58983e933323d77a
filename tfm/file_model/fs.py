"""Filesystem scanning for directory snapshots."""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from pathlib import Path

from .types import Entry

logger = logging.getLogger(__name__)


def _entry_sort_key(entry: Entry) -> tuple[bool, str]:
    """Directories first, then code-point order of the name."""
    return (not entry.is_dir, entry.name)


def read_directory(directory: Path, show_hidden: bool = False) -> list[Entry]:
    """Return sorted visible children of ``directory``.

    Dot-prefixed names are skipped unless ``show_hidden`` is set. Symlinks to
    directories are listed as directories. An unreadable directory yields an
    empty snapshot instead of raising.
    """
    entries: list[Entry] = []
    try:
        with os.scandir(directory) as it:
            for child in it:
                name = child.name
                if not show_hidden and name.startswith("."):
                    continue
                try:
                    is_dir = child.is_dir()
                except OSError:
                    is_dir = False
                entries.append(Entry(name=name, path=Path(directory) / name, is_dir=is_dir))
    except OSError as exc:
        logger.debug("cannot list %s: %s", directory, exc)
        return []

    entries.sort(key=_entry_sort_key)
    return entries


def index_of_name(entries: Sequence[Entry], name: str) -> int | None:
    """Return index of the entry called ``name`` or ``None``."""
    for idx, entry in enumerate(entries):
        if entry.name == name:
            return idx
    return None


def is_probably_binary(data: bytes) -> bool:
    """Treat any NUL byte as a binary-content marker."""
    return b"\x00" in data


__all__ = [
    "read_directory",
    "index_of_name",
    "is_probably_binary",
]
