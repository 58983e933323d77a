"""Single-slot clipboard holding one entry plus its pending copy/cut intent."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..file_model import Entry


class ClipOperation(Enum):
    """Pending clipboard intent."""

    COPY = "copy"
    CUT = "cut"


@dataclass(frozen=True)
class ClipboardState:
    """Read-only view of the clipboard; both fields are set or both are ``None``."""

    entry: Entry | None = None
    operation: ClipOperation | None = None

    @property
    def is_empty(self) -> bool:
        return self.entry is None


class Clipboard:
    """Mutable clipboard that can only be populated with an entry and an intent together."""

    def __init__(self) -> None:
        self._state = ClipboardState()

    @property
    def entry(self) -> Entry | None:
        return self._state.entry

    @property
    def operation(self) -> ClipOperation | None:
        return self._state.operation

    @property
    def is_empty(self) -> bool:
        return self._state.is_empty

    def state(self) -> ClipboardState:
        return self._state

    def set_copy(self, entry: Entry) -> None:
        self._state = ClipboardState(entry=entry, operation=ClipOperation.COPY)

    def set_cut(self, entry: Entry) -> None:
        self._state = ClipboardState(entry=entry, operation=ClipOperation.CUT)

    def clear(self) -> None:
        self._state = ClipboardState()


__all__ = ["ClipOperation", "ClipboardState", "Clipboard"]
