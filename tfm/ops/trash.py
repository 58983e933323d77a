"""Session-scoped trash directory used instead of permanent deletion.

The directory is created on first use and removed when the session ends
cleanly. An abrupt exit leaves it behind in the temp area.
"""

from __future__ import annotations

import logging
import shutil
import tempfile
from pathlib import Path

from .fs_ops import numbered_destination

logger = logging.getLogger(__name__)

TRASH_PREFIX = "tfm_trash_"


class TrashStore:
    """Lazily created temporary holding area for deleted entries."""

    def __init__(self, parent: Path | None = None, prefix: str = TRASH_PREFIX) -> None:
        self._parent = parent
        self._prefix = prefix
        self._path: Path | None = None

    @property
    def path(self) -> Path | None:
        """Return trash directory, or ``None`` before the first delete."""
        return self._path

    def ensure(self) -> Path:
        """Create the trash directory on first call; raises ``OSError`` on failure."""
        if self._path is None:
            self._path = Path(tempfile.mkdtemp(prefix=self._prefix, dir=self._parent))
            logger.debug("created trash directory %s", self._path)
        return self._path

    def destination_for(self, name: str) -> Path:
        """Return a collision-free path for ``name`` inside the trash."""
        return numbered_destination(self.ensure(), name)

    def purge(self) -> None:
        """Recursively remove the trash directory; a second call is a no-op."""
        trash_dir = self._path
        if trash_dir is None:
            return
        self._path = None
        shutil.rmtree(trash_dir, ignore_errors=True)
        logger.debug("purged trash directory %s", trash_dir)


__all__ = ["TRASH_PREFIX", "TrashStore"]
