"""Status-line file information (permissions, owner, group, size, mtime)."""

from __future__ import annotations

import grp
import os
import pwd
import stat
import time
from pathlib import Path

STATUS_ERROR_MESSAGE = "Error getting file information"
MTIME_FORMAT = "%d %b %Y %H:%M"


def format_size(size: int) -> str:
    """Format a byte count as ``B``/``K``/``M``/``G`` with one decimal above bytes."""
    if size < 1024:
        return f"{size}B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f}K"
    if size < 1024 * 1024 * 1024:
        return f"{size / 1024 / 1024:.1f}M"
    return f"{size / 1024 / 1024 / 1024:.1f}G"


def _owner_name(uid: int) -> str:
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return str(uid)


def _group_name(gid: int) -> str:
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return str(gid)


def describe_path(path: Path) -> str:
    """Return ``mode  owner  group  size  mtime`` for ``path``."""
    try:
        info = path.stat()
    except OSError:
        return STATUS_ERROR_MESSAGE

    if stat.S_ISDIR(info.st_mode):
        try:
            size = f"{len(os.listdir(path))} items"
        except OSError:
            size = "? items"
    else:
        size = format_size(info.st_size)
    modified = time.strftime(MTIME_FORMAT, time.localtime(info.st_mtime))
    return "  ".join(
        (
            stat.filemode(info.st_mode),
            _owner_name(info.st_uid),
            _group_name(info.st_gid),
            size,
            modified,
        )
    )


__all__ = ["STATUS_ERROR_MESSAGE", "format_size", "describe_path"]
