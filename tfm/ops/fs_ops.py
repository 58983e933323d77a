"""Filesystem primitives used by file operations.

These helpers raise ``OSError`` on failure and never overwrite an existing
destination; callers decide how to absorb the failure.
"""

from __future__ import annotations

import errno
import logging
import os
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


def path_exists(path: Path) -> bool:
    """Return whether ``path`` exists, counting dangling symlinks."""
    return os.path.lexists(path)


def split_name(name: str) -> tuple[str, str]:
    """Split ``name`` into stem and extension (``.bashrc`` has no extension)."""
    stem, ext = os.path.splitext(name)
    return stem, ext


def numbered_destination(directory: Path, name: str) -> Path:
    """Return ``directory/name`` or the first free ``stem_N.ext`` variant."""
    candidate = directory / name
    if not path_exists(candidate):
        return candidate
    stem, ext = split_name(name)
    counter = 1
    while True:
        candidate = directory / f"{stem}_{counter}{ext}"
        if not path_exists(candidate):
            return candidate
        counter += 1


def copy_destination(directory: Path, name: str) -> Path:
    """Return a free paste target, trying ``stem_copy.ext`` then ``stem_copy_N.ext``."""
    candidate = directory / name
    if not path_exists(candidate):
        return candidate
    stem, ext = split_name(name)
    candidate = directory / f"{stem}_copy{ext}"
    counter = 2
    while path_exists(candidate):
        candidate = directory / f"{stem}_copy_{counter}{ext}"
        counter += 1
    return candidate


def _is_within(path: Path, ancestor: Path) -> bool:
    try:
        path.resolve().relative_to(ancestor.resolve())
    except ValueError:
        return False
    return True


def remove_path(path: Path) -> None:
    """Remove a file, symlink, or whole directory tree."""
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()


def copy_path(source: Path, destination: Path) -> None:
    """Copy a file or a directory tree to ``destination``.

    Directories are copied entry by entry and keep their permission bits.
    Symlinks inside a copied tree are recreated as symlinks. Any partially
    written destination is removed before the error propagates.
    """
    if path_exists(destination):
        raise FileExistsError(errno.EEXIST, "destination exists", str(destination))
    if not path_exists(source):
        raise FileNotFoundError(errno.ENOENT, "source missing", str(source))
    if source.is_dir() and _is_within(destination.parent, source):
        raise OSError(errno.EINVAL, "cannot copy a directory into itself", str(destination))

    try:
        if source.is_dir():
            shutil.copytree(source, destination, symlinks=True)
        else:
            shutil.copy2(source, destination)
    except OSError:
        if path_exists(destination):
            try:
                remove_path(destination)
            except OSError as cleanup_exc:
                logger.warning("could not clean partial copy %s: %s", destination, cleanup_exc)
        raise


def _restore_missing(copy: Path, original: Path) -> None:
    """Copy back every entry of ``copy`` that no longer exists under ``original``."""
    if copy.is_symlink() or not copy.is_dir():
        if not path_exists(original):
            shutil.copy2(copy, original, follow_symlinks=False)
        return
    for dirpath, dirnames, filenames in os.walk(copy):
        current = Path(dirpath)
        target_dir = original / current.relative_to(copy)
        target_dir.mkdir(parents=True, exist_ok=True)
        linked_dirs = [name for name in dirnames if (current / name).is_symlink()]
        for name in [*filenames, *linked_dirs]:
            target = target_dir / name
            if not path_exists(target):
                shutil.copy2(current / name, target, follow_symlinks=False)


def _move_across_devices(source: Path, destination: Path) -> None:
    """Copy ``source`` to ``destination`` and then remove ``source``.

    If removing the source fails partway, whatever was already removed is
    copied back from the complete destination and the destination is dropped,
    so the failed move leaves ``source`` whole.
    """
    if source.is_symlink():
        os.symlink(os.readlink(source), destination)
    else:
        copy_path(source, destination)

    try:
        remove_path(source)
    except OSError:
        try:
            _restore_missing(destination, source)
        except OSError as restore_exc:
            logger.error(
                "move of %s failed midway; complete copy left at %s: %s", source, destination, restore_exc
            )
            raise
        try:
            remove_path(destination)
        except OSError as cleanup_exc:
            logger.warning("could not drop copy %s after failed move: %s", destination, cleanup_exc)
        raise


def move_path(source: Path, destination: Path) -> None:
    """Move ``source`` to ``destination``; never overwrites and never half-moves.

    A plain rename is used when both paths share a filesystem. Across devices
    the entry is copied and then removed, with the source restored from the
    copy if the removal fails.
    """
    if path_exists(destination):
        raise FileExistsError(errno.EEXIST, "destination exists", str(destination))
    if not path_exists(source):
        raise FileNotFoundError(errno.ENOENT, "source missing", str(source))
    try:
        os.rename(source, destination)
        return
    except OSError as exc:
        if exc.errno != errno.EXDEV:
            raise
    logger.debug("cross-device move %s -> %s", source, destination)
    _move_across_devices(source, destination)


__all__ = [
    "path_exists",
    "split_name",
    "numbered_destination",
    "copy_destination",
    "remove_path",
    "copy_path",
    "move_path",
]
