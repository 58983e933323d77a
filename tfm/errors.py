"""Error taxonomy for file operations and external collaborators.

Operations translate raw ``OSError`` failures into these types internally and
absorb them at the operation boundary. Destination conflicts never surface as
errors; they are resolved by picking a free name.
"""

from __future__ import annotations

import errno


class TfmError(Exception):
    """Base class for all tfm failures."""


class NotFoundError(TfmError):
    """A path could not be stat'ed or read."""


class PermissionOrIOError(TfmError):
    """A move, copy, rename or removal was rejected by the system."""


class ExternalToolUnavailable(TfmError):
    """An external helper (opener, jump lookup, shell) is missing or failed."""


def classify_os_error(exc: OSError) -> TfmError:
    """Map ``exc`` onto the tfm taxonomy, keeping the original as ``__cause__``."""
    if isinstance(exc, FileNotFoundError) or exc.errno == errno.ENOENT:
        error: TfmError = NotFoundError(str(exc))
    else:
        error = PermissionOrIOError(str(exc))
    error.__cause__ = exc
    return error


__all__ = [
    "TfmError",
    "NotFoundError",
    "PermissionOrIOError",
    "ExternalToolUnavailable",
    "classify_os_error",
]
