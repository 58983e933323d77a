"""Directory snapshot model: immutable entries plus the listing provider."""

from __future__ import annotations

from .fs import index_of_name, is_probably_binary, read_directory
from .types import Entry

__all__ = [
    "Entry",
    "read_directory",
    "index_of_name",
    "is_probably_binary",
]
