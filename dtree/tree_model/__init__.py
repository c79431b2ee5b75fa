"""Filesystem model for directory trees.

Non-UI primitives only:
- the ``DirectoryEntry`` datatype
- directory scanning with per-entry type lookup
- ordering and visibility rules shared by every renderer
"""

from __future__ import annotations

from .types import DirectoryEntry
from .fs import (
    describe_os_error,
    entry_kind,
    entry_sort_key,
    is_visible,
    list_directory_entries,
    visible_entries,
)

__all__ = [
    "DirectoryEntry",
    "describe_os_error",
    "entry_kind",
    "entry_sort_key",
    "is_visible",
    "list_directory_entries",
    "visible_entries",
]
