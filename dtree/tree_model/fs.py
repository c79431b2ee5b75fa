"""Directory listing, entry typing, ordering and visibility rules."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable

from .types import DirectoryEntry

logger = logging.getLogger(__name__)


def entry_kind(child: os.DirEntry[str]) -> tuple[bool, bool] | None:
    """Return ``(is_dir, is_file)`` for ``child`` without following symlinks.

    Returns ``None`` when the type cannot be determined; the failure is logged
    and the caller is expected to drop the entry.
    """
    try:
        return child.is_dir(follow_symlinks=False), child.is_file(follow_symlinks=False)
    except OSError as exc:
        logger.warning("Skipping %s: cannot determine entry type: %s", child.path, describe_os_error(exc))
        return None


def describe_os_error(exc: OSError) -> str:
    """Return the OS message for ``exc`` without the errno/filename decoration."""
    if exc.strerror:
        return exc.strerror
    return str(exc)


def entry_sort_key(entry: DirectoryEntry) -> tuple[bool, bytes]:
    """Directories first, then raw filename bytes (no locale collation)."""
    return (not entry.is_dir, os.fsencode(entry.name))


def list_directory_entries(directory: str | os.PathLike[str]) -> tuple[list[DirectoryEntry], OSError | None]:
    """List and sort the immediate children of ``directory``.

    Returns ``(entries, scan_error)``. ``scan_error`` is set, and ``entries``
    is empty, when the directory cannot be opened or read.
    """
    entries: list[DirectoryEntry] = []
    try:
        with os.scandir(directory) as children:
            for child in children:
                kind = entry_kind(child)
                if kind is None:
                    continue
                is_dir, is_file = kind
                entries.append(DirectoryEntry(name=child.name, path=child.path, is_dir=is_dir, is_file=is_file))
    except OSError as exc:
        return [], exc

    entries.sort(key=entry_sort_key)
    logger.debug("Listed %d entries in %s", len(entries), os.fspath(directory))
    return entries, None


def is_visible(entry: DirectoryEntry, show_files: bool) -> bool:
    """Directories always; regular files only when ``show_files`` is set."""
    return entry.is_dir or (show_files and entry.is_file)


def visible_entries(entries: Iterable[DirectoryEntry], show_files: bool) -> list[DirectoryEntry]:
    """Filter ``entries`` down to the rows that are drawn, keeping order."""
    return [entry for entry in entries if is_visible(entry, show_files)]


__all__ = [
    "describe_os_error",
    "entry_kind",
    "entry_sort_key",
    "is_visible",
    "list_directory_entries",
    "visible_entries",
]
