"""Domain datatype for one entry observed while listing a directory."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DirectoryEntry:
    """One immediate child of a listed directory.

    ``path`` is the listed directory joined with ``name`` exactly as
    ``os.scandir`` reports it (``./sub`` stays ``./sub``). ``is_dir`` and
    ``is_file`` are looked up without following symlinks, so a symlink,
    socket, fifo or device has both flags ``False``.
    """

    name: str
    path: str
    is_dir: bool
    is_file: bool


__all__ = ["DirectoryEntry"]
