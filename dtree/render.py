"""Render a directory subtree as branch-decorated text rows.

Rows are produced depth-first: a directory's row is followed by all of its
descendants before its next sibling. Traversal keeps an explicit stack of
pending sibling iterators, so depth is bounded by the filesystem rather than
by the interpreter's recursion limit.
"""

from __future__ import annotations

import logging
import os
import re
import sys
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from .style import PLAIN_THEME, UNICODE_STYLE, TreeStyle, TreeTheme
from .tree_model import DirectoryEntry, describe_os_error, list_directory_entries, visible_entries

logger = logging.getLogger(__name__)

LineSink = Callable[[str], None]
ScanErrorHandler = Callable[[str, OSError], None]

_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f-\x9f]")


@dataclass(frozen=True)
class TreeLine:
    """One emitted row: ancestor prefix, branch glyph and the entry itself."""

    prefix: str
    branch: str
    entry: DirectoryEntry


def display_name(name: str) -> str:
    """Return ``name`` as safe, printable UTF-8 text.

    Undecodable bytes become U+FFFD and control characters are escaped as
    ``\\xNN`` so a filename cannot emit newlines or terminal sequences.
    """
    text = os.fsencode(name).decode("utf-8", errors="replace")
    if _CONTROL_RE.search(text) is None:
        return text
    return _CONTROL_RE.sub(lambda match: f"\\x{ord(match.group()):02x}", text)


def format_scan_error(directory: str, exc: OSError) -> str:
    """Format the error-stream line for a directory that could not be listed."""
    return f"Error reading directory {display_name(directory)}: {describe_os_error(exc)}"


def _log_scan_error(directory: str, exc: OSError) -> None:
    logger.warning(format_scan_error(directory, exc))


def _with_last_flag(entries: list[DirectoryEntry]) -> Iterator[tuple[DirectoryEntry, bool]]:
    total = len(entries)
    for idx, entry in enumerate(entries):
        yield entry, idx == total - 1


def iter_tree_lines(
    directory: str | os.PathLike[str],
    prefix: str = "",
    *,
    show_files: bool = False,
    style: TreeStyle = UNICODE_STYLE,
    on_error: ScanErrorHandler | None = None,
) -> Iterator[TreeLine]:
    """Yield the rows below ``directory`` in sorted, filtered, depth-first order.

    A directory that cannot be listed is passed to ``on_error`` (logged when
    omitted) and contributes no rows; the walk then continues with its
    remaining siblings. Symlinks are never followed.
    """
    report = on_error if on_error is not None else _log_scan_error

    def children_of(path: str) -> Iterator[tuple[DirectoryEntry, bool]]:
        entries, scan_error = list_directory_entries(path)
        if scan_error is not None:
            report(path, scan_error)
            return _with_last_flag([])
        return _with_last_flag(visible_entries(entries, show_files))

    pending: list[tuple[Iterator[tuple[DirectoryEntry, bool]], str]] = [
        (children_of(os.fspath(directory)), prefix)
    ]
    while pending:
        siblings, sibling_prefix = pending[-1]
        step = next(siblings, None)
        if step is None:
            pending.pop()
            continue
        entry, is_last = step
        yield TreeLine(prefix=sibling_prefix, branch=style.glyph(is_last), entry=entry)
        if entry.is_dir:
            pending.append((children_of(entry.path), sibling_prefix + style.child_indent(is_last)))


def _write_stdout_line(text: str) -> None:
    sys.stdout.write(text + "\n")


def _write_stderr_line(text: str) -> None:
    sys.stderr.write(text + "\n")


class TreeRenderer:
    """Write a directory tree to line sinks.

    ``out`` receives tree rows and ``err`` receives one line per directory that
    could not be listed. Both default to the process streams, resolved at write
    time.
    """

    def __init__(
        self,
        show_files: bool = False,
        style: TreeStyle = UNICODE_STYLE,
        theme: TreeTheme = PLAIN_THEME,
        out: LineSink | None = None,
        err: LineSink | None = None,
    ) -> None:
        self.show_files = show_files
        self.style = style
        self.theme = theme
        self._out = out if out is not None else _write_stdout_line
        self._err = err if err is not None else _write_stderr_line

    def render_root(self, path: str | os.PathLike[str]) -> None:
        """Print ``path`` as given, then the whole tree below it."""
        self._out(self.theme.paint(self.theme.directory, display_name(os.fspath(path))))
        self.render(path, "")

    def render(self, directory: str | os.PathLike[str], prefix: str = "") -> None:
        """Print every visible entry below ``directory``, each row led by ``prefix``."""
        for line in iter_tree_lines(
            directory,
            prefix,
            show_files=self.show_files,
            style=self.style,
            on_error=self._report_scan_error,
        ):
            self._out(self.format_line(line))

    def format_line(self, line: TreeLine) -> str:
        theme = self.theme
        name_attr = theme.directory if line.entry.is_dir else theme.file
        return theme.paint(theme.branch, line.prefix + line.branch) + theme.paint(
            name_attr, display_name(line.entry.name)
        )

    def _report_scan_error(self, directory: str, exc: OSError) -> None:
        self._err(format_scan_error(directory, exc))


__all__ = [
    "LineSink",
    "ScanErrorHandler",
    "TreeLine",
    "TreeRenderer",
    "display_name",
    "format_scan_error",
    "iter_tree_lines",
]
