"""Command-line front door for dtree.

Parses CLI options, checks that the target is an existing directory, and
prints its tree to stdout. Fatal problems exit with status 1 before any tree
output; unreadable subdirectories are reported on stderr and skipped.
"""

from __future__ import annotations

import argparse
import logging
import os
import stat
import sys

from .render import TreeRenderer
from .style import style_for, theme_for

LOG_FORMAT = "%(levelname)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dtree", description="A directory tree viewer.")
    parser.add_argument("path", nargs="?", default=".", help="Directory to display. Defaults to current directory.")
    parser.add_argument("-f", "--files", dest="show_files", action="store_true", help="Include files in the tree view.")
    parser.add_argument("-a", "--ascii", action="store_true", help="Draw branches with ASCII characters only.")
    color_group = parser.add_mutually_exclusive_group()
    color_group.add_argument(
        "--color",
        dest="color",
        action="store_const",
        const=True,
        default=None,
        help="Colorize output even when stdout is not a TTY.",
    )
    color_group.add_argument("--no-color", dest="color", action="store_const", const=False, help="Disable color output.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log per-entry diagnostics to stderr.")
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def _use_color(requested: bool | None) -> bool:
    """Resolve ``--color``/``--no-color``; default to color only on a TTY."""
    if requested is not None:
        return requested
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


def check_target(raw_path: str) -> None:
    """Raise ``SystemExit`` unless ``raw_path`` names an existing directory.

    Any stat failure (missing, name too long, unsearchable parent) counts as
    the path not existing.
    """
    try:
        mode = os.stat(raw_path).st_mode
    except OSError:
        raise SystemExit(f"Error: Path '{raw_path}' does not exist") from None
    if not stat.S_ISDIR(mode):
        raise SystemExit(f"Error: Path '{raw_path}' is not a directory")


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and print the tree for the requested directory.

    ``argv`` defaults to ``sys.argv[1:]``. Precondition failures raise
    ``SystemExit`` with a one-line message, which exits with status 1.
    """
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    check_target(args.path)

    reconfigure = getattr(sys.stdout, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(encoding="utf-8")

    renderer = TreeRenderer(
        show_files=args.show_files,
        style=style_for(args.ascii),
        theme=theme_for(_use_color(args.color)),
    )
    try:
        renderer.render_root(args.path)
        sys.stdout.flush()
    except BrokenPipeError:
        # Reader went away (``dtree | head``); silence the flush at interpreter exit.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except KeyboardInterrupt:
        raise SystemExit(130) from None


if __name__ == "__main__":
    main()
