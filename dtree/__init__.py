"""Public package surface for dtree.

Exports ``main`` for programmatic CLI invocation and ``TreeRenderer`` for
embedding the tree output in other tools.
"""

from __future__ import annotations

from .render import TreeRenderer


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["TreeRenderer", "main"]
