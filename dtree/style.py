"""Tree glyph sets and colour themes.

Glyphs and palettes are immutable module-level constants; renderers receive
one of each instead of embedding literals.
"""

from __future__ import annotations

from dataclasses import dataclass

from pygments.console import ansiformat


@dataclass(frozen=True)
class TreeStyle:
    """Branch glyphs and indentation units for one drawing style.

    All four strings occupy the same number of columns so that child rows line
    up under their parent's name.
    """

    name: str
    branch: str
    last_branch: str
    pipe_indent: str
    space_indent: str

    def glyph(self, is_last: bool) -> str:
        return self.last_branch if is_last else self.branch

    def child_indent(self, is_last: bool) -> str:
        return self.space_indent if is_last else self.pipe_indent


UNICODE_STYLE = TreeStyle(
    name="unicode",
    branch="├── ",
    last_branch="└── ",
    pipe_indent="│   ",
    space_indent="    ",
)

ASCII_STYLE = TreeStyle(
    name="ascii",
    branch="|-- ",
    last_branch="`-- ",
    pipe_indent="|   ",
    space_indent="    ",
)


@dataclass(frozen=True)
class TreeTheme:
    """Pygments console attributes (``ansiformat`` syntax) for tree rows.

    An empty attribute leaves that part of the row uncoloured.
    """

    name: str
    directory: str
    file: str
    branch: str

    def paint(self, attr: str, text: str) -> str:
        if not attr or not text:
            return text
        return ansiformat(attr, text)


DEFAULT_THEME = TreeTheme(name="default", directory="*blue*", file="", branch="gray")
PLAIN_THEME = TreeTheme(name="plain", directory="", file="", branch="")


def style_for(ascii_only: bool) -> TreeStyle:
    """Return the glyph set selected by the ``--ascii`` flag."""
    return ASCII_STYLE if ascii_only else UNICODE_STYLE


def theme_for(color: bool) -> TreeTheme:
    """Return the palette for coloured or plain output."""
    return DEFAULT_THEME if color else PLAIN_THEME


__all__ = [
    "TreeStyle",
    "TreeTheme",
    "UNICODE_STYLE",
    "ASCII_STYLE",
    "DEFAULT_THEME",
    "PLAIN_THEME",
    "style_for",
    "theme_for",
]
