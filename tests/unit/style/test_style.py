"""Glyph set and theme selection tests."""

from __future__ import annotations

import unittest

from pygments.console import ansiformat

from dtree.style import (
    ASCII_STYLE,
    DEFAULT_THEME,
    PLAIN_THEME,
    UNICODE_STYLE,
    style_for,
    theme_for,
)


class TreeStyleTests(unittest.TestCase):
    def test_unicode_glyphs(self) -> None:
        self.assertEqual(UNICODE_STYLE.glyph(is_last=False), "├── ")
        self.assertEqual(UNICODE_STYLE.glyph(is_last=True), "└── ")
        self.assertEqual(UNICODE_STYLE.child_indent(is_last=False), "│   ")
        self.assertEqual(UNICODE_STYLE.child_indent(is_last=True), "    ")

    def test_every_style_uses_equal_width_units(self) -> None:
        for style in (UNICODE_STYLE, ASCII_STYLE):
            widths = {len(style.branch), len(style.last_branch), len(style.pipe_indent), len(style.space_indent)}
            self.assertEqual(widths, {4}, style.name)

    def test_ascii_style_is_pure_ascii(self) -> None:
        text = ASCII_STYLE.branch + ASCII_STYLE.last_branch + ASCII_STYLE.pipe_indent + ASCII_STYLE.space_indent
        self.assertTrue(text.isascii())

    def test_style_for_flag(self) -> None:
        self.assertIs(style_for(False), UNICODE_STYLE)
        self.assertIs(style_for(True), ASCII_STYLE)


class TreeThemeTests(unittest.TestCase):
    def test_plain_theme_leaves_text_unchanged(self) -> None:
        self.assertEqual(PLAIN_THEME.paint(PLAIN_THEME.directory, "docs"), "docs")

    def test_default_theme_wraps_with_pygments_codes(self) -> None:
        self.assertEqual(DEFAULT_THEME.paint(DEFAULT_THEME.directory, "docs"), ansiformat("*blue*", "docs"))

    def test_empty_text_is_not_wrapped(self) -> None:
        self.assertEqual(DEFAULT_THEME.paint(DEFAULT_THEME.branch, ""), "")

    def test_theme_for_flag(self) -> None:
        self.assertIs(theme_for(True), DEFAULT_THEME)
        self.assertIs(theme_for(False), PLAIN_THEME)


if __name__ == "__main__":
    unittest.main()
