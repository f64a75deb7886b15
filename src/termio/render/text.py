"""Text measuring utilities - display width with and without escape codes."""

from __future__ import annotations

import re

from rich.cells import cell_len

# Pattern to match SGR / CSI escape sequences
_ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")


def split_lines(text: str) -> list[str]:
    """
    Split text on newlines.

    A trailing newline does not start an extra line, a trailing ``\\r`` is
    dropped from each line, and empty text has no lines.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def display_width(s: str) -> int:
    """Terminal columns occupied by s (wide and fullwidth glyphs count 2)."""
    return cell_len(s)


def strip_ansi(s: str) -> str:
    """Remove escape sequences, leaving the visible characters."""
    return _ANSI_ESCAPE.sub("", s)


def visible_width(s: str) -> int:
    """Display width of s, ignoring escape sequences."""
    return display_width(strip_ansi(s))
