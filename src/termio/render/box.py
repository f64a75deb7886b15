"""Render styled text as a terminal box: margin, border, padding, content."""

from __future__ import annotations

from termio.core.constants import RESET
from termio.core.style import Spacing, Style
from termio.render.text import display_width, split_lines


def _close(*styles: str) -> str:
    """Reset sequence, only if one of the given styles emitted anything."""
    return RESET if any(styles) else ""


def _fill(bg_style: str, width: int, reset: bool = False) -> str:
    """Background-colored run of spaces; empty when width is zero."""
    if not width:
        return ""
    return bg_style + " " * width + (_close(bg_style) if reset else "")


class BoxRenderer:
    """
    Render text with a Style using raw escape sequences and spaces.

    Layout, outside in: top margin, top border, top padding, the text
    lines (left margin, left border, left padding, text, fill, right
    padding, right border), bottom padding, bottom border, bottom margin.
    Every content row spans the same number of display columns, so
    borders line up for text containing wide glyphs.

    Text lines are separated by newlines only when a border is drawn;
    unbordered multi-line text is emitted back to back.
    """

    def render(self, text: str, style: Style) -> str:
        """Render text into the final escape-coded string."""
        lines = split_lines(text)
        max_width = max((display_width(line) for line in lines), default=0)

        padding = style.resolved_padding()
        margin = style.resolved_margin()
        content_width = max_width + padding.left + padding.right

        text_style = self._text_style(style)
        bg_style = style.bg.to_ansi_background() if style.bg else ""
        border_style = style.border_color.to_ansi_foreground() if style.border_color else ""
        margin_left = " " * margin.left

        out: list[str] = ["\n" * margin.top]

        if style.border_style is not None:
            glyphs = style.border_style.glyphs
            out.append(margin_left + border_style + glyphs.top_left
                       + glyphs.horizontal * content_width + glyphs.top_right
                       + _close(border_style) + "\n")
            left_edge = border_style + glyphs.vertical + _close(border_style)
            right_edge = left_edge
            fill_row = (margin_left + border_style + glyphs.vertical
                        + bg_style + " " * content_width + _close(border_style, bg_style)
                        + border_style + glyphs.vertical + _close(border_style))
            line_end = "\n"
        else:
            left_edge = right_edge = ""
            fill_row = margin_left + bg_style + " " * content_width + _close(bg_style)
            line_end = ""

        for _ in range(padding.top):
            out.append(fill_row + "\n")

        for line in lines:
            out.append(margin_left + left_edge)
            out.append(_fill(bg_style, padding.left))
            out.append(text_style + line)
            out.append(" " * self._fill_after(line, content_width, padding))
            out.append(_close(bg_style, text_style))
            out.append(_fill(bg_style, padding.right, reset=True))
            out.append(right_edge + line_end)

        for _ in range(padding.bottom):
            if style.border_style is not None:
                out.append(fill_row + "\n")
            else:
                out.append("\n" + fill_row)

        if style.border_style is not None:
            glyphs = style.border_style.glyphs
            out.append(margin_left + border_style + glyphs.bottom_left
                       + glyphs.horizontal * content_width + glyphs.bottom_right
                       + _close(border_style))

        out.append("\n" * margin.bottom)
        return "".join(out)

    @staticmethod
    def _fill_after(line: str, content_width: int, padding: Spacing) -> int:
        """Spaces needed after a line so it reaches the content width."""
        plain_width = len(line)
        extra_width = display_width(line) - plain_width
        return content_width - plain_width - padding.left - padding.right - extra_width

    @staticmethod
    def _text_style(style: Style) -> str:
        """Foreground, background and decoration escapes, in that order."""
        parts: list[str] = []
        if style.fg is not None:
            parts.append(style.fg.to_ansi_foreground())
        if style.bg is not None:
            parts.append(style.bg.to_ansi_background())
        for decoration in style.decoration or ():
            parts.append(decoration.to_ansi())
        return "".join(parts)


_default_renderer = BoxRenderer()


def render(text: str, style: Style) -> str:
    """Render text with a style using the default renderer."""
    return _default_renderer.render(text, style)
