"""Fluent builder API for styling text without a stylesheet."""

from __future__ import annotations

from typing import TYPE_CHECKING

from termio.core.border import BorderStyle
from termio.core.color import Color
from termio.core.decoration import Decoration
from termio.core.style import Style
from termio.render.box import render

if TYPE_CHECKING:
    from termio.registry import Termio


class StyledString:
    """
    Text paired with a Style, rendered by ``str()``.

    Example:
        >>> print(StyledString("Hello")
        ...     .color(Color.CYAN)
        ...     .decoration(Decoration.BOLD)
        ...     .padding(1)
        ...     .border(BorderStyle.ROUNDED))
    """

    def __init__(self, text: str, style: Style | None = None):
        self._text = text
        self._style = style if style is not None else Style()

    @classmethod
    def from_registry(cls, text: str, name: str, tcss: Termio) -> StyledString:
        """Style text with a named rule; unknown names leave it unstyled."""
        style = tcss.get_style(name)
        return cls(text, style.copy() if style is not None else Style())

    @property
    def text(self) -> str:
        return self._text

    @property
    def style(self) -> Style:
        return self._style

    @property
    def fg(self) -> Color | None:
        return self._style.fg

    @property
    def bg(self) -> Color | None:
        return self._style.bg

    @property
    def decorations(self) -> list[Decoration] | None:
        if self._style.decoration is None:
            return None
        return list(self._style.decoration)

    def color(self, color: Color) -> StyledString:
        """Set text color."""
        self._style.fg = color
        return self

    def bg_color(self, color: Color) -> StyledString:
        """Set background color."""
        self._style.bg = color
        return self

    def decoration(self, decoration: Decoration) -> StyledString:
        """Add a decoration after any already set."""
        if self._style.decoration is None:
            self._style.decoration = []
        self._style.decoration.append(decoration)
        return self

    def padding(self, padding: int) -> StyledString:
        """Set padding on all sides."""
        self._style.padding = padding
        return self

    def padding_trbl(self, top: int, right: int, bottom: int, left: int) -> StyledString:
        """Set padding for top, right, bottom, left."""
        self._style.padding_top = top
        self._style.padding_right = right
        self._style.padding_bottom = bottom
        self._style.padding_left = left
        return self

    def margin(self, margin: int) -> StyledString:
        """Set margin on all sides."""
        self._style.margin = margin
        return self

    def border(self, border_style: BorderStyle) -> StyledString:
        self._style.border_style = border_style
        return self

    def border_color(self, color: Color) -> StyledString:
        self._style.border_color = color
        return self

    def render(self) -> str:
        return render(self._text, self._style)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"StyledString({self._text!r}, {self._style!r})"


def styled(text: str) -> StyledString:
    """Start styling text with the fluent builder API."""
    return StyledString(text)
