"""Style - the record of optional visual attributes for one rule."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Optional

from termio.core.border import BorderStyle
from termio.core.color import Color
from termio.core.decoration import Decoration


@dataclass(frozen=True, slots=True)
class Spacing:
    """Resolved per-side spacing, in cells."""
    top: int = 0
    right: int = 0
    bottom: int = 0
    left: int = 0


@dataclass
class Style:
    """
    Visual attributes for a piece of terminal text.

    Every field is optional; an unset field means that aspect is not
    applied. Per-side padding and margin fall back to the uniform value,
    which falls back to zero (see ``resolved_padding``).

    Example:
        >>> style = (Style()
        ...     .with_fg(Color.GREEN)
        ...     .with_padding(1)
        ...     .with_border_style(BorderStyle.ROUNDED))
    """
    fg: Optional[Color] = None
    bg: Optional[Color] = None
    decoration: Optional[list[Decoration]] = None

    padding: Optional[int] = None
    padding_top: Optional[int] = None
    padding_bottom: Optional[int] = None
    padding_left: Optional[int] = None
    padding_right: Optional[int] = None

    margin: Optional[int] = None
    margin_top: Optional[int] = None
    margin_bottom: Optional[int] = None
    margin_left: Optional[int] = None
    margin_right: Optional[int] = None

    border_color: Optional[Color] = None
    border_style: Optional[BorderStyle] = None

    # Fluent setters
    def with_fg(self, color: Color) -> Style:
        """Set the foreground color."""
        self.fg = color
        return self

    def with_bg(self, color: Color) -> Style:
        """Set the background color."""
        self.bg = color
        return self

    def with_decoration(self, decorations: list[Decoration]) -> Style:
        """Set the decoration list."""
        self.decoration = list(decorations)
        return self

    def with_padding(self, padding: int) -> Style:
        """Set the uniform padding (spaces inside the border)."""
        self.padding = padding
        return self

    def with_padding_top(self, padding: int) -> Style:
        self.padding_top = padding
        return self

    def with_padding_bottom(self, padding: int) -> Style:
        self.padding_bottom = padding
        return self

    def with_padding_left(self, padding: int) -> Style:
        self.padding_left = padding
        return self

    def with_padding_right(self, padding: int) -> Style:
        self.padding_right = padding
        return self

    def with_margin(self, margin: int) -> Style:
        """Set the uniform margin (space outside the border)."""
        self.margin = margin
        return self

    def with_margin_top(self, margin: int) -> Style:
        self.margin_top = margin
        return self

    def with_margin_bottom(self, margin: int) -> Style:
        self.margin_bottom = margin
        return self

    def with_margin_left(self, margin: int) -> Style:
        self.margin_left = margin
        return self

    def with_margin_right(self, margin: int) -> Style:
        self.margin_right = margin
        return self

    def with_border_color(self, color: Color) -> Style:
        """Set the border color."""
        self.border_color = color
        return self

    def with_border_style(self, border_style: BorderStyle) -> Style:
        """Set the border style."""
        self.border_style = border_style
        return self

    @property
    def has_border(self) -> bool:
        return self.border_style is not None

    def resolved_padding(self) -> Spacing:
        """Per-side padding after falling back to the uniform value."""
        base = self.padding or 0
        return Spacing(
            top=_pick(self.padding_top, base),
            right=_pick(self.padding_right, base),
            bottom=_pick(self.padding_bottom, base),
            left=_pick(self.padding_left, base),
        )

    def resolved_margin(self) -> Spacing:
        """Per-side margin after falling back to the uniform value."""
        base = self.margin or 0
        return Spacing(
            top=_pick(self.margin_top, base),
            right=_pick(self.margin_right, base),
            bottom=_pick(self.margin_bottom, base),
            left=_pick(self.margin_left, base),
        )

    def copy(self) -> Style:
        """Create an independent copy of this style."""
        return copy.deepcopy(self)

    def to_dict(self) -> dict[str, Any]:
        """Return the set fields as declaration-language property/value pairs."""
        data: dict[str, Any] = {}
        if self.fg is not None:
            data["color"] = self.fg.to_token()
        if self.bg is not None:
            data["background"] = self.bg.to_token()
        if self.decoration is not None:
            data["decoration"] = " ".join(d.value for d in self.decoration)
        for side in ("", "-top", "-bottom", "-left", "-right"):
            for prop in ("padding", "margin"):
                value = getattr(self, f"{prop}{side.replace('-', '_')}")
                if value is not None:
                    data[f"{prop}{side}"] = value
        if self.border_color is not None:
            data["border-color"] = self.border_color.to_token()
        if self.border_style is not None:
            data["border-style"] = self.border_style.value
        return data


def _pick(value: Optional[int], fallback: int) -> int:
    return fallback if value is None else value
