"""Border styles and their box-drawing glyphs."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, slots=True)
class BorderGlyphs:
    """The six glyphs used to frame a box."""
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    horizontal: str
    vertical: str


class BorderStyle(Enum):
    """Border kind, keyed by its declaration keyword."""
    SOLID = "solid"      # ┌─┐ │ └─┘
    DASHED = "dashed"    # ┌┈┐ ┊ └┈┘
    ROUNDED = "rounded"  # ╭─╮ │ ╰─╯
    DOUBLE = "double"    # ╔═╗ ║ ╚═╝

    @classmethod
    def parse(cls, token: str) -> "BorderStyle":
        """Parse a lowercase border keyword."""
        try:
            return cls(token)
        except ValueError:
            raise ValueError(f"Unknown border style: {token}") from None

    @property
    def glyphs(self) -> BorderGlyphs:
        return _GLYPHS[self]


_GLYPHS: dict[BorderStyle, BorderGlyphs] = {
    BorderStyle.SOLID: BorderGlyphs("┌", "┐", "└", "┘", "─", "│"),
    BorderStyle.DASHED: BorderGlyphs("┌", "┐", "└", "┘", "┈", "┊"),
    BorderStyle.ROUNDED: BorderGlyphs("╭", "╮", "╰", "╯", "─", "│"),
    BorderStyle.DOUBLE: BorderGlyphs("╔", "╗", "╚", "╝", "═", "║"),
}
