"""Core value types and the style record."""

from termio.core.border import BorderGlyphs, BorderStyle
from termio.core.color import Color, ColorMode
from termio.core.decoration import Decoration
from termio.core.style import Spacing, Style

__all__ = [
    "BorderGlyphs",
    "BorderStyle",
    "Color",
    "ColorMode",
    "Decoration",
    "Spacing",
    "Style",
]
