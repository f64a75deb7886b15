"""Text decorations (SGR attributes)."""

from enum import Enum

from termio.core.constants import RESET, sgr


class Decoration(Enum):
    """
    A named text attribute.

    Member values are the declaration keywords. Several keywords share an
    SGR code (``conceal``/``hidden``, ``crossed-out``/``strikethrough``)
    but stay distinct members so a parsed style keeps the spelling used.
    """
    NONE = "none"
    BOLD = "bold"
    FAINT = "faint"
    ITALIC = "italic"
    UNDERLINE = "underline"
    BLINK = "blink"
    RAPID_BLINK = "rapid-blink"
    REVERSE = "reverse"
    CONCEAL = "conceal"
    CROSSED_OUT = "crossed-out"
    DOUBLE_UNDERLINE = "double-underline"
    OVERLINE = "overline"
    HIDDEN = "hidden"
    STRIKETHROUGH = "strikethrough"
    FRAMED = "framed"
    ENCIRCLED = "encircled"

    @classmethod
    def parse(cls, token: str) -> "Decoration":
        """Parse a lowercase decoration keyword."""
        try:
            return cls(token)
        except ValueError:
            raise ValueError(f"Unknown decoration: {token}") from None

    @property
    def code(self) -> int:
        """SGR code for this decoration."""
        return _SGR_CODES[self]

    def to_ansi(self) -> str:
        """Return the escape sequence enabling this decoration."""
        return sgr(str(self.code))

    @staticmethod
    def reset() -> str:
        """Return the sequence clearing all attributes."""
        return RESET


_SGR_CODES: dict[Decoration, int] = {
    Decoration.NONE: 0,
    Decoration.BOLD: 1,
    Decoration.FAINT: 2,
    Decoration.ITALIC: 3,
    Decoration.UNDERLINE: 4,
    Decoration.BLINK: 5,
    Decoration.RAPID_BLINK: 6,
    Decoration.REVERSE: 7,
    Decoration.CONCEAL: 8,
    Decoration.CROSSED_OUT: 9,
    Decoration.DOUBLE_UNDERLINE: 21,
    Decoration.OVERLINE: 53,
    Decoration.HIDDEN: 8,
    Decoration.STRIKETHROUGH: 9,
    Decoration.FRAMED: 51,
    Decoration.ENCIRCLED: 52,
}
