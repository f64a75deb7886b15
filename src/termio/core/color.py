"""Color representation for styled terminal text."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from termio.core.constants import COLOR_NAMES, INTENSE_PREFIXES, sgr


class ColorMode(Enum):
    """Color mode for ANSI sequences."""
    STANDARD_16 = "16"      # Named 8 + intense 8 (SGR 30-37, 40-47, 90-97, 100-107)
    EXTENDED_256 = "256"    # 8-bit palette (SGR 38;5;n, 48;5;n)
    TRUE_COLOR = "rgb"      # 24-bit true color (SGR 38;2;r;g;b, 48;2;r;g;b)


_BYTE = re.compile(r"\d{1,3}")
_RGB = re.compile(r"rgb\((.*)\)", re.IGNORECASE)


def parse_byte(token: str) -> int | None:
    """Parse a decimal 0-255 value, returning None if it is not one."""
    if not _BYTE.fullmatch(token):
        return None
    value = int(token)
    return value if value <= 255 else None


@dataclass(frozen=True)
class Color:
    """
    A terminal color value.

    Supports the 8 named colors, their 8 intense variants, an 8-bit
    palette code and a 24-bit RGB triple. Foreground and background
    escapes are produced separately by ``to_ansi_foreground`` and
    ``to_ansi_background``.
    """
    mode: ColorMode
    value: int | tuple[int, int, int]

    BLACK: ClassVar["Color"]
    RED: ClassVar["Color"]
    GREEN: ClassVar["Color"]
    YELLOW: ClassVar["Color"]
    BLUE: ClassVar["Color"]
    MAGENTA: ClassVar["Color"]
    CYAN: ClassVar["Color"]
    WHITE: ClassVar["Color"]
    INTENSE_BLACK: ClassVar["Color"]
    INTENSE_RED: ClassVar["Color"]
    INTENSE_GREEN: ClassVar["Color"]
    INTENSE_YELLOW: ClassVar["Color"]
    INTENSE_BLUE: ClassVar["Color"]
    INTENSE_MAGENTA: ClassVar["Color"]
    INTENSE_CYAN: ClassVar["Color"]
    INTENSE_WHITE: ClassVar["Color"]

    @classmethod
    def from_256(cls, index: int) -> "Color":
        """Create a Color from a 256-color palette index."""
        if not 0 <= index <= 255:
            raise ValueError(f"256-color index must be 0-255, got {index}")
        return cls(ColorMode.EXTENDED_256, index)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        """Create a Color from RGB values."""
        if not all(0 <= c <= 255 for c in (r, g, b)):
            raise ValueError(f"RGB values must be 0-255, got ({r}, {g}, {b})")
        return cls(ColorMode.TRUE_COLOR, (r, g, b))

    @classmethod
    def parse(cls, token: str) -> "Color":
        """
        Parse a color token.

        Accepts, in order: a color name or its ``i-``/``intense-`` variant
        (case-insensitive), ``rgb(r, g, b)``, or a bare 0-255 palette code.

        Raises:
            ValueError: if the token matches none of the forms.
        """
        token = token.strip()
        lowered = token.lower()

        if lowered in COLOR_NAMES:
            return cls(ColorMode.STANDARD_16, COLOR_NAMES.index(lowered))
        for prefix in INTENSE_PREFIXES:
            name = lowered.removeprefix(prefix)
            if name != lowered and name in COLOR_NAMES:
                return cls(ColorMode.STANDARD_16, COLOR_NAMES.index(name) + 8)

        match = _RGB.fullmatch(token)
        if match:
            parts = [p.strip() for p in match.group(1).split(",")]
            if len(parts) != 3:
                raise ValueError(f"Invalid RGB value: {token}")
            components = [parse_byte(p) for p in parts]
            if None in components:
                raise ValueError(f"Invalid RGB value: {token}")
            r, g, b = components
            return cls(ColorMode.TRUE_COLOR, (r, g, b))

        code = parse_byte(token)
        if code is not None:
            return cls(ColorMode.EXTENDED_256, code)

        raise ValueError(f"Unknown color: {token}")

    def to_sgr_fg(self) -> str:
        """Return SGR parameters for foreground color."""
        if self.mode == ColorMode.STANDARD_16:
            assert isinstance(self.value, int)
            if self.value < 8:
                return str(30 + self.value)
            else:
                return str(90 + self.value - 8)
        elif self.mode == ColorMode.EXTENDED_256:
            return f"38;5;{self.value}"
        else:  # TRUE_COLOR
            assert isinstance(self.value, tuple)
            r, g, b = self.value
            return f"38;2;{r};{g};{b}"

    def to_sgr_bg(self) -> str:
        """Return SGR parameters for background color."""
        if self.mode == ColorMode.STANDARD_16:
            assert isinstance(self.value, int)
            if self.value < 8:
                return str(40 + self.value)
            else:
                return str(100 + self.value - 8)
        elif self.mode == ColorMode.EXTENDED_256:
            return f"48;5;{self.value}"
        else:  # TRUE_COLOR
            assert isinstance(self.value, tuple)
            r, g, b = self.value
            return f"48;2;{r};{g};{b}"

    def to_ansi_foreground(self) -> str:
        """Return the complete foreground escape sequence."""
        return sgr(self.to_sgr_fg())

    def to_ansi_background(self) -> str:
        """Return the complete background escape sequence."""
        return sgr(self.to_sgr_bg())

    def to_token(self) -> str:
        """Return the declaration-language spelling of this color."""
        if self.mode == ColorMode.STANDARD_16:
            assert isinstance(self.value, int)
            if self.value < 8:
                return COLOR_NAMES[self.value]
            return f"i-{COLOR_NAMES[self.value - 8]}"
        elif self.mode == ColorMode.EXTENDED_256:
            return str(self.value)
        else:  # TRUE_COLOR
            assert isinstance(self.value, tuple)
            r, g, b = self.value
            return f"rgb({r}, {g}, {b})"


# Initialize class-level color constants
Color.BLACK = Color(ColorMode.STANDARD_16, 0)
Color.RED = Color(ColorMode.STANDARD_16, 1)
Color.GREEN = Color(ColorMode.STANDARD_16, 2)
Color.YELLOW = Color(ColorMode.STANDARD_16, 3)
Color.BLUE = Color(ColorMode.STANDARD_16, 4)
Color.MAGENTA = Color(ColorMode.STANDARD_16, 5)
Color.CYAN = Color(ColorMode.STANDARD_16, 6)
Color.WHITE = Color(ColorMode.STANDARD_16, 7)
Color.INTENSE_BLACK = Color(ColorMode.STANDARD_16, 8)
Color.INTENSE_RED = Color(ColorMode.STANDARD_16, 9)
Color.INTENSE_GREEN = Color(ColorMode.STANDARD_16, 10)
Color.INTENSE_YELLOW = Color(ColorMode.STANDARD_16, 11)
Color.INTENSE_BLUE = Color(ColorMode.STANDARD_16, 12)
Color.INTENSE_MAGENTA = Color(ColorMode.STANDARD_16, 13)
Color.INTENSE_CYAN = Color(ColorMode.STANDARD_16, 14)
Color.INTENSE_WHITE = Color(ColorMode.STANDARD_16, 15)
