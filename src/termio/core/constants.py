"""Shared constants for terminal styling."""

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"

# Standard 8-color palette (SGR 30-37 fg, 40-47 bg; 90-97 / 100-107 intense)
COLOR_NAMES: tuple[str, ...] = (
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
)

# Prefixes accepted for the intense variants ("i-red", "intense-red")
INTENSE_PREFIXES: tuple[str, ...] = ("i-", "intense-")


def sgr(params: str) -> str:
    """Wrap SGR parameters in a complete escape sequence."""
    return f"{CSI}{params}m"
