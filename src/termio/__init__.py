"""
termio: CSS-like styling for terminal text

Describe colors, decorations, borders, padding and margins in a small
declaration language, then render text into that box using raw escape
sequences.

Quick Start:
    >>> import termio
    >>> tcss = termio.Termio()
    >>> tcss.parse('''
    ... @element "header" {
    ...     color: i-cyan;
    ...     decoration: bold underline;
    ...     padding: 0 1;
    ...     border: rounded blue;
    ... }
    ... ''')
    >>> print(tcss.render("Hello, World!", "header"))

Features:
    - 16 named colors, 256-color palette codes and 24-bit RGB
    - 16 text decorations
    - Solid, dashed, rounded and double borders
    - CSS-style padding and margin shorthands
    - Unicode-aware box sizing (wide and fullwidth glyphs)
    - Fluent builder API for styling without a stylesheet
"""

import logging

__version__ = "0.1.0"

# Core types
from termio.core.border import BorderStyle
from termio.core.color import Color
from termio.core.decoration import Decoration
from termio.core.style import Style

# Parsing
from termio.errors import DuplicateElement, InvalidSyntax, ParseError
from termio.registry import Termio

# Convenience functions
from termio.io.reader import load
from termio.render.box import BoxRenderer

# Creation
from termio.create.builder import StyledString, styled

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Core types
    "BorderStyle",
    "Color",
    "Decoration",
    "Style",
    # Parsing
    "Termio",
    "ParseError",
    "InvalidSyntax",
    "DuplicateElement",
    # I/O
    "load",
    # Rendering
    "BoxRenderer",
    # Creation
    "StyledString",
    "styled",
]
