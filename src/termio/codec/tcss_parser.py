"""Declaration-language parser: source text to named Style records."""

from __future__ import annotations

import logging

from termio.core.border import BorderStyle
from termio.core.color import Color, parse_byte
from termio.core.decoration import Decoration
from termio.core.style import Style
from termio.errors import DuplicateElement, InvalidSyntax

logger = logging.getLogger(__name__)

BLOCK_KEYWORD = "@element"
COMMENT_PREFIX = "//"

_SIDES = ("top", "bottom", "left", "right")


class TcssParser:
    """
    Stateful line-oriented parser that fills a name -> Style mapping.

    The parser is either outside a block (skipping blank and comment
    lines, waiting for ``@element "name" {``) or inside one, collecting
    ``property: value;`` declarations until the closing ``}``. Each
    finished block is committed straight into ``styles``, so blocks that
    closed before an error stay committed.

    Example:
        >>> styles: dict[str, Style] = {}
        >>> TcssParser(styles).feed('@element "title" {\\n color: red;\\n}')
        >>> styles["title"].fg == Color.RED
        True
    """

    def __init__(self, styles: dict[str, Style]):
        self.styles = styles

        # Block state
        self.current_name: str | None = None
        self.current_style: Style | None = None
        self.line_no = 0

    def feed(self, content: str) -> None:
        """Parse declaration source into the mapping."""
        for line_no, raw in enumerate(content.splitlines(), start=1):
            self.line_no = line_no
            line = raw.strip()
            if not line or line.startswith(COMMENT_PREFIX):
                continue

            if line.startswith(BLOCK_KEYWORD):
                self._open_block(line)
            elif self.current_style is not None:
                self._handle_block_line(line)
            else:
                logger.debug("Ignoring line %d outside any block: %r", self.line_no, line)

        # A missing final brace still commits the open block
        if self.current_name is not None:
            self._commit()

    def _open_block(self, line: str) -> None:
        """Handle a block header line."""
        if self.current_name is not None:
            self._commit()

        parts = line.split('"')
        if len(parts) < 3:
            raise InvalidSyntax("Missing element name", self.line_no)

        self.current_name = parts[1]
        self.current_style = Style()

        # Declarations may follow the opening brace on the header line
        rest = '"'.join(parts[2:])
        brace = rest.find("{")
        if brace != -1:
            inline = rest[brace + 1:].strip()
            if inline:
                self._handle_block_line(inline)

    def _handle_block_line(self, line: str) -> None:
        """Handle a line inside a block."""
        if line == "}":
            self._commit()
            return
        if line == "{":
            return

        closes = line.endswith("}")
        if closes:
            line = line[:-1].strip()

        for statement in line.split(";"):
            statement = statement.strip()
            if statement:
                self._handle_declaration(statement)

        if closes:
            self._commit()

    def _handle_declaration(self, statement: str) -> None:
        """Apply one ``property: value`` declaration to the open style."""
        assert self.current_style is not None
        style = self.current_style

        parts = statement.split(":")
        if len(parts) != 2:
            raise InvalidSyntax(f"Invalid property: {statement}", self.line_no)

        prop = parts[0].strip()
        value = parts[1].strip().rstrip(";").strip()

        if prop == "color":
            style.fg = self._color(value)
        elif prop == "background":
            style.bg = self._color(value)
        elif prop == "decoration":
            style.decoration = [self._decoration(d) for d in value.split()]
        elif prop in ("padding", "margin"):
            self._apply_shorthand(prop, value)
        elif prop.startswith(("padding-", "margin-")) and prop.split("-", 1)[1] in _SIDES:
            setattr(style, prop.replace("-", "_"), self._number(value, prop))
        elif prop == "border-color":
            style.border_color = self._color(value)
        elif prop == "border-style":
            style.border_style = self._border_style(value)
        elif prop == "border":
            kind, sep, color = value.partition(" ")
            if not sep:
                raise InvalidSyntax(f"Invalid border value: {value}", self.line_no)
            style.border_style = self._border_style(kind)
            style.border_color = self._color(color)
        else:
            raise InvalidSyntax(f"Unknown property: {prop}", self.line_no)

    def _apply_shorthand(self, prop: str, value: str) -> None:
        """
        Expand a padding/margin shorthand.

        One value sets the uniform field and all four sides; two values
        are vertical then horizontal; four are top, right, bottom, left.
        """
        tokens = value.split()
        numbers = [self._number(token, prop, value) for token in tokens]

        if len(numbers) == 1:
            (n,) = numbers
            sides = {"": n, "_top": n, "_bottom": n, "_left": n, "_right": n}
        elif len(numbers) == 2:
            v, h = numbers
            sides = {"_top": v, "_bottom": v, "_left": h, "_right": h}
        elif len(numbers) == 4:
            top, right, bottom, left = numbers
            sides = {"_top": top, "_right": right, "_bottom": bottom, "_left": left}
        else:
            raise InvalidSyntax(
                f"Invalid {prop} format. Use 1, 2, or 4 values", self.line_no
            )

        for suffix, n in sides.items():
            setattr(self.current_style, f"{prop}{suffix}", n)

    def _number(self, token: str, prop: str, value: str | None = None) -> int:
        number = parse_byte(token)
        if number is None:
            raise InvalidSyntax(f"Invalid {prop} value: {value or token}", self.line_no)
        return number

    def _color(self, token: str) -> Color:
        try:
            return Color.parse(token)
        except ValueError as e:
            raise InvalidSyntax(str(e), self.line_no) from e

    def _decoration(self, token: str) -> Decoration:
        try:
            return Decoration.parse(token)
        except ValueError as e:
            raise InvalidSyntax(str(e), self.line_no) from e

    def _border_style(self, token: str) -> BorderStyle:
        try:
            return BorderStyle.parse(token)
        except ValueError as e:
            raise InvalidSyntax(str(e), self.line_no) from e

    def _commit(self) -> None:
        """Insert the open block into the mapping and leave the block."""
        name = self.current_name
        assert name is not None
        if name in self.styles:
            raise DuplicateElement(name)

        self.styles[name] = self.current_style or Style()
        logger.debug("Committed style %r", name)

        self.current_name = None
        self.current_style = None
