"""Tests for core value types (no stylesheet parsing needed)."""

import pytest

from termio.core.border import BorderGlyphs, BorderStyle
from termio.core.color import Color, ColorMode
from termio.core.decoration import Decoration
from termio.core.style import Spacing, Style


class TestColor:
    """Tests for Color parsing and escape encoding."""

    def test_named_colors(self) -> None:
        assert Color.parse("black") == Color.BLACK
        assert Color.parse("red") == Color.RED
        assert Color.parse("white") == Color.WHITE
        assert Color.RED.mode == ColorMode.STANDARD_16
        assert Color.RED.value == 1

    def test_names_are_case_insensitive(self) -> None:
        assert Color.parse("RED") == Color.RED
        assert Color.parse("Green") == Color.GREEN
        assert Color.parse("I-Blue") == Color.INTENSE_BLUE

    def test_intense_prefixes(self) -> None:
        assert Color.parse("i-red") == Color.INTENSE_RED
        assert Color.parse("intense-red") == Color.INTENSE_RED
        assert Color.parse("i-black") == Color.INTENSE_BLACK
        assert Color.parse("intense-white") == Color.INTENSE_WHITE

    def test_rgb(self) -> None:
        color = Color.parse("rgb(255, 128, 0)")
        assert color.mode == ColorMode.TRUE_COLOR
        assert color.value == (255, 128, 0)
        assert Color.parse("rgb(1,2,3)").value == (1, 2, 3)

    @pytest.mark.parametrize("token", [
        "rgb(1, 2)",
        "rgb(1, 2, 3, 4)",
        "rgb(256, 0, 0)",
        "rgb(a, b, c)",
        "rgb(-1, 0, 0)",
    ])
    def test_invalid_rgb(self, token: str) -> None:
        with pytest.raises(ValueError, match="Invalid RGB value"):
            Color.parse(token)

    def test_palette_code(self) -> None:
        color = Color.parse("196")
        assert color.mode == ColorMode.EXTENDED_256
        assert color.value == 196
        assert Color.parse("0").value == 0
        assert Color.parse("255").value == 255

    @pytest.mark.parametrize("token", ["256", "-1", "purple", "i-purple", ""])
    def test_unknown_color(self, token: str) -> None:
        with pytest.raises(ValueError, match="Unknown color"):
            Color.parse(token)

    def test_error_names_input(self) -> None:
        with pytest.raises(ValueError, match="chartreuse"):
            Color.parse("chartreuse")

    def test_from_constructors_validate(self) -> None:
        assert Color.from_256(42).value == 42
        assert Color.from_rgb(1, 2, 3).value == (1, 2, 3)
        with pytest.raises(ValueError):
            Color.from_256(300)
        with pytest.raises(ValueError):
            Color.from_rgb(0, 0, 256)

    def test_foreground_escapes(self) -> None:
        assert Color.RED.to_ansi_foreground() == "\x1b[31m"
        assert Color.INTENSE_CYAN.to_ansi_foreground() == "\x1b[96m"
        assert Color.from_256(196).to_ansi_foreground() == "\x1b[38;5;196m"
        assert Color.from_rgb(255, 0, 0).to_ansi_foreground() == "\x1b[38;2;255;0;0m"

    def test_background_escapes(self) -> None:
        assert Color.BLUE.to_ansi_background() == "\x1b[44m"
        assert Color.INTENSE_GREEN.to_ansi_background() == "\x1b[102m"
        assert Color.from_256(17).to_ansi_background() == "\x1b[48;5;17m"
        assert Color.from_rgb(0, 0, 255).to_ansi_background() == "\x1b[48;2;0;0;255m"

    @pytest.mark.parametrize("rgb", [(0, 0, 0), (255, 255, 255), (12, 200, 7), (38, 48, 2)])
    def test_rgb_fg_and_bg_differ_only_in_introducer(self, rgb: tuple[int, int, int]) -> None:
        r, g, b = rgb
        color = Color.parse(f"rgb({r}, {g}, {b})")
        fg = color.to_ansi_foreground()
        bg = color.to_ansi_background()
        assert fg == f"\x1b[38;2;{r};{g};{b}m"
        assert bg == f"\x1b[48;2;{r};{g};{b}m"

    def test_to_token(self) -> None:
        assert Color.RED.to_token() == "red"
        assert Color.INTENSE_RED.to_token() == "i-red"
        assert Color.from_256(7).to_token() == "7"
        assert Color.from_rgb(1, 2, 3).to_token() == "rgb(1, 2, 3)"
        for color in (Color.MAGENTA, Color.INTENSE_YELLOW, Color.from_256(99)):
            assert Color.parse(color.to_token()) == color


class TestDecoration:
    """Tests for Decoration keywords and codes."""

    @pytest.mark.parametrize("decoration", list(Decoration))
    def test_every_keyword_parses(self, decoration: Decoration) -> None:
        assert Decoration.parse(decoration.value) is decoration

    def test_sixteen_kinds(self) -> None:
        assert len(Decoration) == 16

    def test_hyphenated_keywords(self) -> None:
        assert Decoration.parse("rapid-blink") is Decoration.RAPID_BLINK
        assert Decoration.parse("crossed-out") is Decoration.CROSSED_OUT
        assert Decoration.parse("double-underline") is Decoration.DOUBLE_UNDERLINE

    def test_aliases_share_codes_but_stay_distinct(self) -> None:
        assert Decoration.CONCEAL.code == Decoration.HIDDEN.code == 8
        assert Decoration.CROSSED_OUT.code == Decoration.STRIKETHROUGH.code == 9
        assert Decoration.CONCEAL is not Decoration.HIDDEN
        assert Decoration.parse("hidden") is Decoration.HIDDEN
        assert Decoration.parse("strikethrough") is Decoration.STRIKETHROUGH

    def test_to_ansi(self) -> None:
        assert Decoration.NONE.to_ansi() == "\x1b[0m"
        assert Decoration.BOLD.to_ansi() == "\x1b[1m"
        assert Decoration.DOUBLE_UNDERLINE.to_ansi() == "\x1b[21m"
        assert Decoration.OVERLINE.to_ansi() == "\x1b[53m"
        assert Decoration.FRAMED.to_ansi() == "\x1b[51m"
        assert Decoration.ENCIRCLED.to_ansi() == "\x1b[52m"
        assert Decoration.reset() == "\x1b[0m"

    @pytest.mark.parametrize("token", ["Bold", "BOLD", "glow", "rapid_blink"])
    def test_unknown_keyword(self, token: str) -> None:
        with pytest.raises(ValueError, match=f"Unknown decoration: {token}"):
            Decoration.parse(token)


class TestBorderStyle:
    """Tests for BorderStyle keywords and glyphs."""

    def test_parse(self) -> None:
        assert BorderStyle.parse("solid") is BorderStyle.SOLID
        assert BorderStyle.parse("dashed") is BorderStyle.DASHED
        assert BorderStyle.parse("rounded") is BorderStyle.ROUNDED
        assert BorderStyle.parse("double") is BorderStyle.DOUBLE

    def test_unknown(self) -> None:
        with pytest.raises(ValueError, match="Unknown border style: dotted"):
            BorderStyle.parse("dotted")
        with pytest.raises(ValueError):
            BorderStyle.parse("Solid")

    def test_glyphs(self) -> None:
        assert BorderStyle.SOLID.glyphs == BorderGlyphs("┌", "┐", "└", "┘", "─", "│")
        assert BorderStyle.DASHED.glyphs.horizontal == "┈"
        assert BorderStyle.DASHED.glyphs.vertical == "┊"
        assert BorderStyle.ROUNDED.glyphs.top_left == "╭"
        assert BorderStyle.ROUNDED.glyphs.bottom_right == "╯"
        assert BorderStyle.DOUBLE.glyphs.vertical == "║"

    def test_every_style_has_six_glyphs(self) -> None:
        for border in BorderStyle:
            glyphs = border.glyphs
            assert len({glyphs.top_left, glyphs.top_right, glyphs.bottom_left, glyphs.bottom_right}) == 4


class TestStyle:
    """Tests for the Style record."""

    def test_default_style(self) -> None:
        style = Style()
        assert style.fg is None
        assert style.bg is None
        assert style.decoration is None
        assert style.padding is None
        assert style.border_style is None
        assert style.has_border is False

    def test_fluent_setters_return_same_instance(self) -> None:
        style = Style()
        result = (style
            .with_fg(Color.GREEN)
            .with_bg(Color.BLACK)
            .with_decoration([Decoration.BOLD])
            .with_padding(1)
            .with_margin_left(2)
            .with_border_color(Color.YELLOW)
            .with_border_style(BorderStyle.ROUNDED))
        assert result is style
        assert style.fg == Color.GREEN
        assert style.decoration == [Decoration.BOLD]
        assert style.margin_left == 2
        assert style.has_border is True

    def test_keyword_construction(self) -> None:
        style = Style(fg=Color.RED, padding=2)
        assert style == Style().with_fg(Color.RED).with_padding(2)

    def test_resolved_padding_defaults_to_zero(self) -> None:
        assert Style().resolved_padding() == Spacing(0, 0, 0, 0)
        assert Style().resolved_margin() == Spacing(0, 0, 0, 0)

    def test_resolved_padding_falls_back_to_uniform(self) -> None:
        style = Style(padding=2, padding_left=5)
        assert style.resolved_padding() == Spacing(top=2, right=2, bottom=2, left=5)

    def test_explicit_zero_side_overrides_uniform(self) -> None:
        style = Style(margin=3, margin_top=0)
        assert style.resolved_margin() == Spacing(top=0, right=3, bottom=3, left=3)

    def test_copy_is_independent(self) -> None:
        style = Style(decoration=[Decoration.BOLD])
        copy = style.copy()
        copy.decoration.append(Decoration.ITALIC)
        assert style.decoration == [Decoration.BOLD]

    def test_to_dict(self) -> None:
        style = Style(
            fg=Color.INTENSE_RED,
            decoration=[Decoration.BOLD, Decoration.HIDDEN],
            padding_top=1,
            border_style=BorderStyle.DOUBLE,
        )
        assert style.to_dict() == {
            "color": "i-red",
            "decoration": "bold hidden",
            "padding-top": 1,
            "border-style": "double",
        }
