"""Renderers for outputting styled text."""

from termio.render.box import BoxRenderer, render
from termio.render.text import display_width, strip_ansi, visible_width

__all__ = ["BoxRenderer", "render", "display_width", "strip_ansi", "visible_width"]
