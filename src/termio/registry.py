"""Termio - a registry of named styles."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, Mapping

from termio.codec.tcss_parser import TcssParser
from termio.core.style import Style
from termio.render.box import render as render_text

logger = logging.getLogger(__name__)


class Termio:
    """
    A name -> Style registry populated from declaration source.

    Registries are independent of each other. Parsing is additive: each
    ``parse`` call may add new names, and a name already present (from
    this or any earlier call) raises ``DuplicateElement``. ``add_style``
    is the programmatic path and always overwrites.

    Example:
        >>> tcss = Termio()
        >>> tcss.parse('@element "warn" {\\n color: yellow;\\n}')
        >>> print(tcss.render("careful", "warn"))
    """

    def __init__(self) -> None:
        self._styles: dict[str, Style] = {}

    @classmethod
    def from_file(cls, path: str | Path) -> Termio:
        """Create a registry from a stylesheet on disk."""
        from termio.io.reader import load
        return load(path)

    @classmethod
    def from_styles(cls, styles: Mapping[str, Style]) -> Termio:
        """Create a registry from already-built styles."""
        tcss = cls()
        for name, style in styles.items():
            tcss.add_style(name, style)
        return tcss

    def parse(self, content: str) -> None:
        """
        Parse declaration source into this registry.

        Raises:
            InvalidSyntax: on malformed source or unrecognized values.
            DuplicateElement: if a block name is already registered.

        Blocks completed before a failing line remain registered.
        """
        before = len(self._styles)
        TcssParser(self._styles).feed(content)
        logger.debug("Parsed %d new style(s)", len(self._styles) - before)

    def get_style(self, name: str) -> Style | None:
        """Look up a style by name, or None if it is not registered."""
        return self._styles.get(name)

    def add_style(self, name: str, style: Style) -> None:
        """Register a style under ``name``, replacing any existing one."""
        self._styles[name] = style

    def names(self) -> list[str]:
        """Registered style names."""
        return list(self._styles)

    def render(self, text: str, name: str) -> str:
        """Render text with the named style, unstyled if the name is unknown."""
        return render_text(text, self.get_style(name) or Style())

    def __contains__(self, name: object) -> bool:
        return name in self._styles

    def __len__(self) -> int:
        return len(self._styles)

    def __iter__(self) -> Iterator[str]:
        return iter(self._styles)
