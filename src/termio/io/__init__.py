"""Stylesheet file I/O."""

from termio.io.reader import load

__all__ = ["load"]
