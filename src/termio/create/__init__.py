"""Programmatic style construction."""

from termio.create.builder import StyledString, styled

__all__ = ["StyledString", "styled"]
