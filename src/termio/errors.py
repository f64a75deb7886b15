"""Errors raised while parsing style declarations."""

from __future__ import annotations


class ParseError(Exception):
    """Base class for declaration parsing failures."""


class InvalidSyntax(ParseError):
    """Malformed declaration source, unknown values, or unreadable input."""

    def __init__(self, message: str, line: int | None = None):
        self.message = message
        self.line = line
        super().__init__(message)

    def __str__(self) -> str:
        if self.line is not None:
            return f"Invalid syntax: {self.message} (line {self.line})"
        return f"Invalid syntax: {self.message}"


class DuplicateElement(ParseError):
    """A block name that already exists in the registry."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Duplicate element name: {self.name}"
