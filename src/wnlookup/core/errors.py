"""Exceptions raised by the lookup engine.

Not-found is never an error: lookups return ``None`` or an empty list.
"""

from __future__ import annotations


class WordnetError(Exception):
    """Base class for all wnlookup errors."""


class ConfigError(WordnetError):
    """The data directory (or one of its files) is missing or unreadable."""


class InvalidOffset(WordnetError, ValueError):
    """A byte offset is not a positive integer inside the file."""


class MalformedRecord(WordnetError, ValueError):
    """A database line does not have the expected structure."""

    def __init__(self, message: str, line: str | None = None) -> None:
        super().__init__(message)
        self.line = line

    def __str__(self) -> str:
        message = super().__str__()
        if self.line is None:
            return message
        return f"{message}\n{self.line}"
