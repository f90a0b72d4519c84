"""Exceptions for the reply parser module."""

from typing import Any


class ReplyParserError(Exception):
    """Base exception for reply parser errors."""

    pass


class PatternConfigError(ReplyParserError):
    """Raised when a configured pattern cannot be used.

    Parsing itself never raises. This covers configuration only: pattern
    strings that do not compile, values of the wrong type, and pattern
    files that cannot be read.

    Attributes:
        pattern: The offending pattern, value, or file path.
    """

    def __init__(self, message: str, pattern: Any = None):
        super().__init__(message)
        self.pattern = pattern
