"""
Error taxonomy for the WKT parser.

Every parse failure is terminal for the current call. Errors are raised where
they are detected and travel unchanged up to the caller.
"""

from __future__ import annotations

from typing import Optional


class WKTError(ValueError):
    """Base class for all WKT parse failures."""

    def __init__(self, message: str, position: Optional[int] = None):
        self.position = position
        if position is not None:
            message = f"{message} (at position {position})"
        super().__init__(message)


class InvalidTokenError(WKTError):
    """Raised when the tokenizer meets a character no token accepts."""

    def __init__(self, char: str, position: Optional[int] = None):
        self.char = char
        super().__init__(f"Invalid character {char!r}", position)


class EncodingError(WKTError):
    """Raised when a geometry keyword is not plain ASCII."""

    def __init__(self, word: str, position: Optional[int] = None):
        self.word = word
        super().__init__(f"Encountered non-ascii word {word!r}", position)


class UnknownGeometryTypeError(WKTError):
    """Raised when a keyword does not name a supported geometry type."""

    def __init__(self, keyword: str, position: Optional[int] = None):
        self.keyword = keyword
        super().__init__(f"Unknown geometry type {keyword!r}", position)


class MalformedGroupError(WKTError):
    """Raised when a group holds a token other than the one expected."""

    def __init__(self, expected: str, found: str, position: Optional[int] = None):
        self.expected = expected
        self.found = found
        super().__init__(f"Expected {expected}, found {found}", position)


class UnexpectedEndOfInputError(WKTError):
    """Raised when the token stream runs out in the middle of a geometry."""

    def __init__(self, expected: str):
        self.expected = expected
        super().__init__(f"Unexpected end of input, expected {expected}")


class TooFewOrdinatesError(WKTError):
    def __init__(self, found: int, required: int, position: Optional[int] = None):
        self.found = found
        self.required = required
        super().__init__(
            f"Coordinate has {found} ordinate(s), at least {required} required",
            position,
        )


class TooManyOrdinatesError(WKTError):
    def __init__(self, found: int, allowed: int, position: Optional[int] = None):
        self.found = found
        self.allowed = allowed
        super().__init__(
            f"Coordinate has {found} ordinate(s), at most {allowed} allowed",
            position,
        )


class TrailingInputError(WKTError):
    """Raised in strict mode when tokens remain after the geometry."""

    def __init__(self, found: str, position: Optional[int] = None):
        self.found = found
        super().__init__(f"Unexpected trailing input {found}", position)


class ConfigError(Exception):
    """Raised when configuration values are invalid."""


class NestingTooDeepError(WKTError):
    """Raised when groups nest deeper than the parse call allows."""

    def __init__(self, limit: int, position: Optional[int] = None):
        self.limit = limit
        super().__init__(f"Groups nested deeper than {limit} levels", position)
