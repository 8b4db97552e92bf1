"""
Shared parse plumbing: error taxonomy and per-call parse context.
"""

from .context import Dimension, ParseContext
from .exceptions import (
    ConfigError,
    EncodingError,
    InvalidTokenError,
    MalformedGroupError,
    NestingTooDeepError,
    TooFewOrdinatesError,
    TooManyOrdinatesError,
    TrailingInputError,
    UnexpectedEndOfInputError,
    UnknownGeometryTypeError,
    WKTError,
)

__all__ = [
    "Dimension",
    "ParseContext",
    "ConfigError",
    "EncodingError",
    "InvalidTokenError",
    "MalformedGroupError",
    "NestingTooDeepError",
    "TooFewOrdinatesError",
    "TooManyOrdinatesError",
    "TrailingInputError",
    "UnexpectedEndOfInputError",
    "UnknownGeometryTypeError",
    "WKTError",
]
