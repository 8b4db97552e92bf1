# src/wkt_parser/loader/__init__.py

"""
Lexical layer of the WKT parser.

    from wkt_parser.loader import Token, TokenKind, PeekableTokens, tokenize

The keyword dispatcher lives in ``wkt_parser.loader.dispatcher``; it is not
imported here because the geometry classes depend on this package.
"""

from __future__ import annotations

from .cursor import PeekableTokens
from .tokenizer import Token, TokenKind, tokenize

__all__ = [
    "PeekableTokens",
    "Token",
    "TokenKind",
    "tokenize",
]
