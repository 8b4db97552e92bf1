# src/wkt_parser/loader/cursor.py

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from wkt_parser.core.exceptions import MalformedGroupError, UnexpectedEndOfInputError

from .tokenizer import Token, TokenKind

_EXHAUSTED = object()


class PeekableTokens:
    """
    Token iterator with one token of look-ahead.

    Parsers peek to decide whether a ``,`` continues the current group or a
    ``)`` closes it. Tokens are pulled from the underlying iterable only when
    needed, so lexing errors surface at the token that triggers them.
    """

    def __init__(self, tokens: Iterable[Token]):
        self._tokens: Iterator[Token] = iter(tokens)
        self._peeked: object = None
        self._has_peeked = False

    def __iter__(self) -> "PeekableTokens":
        return self

    def __next__(self) -> Token:
        if self._has_peeked:
            self._has_peeked = False
            token = self._peeked
            self._peeked = None
            if token is _EXHAUSTED:
                raise StopIteration
            return token  # type: ignore[return-value]
        return next(self._tokens)

    def peek(self) -> Optional[Token]:
        """Return the next token without consuming it, or None at the end."""
        if not self._has_peeked:
            self._peeked = next(self._tokens, _EXHAUSTED)
            self._has_peeked = True
        if self._peeked is _EXHAUSTED:
            return None
        return self._peeked  # type: ignore[return-value]

    def at_end(self) -> bool:
        return self.peek() is None

    def peek_kind(self) -> Optional[TokenKind]:
        token = self.peek()
        return token.kind if token is not None else None

    def accept(self, kind: TokenKind) -> Optional[Token]:
        """Consume and return the next token only if it has the given kind."""
        if self.peek_kind() is kind:
            return next(self)
        return None

    def expect(self, *kinds: TokenKind) -> Token:
        """
        Consume the next token and check it is one of ``kinds``.

        Raises:
            UnexpectedEndOfInputError: if no tokens remain.
            MalformedGroupError: if the token has another kind.
        """
        expected = " or ".join(str(k) for k in kinds)
        token = self.peek()
        if token is None:
            raise UnexpectedEndOfInputError(expected)
        if token.kind not in kinds:
            raise MalformedGroupError(expected, token.describe(), token.position)
        return next(self)
