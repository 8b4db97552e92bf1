# src/wkt_parser/loader/tokenizer.py

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Union

from wkt_parser.core.exceptions import InvalidTokenError


class TokenKind(Enum):
    WORD = "WORD"
    NUMBER = "NUMBER"
    LPAREN = "'('"
    RPAREN = "')'"
    COMMA = "','"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Token:
    """
    A single WKT lexical token.

    Attributes:
        kind: Token kind (word, number or one of the punctuation marks).
        value: The keyword text for WORD, the parsed float for NUMBER,
            the punctuation character otherwise.
        position: 0-based offset of the first character in the source text,
            or None for tokens that did not come from text.
    """
    kind: TokenKind
    value: Union[str, float]
    position: Optional[int] = None

    def describe(self) -> str:
        if self.kind is TokenKind.WORD:
            return f"WORD {self.value!r}"
        if self.kind is TokenKind.NUMBER:
            return f"NUMBER {self.value!r}"
        return str(self.kind)


WHITESPACE = frozenset(" \t\n\r")

PUNCTUATION = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    ",": TokenKind.COMMA,
}

# Optional sign, integer or decimal mantissa, optional exponent. ASCII digits only.
NUMBER_RE = re.compile(r"[-+]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?")


def _scan_word(text: str, start: int) -> int:
    end = start
    while end < len(text) and text[end].isalpha():
        end += 1
    return end


def tokenize(text: str) -> Iterator[Token]:
    """
    Lazily yield the tokens of a WKT string.

    Whitespace (space, tab, newline, carriage return) separates tokens and
    produces none. The scan is purely lexical: nothing checks how tokens
    combine.

    Raises:
        InvalidTokenError: on the first character that starts no token.
            Tokens before it have already been yielded.
    """
    pos = 0
    length = len(text)

    while pos < length:
        char = text[pos]

        if char in WHITESPACE:
            pos += 1
            continue

        kind = PUNCTUATION.get(char)
        if kind is not None:
            yield Token(kind, char, pos)
            pos += 1
            continue

        if char.isalpha():
            end = _scan_word(text, pos)
            yield Token(TokenKind.WORD, text[pos:end], pos)
            pos = end
            continue

        match = NUMBER_RE.match(text, pos)
        if match:
            yield Token(TokenKind.NUMBER, float(match.group(0)), pos)
            pos = match.end()
            continue

        raise InvalidTokenError(char, pos)
