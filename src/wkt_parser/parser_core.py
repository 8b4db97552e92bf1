"""
parser_core.py
Document assembly and the public parse entry points.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Union

from wkt_parser.config import get_config
from wkt_parser.core.context import Dimension, ParseContext
from wkt_parser.core.exceptions import TrailingInputError, WKTError
from wkt_parser.geometry import Document, Geometry
from wkt_parser.loader.cursor import PeekableTokens
from wkt_parser.loader.dispatcher import parse_geometry
from wkt_parser.loader.tokenizer import Token, TokenKind, tokenize
from wkt_parser.logging import get_logger

DimensionLike = Union[Dimension, str]


class WKTParser:
    """
    High-level parser:
      - tokenizes WKT text (lazily)
      - reads the geometry keyword and dispatches to its kind
      - wraps the result in a Document

    Defaults for ``dimension`` and ``allow_trailing`` come from the
    configuration; both can be overridden per call.
    """

    def __init__(self, config=None):
        self.cfg = config if config is not None else get_config()
        self.log = get_logger("parser_core")

    def _context(
        self,
        dimension: Optional[DimensionLike],
        allow_trailing: Optional[bool],
    ) -> ParseContext:
        return ParseContext(
            dimension=Dimension.parse(dimension) if dimension is not None else self.cfg.dimension,
            allow_trailing=self.cfg.allow_trailing if allow_trailing is None else allow_trailing,
            logger=self.log,
            max_depth=self.cfg.max_depth,
        )

    def parse(
        self,
        text: str,
        *,
        dimension: Optional[DimensionLike] = None,
        allow_trailing: Optional[bool] = None,
    ) -> Document:
        """Parse WKT text into a Document."""
        return self.parse_tokens(
            tokenize(text), dimension=dimension, allow_trailing=allow_trailing
        )

    def parse_tokens(
        self,
        tokens: Iterable[Token],
        *,
        dimension: Optional[DimensionLike] = None,
        allow_trailing: Optional[bool] = None,
    ) -> Document:
        """
        Parse an already tokenized WKT geometry into a Document.

        Empty input gives an empty Document. Tokens after the first geometry
        are left unread unless ``allow_trailing`` is False, in which case
        any remaining token raises ``TrailingInputError``.
        """
        context = self._context(dimension, allow_trailing)
        cursor = PeekableTokens(tokens)

        try:
            items = self._read_items(cursor, context)
        except WKTError as exc:
            self.log.debug(f"WKT parse failed: {exc}")
            raise

        self.log.debug(f"Parsed document with {len(items)} item(s).")
        return Document(items=tuple(items))

    def _read_items(self, cursor: PeekableTokens, context: ParseContext) -> List[Geometry]:
        items: List[Geometry] = []

        if cursor.at_end():
            return items

        word = cursor.expect(TokenKind.WORD)
        items.append(parse_geometry(word, cursor, context))

        if not context.allow_trailing:
            extra = cursor.peek()
            if extra is not None:
                raise TrailingInputError(extra.describe(), extra.position)

        return items


def parse_wkt(
    text: str,
    *,
    dimension: Optional[DimensionLike] = None,
    allow_trailing: Optional[bool] = None,
) -> Document:
    """Parse WKT text with a parser built from the shared configuration."""
    return WKTParser().parse(text, dimension=dimension, allow_trailing=allow_trailing)


def parse_tokens(
    tokens: Iterable[Token],
    *,
    dimension: Optional[DimensionLike] = None,
    allow_trailing: Optional[bool] = None,
) -> Document:
    """Parse a token sequence with a parser built from the shared configuration."""
    return WKTParser().parse_tokens(tokens, dimension=dimension, allow_trailing=allow_trailing)


loads = parse_wkt
