# src/wkt_parser/geometry/base.py

from __future__ import annotations

from typing import Any, ClassVar, Iterator, List, Optional, Tuple

from wkt_parser.core.context import ParseContext
from wkt_parser.core.exceptions import NestingTooDeepError
from wkt_parser.loader.cursor import PeekableTokens
from wkt_parser.loader.tokenizer import TokenKind


class FromTokens:
    """
    Shared "construct from tokens" capability of every geometry kind.

    The group syntax is handled once, in ``from_tokens_with_parens``:

        '(' (element (',' element)*)? ')'

    Each kind supplies ``parse_element`` (one comma-separated element) and
    ``from_elements`` (build the value from the parsed elements). Composite
    kinds parse their elements by calling the element kind's own
    ``from_tokens_with_parens``.
    """

    allow_empty: ClassVar[bool] = True
    max_elements: ClassVar[Optional[int]] = None

    @classmethod
    def parse_element(cls, cursor: PeekableTokens, context: ParseContext) -> Any:
        raise NotImplementedError

    @classmethod
    def from_elements(cls, elements: List[Any]) -> Any:
        raise NotImplementedError

    @classmethod
    def from_tokens_with_parens(cls, cursor: PeekableTokens, context: ParseContext):
        opening = cursor.expect(TokenKind.LPAREN)
        if context.depth >= context.max_depth:
            raise NestingTooDeepError(context.max_depth, opening.position)

        context.depth += 1
        try:
            return cls._parse_group_body(cursor, context)
        finally:
            context.depth -= 1

    @classmethod
    def _parse_group_body(cls, cursor: PeekableTokens, context: ParseContext):
        elements: List[Any] = []
        if cls.allow_empty and cursor.accept(TokenKind.RPAREN):
            return cls.from_elements(elements)

        elements.append(cls.parse_element(cursor, context))
        while True:
            if cls.max_elements is not None and len(elements) >= cls.max_elements:
                cursor.expect(TokenKind.RPAREN)
                break
            token = cursor.expect(TokenKind.COMMA, TokenKind.RPAREN)
            if token.kind is TokenKind.RPAREN:
                break
            elements.append(cls.parse_element(cursor, context))

        return cls.from_elements(elements)


class BaseGeometry(FromTokens):
    """
    Read-only container behaviour shared by the geometry kinds.

    ``geometry_type`` is the WKT keyword of the kind; together with the
    class itself it tags each member of the closed geometry union.
    """

    geometry_type: ClassVar[str] = ""

    @property
    def elements(self) -> Tuple[Any, ...]:
        raise NotImplementedError

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.elements)

    def iter_coords(self):
        """Yield every coordinate depth-first, in input order."""
        for element in self.elements:
            yield from element.iter_coords()
