# src/wkt_parser/geometry/collection.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Tuple

from wkt_parser.core.context import ParseContext
from wkt_parser.loader.cursor import PeekableTokens
from wkt_parser.loader.tokenizer import TokenKind

from .base import BaseGeometry


@dataclass(frozen=True)
class GeometryCollection(BaseGeometry):
    """
    Heterogeneous geometries, each written with its own keyword.

    Elements go back through the keyword dispatcher, so collections nest.
    """

    geometry_type = "GEOMETRYCOLLECTION"

    items: Tuple[Any, ...] = ()

    @property
    def elements(self) -> Tuple[Any, ...]:
        return self.items

    @classmethod
    def parse_element(cls, cursor: PeekableTokens, context: ParseContext):
        # Imported here: the dispatcher's keyword table includes this class.
        from wkt_parser.loader.dispatcher import parse_geometry

        word = cursor.expect(TokenKind.WORD)
        return parse_geometry(word, cursor, context)

    @classmethod
    def from_elements(cls, elements: List[Any]) -> "GeometryCollection":
        return cls(items=tuple(elements))
