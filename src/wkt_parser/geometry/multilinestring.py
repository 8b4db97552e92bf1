# src/wkt_parser/geometry/multilinestring.py

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from wkt_parser.core.context import ParseContext
from wkt_parser.loader.cursor import PeekableTokens

from .base import BaseGeometry
from .linestring import LineString


@dataclass(frozen=True)
class MultiLineString(BaseGeometry):
    geometry_type = "MULTILINESTRING"

    lines: Tuple[LineString, ...] = ()

    @property
    def elements(self) -> Tuple[LineString, ...]:
        return self.lines

    @classmethod
    def parse_element(cls, cursor: PeekableTokens, context: ParseContext) -> LineString:
        return LineString.from_tokens_with_parens(cursor, context)

    @classmethod
    def from_elements(cls, elements: List[LineString]) -> "MultiLineString":
        return cls(lines=tuple(elements))
