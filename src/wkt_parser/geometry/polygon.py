# src/wkt_parser/geometry/polygon.py

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from wkt_parser.core.context import ParseContext
from wkt_parser.loader.cursor import PeekableTokens

from .base import BaseGeometry
from .linestring import LineString


@dataclass(frozen=True)
class Polygon(BaseGeometry):
    """
    A list of rings, each a parenthesized coordinate list.

    The first ring is conventionally the exterior and the rest are holes.
    Closure and orientation of rings are not checked.
    """

    geometry_type = "POLYGON"

    rings: Tuple[LineString, ...] = ()

    @property
    def elements(self) -> Tuple[LineString, ...]:
        return self.rings

    @property
    def exterior(self):
        return self.rings[0] if self.rings else None

    @property
    def interiors(self) -> Tuple[LineString, ...]:
        return self.rings[1:]

    @classmethod
    def parse_element(cls, cursor: PeekableTokens, context: ParseContext) -> LineString:
        return LineString.from_tokens_with_parens(cursor, context)

    @classmethod
    def from_elements(cls, elements: List[LineString]) -> "Polygon":
        return cls(rings=tuple(elements))
