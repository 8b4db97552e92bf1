# src/wkt_parser/geometry/multipolygon.py

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from wkt_parser.core.context import ParseContext
from wkt_parser.loader.cursor import PeekableTokens

from .base import BaseGeometry
from .polygon import Polygon


@dataclass(frozen=True)
class MultiPolygon(BaseGeometry):
    geometry_type = "MULTIPOLYGON"

    polygons: Tuple[Polygon, ...] = ()

    @property
    def elements(self) -> Tuple[Polygon, ...]:
        return self.polygons

    @classmethod
    def parse_element(cls, cursor: PeekableTokens, context: ParseContext) -> Polygon:
        return Polygon.from_tokens_with_parens(cursor, context)

    @classmethod
    def from_elements(cls, elements: List[Polygon]) -> "MultiPolygon":
        return cls(polygons=tuple(elements))
