# src/wkt_parser/geometry/linestring.py

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from wkt_parser.core.context import ParseContext
from wkt_parser.loader.cursor import PeekableTokens

from .base import BaseGeometry
from .coordinate import Coordinate


@dataclass(frozen=True)
class LineString(BaseGeometry):
    geometry_type = "LINESTRING"

    coords: Tuple[Coordinate, ...] = ()

    @property
    def elements(self) -> Tuple[Coordinate, ...]:
        return self.coords

    @classmethod
    def parse_element(cls, cursor: PeekableTokens, context: ParseContext) -> Coordinate:
        return Coordinate.from_tokens(cursor, context)

    @classmethod
    def from_elements(cls, elements: List[Coordinate]) -> "LineString":
        return cls(coords=tuple(elements))
