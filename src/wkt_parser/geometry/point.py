# src/wkt_parser/geometry/point.py

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from wkt_parser.core.context import ParseContext
from wkt_parser.loader.cursor import PeekableTokens

from .base import BaseGeometry
from .coordinate import Coordinate


@dataclass(frozen=True)
class Point(BaseGeometry):
    """A single coordinate. ``POINT ()`` is not a valid point."""

    geometry_type = "POINT"
    allow_empty = False
    max_elements = 1

    coord: Coordinate

    @property
    def elements(self) -> Tuple[Coordinate, ...]:
        return (self.coord,)

    @classmethod
    def parse_element(cls, cursor: PeekableTokens, context: ParseContext) -> Coordinate:
        return Coordinate.from_tokens(cursor, context)

    @classmethod
    def from_elements(cls, elements: List[Coordinate]) -> "Point":
        return cls(coord=elements[0])
