# src/wkt_parser/geometry/multipoint.py

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from wkt_parser.core.context import ParseContext
from wkt_parser.loader.cursor import PeekableTokens

from .base import BaseGeometry
from .point import Point


@dataclass(frozen=True)
class MultiPoint(BaseGeometry):
    """Points written as ``MULTIPOINT ((x y), (x y))``."""

    geometry_type = "MULTIPOINT"

    points: Tuple[Point, ...] = ()

    @property
    def elements(self) -> Tuple[Point, ...]:
        return self.points

    @classmethod
    def parse_element(cls, cursor: PeekableTokens, context: ParseContext) -> Point:
        return Point.from_tokens_with_parens(cursor, context)

    @classmethod
    def from_elements(cls, elements: List[Point]) -> "MultiPoint":
        return cls(points=tuple(elements))
