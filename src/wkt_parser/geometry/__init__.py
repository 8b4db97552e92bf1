"""
Geometry data model.

Every kind is a frozen dataclass that knows how to parse its own
parenthesized group (see ``FromTokens``). ``Geometry`` is the closed union
of the seven kinds a WKT keyword can name.
"""

from typing import Union

from .base import BaseGeometry, FromTokens
from .collection import GeometryCollection
from .coordinate import Coordinate
from .document import Document
from .linestring import LineString
from .multilinestring import MultiLineString
from .multipoint import MultiPoint
from .multipolygon import MultiPolygon
from .point import Point
from .polygon import Polygon

Geometry = Union[
    Point,
    LineString,
    Polygon,
    MultiPoint,
    MultiLineString,
    MultiPolygon,
    GeometryCollection,
]

__all__ = [
    "BaseGeometry",
    "FromTokens",
    "Coordinate",
    "Document",
    "Geometry",
    "GeometryCollection",
    "LineString",
    "MultiLineString",
    "MultiPoint",
    "MultiPolygon",
    "Point",
    "Polygon",
]
