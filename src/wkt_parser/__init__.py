"""
wkt_parser: parse Well-Known Text geometries into typed, immutable trees.

    >>> from wkt_parser import parse_wkt
    >>> doc = parse_wkt("POINT (10 -20)")
    >>> doc.geometry.coord.x
    10.0
"""

from wkt_parser.core.context import Dimension, ParseContext
from wkt_parser.core.exceptions import (
    EncodingError,
    InvalidTokenError,
    MalformedGroupError,
    NestingTooDeepError,
    TooFewOrdinatesError,
    TooManyOrdinatesError,
    TrailingInputError,
    UnexpectedEndOfInputError,
    UnknownGeometryTypeError,
    WKTError,
)
from wkt_parser.geometry import (
    Coordinate,
    Document,
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from wkt_parser.loader import PeekableTokens, Token, TokenKind, tokenize
from wkt_parser.loader.dispatcher import GEOMETRY_TYPES, parse_geometry
from wkt_parser.parser_core import WKTParser, loads, parse_tokens, parse_wkt

__all__ = [
    "Dimension",
    "ParseContext",
    "EncodingError",
    "InvalidTokenError",
    "MalformedGroupError",
    "NestingTooDeepError",
    "TooFewOrdinatesError",
    "TooManyOrdinatesError",
    "TrailingInputError",
    "UnexpectedEndOfInputError",
    "UnknownGeometryTypeError",
    "WKTError",
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
    "PeekableTokens",
    "Token",
    "TokenKind",
    "tokenize",
    "GEOMETRY_TYPES",
    "parse_geometry",
    "WKTParser",
    "loads",
    "parse_tokens",
    "parse_wkt",
]
