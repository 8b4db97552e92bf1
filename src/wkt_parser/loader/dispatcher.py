# src/wkt_parser/loader/dispatcher.py

from __future__ import annotations

from typing import Dict, Type

from wkt_parser.core.context import ParseContext
from wkt_parser.core.exceptions import EncodingError, UnknownGeometryTypeError
from wkt_parser.geometry import (
    BaseGeometry,
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)

from .cursor import PeekableTokens
from .tokenizer import Token

GEOMETRY_TYPES: Dict[str, Type[BaseGeometry]] = {
    cls.geometry_type: cls
    for cls in (
        Point,
        LineString,
        Polygon,
        MultiPoint,
        MultiLineString,
        MultiPolygon,
        GeometryCollection,
    )
}


def parse_geometry(word: Token, cursor: PeekableTokens, context: ParseContext) -> Geometry:
    """
    Parse the geometry introduced by ``word``.

    The keyword is matched case-insensitively against ``GEOMETRY_TYPES``
    and the cursor, positioned just after it, is handed to that kind's
    group parser.

    Raises:
        EncodingError: if the keyword is not plain ASCII.
        UnknownGeometryTypeError: if the keyword names no supported kind.
    """
    text = str(word.value)
    if not text.isascii():
        raise EncodingError(text, word.position)

    keyword = text.upper()
    geometry_cls = GEOMETRY_TYPES.get(keyword)
    if geometry_cls is None:
        raise UnknownGeometryTypeError(keyword, word.position)

    if context.logger is not None:
        context.logger.debug(f"Dispatching {keyword} at position {word.position}")

    return geometry_cls.from_tokens_with_parens(cursor, context)
