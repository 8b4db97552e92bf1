# tests/test_geometry_parsers.py

from __future__ import annotations

import pytest

from wkt_parser.core.context import Dimension, ParseContext
from wkt_parser.core.exceptions import (
    MalformedGroupError,
    TooFewOrdinatesError,
    TooManyOrdinatesError,
    UnexpectedEndOfInputError,
)
from wkt_parser.geometry import (
    Coordinate,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from wkt_parser.loader import PeekableTokens, tokenize


def cursor_for(text: str) -> PeekableTokens:
    return PeekableTokens(tokenize(text))


def test_coordinate_reads_xy() -> None:
    coord = Coordinate.from_tokens(cursor_for("1.5 -2"), ParseContext())
    assert coord == Coordinate(1.5, -2.0)
    assert coord.dimension is Dimension.XY


def test_coordinate_reads_xyz_and_xyzm() -> None:
    xyz = Coordinate.from_tokens(cursor_for("1 2 3"), ParseContext(Dimension.XYZ))
    assert (xyz.z, xyz.m) == (3.0, None)
    assert xyz.dimension is Dimension.XYZ

    xyzm = Coordinate.from_tokens(cursor_for("1 2 3 4"), ParseContext(Dimension.XYZM))
    assert (xyzm.z, xyzm.m) == (3.0, 4.0)
    assert xyzm.dimension is Dimension.XYZM


def test_coordinate_third_ordinate_is_m_for_xym() -> None:
    coord = Coordinate.from_tokens(cursor_for("1 2 7"), ParseContext(Dimension.XYM))
    assert coord.z is None
    assert coord.m == 7.0
    assert coord.dimension is Dimension.XYM


def test_coordinate_stops_at_terminator() -> None:
    cursor = cursor_for("1 2, 3 4")
    Coordinate.from_tokens(cursor, ParseContext())
    assert str(cursor.peek().kind) == "','"


def test_coordinate_too_few_ordinates() -> None:
    with pytest.raises(TooFewOrdinatesError) as excinfo:
        Coordinate.from_tokens(cursor_for("1 )"), ParseContext())
    assert excinfo.value.found == 1


def test_coordinate_fewer_than_dimension_requires() -> None:
    with pytest.raises(TooFewOrdinatesError) as excinfo:
        Coordinate.from_tokens(cursor_for("1 2 )"), ParseContext(Dimension.XYZ))
    assert excinfo.value.required == 3


def test_coordinate_more_than_dimension_allows() -> None:
    with pytest.raises(TooManyOrdinatesError) as excinfo:
        Coordinate.from_tokens(cursor_for("1 2 3 )"), ParseContext())
    assert excinfo.value.allowed == 2


def test_coordinate_more_than_four_ordinates() -> None:
    with pytest.raises(TooManyOrdinatesError) as excinfo:
        Coordinate.from_tokens(cursor_for("1 2 3 4 5"), ParseContext(Dimension.INFER))
    assert excinfo.value.allowed == 4


def test_coordinate_at_end_of_input() -> None:
    with pytest.raises(UnexpectedEndOfInputError):
        Coordinate.from_tokens(cursor_for("1"), ParseContext())


def test_infer_fixes_dimension_for_the_rest_of_the_call() -> None:
    context = ParseContext(Dimension.INFER)
    Coordinate.from_tokens(cursor_for("1 2 3"), context)
    assert context.dimension is Dimension.XYZ
    with pytest.raises(TooFewOrdinatesError):
        Coordinate.from_tokens(cursor_for("1 2 )"), context)


def test_point_group() -> None:
    point = Point.from_tokens_with_parens(cursor_for("(10 -20)"), ParseContext())
    assert point.coord == Coordinate(10.0, -20.0)
    assert list(point.iter_coords()) == [Coordinate(10.0, -20.0)]


def test_point_group_rejects_second_coordinate() -> None:
    with pytest.raises(MalformedGroupError) as excinfo:
        Point.from_tokens_with_parens(cursor_for("(1 2, 3 4)"), ParseContext())
    assert excinfo.value.expected == "')'"


def test_point_group_rejects_empty() -> None:
    with pytest.raises(TooFewOrdinatesError):
        Point.from_tokens_with_parens(cursor_for("()"), ParseContext())


def test_point_group_requires_open_paren() -> None:
    with pytest.raises(MalformedGroupError):
        Point.from_tokens_with_parens(cursor_for("10 20"), ParseContext())


def test_linestring_preserves_order() -> None:
    line = LineString.from_tokens_with_parens(cursor_for("(1 2, 3 4, 5 6)"), ParseContext())
    assert [(c.x, c.y) for c in line.coords] == [(1, 2), (3, 4), (5, 6)]
    assert len(line) == 3


def test_linestring_may_be_empty() -> None:
    line = LineString.from_tokens_with_parens(cursor_for("()"), ParseContext())
    assert line.coords == ()
    assert len(line) == 0


def test_linestring_missing_comma() -> None:
    with pytest.raises(TooManyOrdinatesError):
        LineString.from_tokens_with_parens(cursor_for("(1 2 3 4)"), ParseContext())


def test_linestring_trailing_comma() -> None:
    with pytest.raises(TooFewOrdinatesError):
        LineString.from_tokens_with_parens(cursor_for("(1 2, )"), ParseContext())


def test_linestring_unclosed_group() -> None:
    with pytest.raises(UnexpectedEndOfInputError):
        LineString.from_tokens_with_parens(cursor_for("(1 2, 3 4"), ParseContext())


def test_polygon_rings() -> None:
    polygon = Polygon.from_tokens_with_parens(
        cursor_for("((8 4, 4 0, 0 4, 8 4), (7 3, 4 1, 1 4, 7 3))"), ParseContext()
    )
    assert len(polygon.rings) == 2
    assert [len(r) for r in polygon.rings] == [4, 4]
    assert polygon.exterior is polygon.rings[0]
    assert polygon.interiors == (polygon.rings[1],)


def test_polygon_ring_must_be_parenthesized() -> None:
    with pytest.raises(MalformedGroupError):
        Polygon.from_tokens_with_parens(cursor_for("(8 4, 4 0)"), ParseContext())


def test_polygon_does_not_require_closed_rings() -> None:
    polygon = Polygon.from_tokens_with_parens(cursor_for("((0 0, 1 1))"), ParseContext())
    assert len(polygon.rings[0]) == 2


def test_multipoint_points() -> None:
    multipoint = MultiPoint.from_tokens_with_parens(cursor_for("((8 4), (4 0))"), ParseContext())
    assert [p.coord for p in multipoint.points] == [Coordinate(8, 4), Coordinate(4, 0)]


def test_multilinestring_lines() -> None:
    multi = MultiLineString.from_tokens_with_parens(
        cursor_for("((8 4, -3 0), (4 0, 6 -10))"), ParseContext()
    )
    assert len(multi.lines) == 2
    assert multi.lines[1].coords[1] == Coordinate(6, -10)


def test_multipolygon_polygons() -> None:
    multi = MultiPolygon.from_tokens_with_parens(cursor_for("(((8 4)), ((4 0)))"), ParseContext())
    assert len(multi.polygons) == 2
    assert multi.polygons[1].rings[0].coords == (Coordinate(4, 0),)


def test_collection_recurses_into_dispatcher() -> None:
    collection = GeometryCollection.from_tokens_with_parens(
        cursor_for("(POINT (1 2), geometrycollection (LINESTRING (3 4, 5 6)))"),
        ParseContext(),
    )
    assert isinstance(collection.items[0], Point)
    nested = collection.items[1]
    assert isinstance(nested, GeometryCollection)
    assert isinstance(nested.items[0], LineString)
    assert [c.x for c in collection.iter_coords()] == [1, 3, 5]


def test_collection_elements_need_keywords() -> None:
    with pytest.raises(MalformedGroupError) as excinfo:
        GeometryCollection.from_tokens_with_parens(cursor_for("((1 2))"), ParseContext())
    assert excinfo.value.expected == "WORD"


def test_geometries_are_immutable() -> None:
    point = Point(Coordinate(1, 2))
    with pytest.raises(AttributeError):
        point.coord = Coordinate(3, 4)  # type: ignore[misc]
