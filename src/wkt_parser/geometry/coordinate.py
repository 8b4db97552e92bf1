# src/wkt_parser/geometry/coordinate.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional

from wkt_parser.core.context import Dimension, ParseContext
from wkt_parser.core.exceptions import (
    TooFewOrdinatesError,
    TooManyOrdinatesError,
    UnexpectedEndOfInputError,
)
from wkt_parser.loader.cursor import PeekableTokens
from wkt_parser.loader.tokenizer import TokenKind

MIN_ORDINATES = 2
MAX_ORDINATES = 4


@dataclass(frozen=True)
class Coordinate:
    """
    One position: x and y always, z and m when the parse dimension has them.
    """

    x: float
    y: float
    z: Optional[float] = None
    m: Optional[float] = None

    @property
    def dimension(self) -> Dimension:
        if self.z is not None and self.m is not None:
            return Dimension.XYZM
        if self.z is not None:
            return Dimension.XYZ
        if self.m is not None:
            return Dimension.XYM
        return Dimension.XY

    def iter_coords(self) -> Iterator["Coordinate"]:
        yield self

    @classmethod
    def from_tokens(cls, cursor: PeekableTokens, context: ParseContext) -> "Coordinate":
        """
        Read the run of NUMBER tokens forming one coordinate.

        The ordinate count must match ``context.dimension``. Under
        ``Dimension.INFER`` the first coordinate of the call fixes it.
        """
        first = cursor.peek()
        position = first.position if first is not None else None

        ordinates: List[float] = []
        while cursor.peek_kind() is TokenKind.NUMBER:
            ordinates.append(float(next(cursor).value))

        count = len(ordinates)
        if count < MIN_ORDINATES:
            if cursor.at_end():
                raise UnexpectedEndOfInputError(str(TokenKind.NUMBER))
            raise TooFewOrdinatesError(count, MIN_ORDINATES, position)
        if count > MAX_ORDINATES:
            raise TooManyOrdinatesError(count, MAX_ORDINATES, position)

        dimension = context.dimension
        if dimension is Dimension.INFER:
            dimension = context.fix_dimension(count)

        required = dimension.ordinate_count
        if count < required:
            raise TooFewOrdinatesError(count, required, position)
        if count > required:
            raise TooManyOrdinatesError(count, required, position)

        x, y, *rest = ordinates
        z = rest.pop(0) if dimension.has_z else None
        m = rest.pop(0) if dimension.has_m else None
        return cls(x=x, y=y, z=z, m=m)
