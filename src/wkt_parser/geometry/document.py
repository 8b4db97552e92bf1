# src/wkt_parser/geometry/document.py

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, Optional, Tuple

from .coordinate import Coordinate

if TYPE_CHECKING:
    from . import Geometry


@dataclass(frozen=True)
class Document:
    """
    Result of one top-level parse.

    Holds zero items for empty input and one item otherwise; the model
    itself allows any number.
    """

    items: Tuple["Geometry", ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator["Geometry"]:
        return iter(self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def geometry(self) -> Optional["Geometry"]:
        """The first geometry, or None for an empty document."""
        return self.items[0] if self.items else None

    def iter_coords(self) -> Iterator[Coordinate]:
        for item in self.items:
            yield from item.iter_coords()
