from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from .exceptions import ConfigError

DEFAULT_MAX_DEPTH = 100


class Dimension(Enum):
    """Ordinate layout expected for every coordinate of one parse call."""

    XY = "xy"
    XYZ = "xyz"
    XYM = "xym"
    XYZM = "xyzm"
    INFER = "infer"

    @property
    def ordinate_count(self) -> int:
        if self is Dimension.INFER:
            raise ValueError("INFER has no fixed ordinate count")
        return len(self.value)

    @property
    def has_z(self) -> bool:
        return "z" in self.value

    @property
    def has_m(self) -> bool:
        return "m" in self.value

    @classmethod
    def from_count(cls, count: int) -> "Dimension":
        """Dimension implied by a bare ordinate count (3 means XYZ)."""
        return {2: cls.XY, 3: cls.XYZ, 4: cls.XYZM}[count]

    @classmethod
    def parse(cls, value: Any) -> "Dimension":
        """Accept a Dimension or its case-insensitive name."""
        if isinstance(value, Dimension):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(d.value for d in cls)
            raise ConfigError(
                f"Unknown dimension {value!r}; expected one of: {choices}"
            ) from None


@dataclass
class ParseContext:
    """
    Per-call parse options, passed down through every geometry parser.

    ``dimension`` starts as the requested layout. Under ``Dimension.INFER``
    the first coordinate parsed replaces it, so the rest of the call is held
    to the same layout.

    ``max_depth`` bounds how deeply parenthesized groups may nest; ``depth``
    is the nesting reached so far while the call runs.
    """

    dimension: Dimension = Dimension.XY
    allow_trailing: bool = True
    logger: Optional[Any] = None
    max_depth: int = DEFAULT_MAX_DEPTH
    depth: int = 0

    def fix_dimension(self, count: int) -> Dimension:
        self.dimension = Dimension.from_count(count)
        if self.logger is not None:
            self.logger.debug(f"Inferred dimension {self.dimension.name}")
        return self.dimension
