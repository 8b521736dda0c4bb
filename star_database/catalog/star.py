"""
Records shared by every stage of the database generator.

- Point: a (ra, dec) position, planar distance only.
- Star: an attribute (magnitude before processing, angle after) and a position.
- StarSet: one resolved pyramid triangle (angle, pilot position, opposite position).
"""

from __future__ import annotations
import math
from dataclasses import dataclass, field


def _check_finite(*values: float) -> bool:
    return all(math.isfinite(v) for v in values)


@dataclass(frozen=True)
class Point:
    ra: float = 0.0
    dec: float = 0.0

    def distance(self, other: Point) -> float:
        """
        Euclidean distance in the ra/dec plane.

        Raises:
            ArithmeticError: If the distance is NaN or infinite.
        """
        dist = math.hypot(self.ra - other.ra, self.dec - other.dec)
        if not math.isfinite(dist):
            raise ArithmeticError(f"non finite distance between {self} and {other}")
        return dist

    def is_finite(self) -> bool:
        return _check_finite(self.ra, self.dec)

    def to_csv(self) -> str:
        return f"{self.ra!r},{self.dec!r}"


@dataclass
class Star:
    attribute: float = 0.0
    main: Point = field(default_factory=Point)

    @classmethod
    def from_values(cls, attribute: float, ra: float, dec: float) -> Star:
        return cls(attribute, Point(ra, dec))

    @property
    def ra(self) -> float:
        return self.main.ra

    @property
    def dec(self) -> float:
        return self.main.dec

    def distance(self, other: Star | StarSet) -> float:
        return self.main.distance(other.main)

    def __lt__(self, other: Star) -> bool:
        return self.attribute < other.attribute

    def to_csv_row(self) -> str:
        return f"{self.attribute!r},{self.main.to_csv()}"


@dataclass(frozen=True)
class StarSet:
    """
    Summary of one pilot + 3 companion combination.

    attribute is the angle (radians) at the companion furthest from the pilot,
    main is the pilot position and opposite is the furthest companion.
    """
    attribute: float = 0.0
    main: Point = field(default_factory=Point)
    opposite: Point = field(default_factory=Point)

    @classmethod
    def from_values(
        cls, attribute: float, pilot_ra: float, pilot_dec: float,
        opposite_ra: float, opposite_dec: float
    ) -> StarSet:
        return cls(attribute, Point(pilot_ra, pilot_dec), Point(opposite_ra, opposite_dec))

    def is_finite(self) -> bool:
        return math.isfinite(self.attribute) and self.main.is_finite() and self.opposite.is_finite()

    def fields(self) -> tuple[float, float, float, float, float]:
        return (self.attribute, self.main.ra, self.main.dec, self.opposite.ra, self.opposite.dec)

    def to_csv_row(self) -> str:
        """
        Returns "angle,pilot_ra,pilot_dec,opposite_ra,opposite_dec".

        Raises:
            ArithmeticError: If any value is NaN or infinite.
        """
        if not self.is_finite():
            raise ArithmeticError(f"found NaN or Inf in star set: {self}")
        return f"{self.attribute!r},{self.main.to_csv()},{self.opposite.to_csv()}"
