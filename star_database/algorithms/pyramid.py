"""
Pyramid angle resolution.

Given a pilot and three companions, the companion furthest from the pilot is
the "opposite" star and the stored angle is the angle at that star, inside
the triangle formed by the three companions (cosine rule).
"""

from __future__ import annotations
import math
from typing import Tuple

from ..catalog.star import Star, StarSet


class DegenerateTriangleError(ArithmeticError):
    """Raised when three stars do not define an angle (coincident vertices, non finite sides)."""


def _distance(a: Star, b: Star) -> float:
    try:
        return a.distance(b)
    except ArithmeticError as e:
        raise DegenerateTriangleError(str(e)) from e


def sort_furthest(pilot: Star, s0: Star, s1: Star, s2: Star) -> Tuple[Star, Star, Star]:
    """
    Order three stars so the one furthest from the pilot comes first.

    Args:
        pilot (Star): Reference star.
        s0, s1, s2 (Star): Companions.

    Returns:
        (furthest, other, other). Ties fall through to the later star.
    """
    d0 = _distance(s0, pilot)
    d1 = _distance(s1, pilot)
    d2 = _distance(s2, pilot)

    if d0 > d1 and d0 > d2:
        return s0, s1, s2
    if d1 > d2:
        return s1, s0, s2
    return s2, s1, s0


def cosine_rule(a: float, b: float, c: float) -> float:
    """
    Angle opposite side `a` of a triangle with sides a, b, c.

    Raises:
        DegenerateTriangleError: If b or c is zero or the cosine is outside [-1, 1].
    """
    if not (math.isfinite(a) and math.isfinite(b) and math.isfinite(c)):
        raise DegenerateTriangleError("non finite side length")
    if b == 0 or c == 0:
        raise DegenerateTriangleError("coincident vertices")

    cos_a = (b * b + c * c - a * a) / (2.0 * b * c)
    if not math.isfinite(cos_a) or not -1.0 <= cos_a <= 1.0:
        raise DegenerateTriangleError(f"undefined angle, cos = {cos_a}")

    return math.acos(cos_a)


def find_angle(opposite: Star, s1: Star, s2: Star) -> float:
    """Angle s1 - opposite - s2 in radians."""
    a = _distance(s1, s2)
    b = _distance(opposite, s2)
    c = _distance(opposite, s1)
    return cosine_rule(a, b, c)


def _check_distinct(s0: Star, s1: Star, s2: Star) -> None:
    if s0 is s1 or s0 is s2 or s1 is s2:
        raise ValueError("a pyramid needs three distinct companion stars")


def resolve(pilot: Star, s0: Star, s1: Star, s2: Star) -> StarSet:
    """
    Resolve one pilot + 3 companion group into a StarSet.

    Raises:
        ValueError: If the same star is passed twice.
        DegenerateTriangleError: If the angle is undefined.
    """
    _check_distinct(s0, s1, s2)
    opposite, a, b = sort_furthest(pilot, s0, s1, s2)
    angle = find_angle(opposite, a, b)
    return StarSet(angle, pilot.main, opposite.main)


def resolve_legacy(pilot: Star, s0: Star, s1: Star, s2: Star) -> StarSet:
    """
    Swap based formulation: assume s0 is furthest, swap sides if s1 or s2 is.

    Equivalent to `resolve` when there are no distance ties.
    """
    _check_distinct(s0, s1, s2)

    hyp = _distance(s0, pilot)
    adj = _distance(s1, pilot)
    opp = _distance(s2, pilot)

    # side x is opposite vertex x
    a = _distance(s1, s2)
    b = _distance(s0, s2)
    c = _distance(s0, s1)
    far = s0

    if adj > hyp and adj > opp:
        a, b = b, a
        far = s1
    elif opp > hyp:
        a, c = c, a
        far = s2

    return StarSet(cosine_rule(a, b, c), pilot.main, far.main)
