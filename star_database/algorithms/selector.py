"""
Companion selection around a pilot star.

Two strategies:
- bound: first `num` stars of a brightness sorted catalog strictly inside a radius.
- ring: the `num` nearest stars, nearest first, by raising a distance floor each round.
"""

from __future__ import annotations
import math
from typing import Callable, Dict, List, Optional, Sequence

from ..catalog.star import Star

# Smallest catalog (pilot included) worth searching.
MIN_CATALOG_SIZE = 4

SelectFn = Callable[[Star, Sequence[Star], int, float], Optional[List[Star]]]


def _distance_or_inf(pilot: Star, star: Star) -> float:
    # overflowing distances put the star out of reach
    try:
        return star.distance(pilot)
    except ArithmeticError:
        return math.inf


def find_closest_brightest(
    pilot: Star, stars: Sequence[Star], num: int, radius: float
) -> Optional[List[Star]]:
    """
    Scan forward from the brightest candidate collecting stars inside the radius.

    Args:
        pilot (Star): The pilot, not part of `stars`.
        stars (Sequence[Star]): Candidates sorted brightest first.
        num (int): Number of companions required.
        radius (float): Exclusive maximum distance from the pilot.

    Returns:
        The first `num` qualifying stars in encounter order, or None if the
        catalog runs out first.
    """
    if len(stars) + 1 < MIN_CATALOG_SIZE:
        return None

    close: List[Star] = []
    for cur in stars:
        if _distance_or_inf(pilot, cur) < radius:
            close.append(cur)
            if len(close) == num:
                return close

    return None


def find_closest(
    pilot: Star, stars: Sequence[Star], num: int, radius: float = math.inf
) -> List[Star]:
    """
    Nearest neighbours of the pilot, nearest first.

    Each round picks the closest star strictly further than the previous pick,
    so stars sitting on the pilot are never chosen. If a round finds nothing
    the previous pick is repeated. `radius` is accepted for a common call
    signature and not applied.

    Raises:
        ValueError: If there are no candidates or num < 1.
    """
    if num < 1:
        raise ValueError(f"num must be positive, got {num}")
    if not stars:
        raise ValueError("cannot select companions from an empty catalog")

    close: List[Star] = []
    last_dist = 0.0

    for _ in range(num):
        best: Optional[Star] = None
        best_dist = math.inf

        for cur in stars:
            dist = _distance_or_inf(pilot, cur)
            if last_dist < dist < best_dist:
                best_dist = dist
                best = cur

        if best is None:
            best = close[-1] if close else stars[0]
        else:
            last_dist = best_dist
        close.append(best)

    return close


STRATEGIES: Dict[str, SelectFn] = {
    "bound": find_closest_brightest,
    "ring": find_closest,
}


def get_selector(strategy: str) -> SelectFn:
    try:
        return STRATEGIES[strategy]
    except KeyError:
        raise ValueError(f"unknown selection strategy {strategy!r}, expected one of {sorted(STRATEGIES)}") from None
