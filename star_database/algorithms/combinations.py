"""
Walks the catalog pilot by pilot and resolves every companion triple.
"""

from __future__ import annotations
import itertools
import logging
from typing import Callable, Iterator, List, Optional, Sequence

from ..catalog.star import Star, StarSet
from .pyramid import DegenerateTriangleError, resolve
from .selector import MIN_CATALOG_SIZE, get_selector

logger = logging.getLogger(__name__)

PROGRESS_EVERY = 100


def combinations(pilot: Star, companions: Sequence[Star]) -> Iterator[StarSet]:
    """
    Yield a StarSet for every unordered triple of companions.

    Triples with an undefined angle are skipped.
    """
    for s0, s1, s2 in itertools.combinations(companions, 3):
        try:
            star_set = resolve(pilot, s0, s1, s2)
        except DegenerateTriangleError as e:
            logger.debug("Dropping degenerate combination around %s: %s", pilot.main, e)
            continue
        yield star_set


def _distinct(stars: Sequence[Star]) -> List[Star]:
    seen = set()
    out = []
    for s in stars:
        if id(s) not in seen:
            seen.add(id(s))
            out.append(s)
    return out


def enumerate_star_sets(
    catalog: Sequence[Star],
    group_size: int,
    radius: float,
    strategy: str = "bound",
    skip_after_pilot: bool = False,
    progress: Optional[Callable[[int], None]] = None,
) -> List[StarSet]:
    """
    Resolve every pilot in catalog order.

    The catalog is read through a cursor: the star at the cursor is the pilot
    and only the stars after it are candidates, so every pilot sees a smaller
    working set than the one before. The input sequence is not modified.

    Args:
        catalog (Sequence[Star]): Stars, brightest first for the bound strategy.
        group_size (int): Companions per pilot (>= 3).
        radius (float): Maximum pilot to companion distance (> 0).
        strategy (str): "bound" or "ring".
        skip_after_pilot (bool): Also consume the star after each pilot.
        progress (Callable[[int], None] | None): Called with the number of stars left.

    Returns:
        All resolved StarSets, in pilot order.

    Raises:
        ValueError: On invalid group_size, radius or strategy.
    """
    if group_size < 3:
        raise ValueError(f"group_size must be at least 3, got {group_size}")
    if not radius > 0:
        raise ValueError(f"radius must be positive, got {radius}")

    select = get_selector(strategy)
    stars = list(catalog)
    output: List[StarSet] = []
    cursor = 0
    pilots = 0

    logger.info("%d to go.", len(stars))

    while len(stars) - cursor >= MIN_CATALOG_SIZE:
        pilot = stars[cursor]
        cursor += 1
        candidates = stars[cursor:]

        companions = select(pilot, candidates, group_size, radius)
        if companions is not None:
            companions = _distinct(companions)
            if len(companions) >= 3:
                output.extend(combinations(pilot, companions))

        if skip_after_pilot:
            cursor += 1

        pilots += 1
        remaining = max(len(stars) - cursor, 0)
        if pilots % PROGRESS_EVERY == 0:
            logger.info("%d to go.", remaining)
        if progress is not None:
            progress(remaining)

    logger.info("Resolved %d star sets from %d pilots.", len(output), pilots)
    return output
