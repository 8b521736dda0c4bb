"""
Turns raw "magnitude,ra,dec" rows into Star records.

Rows which cannot be parsed are skipped and logged, rows at or above the
magnitude cutoff are silently dropped.
"""

from __future__ import annotations
import logging
import math
from typing import Iterable, List, Optional

from .star import Star

logger = logging.getLogger(__name__)


def parse_line(line: str) -> Optional[Star]:
    """
    Parse a single catalog row.

    Args:
        line (str): Comma separated "magnitude, ra, dec", extra columns ignored.

    Returns:
        The star, or None if any of the three fields is not a finite number.
    """
    parts = line.strip().split(",")
    if len(parts) < 3:
        return None

    try:
        mag, ra, dec = (float(p) for p in parts[:3])
    except ValueError:
        return None

    if not (math.isfinite(mag) and math.isfinite(ra) and math.isfinite(dec)):
        return None

    return Star.from_values(mag, ra, dec)


def parse_catalog(lines: Iterable[str], cutoff: float, header: bool = False) -> List[Star]:
    """
    Parse every row, keeping input order.

    Args:
        lines (Iterable[str]): Raw rows.
        cutoff (float): Stars with magnitude >= cutoff are excluded.
        header (bool): Drop the first row before parsing.

    Returns:
        List of valid stars brighter than the cutoff.
    """
    stars: List[Star] = []
    skipped = 0

    for i, line in enumerate(lines):
        if header and i == 0:
            continue

        star = parse_line(line)
        if star is None:
            skipped += 1
            logger.warning("Invalid line, ignoring: %r", line.rstrip("\n"))
            continue

        if star.attribute < cutoff:
            stars.append(star)

    if skipped:
        logger.info("Skipped %d unparseable rows", skipped)

    return stars
