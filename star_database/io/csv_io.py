"""
Line based file access for catalogs and angle databases.
"""

from __future__ import annotations
import csv
from pathlib import Path
from typing import Iterable, List, Sequence, Union

from ..catalog.star import StarSet

PathLike = Union[str, Path]

DATABASE_HEADER = ("angle", "ra", "dec", "ra", "dec")


class DatabaseFormatError(ValueError):
    """A database row that is not five numbers."""


def read_lines(path: PathLike) -> List[str]:
    with open(path, "r", newline="") as f:
        return [line.rstrip("\r\n") for line in f]


def write_lines(path: PathLike, lines: Iterable[str]) -> None:
    with open(path, "w", newline="") as f:
        for line in lines:
            f.write(line + "\n")


def write_database(path: PathLike, star_sets: Iterable[StarSet], header: Sequence[str] = DATABASE_HEADER) -> int:
    """
    Write star sets as "angle,ra,dec,ra,dec" rows.

    Returns:
        Number of rows written (header excluded).

    Raises:
        ArithmeticError: If a star set holds NaN or Inf.
    """
    count = 0
    with open(path, "w", newline="") as f:
        w = csv.writer(f, lineterminator="\n")
        w.writerow(header)
        for s in star_sets:
            if not s.is_finite():
                raise ArithmeticError(f"found NaN or Inf in star set: {s}")
            w.writerow(s.fields())
            count += 1
    return count


def read_database(path: PathLike) -> List[StarSet]:
    """
    Read rows written by `write_database` (header line skipped).

    Raises:
        DatabaseFormatError: On a row with fewer than five fields or a non numeric field.
    """
    out: List[StarSet] = []
    with open(path, "r", newline="") as f:
        r = csv.reader(f)
        next(r, None)
        for row in r:
            if not row:
                continue
            try:
                values = [float(v) for v in row[:5]]
            except ValueError as e:
                raise DatabaseFormatError(f"{path}:{r.line_num}: {e}") from None
            if len(values) < 5:
                raise DatabaseFormatError(f"{path}:{r.line_num}: expected 5 fields, got {len(values)}")
            out.append(StarSet.from_values(*values))
    return out
