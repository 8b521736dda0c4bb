"""
Star catalog loader for the HYG Database.

Provides:
- Loading of a full HYG csv (or any csv holding magnitude, RA, Dec)
- Selection of the magnitude / RA / Dec columns by name or position
- Filtering by magnitude into Star records for the database generator
"""

from __future__ import annotations
import pandas as pd
import numpy as np
from typing import List, Tuple, Union

from .star import Star

Column = Union[str, int]

# Column positions of apparent magnitude, RA and Dec in HYG v3.
HYG_V3_COLUMNS: Tuple[int, int, int] = (13, 7, 8)


class StarCatalog:
    def __init__(self, path: str, mag: Column = "mag", ra: Column = "ra", dec: Column = "dec"):
        """
        Load the catalog from CSV.

        Args:
            path (str): CSV file with a header row.
            mag, ra, dec (str | int): Column name or zero based column index.
        """
        raw = pd.read_csv(path)
        cols = [self._column_name(raw, c) for c in (mag, ra, dec)]

        self.df = raw[cols].copy()
        self.df.columns = ["mag", "ra", "dec"]
        self.df = self.df.apply(pd.to_numeric, errors="coerce")
        self.df = self.df.replace([np.inf, -np.inf], np.nan).dropna(subset=["mag", "ra", "dec"])

    @staticmethod
    def _column_name(df: pd.DataFrame, column: Column) -> str:
        if isinstance(column, int):
            if not 0 <= column < len(df.columns):
                raise ValueError(f"column {column} out of range ({len(df.columns)} columns)")
            return df.columns[column]

        if column not in df.columns:
            raise ValueError(f"column {column!r} not in catalog")
        return column

    def __len__(self) -> int:
        return len(self.df)

    def filtered(self, max_mag: float) -> pd.DataFrame:
        """Rows strictly brighter (lower magnitude) than max_mag."""
        return self.df.loc[self.df["mag"] < max_mag]

    def as_stars(self, max_mag: float) -> List[Star]:
        """Return list of Star records, in file order, brighter than max_mag."""
        rows = self.filtered(max_mag)
        return [
            Star.from_values(float(m), float(r), float(d))
            for m, r, d in zip(rows["mag"].to_numpy(), rows["ra"].to_numpy(), rows["dec"].to_numpy())
        ]
