"""
Quick look statistics for a generated angle database.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence

import numpy as np
import matplotlib.pyplot as plt

from ..catalog.star import StarSet


@dataclass
class DatabaseSummary:
    count: int
    min_angle: float
    max_angle: float
    mean_angle: float
    bins: int
    empty_bins: int

    @property
    def empty_fraction(self) -> float:
        return self.empty_bins / self.bins if self.bins else 0.0


def angles(star_sets: Sequence[StarSet]) -> np.ndarray:
    return np.array([s.attribute for s in star_sets], dtype=float)


def summarize(star_sets: Sequence[StarSet], bins: int = 100) -> DatabaseSummary:
    """
    Args:
        star_sets (Sequence[StarSet]): The database.
        bins (int): Histogram bins over [0, pi].

    Returns:
        DatabaseSummary, angle fields are NaN for an empty database.
    """
    if bins < 1:
        raise ValueError(f"bins must be positive, got {bins}")

    a = angles(star_sets)
    if a.size == 0:
        return DatabaseSummary(0, float("nan"), float("nan"), float("nan"), bins, bins)

    hist, _ = np.histogram(a, bins=bins, range=(0.0, np.pi))
    return DatabaseSummary(
        count=int(a.size),
        min_angle=float(a.min()),
        max_angle=float(a.max()),
        mean_angle=float(a.mean()),
        bins=bins,
        empty_bins=int(np.count_nonzero(hist == 0)),
    )


def plot_angle_histogram(star_sets: Sequence[StarSet], out_path: str, bins: int = 100) -> None:
    """
    Saves a histogram of the stored angles.

    Args:
        star_sets (Sequence[StarSet]): The database.
        out_path (str): Output image path.
        bins (int): Histogram bins over [0, pi].
    """
    a = angles(star_sets)

    fig, ax = plt.subplots(figsize=(6, 4))
    ax.hist(a, bins=bins, range=(0.0, np.pi))
    ax.set_xlabel("angle [rad]")
    ax.set_ylabel("star sets")
    ax.set_title(f"Pyramid angle distribution ({a.size} sets)")
    plt.tight_layout()
    fig.savefig(out_path, dpi=150)
    plt.close(fig)
