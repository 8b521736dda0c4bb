import math
import pytest

from star_database.catalog.star import StarSet
from star_database.analysis.database_stats import plot_angle_histogram, summarize


def _sets(angles):
    return [StarSet.from_values(a, 0.0, 0.0, 1.0, 1.0) for a in angles]


def test_summarize():
    """
    Test angle statistics and empty bin counting.
    """
    summary = summarize(_sets([0.1, 0.5, 3.0]), bins=10)

    assert summary.count == 3
    assert summary.min_angle == pytest.approx(0.1)
    assert summary.max_angle == pytest.approx(3.0)
    assert summary.mean_angle == pytest.approx(1.2)
    assert summary.empty_bins == 7
    assert summary.empty_fraction == pytest.approx(0.7)


def test_summarize_empty():
    """
    Test the summary of an empty database.
    """
    summary = summarize([], bins=4)

    assert summary.count == 0
    assert math.isnan(summary.mean_angle)
    assert summary.empty_bins == 4


def test_summarize_invalid_bins():
    with pytest.raises(ValueError):
        summarize(_sets([0.1]), bins=0)


def test_plot_angle_histogram(tmp_path):
    """
    Test that the histogram image is written.
    """
    out = tmp_path / "hist.png"

    plot_angle_histogram(_sets([0.1, 0.2, 1.0, 2.5]), str(out), bins=20)

    assert out.exists() and out.stat().st_size > 0
