import numpy as np
import pandas as pd
import pytest
from pathlib import Path

from star_database.catalog.star_catalog import StarCatalog
from star_database.catalog.star import Star


@pytest.fixture
def small_catalog_csv(tmp_path: Path) -> Path:
    data = {
        "id": [1, 2, 3, 4],
        "proper": ["Alpha", "Beta", "Gamma", "Delta"],
        "ra": [0.0, 90.0, 180.0, 270.0],     # [deg]
        "dec": [0.0, 45.0, 0.0, -45.0],      # [deg]
        "mag": [1.0, 5.5, 6.5, 2.0],
    }

    df = pd.DataFrame(data)
    csv_path = tmp_path / "mini_hyg.csv"
    df.to_csv(csv_path, index=False)

    return csv_path


def test_catalog_loads_and_drops_nans(small_catalog_csv):
    """
    Test loading of catalog and dropping of NaN values.
    """
    df = pd.read_csv(small_catalog_csv)
    df.loc[len(df)] = [99, "Bad", np.nan, np.nan, 3.3]
    bad_csv = small_catalog_csv.with_name("mini_hyg_bad.csv")
    df.to_csv(bad_csv, index=False)

    cat = StarCatalog(str(bad_csv))

    assert len(cat) == 4
    assert list(cat.df.columns) == ["mag", "ra", "dec"]


def test_as_stars_filters_by_magnitude(small_catalog_csv):
    """
    Test that as_stars keeps file order and drops stars at or above the cutoff.
    """
    cat = StarCatalog(str(small_catalog_csv))

    stars = cat.as_stars(max_mag=5.5)

    assert all(isinstance(s, Star) for s in stars)
    assert [s.attribute for s in stars] == [1.0, 2.0]
    assert (stars[1].ra, stars[1].dec) == (270.0, -45.0)


def test_columns_by_index(small_catalog_csv):
    """
    Test selecting magnitude, RA and Dec by column position.
    """
    cat = StarCatalog(str(small_catalog_csv), mag=4, ra=2, dec=3)

    stars = cat.as_stars(max_mag=6.0)

    assert len(stars) == 3
    assert stars[1].attribute == 5.5
    assert stars[1].dec == 45.0


@pytest.mark.parametrize("kwargs", [dict(mag="vmag"), dict(ra=12)])
def test_unknown_column_raises(small_catalog_csv, kwargs):
    """
    Test that unknown column names or positions raise.
    """
    with pytest.raises(ValueError):
        StarCatalog(str(small_catalog_csv), **kwargs)
