import logging
import pytest

from star_database.catalog.catalog_filter import parse_line, parse_catalog


def test_parse_catalog_skips_invalid_and_faint_rows(caplog):
    """
    Unparseable rows are logged and skipped, rows at the cutoff are dropped silently.
    """
    lines = [
        "1,2,3",
        "2.1 , 2 , 3",
        "3 , -10000 , 3",
        "4 , NAN , 3",
        "-5 , -10000 , 3",
        "cutoff , 0 , 3",
        "10 , -1 , -3",
        "NAN , -1 , -3",
        "0 , -1 , -3",
    ]

    with caplog.at_level(logging.WARNING, logger="star_database.catalog.catalog_filter"):
        stars = parse_catalog(lines, cutoff=10.0)

    assert [s.attribute for s in stars] == pytest.approx([1.0, 2.1, 3.0, -5.0, 0.0])
    assert stars[2].ra == pytest.approx(-10000.0)

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 3


def test_parse_catalog_header_and_order():
    """
    Test that parsed stars keep file order after the header row.
    """
    lines = ["mag,ra,dec", "3,0,8", "1,0,0", "2,3,4"]

    stars = parse_catalog(lines, cutoff=10.0, header=True)

    assert [s.attribute for s in stars] == [3.0, 1.0, 2.0]


def test_parse_catalog_header_row_is_skipped_without_flag():
    """
    Test that an unparseable header row is skipped even without the flag.
    """
    stars = parse_catalog(["mag,ra,dec", "1,0,0"], cutoff=10.0)

    assert len(stars) == 1


@pytest.mark.parametrize("line", ["", "1,2", "1,,2", "a,b,c", "1,inf,2"])
def test_parse_line_rejects(line):
    """
    Test rows with missing, empty, non numeric or infinite fields.
    """
    assert parse_line(line) is None


def test_parse_line_ignores_extra_columns():
    """
    Test that columns after dec are ignored.
    """
    star = parse_line("1.5,10.25,-20.5,Sirius\n")

    assert star.attribute == 1.5
    assert (star.ra, star.dec) == (10.25, -20.5)
