import math
import random
import pytest

from star_database.catalog.star import Point, Star
from star_database.algorithms.pyramid import (
    DegenerateTriangleError,
    find_angle,
    resolve,
    resolve_legacy,
    sort_furthest,
)


def _star(ra, dec, attribute=0.0):
    return Star.from_values(attribute, ra, dec)


def test_sort_furthest():
    """
    Test that the furthest companion comes first.
    """
    p = _star(0, 0)
    s0 = _star(100, 130)
    s1 = _star(-10, -123)
    s2 = _star(0, 0)

    assert sort_furthest(p, s0, s1, s2) == (s0, s1, s2)
    assert sort_furthest(p, s0, s2, s1) == (s0, s2, s1)
    assert sort_furthest(p, s1, s0, s2) == (s0, s1, s2)
    assert sort_furthest(p, s2, s1, s0) == (s0, s1, s2)


def test_find_angle_coincident_raises():
    """
    Test that coincident stars have no angle.
    """
    o = _star(0, 0)

    with pytest.raises(DegenerateTriangleError):
        find_angle(o, _star(0, 0), _star(0, 0))


@pytest.mark.parametrize(
    "o, b, c, expected",
    [
        ((-10, 0), (0, 0), (0, 0), 0.0),
        ((-10, 0), (-10, 10), (0, 0), math.pi / 2),
        ((-10, 0), (-10, 10), (-10, -5), math.pi),
        ((-10, 0), (-10, 10), (0, 10), math.pi / 4),
        ((-10, 0), (-10, 10), (-23.22, 8.21), 1.015057844),
        ((10000, 0), (-10, 10), (-23.22, 100000), 1.469898778),
    ],
)
def test_find_angle(o, b, c, expected):
    """
    Test angles at the opposite star.
    """
    assert find_angle(_star(*o), _star(*b), _star(*c)) == pytest.approx(expected, abs=1e-5)


def test_resolve_picks_furthest_companion():
    """
    Test the pyramid from the four star example.
    """
    pilot = _star(0, 0, 1)
    a, b, c = _star(3, 4, 2), _star(0, 8, 3), _star(-3, 4, 4)

    star_set = resolve(pilot, a, b, c)

    assert star_set.opposite == Point(0, 8)
    assert star_set.main == Point(0, 0)
    assert star_set.attribute == pytest.approx(math.acos(0.28))


def test_resolve_independent_of_argument_order():
    """
    Test that companion order does not change the result.
    """
    p = _star(0, 1)
    o = _star(10000, 1)
    s1 = _star(-10, 11)
    s2 = _star(-23.22, 1001)

    first = resolve(p, o, s1, s2)
    second = resolve(p, s1, s2, o)

    assert first.attribute == pytest.approx(0.098440278, abs=1e-4)
    assert second.attribute == pytest.approx(first.attribute)
    assert first.opposite == second.opposite == o.main
    assert first.main == p.main


def test_resolve_same_star_twice_is_misuse():
    """
    Test that passing a star twice is rejected.
    """
    pilot = _star(0, 0)
    a, b = _star(1, 0), _star(0, 1)

    with pytest.raises(ValueError):
        resolve(pilot, a, a, b)
    with pytest.raises(ValueError):
        resolve_legacy(pilot, a, b, b)


def test_resolve_coincident_opposite_raises():
    """
    Test that a coincident opposite star is degenerate.
    """
    pilot = _star(0, 0)

    with pytest.raises(DegenerateTriangleError):
        resolve(pilot, _star(0, 3), _star(0, 3), _star(1, 0))


def test_legacy_formulation_matches_without_ties():
    """
    Test that both formulations agree on random triples.
    """
    rng = random.Random(11)
    pilot = _star(0, 0)

    for _ in range(200):
        s0, s1, s2 = (_star(rng.uniform(-10, 10), rng.uniform(-10, 10)) for _ in range(3))

        new = resolve(pilot, s0, s1, s2)
        old = resolve_legacy(pilot, s0, s1, s2)

        assert old.opposite == new.opposite
        assert old.attribute == pytest.approx(new.attribute)


def test_angle_within_zero_and_pi():
    """
    Test that every resolved angle lies in [0, pi].
    """
    rng = random.Random(5)
    pilot = _star(0, 0)

    for _ in range(200):
        s0, s1, s2 = (_star(rng.uniform(-5, 5), rng.uniform(-5, 5)) for _ in range(3))

        angle = resolve(pilot, s0, s1, s2).attribute

        assert 0.0 <= angle <= math.pi


def test_resolve_overflowing_distance_raises_degenerate():
    """
    A distance that overflows between finite coordinates is an undefined angle.
    """
    pilot = _star(-1e308, 0)

    with pytest.raises(DegenerateTriangleError):
        resolve(pilot, _star(1e308, 0), _star(0, 1), _star(0, 2))
    with pytest.raises(DegenerateTriangleError):
        resolve_legacy(pilot, _star(1e308, 0), _star(0, 1), _star(0, 2))
