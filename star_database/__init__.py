"""
Pyramid method star database generator.

Turns a (magnitude, ra, dec) star catalog into a sorted database of
triangle angles for the pyramid star identification method.
"""

from .catalog import Point, Star, StarSet, OrderedCatalog, parse_catalog
from .algorithms import enumerate_star_sets, resolve, DegenerateTriangleError
from .pipeline import generate_database, sort_star_sets

__all__ = [
    "Point",
    "Star",
    "StarSet",
    "OrderedCatalog",
    "parse_catalog",
    "enumerate_star_sets",
    "resolve",
    "DegenerateTriangleError",
    "generate_database",
    "sort_star_sets",
]
