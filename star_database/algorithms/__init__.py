from .selector import (
    find_closest_brightest,
    find_closest,
    get_selector,
    MIN_CATALOG_SIZE,
    STRATEGIES,
)
from .pyramid import (
    sort_furthest,
    find_angle,
    cosine_rule,
    resolve,
    resolve_legacy,
    DegenerateTriangleError,
)
from .combinations import (
    combinations,
    enumerate_star_sets,
)

__all__ = [
    "find_closest_brightest",
    "find_closest",
    "get_selector",
    "MIN_CATALOG_SIZE",
    "STRATEGIES",
    "sort_furthest",
    "find_angle",
    "cosine_rule",
    "resolve",
    "resolve_legacy",
    "DegenerateTriangleError",
    "combinations",
    "enumerate_star_sets",
]
