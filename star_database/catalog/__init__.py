from .star import Point, Star, StarSet
from .catalog_filter import parse_line, parse_catalog
from .ordered_catalog import OrderedCatalog, TreeNode
from .star_catalog import StarCatalog, HYG_V3_COLUMNS

__all__ = [
    "Point",
    "Star",
    "StarSet",
    "parse_line",
    "parse_catalog",
    "OrderedCatalog",
    "TreeNode",
    "StarCatalog",
    "HYG_V3_COLUMNS",
]
