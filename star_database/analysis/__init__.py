from .database_stats import (
    DatabaseSummary,
    summarize,
    plot_angle_histogram,
)

__all__ = [
    "DatabaseSummary",
    "summarize",
    "plot_angle_histogram",
]
