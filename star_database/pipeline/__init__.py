from .pipeline import (
    generate_database,
    sort_stars,
    sort_star_sets,
    process_lines,
    run_generate,
    run_balance,
    run_stats,
    main,
)

__all__ = [
    "generate_database",
    "sort_stars",
    "sort_star_sets",
    "process_lines",
    "run_generate",
    "run_balance",
    "run_stats",
    "main",
]
