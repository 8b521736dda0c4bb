import argparse
import logging
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence

from ..catalog.star import Star, StarSet
from ..catalog.catalog_filter import parse_catalog
from ..catalog.ordered_catalog import OrderedCatalog
from ..catalog.star_catalog import StarCatalog
from ..algorithms.combinations import enumerate_star_sets
from ..io.csv_io import DatabaseFormatError, read_database, read_lines, write_database, write_lines
from ..io.template import fill_database_template
from ..analysis.database_stats import plot_angle_histogram, summarize
from ..config import ConfigError, load_config, validate_config

logger = logging.getLogger(__name__)


def sort_stars(stars: Sequence[Star]) -> List[Star]:
    """Brightest (lowest magnitude) first, equal magnitudes keep input order."""
    return sorted(stars, key=lambda s: s.attribute)


def sort_star_sets(
    star_sets: Sequence[StarSet],
    key: Optional[Callable[[StarSet], Any]] = None,
    reverse: bool = False,
) -> List[StarSet]:
    """
    Args:
        star_sets (Sequence[StarSet]): Sets to order.
        key (Callable | None): Sort key, defaults to the angle.
        reverse (bool): Descending order.
    """
    return sorted(star_sets, key=key or (lambda s: s.attribute), reverse=reverse)


def generate_database(
    stars: Sequence[Star],
    cutoff: float,
    group_size: int,
    radius: float,
    strategy: str = "bound",
    descending: bool = True,
    skip_after_pilot: bool = False,
) -> List[StarSet]:
    """
    Catalog in, ordered angle database out. No file access.

    Args:
        stars (Sequence[Star]): Parsed catalog (attribute = magnitude).
        cutoff (float): Stars with magnitude >= cutoff are ignored.
        group_size (int): Companions per pilot.
        radius (float): Field of view, same units as ra/dec.
        strategy (str): Companion selection, "bound" or "ring".
        descending (bool): Largest angle first.
        skip_after_pilot (bool): Consume the star after each pilot as well.

    Returns:
        StarSets ordered by angle.
    """
    bright = sort_stars([s for s in stars if s.attribute < cutoff])
    star_sets = enumerate_star_sets(
        bright, group_size, radius, strategy=strategy, skip_after_pilot=skip_after_pilot
    )
    return sort_star_sets(star_sets, reverse=descending)


def process_lines(
    lines: Sequence[str],
    fov: float,
    cutoff: float,
    group_size: int,
    header: bool = True,
    strategy: str = "bound",
) -> List[str]:
    """Raw catalog rows in, csv rows of the angle database out."""
    stars = parse_catalog(lines, cutoff, header=header)
    return [s.to_csv_row() for s in generate_database(stars, cutoff, group_size, fov, strategy=strategy)]


def load_stars(config: Dict[str, Any]) -> List[Star]:
    pre = config["preprocessor"]
    cols = config["columns"]

    # Plain 3 column catalogs go through the row filter, anything else through pandas.
    if cols == {"mag": 0, "ra": 1, "dec": 2}:
        return parse_catalog(read_lines(config["database"]), pre["cutoff_mag"], header=config["header"])

    cat = StarCatalog(config["database"], mag=cols["mag"], ra=cols["ra"], dec=cols["dec"])
    return cat.as_stars(max_mag=pre["cutoff_mag"])


def run_generate(config: Dict[str, Any]) -> List[StarSet]:
    """Read the catalog, build the database and write every configured output."""
    pre = config["preprocessor"]
    start = time.perf_counter()
    logger.debug("Preprocessor settings: %s", pre)

    print(
        f"[INFO] Reading: {config['database']}"
        f" (cutoff magnitude {pre['cutoff_mag']}, {pre['pilot_sets']} stars per pilot, fov {pre['fov']})"
    )
    stars = load_stars(config)
    print(f"[INFO] Valid stars: {len(stars)}")

    star_sets = generate_database(
        stars,
        cutoff=pre["cutoff_mag"],
        group_size=pre["pilot_sets"],
        radius=pre["fov"],
        strategy=pre["strategy"],
        descending=pre["descending"],
        skip_after_pilot=pre["skip_after_pilot"],
    )

    out_path = Path(config["output"])
    out_path.parent.mkdir(parents=True, exist_ok=True)
    write_database(out_path, star_sets)

    print(f"[INFO] Number of angles: {len(star_sets)}, time taken: {time.perf_counter() - start:.2f} s")
    print(f"         CSV: {out_path}")

    if config.get("template"):
        template_out = Path(config.get("template_output") or out_path.with_suffix(".h"))
        rows = [s.to_csv_row() for s in star_sets]
        filled = fill_database_template(
            read_lines(config["template"]), rows, template_out.name, config["array_name"]
        )
        write_lines(template_out, filled)
        print(f"         Template: {template_out}")

    return star_sets


def run_balance(input_path: str, output_path: str) -> OrderedCatalog:
    """Rewrite an angle database in the pre-order of its balanced tree."""
    tree = OrderedCatalog(read_database(input_path))
    balanced = OrderedCatalog.create_balanced_tree(tree)

    print(f"[INFO] Balance of tree: {balanced.balance()}% (height {balanced.height()}, {len(balanced)} nodes)")
    write_database(output_path, balanced.pre_order_traversal())
    print(f"[INFO] Saved: {output_path}")
    return balanced


def run_stats(input_path: str, bins: int = 100, plot: Optional[str] = None) -> None:
    star_sets = read_database(input_path)
    summary = summarize(star_sets, bins=bins)

    print(f"[INFO] Star sets: {summary.count}")
    print(f"         Angle min/mean/max: {summary.min_angle:.6f} / {summary.mean_angle:.6f} / {summary.max_angle:.6f} rad")
    print(f"         Empty bins: {summary.empty_bins}/{summary.bins} ({100.0 * summary.empty_fraction:.1f} %)")

    if plot:
        plot_angle_histogram(star_sets, plot, bins=bins)
        print(f"         Image: {plot}")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Pyramid method star database generator")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log progress and skipped rows.")
    ap.add_argument("-q", "--quiet", action="store_true", help="Only log errors.")
    sub = ap.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Build the angle database from a star catalog.")
    gen.add_argument("--config", type=str, default=None, help="YAML config file.")
    gen.add_argument("--database", type=str, default=None, help="Input catalog csv.")
    gen.add_argument("--output", type=str, default=None, help="Output angle database csv.")
    gen.add_argument("--fov", type=float, default=None, help="Max pilot to companion distance.")
    gen.add_argument("--cutoff", type=float, default=None, help="Magnitude cutoff (exclusive).")
    gen.add_argument("--pilot-sets", type=int, default=None, help="Companions per pilot (>= 3).")
    gen.add_argument("--strategy", type=str, default=None, choices=["bound", "ring"])
    gen.add_argument("--ascending", action="store_true", help="Smallest angle first.")
    gen.add_argument("--skip-after-pilot", action="store_true", help="Also drop the star after each pilot.")
    gen.add_argument("--simple", action="store_true", help="Input is a plain mag,ra,dec csv.")
    gen.add_argument("--template", type=str, default=None, help="Source template to fill.")
    gen.add_argument("--template-output", type=str, default=None)
    gen.add_argument("--array-name", type=str, default=None)

    bal = sub.add_parser("balance", help="Reorder a database into balanced tree pre-order.")
    bal.add_argument("input", type=str)
    bal.add_argument("output", type=str)

    st = sub.add_parser("stats", help="Summarize an angle database.")
    st.add_argument("input", type=str)
    st.add_argument("--bins", type=int, default=100)
    st.add_argument("--plot", type=str, default=None, help="Save a histogram image.")

    return ap


def apply_overrides(config: Dict[str, Any], args: argparse.Namespace) -> Dict[str, Any]:
    pre = config["preprocessor"]
    for key, value in (("database", args.database), ("output", args.output),
                       ("template", args.template), ("template_output", args.template_output),
                       ("array_name", args.array_name)):
        if value is not None:
            config[key] = value

    for key, value in (("fov", args.fov), ("cutoff_mag", args.cutoff),
                       ("pilot_sets", args.pilot_sets), ("strategy", args.strategy)):
        if value is not None:
            pre[key] = value

    if args.ascending:
        pre["descending"] = False
    if args.skip_after_pilot:
        pre["skip_after_pilot"] = True
    if args.simple:
        config["columns"] = {"mag": 0, "ra": 1, "dec": 2}

    return config


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    level = logging.WARNING
    if args.verbose:
        level = logging.INFO
    elif args.quiet:
        level = logging.ERROR
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.command == "generate":
            config = validate_config(apply_overrides(load_config(args.config), args))
            run_generate(config)
        elif args.command == "balance":
            run_balance(args.input, args.output)
        elif args.command == "stats":
            run_stats(args.input, bins=args.bins, plot=args.plot)
    except (ConfigError, DatabaseFormatError, OSError) as e:
        raise SystemExit(f"[ERROR] {e}")


if __name__ == "__main__":
    main()
