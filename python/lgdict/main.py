"""lgdict CLI - export connector sets to a Link Grammar dictionary.

Usage:
    python -m lgdict.main csets.jsonl --output data/en --locale EN_us
    lgdict-export csets.jsonl -o dict.db
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from . import config as cfg
from .builder import ExportDriver
from .errors import ExportError
from .ingest import JsonLinesSource
from .scoring import get_cost_function, list_cost_functions


def build_parser() -> argparse.ArgumentParser:
    """Argument parser with defaults from config.json."""
    defaults = cfg.load().get("defaults", cfg.FALLBACK_DEFAULTS)

    parser = argparse.ArgumentParser(
        description="lgdict - export connector sets to a Link Grammar dictionary"
    )
    parser.add_argument(
        "input",
        type=Path,
        help="JSON Lines file of connector sets",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=Path(defaults.get("output_dir", "output")),
        help="Output directory (gets dict.db) or .db file path",
    )
    parser.add_argument(
        "--locale",
        "-l",
        type=str,
        default=defaults.get("locale", "EN_us"),
        help=f"Dictionary locale (default: {defaults.get('locale', 'EN_us')})",
    )
    parser.add_argument(
        "--cost",
        type=str,
        default=defaults.get("cost", "zero"),
        choices=list_cost_functions(),
        help="Cost function name",
    )
    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        default=defaults.get("quiet", False),
        help="Only print errors",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=defaults.get("verbose", False),
        help="Log progress details",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    level = logging.WARNING
    if args.verbose:
        level = logging.INFO
    if args.quiet:
        level = logging.ERROR
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if not args.quiet:
        print("=" * 60)
        print("lgdict - Link Grammar Dictionary Export")
        print("=" * 60)
        print(f"Input: {args.input}")
        print(f"Output: {args.output}")
        print(f"Locale: {args.locale}")
        print()

    driver = ExportDriver(
        JsonLinesSource(args.input),
        commit_every=cfg.default_commit_every(),
        log_every=cfg.default_log_every(),
        link_prefix=cfg.default_link_prefix(),
    )
    try:
        stats = driver.export(args.output, args.locale, get_cost_function(args.cost))
    except (ExportError, OSError) as e:
        print(f"ERROR - {e}", file=sys.stderr)
        return 1

    if not args.quiet:
        print(f"  Records read: {stats.records_seen:,}")
        print(f"  Entries written: {stats.rows_written:,}")
        print(f"  Empty sets skipped: {stats.skipped_empty:,}")
        print(f"  Link names issued: {stats.links_issued:,}")
        print(f"  Dictionary: {stats.output_path}")
        print("\n" + "=" * 60)
        print("Done!")
        print("=" * 60)

    return 0


if __name__ == "__main__":
    sys.exit(main())
