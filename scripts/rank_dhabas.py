#!/usr/bin/env python3
"""
Filter and rank highway dhaba listings.
"""

import argparse
import logging
import sys
from functools import cmp_to_key
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from dhaba.operations import (  # noqa: E402
    apply_operations,
    create_filter,
    create_mapper,
    create_sorter,
)
from records.loader import load_records  # noqa: E402

logger = logging.getLogger(__name__)


def rank(listings, min_rating=None, sort_by="rating", order="desc", fields=None):
    """Filter by minimum rating, sort, and project the listings."""
    operations = []
    if min_rating is not None:
        high_rated = create_filter("rating", ">=", min_rating)
        operations.append(lambda rows: [row for row in rows if high_rated(row)])

    by_field = create_sorter(sort_by, order)
    operations.append(lambda rows: sorted(rows, key=cmp_to_key(by_field)))

    if fields:
        pick = create_mapper(fields)
        operations.append(lambda rows: [pick(row) for row in rows])

    return apply_operations(listings, *operations)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Rank dhaba listings")
    parser.add_argument("listings", help="CSV/JSON file of dhaba listings")
    parser.add_argument(
        "--min-rating", type=float, help="Only keep listings rated at least this"
    )
    parser.add_argument(
        "--sort-by", default="rating", help="Field to sort by (default: rating)"
    )
    parser.add_argument(
        "--order",
        choices=["asc", "desc"],
        default="desc",
        help="Sort order (default: desc)",
    )
    parser.add_argument("--fields", help="Comma-separated fields to show")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
    )

    try:
        listings = load_records(args.listings)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Could not load listings: {e}")
        sys.exit(1)

    if listings and args.sort_by not in listings[0]:
        logger.error(f"Unknown sort field: {args.sort_by}")
        sys.exit(1)

    fields = args.fields.split(",") if args.fields else None
    ranked = rank(listings, args.min_rating, args.sort_by, args.order, fields)

    print(f"\n=== {len(ranked)} of {len(listings)} dhabas ===")
    for position, listing in enumerate(ranked, 1):
        details = ", ".join(f"{key}={value}" for key, value in listing.items())
        print(f"{position:2d}. {details}")


if __name__ == "__main__":
    main()
