#!/usr/bin/env python3
"""
Quote a tiffin plan for a customer, with optional addons.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from tiffin.plans import MEAL_RATES, apply_addons, create_tiffin_plan  # noqa: E402

logger = logging.getLogger(__name__)


def parse_addon(text):
    """Parse "name:price" into an addon dict."""
    name, sep, price = text.partition(":")
    if not sep or not name:
        raise argparse.ArgumentTypeError(
            f"Addon must look like name:price, got {text!r}"
        )
    try:
        return {"name": name, "price": int(price)}
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Addon price must be a whole number: {text!r}"
        )


def main(argv=None):
    parser = argparse.ArgumentParser(description="Quote a tiffin plan")
    parser.add_argument("name", help="Customer name")
    parser.add_argument(
        "--meal-type",
        default="veg",
        choices=sorted(MEAL_RATES),
        help="Meal type (default: veg)",
    )
    parser.add_argument(
        "--days", type=int, default=30, help="Plan length in days (default: 30)"
    )
    parser.add_argument(
        "--addon",
        action="append",
        type=parse_addon,
        default=[],
        help="Addon as name:price, may be repeated",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
    )

    plan = create_tiffin_plan(args.name, args.meal_type, args.days)
    if plan is None:
        logger.error("Could not create plan: customer name is required")
        sys.exit(1)

    if args.addon:
        plan = apply_addons(plan, *args.addon)

    print(f"\n=== Tiffin plan for {plan['name']} ===")
    print(f"Meal type:  {plan['meal_type']}")
    print(f"Days:       {plan['days']}")
    print(f"Daily rate: ₹{plan['daily_rate']}")
    if plan.get("addon_names"):
        print(f"Addons:     {', '.join(plan['addon_names'])}")
    print(f"Total:      ₹{plan['total_cost']}")


if __name__ == "__main__":
    main()
