"""Demo entry point for the Time Library.

Rebuilds the two-book catalog, checks one title out for a year through the
circulation desk and prints the outcome along with every title still
available that year.

Usage:
    python -m time_library [--title TITLE] [--year YEAR]
"""

import argparse
import logging
import sys

from pydantic import ValidationError

from .catalog import Catalog
from .circulation import available_titles, checkout_book
from .config import get_config
from .models import Book

logger = logging.getLogger(__name__)


def build_demo_catalog() -> Catalog:
    """The Time Machine (1895, still exists) and the lost Cardenio (1613 only)."""
    catalog = Catalog()
    catalog.add(Book.create("The Time Machine", "H. G. Wells", 1895))
    catalog.add(Book.create("Cardenio", "William Shakespeare", 1613, 1613))
    return catalog


def main(argv: list[str] | None = None) -> int:
    """Run the demo and return the process exit status."""
    config = get_config()

    parser = argparse.ArgumentParser(
        prog="time_library",
        description="Check a book out of the Time Library in a given year",
    )
    parser.add_argument(
        "--title",
        default="Cardenio",
        help="Title of the book to check out",
    )
    parser.add_argument(
        "--year",
        type=int,
        default=config.default_year,
        help="Year in which to check the book out",
    )
    args = parser.parse_args(argv)

    # stderr keeps stdout for the demo's own output
    logging.basicConfig(
        level=config.effective_log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    logger.debug("Starting %s demo for '%s' in %d", config.library_name, args.title, args.year)

    catalog = build_demo_catalog()
    try:
        result = checkout_book(catalog, args.title, args.year)
    except ValidationError as e:
        logger.error("Invalid checkout request: %s", e)
        reasons = "; ".join(f"{err['loc'][0]}: {err['msg']}" for err in e.errors())
        print(f"Error: invalid request ({reasons})")
        return 1

    if result.success:
        print(result.message)
    else:
        print(f"Error: {result.message}")

    titles = available_titles(catalog, args.year)
    print(f"Available in {args.year}: {', '.join(titles) if titles else 'none'}")

    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
