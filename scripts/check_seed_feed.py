#!/usr/bin/env python3
"""
Check the seed feed - fetch it, load it into a local store and print
per-month statistics.

Usage:
    python scripts/check_seed_feed.py
    python scripts/check_seed_feed.py --month March
    python scripts/check_seed_feed.py --url https://example.com/feed.json
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from api.config import Settings
from domain.month import Month
from repositories.transaction_store import TransactionStore
from services.analytics_service import (
    get_category_counts,
    get_price_range_counts,
    get_statistics,
)
from services.seed_service import SeedError, fetch_seed_feed, parse_seed_feed


def print_month_summary(store: TransactionStore, month: Month) -> None:
    stats = get_statistics(store, month.value)
    total = stats.total_sold_items + stats.total_not_sold_items

    print(
        f"{month.name.title():<10} {total:>6} {stats.total_sold_items:>6} "
        f"{stats.total_not_sold_items:>8} {stats.total_sale_amount:>14.2f}"
    )


def check_seed_feed(url: str, timeout: float, month: Month | None = None) -> int:
    """Fetch and summarize the feed. Returns a process exit code."""

    try:
        records = parse_seed_feed(fetch_seed_feed(url, timeout=timeout))
    except SeedError as e:
        print(f"\nFEED ERROR: {e}", file=sys.stderr)
        return 1

    store = TransactionStore()
    store.insert_many(records)

    print("=" * 50)
    print("SEED FEED STATUS")
    print("=" * 50)
    print(f"Feed URL:      {url}")
    print(f"Records:       {len(store)}")
    print("=" * 50)

    print(f"\n{'Month':<10} {'Total':>6} {'Sold':>6} {'Unsold':>8} {'Sale amount':>14}")
    print("-" * 50)
    for m in ([month] if month else list(Month)):
        print_month_summary(store, m)
    print("-" * 50)

    if month:
        print(f"\nPrice ranges for {month.name.title()}:")
        for bucket in get_price_range_counts(store, month.value):
            print(f"  {bucket.label:<10} {bucket.count}")

        print(f"\nCategories for {month.name.title()}:")
        for bucket in get_category_counts(store, month.value):
            print(f"  {bucket.label:<25} {bucket.count}")

    return 0


def main() -> int:
    settings = Settings.from_env()

    parser = argparse.ArgumentParser(description="Fetch the seed feed and print per-month statistics")
    parser.add_argument(
        "--url",
        default=settings.seed_url,
        help="Seed feed URL (default: SEED_URL or the public product feed)"
    )
    parser.add_argument(
        "--month",
        default=None,
        help="Only summarize this month (number or name), with chart breakdowns"
    )
    args = parser.parse_args()

    try:
        month = Month.parse(args.month)
    except ValueError as e:
        parser.error(str(e))

    return check_seed_feed(args.url, settings.seed_timeout_seconds, month)


if __name__ == "__main__":
    sys.exit(main())
