"""
Pytest configuration and shared fixtures.

Adds the project root to the Python path so tests can import the api,
domain, repositories and services packages without installing them.
"""

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Add the project directory to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from domain.transaction import TransactionRecord  # noqa: E402
from repositories.transaction_store import TransactionStore  # noqa: E402


def make_record(
    id: int,
    month: int,
    price: float = 10.0,
    sold: bool = True,
    category: str = "A",
    day: int = 1,
    year: int = 2022,
    title: str | None = None,
    description: str = "Plain item",
) -> TransactionRecord:
    """Build a TransactionRecord with sensible defaults."""

    return TransactionRecord(
        id=id,
        date_of_sale=datetime(year, month, day, 12, 0, 0, tzinfo=timezone.utc),
        product_title=title if title is not None else f"Product {id}",
        product_description=description,
        price=price,
        category=category,
        sold=sold,
    )


def make_store(records) -> TransactionStore:
    store = TransactionStore()
    store.insert_many(records)
    return store


@pytest.fixture
def scenario_records() -> list[TransactionRecord]:
    """Two March records and one April record."""

    return [
        make_record(1, month=3, price=50, sold=True, category="A", day=5),
        make_record(2, month=3, price=550, sold=False, category="B", day=10),
        make_record(3, month=4, price=120, sold=True, category="A", day=2),
    ]


@pytest.fixture
def scenario_store(scenario_records) -> TransactionStore:
    return make_store(scenario_records)
