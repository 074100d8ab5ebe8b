"""
Tests for `domain/transaction.py` and `domain/time.py`.

Covers rules:
- TransactionRecord.date_of_sale is required and must be a UTC timestamp.
- TransactionRecord is immutable (frozen).
- Feed entries are parsed into records, normalizing dateOfSale to UTC.
- The textual price used for search drops a zero fractional part.
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta, timezone

import pytest

from domain.time import parse_utc_datetime
from domain.transaction import TransactionRecord


FEED_ENTRY = {
    "id": 7,
    "dateOfSale": "2021-11-27T20:29:54+05:30",
    "productTitle": "Blue Shirt",
    "productDescription": "Cotton shirt",
    "price": 329.85,
    "category": "men's clothing",
    "sold": False,
}


def test_transaction_date_of_sale_must_be_utc() -> None:
    """Verify date_of_sale enforces a UTC timezone-aware timestamp."""

    kwargs = dict(id=1, product_title="t", product_description="d", price=1.0, category="c", sold=True)

    with pytest.raises(ValueError):
        TransactionRecord(date_of_sale=datetime(2022, 3, 1), **kwargs)

    with pytest.raises(ValueError):
        TransactionRecord(
            date_of_sale=datetime(2022, 3, 1, tzinfo=timezone(timedelta(hours=2))),
            **kwargs,
        )


def test_transaction_is_immutable() -> None:
    """Verify a TransactionRecord cannot be mutated after seeding."""

    record = TransactionRecord.from_feed(FEED_ENTRY)

    with pytest.raises(FrozenInstanceError):
        record.price = 1.0  # type: ignore[misc]


def test_from_feed_parses_all_fields_and_normalizes_to_utc() -> None:
    record = TransactionRecord.from_feed(FEED_ENTRY)

    assert record.id == 7
    assert record.date_of_sale == datetime(2021, 11, 27, 14, 59, 54, tzinfo=timezone.utc)
    assert record.product_title == "Blue Shirt"
    assert record.product_description == "Cotton shirt"
    assert record.price == 329.85
    assert record.category == "men's clothing"
    assert record.sold is False
    assert record.month == 11


def test_from_feed_month_is_evaluated_in_utc() -> None:
    """A sale just after midnight on March 1st at +05:30 is still February in UTC."""

    record = TransactionRecord.from_feed({**FEED_ENTRY, "dateOfSale": "2022-03-01T02:00:00+05:30"})

    assert record.month == 2


def test_from_feed_accepts_short_title_and_description_keys() -> None:
    entry = {k: v for k, v in FEED_ENTRY.items() if k not in ("productTitle", "productDescription")}
    entry["title"] = "Backpack"
    entry["description"] = "For everyday use"

    record = TransactionRecord.from_feed(entry)

    assert record.product_title == "Backpack"
    assert record.product_description == "For everyday use"


def test_from_feed_missing_field_raises() -> None:
    entry = {k: v for k, v in FEED_ENTRY.items() if k != "category"}

    with pytest.raises(KeyError):
        TransactionRecord.from_feed(entry)


def test_from_feed_non_boolean_sold_raises() -> None:
    with pytest.raises(ValueError):
        TransactionRecord.from_feed({**FEED_ENTRY, "sold": "yes"})


@pytest.mark.parametrize(
    "price, expected",
    [
        (50, "50"),
        (50.0, "50"),
        (329.85, "329.85"),
        (0.5, "0.5"),
    ],
)
def test_price_text(price: float, expected: str) -> None:
    record = TransactionRecord.from_feed({**FEED_ENTRY, "price": price})

    assert record.price_text == expected


def test_parse_utc_datetime_handles_trailing_z_and_naive_values() -> None:
    assert parse_utc_datetime("2022-03-01T10:00:00Z") == datetime(2022, 3, 1, 10, tzinfo=timezone.utc)
    assert parse_utc_datetime("2022-03-01T10:00:00") == datetime(2022, 3, 1, 10, tzinfo=timezone.utc)

    with pytest.raises(TypeError):
        parse_utc_datetime(12345)



@pytest.mark.parametrize("field", ["productTitle", "productDescription", "category"])
def test_from_feed_null_text_field_raises(field: str) -> None:
    """A null title, description or category is rejected, not stored as the text 'None'."""

    with pytest.raises(ValueError):
        TransactionRecord.from_feed({**FEED_ENTRY, field: None})


def test_from_feed_non_string_category_raises() -> None:
    with pytest.raises(ValueError):
        TransactionRecord.from_feed({**FEED_ENTRY, "category": 42})


@pytest.mark.parametrize("value", [3.7, None, True, "seven"])
def test_from_feed_invalid_id_raises(value) -> None:
    """Non-integral ids are rejected instead of being truncated."""

    with pytest.raises(ValueError):
        TransactionRecord.from_feed({**FEED_ENTRY, "id": value})


@pytest.mark.parametrize("value", [7, 7.0, "7"])
def test_from_feed_accepts_integral_id(value) -> None:
    assert TransactionRecord.from_feed({**FEED_ENTRY, "id": value}).id == 7
