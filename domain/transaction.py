"""
Domain: Transaction records.

A TransactionRecord is one product purchase event taken from the seed feed.

Rules implemented here:
- Every field is required.
- Records are immutable once created.
- date_of_sale is a UTC timestamp; its calendar month drives month filters.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping

from .time import parse_utc_datetime, require_utc_timestamp


def _feed_value(entry: Mapping[str, Any], *keys: str) -> Any:
    """Return the first present key; the public feed uses short names (title, description)."""

    for key in keys:
        if key in entry:
            return entry[key]
    raise KeyError(keys[0])


def _feed_id(value: Any) -> int:
    """Parse a feed id. Integral numbers and digit strings only; 3.7 is rejected, not truncated."""

    if isinstance(value, bool):
        raise ValueError(f"id must be an integer, got {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"id must be an integer, got {value!r}")
        return int(value)
    if isinstance(value, (int, str)):
        return int(value)
    raise ValueError(f"id must be an integer, got {value!r}")


@dataclass(frozen=True, slots=True)
class TransactionRecord:
    """
    Immutable product transaction.

    price is kept as a float: it is summed for statistics, bucketed for the
    price-range histogram and matched as text by the search filter.
    """

    id: int
    date_of_sale: datetime
    product_title: str
    product_description: str
    price: float
    category: str
    sold: bool

    def __post_init__(self) -> None:
        require_utc_timestamp("date_of_sale", self.date_of_sale)
        if not isinstance(self.id, int) or isinstance(self.id, bool):
            raise ValueError(f"id must be an integer, got {self.id!r}")
        for name in ("product_title", "product_description", "category"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ValueError(f"{name} must be a string, got {value!r}")
        if not isinstance(self.sold, bool):
            raise ValueError(f"sold must be a boolean, got {self.sold!r}")

    @property
    def month(self) -> int:
        """Calendar month (1-12) of the sale, evaluated in UTC."""
        return self.date_of_sale.month

    @property
    def price_text(self) -> str:
        """
        Textual form of the price used by the search filter.

        Integral prices render without a fractional part ("50", not "50.0"),
        matching how the feed writes them.
        """
        price = float(self.price)
        if price.is_integer():
            return str(int(price))
        return repr(price)

    @classmethod
    def from_feed(cls, entry: Mapping[str, Any]) -> "TransactionRecord":
        """
        Build a record from one seed feed entry.

        Raises:
            KeyError: A required field is missing
            ValueError / TypeError: A field has an unusable value
        """

        return cls(
            id=_feed_id(entry["id"]),
            date_of_sale=parse_utc_datetime(entry["dateOfSale"]),
            product_title=_feed_value(entry, "productTitle", "title"),
            product_description=_feed_value(entry, "productDescription", "description"),
            price=float(entry["price"]),
            category=entry["category"],
            sold=entry["sold"],
        )
