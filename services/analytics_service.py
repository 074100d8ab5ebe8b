"""
Analytics service for the transaction dashboard.

Translates dashboard parameters (month, search text, pagination) into
TransactionStore queries and shapes the results:
- Paged transaction listing
- Sales statistics (sold amount, sold / not sold counts)
- Price-range histogram (bar chart)
- Category breakdown (pie chart)
- All of the above in a single combined result

Month handling is permissive: a month that cannot be parsed produces a filter
that matches nothing. It is never rejected.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from domain.month import Month
from domain.price_range import PriceRange
from domain.transaction import TransactionRecord
from repositories.transaction_store import TransactionQueryFilters, TransactionStore

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 10


@dataclass(frozen=True, slots=True)
class SalesStatistics:
    total_sale_amount: float
    total_sold_items: int
    total_not_sold_items: int


@dataclass(frozen=True, slots=True)
class ChartBucket:
    """One bar or pie slice: a label (price range or category) and its record count."""
    label: str
    count: int


@dataclass(frozen=True, slots=True)
class CombinedData:
    """
    Everything the dashboard needs for one month.

    transactions is month-filtered only: no search and no pagination.
    """
    transactions: List[TransactionRecord]
    statistics: SalesStatistics
    bar_chart: List[ChartBucket]
    pie_chart: List[ChartBucket]


def build_filters(
    month: Optional[str | int] = None,
    search: Optional[str] = "",
    sold: Optional[bool] = None,
) -> TransactionQueryFilters:
    """
    Build store filters from raw API parameters.

    Example:
        build_filters("March", search="shirt")
        build_filters("3")
        build_filters("13")  # matches nothing
    """

    try:
        parsed = Month.parse(month)
    except ValueError:
        return TransactionQueryFilters(month_invalid=True, search=search or "", sold=sold)

    return TransactionQueryFilters(month=parsed, search=search or "", sold=sold)


def parse_positive_int(value: Optional[str | int], default: int) -> int:
    """Parse a page or perPage parameter. Missing, non-numeric and values < 1 fall back to default."""

    if value is None:
        return default
    try:
        number = int(str(value).strip())
    except ValueError:
        return default
    return number if number >= 1 else default


def list_transactions(
    store: TransactionStore,
    month: Optional[str | int] = None,
    search: Optional[str] = "",
    page: Optional[str | int] = DEFAULT_PAGE,
    per_page: Optional[str | int] = DEFAULT_PER_PAGE,
) -> List[TransactionRecord]:
    """
    Return one page of transactions for a month, newest first.

    Args:
        store: Transaction store to query
        month: Month number or name (None for all months)
        search: Case-insensitive text matched against title, description and price
        page: 1-based page number (default 1)
        per_page: Page size (default 10)

    Example:
        list_transactions(store, month="3", search="blue", page=2, per_page=10)
        # Records 11-20 of the March records mentioning "blue"
    """

    page_number = parse_positive_int(page, DEFAULT_PAGE)
    page_size = parse_positive_int(per_page, DEFAULT_PER_PAGE)

    return store.find_page(
        build_filters(month, search),
        skip=(page_number - 1) * page_size,
        limit=page_size,
    )


def get_statistics(store: TransactionStore, month: Optional[str | int] = None) -> SalesStatistics:
    """
    Compute sales statistics for a month.

    total_sale_amount is the price sum over sold records (0 when there are
    none), rounded to cents.
    """

    sold_filters = build_filters(month, sold=True)
    sold_groups = store.aggregate(sold_filters, group_by=lambda r: None, sum_of=lambda r: r.price)
    total_sale_amount = sold_groups[0].total if sold_groups else 0.0

    return SalesStatistics(
        total_sale_amount=round(total_sale_amount, 2),
        total_sold_items=store.count(sold_filters),
        total_not_sold_items=store.count(build_filters(month, sold=False)),
    )


def get_price_range_counts(store: TransactionStore, month: Optional[str | int] = None) -> List[ChartBucket]:
    """
    Count month records per price range.

    Sold status is ignored. Ranges with no records are omitted; the rest come
    back in ascending price order.
    """

    groups = store.aggregate(build_filters(month), group_by=lambda r: PriceRange.for_price(r.price))
    counts = {group.key: group.count for group in groups}

    return [ChartBucket(label=bucket.value, count=counts[bucket]) for bucket in PriceRange if bucket in counts]


def get_category_counts(store: TransactionStore, month: Optional[str | int] = None) -> List[ChartBucket]:
    """Count month records per category, one entry per category present, sorted by category."""

    groups = store.aggregate(build_filters(month), group_by=lambda r: r.category)

    return [ChartBucket(label=group.key, count=group.count) for group in sorted(groups, key=lambda g: g.key)]


def get_combined_data(store: TransactionStore, month: Optional[str | int] = None) -> CombinedData:
    """
    Build every dashboard dataset for a month in one call.

    Each part is computed independently over the same month filter.
    """

    return CombinedData(
        transactions=store.find_page(build_filters(month)),
        statistics=get_statistics(store, month),
        bar_chart=get_price_range_counts(store, month),
        pie_chart=get_category_counts(store, month),
    )


__all__ = [
    "DEFAULT_PAGE",
    "DEFAULT_PER_PAGE",
    "SalesStatistics",
    "ChartBucket",
    "CombinedData",
    "build_filters",
    "parse_positive_int",
    "list_transactions",
    "get_statistics",
    "get_price_range_counts",
    "get_category_counts",
    "get_combined_data",
]
