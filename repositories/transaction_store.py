"""
In-process transaction store.

Holds every TransactionRecord loaded from the seed feed and answers filter,
count and grouping queries over them.

The store is an explicitly constructed object owned by the application. It is
populated exactly once (insert_many) and is read-only afterwards, so request
handlers can read it concurrently without locking. The record set is swapped
in atomically: a reader sees either the empty store or the complete seed set.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Hashable, Iterable, List, Optional, Tuple

from domain.month import Month
from domain.transaction import TransactionRecord


class SeedStatus(str, Enum):
    PENDING = "pending"
    READY = "ready"
    FAILED = "failed"


class StoreAlreadySeededError(RuntimeError):
    """Raised when insert_many is called after seeding has already settled."""
    pass


@dataclass(frozen=True, slots=True)
class TransactionQueryFilters:
    """
    Filter criteria for transaction queries.

    month_invalid marks a month parameter that could not be parsed; such a
    filter matches nothing rather than being rejected.
    """
    month: Optional[Month] = None
    month_invalid: bool = False
    search: str = ""
    sold: Optional[bool] = None

    def matches(self, record: TransactionRecord) -> bool:
        if self.month_invalid:
            return False

        if self.month is not None and record.month != self.month:
            return False

        if self.sold is not None and record.sold is not self.sold:
            return False

        if self.search:
            needle = self.search.casefold()
            haystacks = (record.product_title, record.product_description, record.price_text)
            if not any(needle in text.casefold() for text in haystacks):
                return False

        return True


@dataclass(frozen=True, slots=True)
class GroupResult:
    """One group produced by TransactionStore.aggregate."""
    key: Any
    count: int
    total: float = 0.0


class TransactionStore:
    """Read-mostly record collection seeded once per process."""

    def __init__(self) -> None:
        self._records: Tuple[TransactionRecord, ...] = ()
        self._lock = threading.Lock()
        self._settled = threading.Event()
        self._status = SeedStatus.PENDING
        self._failure: Optional[str] = None

    def __len__(self) -> int:
        return len(self._records)

    @property
    def status(self) -> SeedStatus:
        return self._status

    @property
    def failure(self) -> Optional[str]:
        """Reason the seed failed, if it did."""
        return self._failure

    def insert_many(self, records: Iterable[TransactionRecord]) -> int:
        """
        Install the full record set and mark the store ready.

        Returns:
            Number of records inserted

        Raises:
            StoreAlreadySeededError: Seeding already settled (ready or failed)
        """

        batch = tuple(records)
        with self._lock:
            if self._status is not SeedStatus.PENDING:
                raise StoreAlreadySeededError("Transaction store is already seeded")
            self._records = batch
            self._status = SeedStatus.READY
            self._failure = None
        self._settled.set()
        return len(batch)

    def mark_failed(self, reason: str) -> None:
        """Record that seeding failed. No effect on a store that is already ready."""

        with self._lock:
            if self._status is SeedStatus.READY:
                return
            self._status = SeedStatus.FAILED
            self._failure = reason
        self._settled.set()

    def wait_until_ready(self, timeout: Optional[float] = None) -> bool:
        """
        Block until seeding has settled (succeeded or failed).

        Returns:
            True if the store is ready, False on failure or timeout
        """

        self._settled.wait(timeout)
        return self._status is SeedStatus.READY

    def _matching(self, filters: TransactionQueryFilters) -> List[TransactionRecord]:
        records = self._records
        return [record for record in records if filters.matches(record)]

    def find_page(
        self,
        filters: TransactionQueryFilters,
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> List[TransactionRecord]:
        """
        Return matching records sorted by date_of_sale descending.

        Ties keep insertion order (the sort is stable).

        Args:
            filters: Query filters
            skip: Number of matching records to skip
            limit: Maximum number of records to return (None for no cap)
        """

        if skip < 0:
            raise ValueError("skip must be >= 0")
        if limit is not None and limit < 0:
            raise ValueError("limit must be >= 0")

        matching = sorted(self._matching(filters), key=lambda r: r.date_of_sale, reverse=True)
        end = None if limit is None else skip + limit
        return matching[skip:end]

    def count(self, filters: TransactionQueryFilters) -> int:
        """Number of records matching filters."""

        return sum(1 for record in self._records if filters.matches(record))

    def aggregate(
        self,
        filters: TransactionQueryFilters,
        group_by: Callable[[TransactionRecord], Hashable],
        sum_of: Optional[Callable[[TransactionRecord], float]] = None,
    ) -> List[GroupResult]:
        """
        Group matching records and count (and optionally sum) each group.

        Groups are returned in the order their key is first seen.

        Example:
            store.aggregate(filters, group_by=lambda r: r.category)
            # [GroupResult(key="electronics", count=12), ...]
        """

        counts: dict[Hashable, int] = {}
        totals: dict[Hashable, float] = {}

        for record in self._matching(filters):
            key = group_by(record)
            counts[key] = counts.get(key, 0) + 1
            if sum_of is not None:
                totals[key] = totals.get(key, 0.0) + sum_of(record)

        return [GroupResult(key=key, count=count, total=totals.get(key, 0.0)) for key, count in counts.items()]


__all__ = [
    "SeedStatus",
    "StoreAlreadySeededError",
    "TransactionQueryFilters",
    "GroupResult",
    "TransactionStore",
]
