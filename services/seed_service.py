"""
Seed service for the transaction store.

Fetches the product transaction feed once and loads it into a
TransactionStore.

Failure handling:
- Fetch, parse and insert failures are logged with a traceback.
- The store is marked FAILED and stays empty.
- Failures never propagate out of seed_store(); the API keeps serving.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, List

import requests

from domain.transaction import TransactionRecord
from repositories.transaction_store import SeedStatus, TransactionStore

logger = logging.getLogger(__name__)


class SeedError(RuntimeError):
    """Raised when the seed feed cannot be fetched or understood."""
    pass


def fetch_seed_feed(url: str, timeout: float = 30.0) -> List[dict[str, Any]]:
    """
    Download the seed feed.

    Args:
        url: Feed URL (must return a JSON array of objects)
        timeout: Request timeout in seconds

    Returns:
        Raw feed entries

    Raises:
        SeedError: Network/HTTP failure or a payload that is not a JSON array
    """

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        payload = response.json()
    except (requests.RequestException, ValueError) as e:
        raise SeedError(f"Failed to fetch seed feed from {url}: {e}") from e

    if not isinstance(payload, list):
        raise SeedError(f"Seed feed must be a JSON array, got {type(payload).__name__}")

    return payload


def parse_seed_feed(entries: List[Any]) -> List[TransactionRecord]:
    """
    Convert raw feed entries into TransactionRecords.

    The whole feed is rejected if any entry is invalid (no partial seed).

    Raises:
        SeedError: An entry is not an object or has missing/invalid fields
    """

    records: List[TransactionRecord] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise SeedError(f"Seed entry {index} is not an object")
        try:
            records.append(TransactionRecord.from_feed(entry))
        except (KeyError, ValueError, TypeError) as e:
            raise SeedError(f"Seed entry {index} is invalid: {e!r}") from e

    return records


def seed_store(store: TransactionStore, url: str, timeout: float = 30.0) -> int:
    """
    Fetch the feed and insert every record into the store.

    Returns:
        Number of records inserted (0 when seeding failed or was skipped)
    """

    if store.status is not SeedStatus.PENDING:
        logger.warning("Transaction store already %s; skipping seed from %s", store.status.value, url)
        return 0

    try:
        records = parse_seed_feed(fetch_seed_feed(url, timeout=timeout))
        inserted = store.insert_many(records)
    except Exception as e:
        logger.exception("Error initializing transaction store from %s", url)
        store.mark_failed(str(e))
        return 0

    logger.info("Transaction store initialized with %d seed records", inserted)
    return inserted


def start_background_seed(store: TransactionStore, url: str, timeout: float = 30.0) -> threading.Thread:
    """
    Seed the store on a daemon thread.

    The caller does not wait: requests served before the thread finishes see
    an empty store. Use store.status / store.wait_until_ready() to observe it.
    """

    thread = threading.Thread(
        target=seed_store,
        args=(store, url),
        kwargs={"timeout": timeout},
        name="transaction-seed",
        daemon=True,
    )
    thread.start()
    return thread


__all__ = [
    "SeedError",
    "fetch_seed_feed",
    "parse_seed_feed",
    "seed_store",
    "start_background_seed",
]
