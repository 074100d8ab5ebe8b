"""
Transactions API Endpoints.

Endpoint for browsing the seeded product transactions.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_store, internal_error
from api.models import ErrorResponse, TransactionResponse
from repositories.transaction_store import TransactionStore
from services.analytics_service import list_transactions

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/transactions",
    response_model=List[TransactionResponse],
    responses={500: {"model": ErrorResponse}},
    summary="List Transactions",
    description="Page through a month's transactions, newest first, with optional text search."
)
def get_transactions(
    month: Optional[str] = Query(None, description="Month number (1-12) or name (e.g., 'March')"),
    search: Optional[str] = Query("", description="Case-insensitive match on title, description or price"),
    page: Optional[str] = Query(None, description="1-based page number (default 1)"),
    per_page: Optional[str] = Query(None, alias="perPage", description="Page size (default 10)"),
    store: TransactionStore = Depends(get_store),
):
    """
    List transactions for a month.

    Parameters are parsed permissively: an unknown month matches nothing and
    invalid page values fall back to their defaults.

    **Example usage:**
    - All March transactions: `GET /api/transactions?month=3`
    - Search by text: `GET /api/transactions?month=March&search=shirt`
    - Second page: `GET /api/transactions?month=3&page=2&perPage=10`
    """
    try:
        records = list_transactions(store, month=month, search=search, page=page, per_page=per_page)
        return [TransactionResponse.from_record(record) for record in records]
    except Exception:
        return internal_error(logger, "transactions")
