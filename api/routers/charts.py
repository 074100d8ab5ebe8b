"""
Statistics and Chart API Endpoints.

Monthly aggregates: sales totals, price-range histogram and category
breakdown.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_store, internal_error
from api.models import ChartDataPoint, ErrorResponse, StatisticsResponse
from repositories.transaction_store import TransactionStore
from services.analytics_service import (
    get_category_counts,
    get_price_range_counts,
    get_statistics,
)

logger = logging.getLogger(__name__)

router = APIRouter()

MONTH_QUERY_DESCRIPTION = "Month number (1-12) or name (e.g., 'March')"


@router.get(
    "/statistics",
    response_model=StatisticsResponse,
    responses={500: {"model": ErrorResponse}},
    summary="Sales Statistics",
    description="Total sale amount plus sold and not-sold item counts for a month."
)
def get_sales_statistics(
    month: Optional[str] = Query(None, description=MONTH_QUERY_DESCRIPTION),
    store: TransactionStore = Depends(get_store),
):
    """
    Compute sales statistics for a month.

    **Example response:**
    ```json
    {"totalSaleAmount": 4250.75, "totalSoldItems": 12, "totalNotSoldItems": 8}
    ```
    """
    try:
        return StatisticsResponse.from_statistics(get_statistics(store, month))
    except Exception:
        return internal_error(logger, "statistics")


@router.get(
    "/bar-chart",
    response_model=List[ChartDataPoint],
    responses={500: {"model": ErrorResponse}},
    summary="Price Range Histogram",
    description="Item counts per price range for a month. Empty ranges are omitted."
)
def get_bar_chart(
    month: Optional[str] = Query(None, description=MONTH_QUERY_DESCRIPTION),
    store: TransactionStore = Depends(get_store),
):
    try:
        return [ChartDataPoint.from_bucket(bucket) for bucket in get_price_range_counts(store, month)]
    except Exception:
        return internal_error(logger, "bar chart data")


@router.get(
    "/pie-chart",
    response_model=List[ChartDataPoint],
    responses={500: {"model": ErrorResponse}},
    summary="Category Breakdown",
    description="Item counts per category for a month."
)
def get_pie_chart(
    month: Optional[str] = Query(None, description=MONTH_QUERY_DESCRIPTION),
    store: TransactionStore = Depends(get_store),
):
    try:
        return [ChartDataPoint.from_bucket(bucket) for bucket in get_category_counts(store, month)]
    except Exception:
        return internal_error(logger, "pie chart data")
