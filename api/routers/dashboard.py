"""
Combined Dashboard API Endpoint.

Returns the transaction list, statistics and both chart datasets for a month
in a single response.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_store, internal_error
from api.models import (
    ChartDataPoint,
    CombinedDataResponse,
    ErrorResponse,
    StatisticsResponse,
    TransactionResponse,
)
from repositories.transaction_store import TransactionStore
from services.analytics_service import get_combined_data

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/combined-data",
    response_model=CombinedDataResponse,
    responses={500: {"model": ErrorResponse}},
    summary="Combined Dashboard Data",
    description="Transactions, statistics, bar chart and pie chart data for a month in one response."
)
def get_combined_dashboard_data(
    month: Optional[str] = Query(None, description="Month number (1-12) or name (e.g., 'March')"),
    store: TransactionStore = Depends(get_store),
):
    """
    Fetch every dashboard dataset for a month.

    The transaction list is filtered by month only. Search and pagination
    are not applied here; use `GET /api/transactions` for those.
    """
    try:
        data = get_combined_data(store, month)

        return CombinedDataResponse(
            transactions=[TransactionResponse.from_record(record) for record in data.transactions],
            statistics=StatisticsResponse.from_statistics(data.statistics),
            bar_chart_data=[ChartDataPoint.from_bucket(bucket) for bucket in data.bar_chart],
            pie_chart_data=[ChartDataPoint.from_bucket(bucket) for bucket in data.pie_chart],
        )
    except Exception:
        return internal_error(logger, "combined data")
