"""
API Response Models.

Pydantic models for serializing dashboard responses. Field names are
snake_case in Python and camelCase on the wire (the dashboard's JSON
contract); chart points expose their label as `_id`.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from domain.transaction import TransactionRecord
from services.analytics_service import ChartBucket, SalesStatistics


# ============================================================================
# Transaction Models
# ============================================================================

class TransactionResponse(BaseModel):
    """Single transaction in API responses."""
    id: int
    date_of_sale: datetime = Field(..., alias="dateOfSale")
    product_title: str = Field(..., alias="productTitle")
    product_description: str = Field(..., alias="productDescription")
    price: float
    category: str
    sold: bool

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "dateOfSale": "2021-11-27T14:59:54Z",
                "productTitle": "Fjallraven - Foldsack No. 1 Backpack",
                "productDescription": "Your perfect pack for everyday use and walks in the forest.",
                "price": 329.85,
                "category": "men's clothing",
                "sold": False
            }
        },
    )

    @classmethod
    def from_record(cls, record: TransactionRecord) -> "TransactionResponse":
        return cls(
            id=record.id,
            date_of_sale=record.date_of_sale,
            product_title=record.product_title,
            product_description=record.product_description,
            price=record.price,
            category=record.category,
            sold=record.sold,
        )


# ============================================================================
# Statistics & Chart Models
# ============================================================================

class StatisticsResponse(BaseModel):
    """Sales statistics for a month."""
    total_sale_amount: float = Field(..., alias="totalSaleAmount")
    total_sold_items: int = Field(..., alias="totalSoldItems")
    total_not_sold_items: int = Field(..., alias="totalNotSoldItems")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "totalSaleAmount": 4250.75,
                "totalSoldItems": 12,
                "totalNotSoldItems": 8
            }
        },
    )

    @classmethod
    def from_statistics(cls, statistics: SalesStatistics) -> "StatisticsResponse":
        return cls(
            total_sale_amount=statistics.total_sale_amount,
            total_sold_items=statistics.total_sold_items,
            total_not_sold_items=statistics.total_not_sold_items,
        )


class ChartDataPoint(BaseModel):
    """One bar (price range) or pie slice (category)."""
    label: str = Field(..., alias="_id")
    count: int

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "_id": "101-200",
                "count": 4
            }
        },
    )

    @classmethod
    def from_bucket(cls, bucket: ChartBucket) -> "ChartDataPoint":
        return cls(label=bucket.label, count=bucket.count)


class CombinedDataResponse(BaseModel):
    """Every dashboard dataset for a month."""
    transactions: List[TransactionResponse]
    statistics: StatisticsResponse
    bar_chart_data: List[ChartDataPoint] = Field(..., alias="barChartData")
    pie_chart_data: List[ChartDataPoint] = Field(..., alias="pieChartData")

    model_config = ConfigDict(populate_by_name=True)


# ============================================================================
# Health & Error Models
# ============================================================================

class SeedStatusResponse(BaseModel):
    """State of the one-time store seed."""
    status: str  # "pending", "ready" or "failed"
    records: int
    error: Optional[str] = None


class ErrorResponse(BaseModel):
    """Generic error body returned with HTTP 500."""
    error: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": "Internal server error"
            }
        },
    )
