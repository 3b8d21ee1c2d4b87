"""
API Request and Response Models.

Pydantic models for validating API requests and serializing responses.
"""

from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional, Union

from pydantic import BaseModel


# ============================================================================
# Sale Models
# ============================================================================

class SaleCreateRequest(BaseModel):
    """
    Add-sale form input.

    Fields are passed through as typed; business validation (non-empty names,
    numeric amount, date range) happens in the domain layer and is reported
    as a 422 with per-field messages.
    """
    customer_name: Optional[str] = None
    product: Optional[str] = None
    amount: Union[str, Decimal, None] = None
    date: Optional[datetime] = None

    class Config:
        json_schema_extra = {
            "example": {
                "customer_name": "Bob",
                "product": "Widget",
                "amount": "10.00",
                "date": "2025-01-06T14:30:00"
            }
        }


class SaleResponse(BaseModel):
    """Single stored sale."""
    sale_id: int
    customer_name: str
    product: str
    amount: Decimal
    date: datetime


class SaleListResponse(BaseModel):
    """All sales in insertion order."""
    items: List[SaleResponse]
    total_count: int


# ============================================================================
# Summary Models
# ============================================================================

class TodaySummaryResponse(BaseModel):
    """Totals for the current day."""
    total: Decimal
    by_product: Dict[str, Decimal]
    colors: Dict[str, str]
    count: int

    class Config:
        json_schema_extra = {
            "example": {
                "total": "15.00",
                "by_product": {"Widget": "10.00", "Gadget": "5.00"},
                "colors": {"Gadget": "#2196F3", "Widget": "#F44336"},
                "count": 2
            }
        }


class WeekSummaryResponse(BaseModel):
    """Totals for the current week, Monday (1) to Sunday (7)."""
    total: Decimal
    by_weekday: Dict[int, Decimal]
    count: int
    week_start: datetime


# ============================================================================
# Error Models
# ============================================================================

class ValidationErrorResponse(BaseModel):
    """Per-field validation messages."""
    errors: Dict[str, str]

    class Config:
        json_schema_extra = {
            "example": {
                "errors": {"amount": "Please enter a valid amount"}
            }
        }
