"""
Summary API Endpoints.

Today and this-week statistics for dashboard charts.
"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_sales_book
from api.models import TodaySummaryResponse, WeekSummaryResponse
from services.aggregation import assign_product_colors
from services.sales_book import SalesBook

router = APIRouter()


@router.get(
    "/summary/today",
    response_model=TodaySummaryResponse,
    summary="Today's Sales",
    description="Total and per-product breakdown for the current day."
)
def get_today_summary(
    now: Optional[datetime] = Query(None, description="Reference instant (defaults to server time)"),
    book: SalesBook = Depends(get_sales_book),
):
    try:
        summary = book.today_summary(now)
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to summarize today's sales: {str(e)}"
        )

    return TodaySummaryResponse(
        total=summary.total,
        by_product=summary.by_product,
        colors=assign_product_colors(summary.by_product),
        count=summary.count
    )


@router.get(
    "/summary/week",
    response_model=WeekSummaryResponse,
    summary="This Week's Sales",
    description="Total and Monday..Sunday distribution for the current week."
)
def get_week_summary(
    now: Optional[datetime] = Query(None, description="Reference instant (defaults to server time)"),
    book: SalesBook = Depends(get_sales_book),
):
    try:
        summary = book.week_summary(now)
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to summarize this week's sales: {str(e)}"
        )

    return WeekSummaryResponse(
        total=summary.total,
        by_weekday=dict(summary.series()),
        count=summary.count,
        week_start=summary.week_start
    )
