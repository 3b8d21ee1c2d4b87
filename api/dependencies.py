"""
API Dependencies

Dependency injection for the SalesBook. Tests replace `get_sales_book`
through `app.dependency_overrides`.
"""

from functools import lru_cache

from repositories.client import open_sale_repository
from services.sales_book import SalesBook


@lru_cache()
def get_sales_book() -> SalesBook:
    """Get the SalesBook over the configured record store."""
    return SalesBook(open_sale_repository())
