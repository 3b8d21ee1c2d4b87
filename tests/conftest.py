"""
Pytest configuration and shared fixtures.

This file adds the project root to the Python path so that tests
can import from the domain, repositories, services and api packages.
"""

import sys
from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import Callable, Iterator

import pytest

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from domain.sale import Sale, SaleEntry  # noqa: E402
from repositories.local_sale_repository import LocalSaleRepository  # noqa: E402


@pytest.fixture
def now() -> datetime:
    """Wednesday 2025-01-08 15:30 (week starts Monday 2025-01-06)."""
    return datetime(2025, 1, 8, 15, 30)


@pytest.fixture
def make_sale() -> Callable[..., Sale]:
    """Factory for stored sales with sequential handles."""
    counter = iter(range(1, 10_000))

    def _make(customer_name: str, product: str, amount: str, date: datetime) -> Sale:
        return Sale(
            sale_id=next(counter),
            customer_name=customer_name,
            product=product,
            amount=Decimal(amount),
            date=date,
        )

    return _make


@pytest.fixture
def make_entry() -> Callable[..., SaleEntry]:
    def _make(customer_name: str, product: str, amount: str, date: datetime) -> SaleEntry:
        return SaleEntry(
            customer_name=customer_name,
            product=product,
            amount=Decimal(amount),
            date=date,
        )

    return _make


@pytest.fixture
def memory_repository() -> Iterator[LocalSaleRepository]:
    """SQLite record store living only for the test."""
    repository = LocalSaleRepository(":memory:")
    yield repository
    repository.close()
