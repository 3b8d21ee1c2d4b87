"""
Domain: Sale records.

A Sale is a single recorded transaction: who bought (customer_name), what was
bought (product), how much was paid (amount) and when (date).

Identity is the storage-assigned handle (sale_id), not the field values: two
sales with identical fields remain distinct records. Sales are never mutated
after creation; they are only added and deleted.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from .time import require_datetime

# Storage handle type. Handles increase with insertion order.
SaleRef = int


def _require_text(name: str, value: object) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{name} must be a non-empty string")


def _require_amount(value: object) -> None:
    if not isinstance(value, Decimal):
        raise ValueError(f"amount must be a Decimal, got {type(value).__name__}")
    if not value.is_finite():
        raise ValueError("amount must be a finite number")


@dataclass(frozen=True, slots=True)
class SaleEntry:
    """
    Validated sale data that has not been stored yet.

    Produced by `domain.validation.validate_sale_entry`; turned into a Sale by
    the record store once a handle has been assigned.
    """

    customer_name: str
    product: str
    amount: Decimal
    date: datetime

    def __post_init__(self) -> None:
        _require_text("customer_name", self.customer_name)
        _require_text("product", self.product)
        _require_amount(self.amount)
        require_datetime("date", self.date)

    def to_sale(self, sale_id: SaleRef) -> "Sale":
        """Attach a storage handle."""

        return Sale(
            sale_id=sale_id,
            customer_name=self.customer_name,
            product=self.product,
            amount=self.amount,
            date=self.date,
        )


@dataclass(frozen=True, slots=True)
class Sale:
    """Immutable stored sale. `sale_id` is the record store handle."""

    sale_id: SaleRef
    customer_name: str
    product: str
    amount: Decimal
    date: datetime

    def __post_init__(self) -> None:
        if isinstance(self.sale_id, bool) or not isinstance(self.sale_id, int):
            raise ValueError("sale_id must be an integer handle")
        _require_text("customer_name", self.customer_name)
        _require_text("product", self.product)
        _require_amount(self.amount)
        require_datetime("date", self.date)

    @property
    def weekday(self) -> int:
        """ISO weekday of the sale date (Monday = 1 ... Sunday = 7)."""

        return self.date.isoweekday()
