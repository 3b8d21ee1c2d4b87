"""
Domain: Sale entry validation.

Raw form input (strings from the add-sale form, or already typed values) is
checked here before anything is constructed or stored:

- customer_name must be non-empty
- product must be non-empty
- amount must parse as a finite real number (sign is not restricted)
- date defaults to `now` and must lie within [2000-01-01, now]

All field problems are reported together. On failure no SaleEntry is built.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Dict, Mapping, Optional, Union

from .sale import SaleEntry
from .time import EARLIEST_SALE_DATE, align_to, earliest_sale_date

AmountInput = Union[str, int, float, Decimal]


class ValidationError(ValueError):
    """Raised when sale entry input is rejected. `errors` maps field -> message."""

    def __init__(self, errors: Mapping[str, str]):
        self.errors: Dict[str, str] = dict(errors)
        super().__init__("; ".join(f"{field}: {message}" for field, message in self.errors.items()))


def parse_amount(value: object) -> Optional[Decimal]:
    """
    Parse a user-entered amount into a Decimal.

    Returns None when the value is not a finite real number. Floats go through
    their shortest repr so 0.1 becomes Decimal("0.1").
    """

    if isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, int):
        amount = Decimal(value)
    elif isinstance(value, float):
        amount = Decimal(repr(value))
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            amount = Decimal(text)
        except InvalidOperation:
            return None
    else:
        return None

    if not amount.is_finite():
        return None
    return amount


def validate_sale_entry(
    customer_name: Optional[str],
    product: Optional[str],
    amount: object,
    date: Optional[datetime] = None,
    *,
    now: datetime,
) -> SaleEntry:
    """
    Validate add-sale form input.

    Args:
        customer_name: Customer name as typed
        product: Product name as typed
        amount: Amount as typed (str) or a numeric value
        date: Sale date; None means "now"
        now: Entry time, the upper bound for the sale date

    Returns:
        SaleEntry with stripped text and a Decimal amount

    Raises:
        ValidationError: with one message per rejected field
    """

    errors: Dict[str, str] = {}

    name_text = customer_name.strip() if isinstance(customer_name, str) else ""
    if not name_text:
        errors["customer_name"] = "Please enter the customer name"

    product_text = product.strip() if isinstance(product, str) else ""
    if not product_text:
        errors["product"] = "Please enter the product"

    parsed_amount = parse_amount(amount)
    if parsed_amount is None:
        errors["amount"] = "Please enter a valid amount"

    sale_date = now if date is None else date
    if not isinstance(sale_date, datetime):
        errors["date"] = "Please pick a valid date"
    else:
        local_date = align_to(sale_date, now)
        if local_date < earliest_sale_date(now):
            errors["date"] = f"Date cannot be before {EARLIEST_SALE_DATE.year}"
        elif local_date > now:
            errors["date"] = "Date cannot be in the future"

    if errors:
        raise ValidationError(errors)

    return SaleEntry(
        customer_name=name_text,
        product=product_text,
        amount=parsed_amount,
        date=sale_date,
    )
