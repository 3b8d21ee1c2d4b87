"""
SalesBook: the interface the presentation layer talks to.

Handles:
- Listing, adding and deleting sales through an injected SaleRepository
- Entry validation before anything reaches the store
- Today / week summaries computed from a fresh snapshot
- Change notifications after successful writes (on_change subscriptions)
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, List, Optional

from domain.sale import Sale, SaleRef
from domain.validation import validate_sale_entry
from repositories.base import SaleRepository
from services.aggregation import (
    TodaySummary,
    WeekSummary,
    today_summary,
    week_summary,
)

logger = logging.getLogger(__name__)

ChangeCallback = Callable[[], None]


class SalesBook:
    """
    Sales ledger over a single record store.

    All reads go to the repository (no caching), so a write followed by a
    read always observes the write. `clock` supplies "now" for entry
    validation and summaries when the caller does not pass one.
    """

    def __init__(
        self,
        repository: SaleRepository,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._repository = repository
        self._clock = clock
        self._listeners: List[ChangeCallback] = []

    def list_all(self) -> List[Sale]:
        """Every stored sale, in insertion order."""

        sales = self._repository.list_all()
        logger.debug("Loaded %d sales", len(sales))
        return sales

    def add(
        self,
        customer_name: Optional[str],
        product: Optional[str],
        amount: object,
        date: Optional[datetime] = None,
    ) -> Sale:
        """
        Validate form input and store a new sale.

        Raises:
            ValidationError: when any field is rejected (the store is not called)
        """

        entry = validate_sale_entry(customer_name, product, amount, date, now=self._clock())
        sale = self._repository.add(entry)
        logger.info("Recorded sale %s: %s %s", sale.sale_id, sale.product, sale.amount)
        self._notify()
        return sale

    def delete(self, sale_id: SaleRef) -> None:
        """Delete a sale by handle. Unknown handles are ignored."""

        if not self._repository.delete(sale_id):
            logger.warning("Delete ignored: no sale with id %s", sale_id)
            return
        logger.info("Deleted sale %s", sale_id)
        self._notify()

    def today_summary(self, now: Optional[datetime] = None) -> TodaySummary:
        return today_summary(self.list_all(), now or self._clock())

    def week_summary(self, now: Optional[datetime] = None) -> WeekSummary:
        return week_summary(self.list_all(), now or self._clock())

    def on_change(self, callback: ChangeCallback) -> Callable[[], None]:
        """
        Subscribe to successful writes.

        Returns a function that removes the subscription.
        """

        self._listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def _notify(self) -> None:
        for callback in list(self._listeners):
            callback()


__all__ = ["SalesBook"]
