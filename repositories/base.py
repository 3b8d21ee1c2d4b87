"""
Record store interface for Sale records.

Backends persist sales and hand out integer handles (SaleRef) that increase
with insertion order. `list_all` enumerates in insertion order. No business
rules live here.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from domain.sale import Sale, SaleEntry, SaleRef

# Table name used by every backend.
SALES_TABLE: str = "sales"


class SaleRepository(ABC):
    """Persistence operations for Sale records."""

    @abstractmethod
    def add(self, entry: SaleEntry) -> Sale:
        """Append a validated entry and return the stored Sale with its handle."""

    @abstractmethod
    def list_all(self) -> List[Sale]:
        """Return every stored sale in insertion order."""

    @abstractmethod
    def delete(self, sale_id: SaleRef) -> bool:
        """Delete by handle. Returns False when no record had that handle."""

    def close(self) -> None:
        """Release backend resources. No-op by default."""

    def __enter__(self) -> "SaleRepository":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
