"""
Sale repository (Supabase persistence).

This module provides *only* persistence operations for the Sale domain entity
against a Supabase table. It does not validate entries; callers hand it
SaleEntry values that already passed `domain.validation`.

The Supabase client is injected (see `repositories.client.create_supabase_client`)
so that no module-level connection exists.

Expected table (Postgres):

    create table sales (
        sale_id bigint generated always as identity primary key,
        customer_name text not null,
        product text not null,
        amount numeric not null,
        sold_at text not null,
        created_at_utc timestamptz not null
    );
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, List, Mapping

from domain.sale import Sale, SaleEntry, SaleRef
from repositories.base import SALES_TABLE, SaleRepository

logger = logging.getLogger(__name__)


def _parse_datetime(value: Any) -> datetime:
    """
    Parse a Supabase timestamp into a datetime.

    Supabase commonly returns ISO-8601 strings, sometimes with a trailing 'Z'.
    Naive values stay naive (they were stored as local wall-clock time).
    """

    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    raise TypeError(f"Unsupported timestamp type: {type(value)!r}")


def _row_to_sale(row: Mapping[str, Any]) -> Sale:
    """Convert a Supabase row into a Sale."""

    return Sale(
        sale_id=int(row["sale_id"]),
        customer_name=str(row["customer_name"]),
        product=str(row["product"]),
        amount=Decimal(str(row["amount"])),
        date=_parse_datetime(row["sold_at"]),
    )


def _raise_on_error(response: Any, action: str) -> None:
    error = getattr(response, "error", None)
    if error:
        raise RuntimeError(f"Failed to {action}: {error}")


class SupabaseSaleRepository(SaleRepository):
    """Record store backed by a Supabase (PostgREST) table."""

    def __init__(self, client: Any, table: str = SALES_TABLE):
        self._client = client
        self._table = table

    def add(self, entry: SaleEntry) -> Sale:
        """
        Insert a new sale into Supabase.

        Returns:
            Sale carrying the database-assigned sale_id
        """

        payload: dict[str, Any] = {
            "customer_name": entry.customer_name,
            "product": entry.product,
            "amount": str(entry.amount),
            "sold_at": entry.date.isoformat(),
            "created_at_utc": datetime.now(timezone.utc).isoformat(),
        }

        response = self._client.table(self._table).insert(payload).execute()
        _raise_on_error(response, "record sale")

        rows = getattr(response, "data", None) or []
        if not rows:
            raise RuntimeError("Failed to record sale: insert returned no row")

        return entry.to_sale(int(rows[0]["sale_id"]))

    def list_all(self) -> List[Sale]:
        """
        Retrieve all sale records, oldest first.

        Returns:
            List[Sale] (possibly empty)
        """

        response = self._client.table(self._table).select("*").order("sale_id").execute()
        _raise_on_error(response, "list sales")

        rows = getattr(response, "data", None) or []
        return [_row_to_sale(row) for row in rows]

    def delete(self, sale_id: SaleRef) -> bool:
        """Delete a sale by handle. Returns False when nothing matched."""

        response = (
            self._client.table(self._table)
            .delete()
            .eq("sale_id", int(sale_id))
            .execute()
        )
        _raise_on_error(response, "delete sale")

        rows = getattr(response, "data", None) or []
        return len(rows) > 0


__all__ = ["SupabaseSaleRepository"]
