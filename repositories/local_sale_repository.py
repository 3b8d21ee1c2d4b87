"""
Local sale repository (SQLite).

Embedded, file-backed record store used by default. Handles are SQLite
AUTOINCREMENT ids, so they never repeat and follow insertion order.

Amounts are stored as text to keep Decimal values exact; dates are stored as
ISO-8601 strings and round-trip with their original awareness.
"""

from __future__ import annotations

import logging
import sqlite3
from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import List, Union

from domain.sale import Sale, SaleEntry, SaleRef
from repositories.base import SALES_TABLE, SaleRepository

logger = logging.getLogger(__name__)

# Default database path
DEFAULT_DB_PATH = "./data/sales.db"

_MEMORY = ":memory:"


def get_connection(db_path: Union[str, Path] = DEFAULT_DB_PATH) -> sqlite3.Connection:
    """Open a database connection, creating the parent directory if needed."""

    db_path = str(db_path)
    if db_path != _MEMORY:
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    # The HTTP adapter serves sync endpoints from a worker thread.
    conn = sqlite3.connect(db_path, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    return conn


def init_database(conn: sqlite3.Connection) -> None:
    """Create the sales table if it does not exist."""

    conn.execute(f"""
        CREATE TABLE IF NOT EXISTS {SALES_TABLE} (
            sale_id INTEGER PRIMARY KEY AUTOINCREMENT,
            customer_name TEXT NOT NULL,
            product TEXT NOT NULL,
            amount TEXT NOT NULL,
            sold_at TEXT NOT NULL
        )
    """)
    conn.commit()


def _row_to_sale(row: sqlite3.Row) -> Sale:
    """Convert a SQLite row into a Sale."""

    return Sale(
        sale_id=int(row["sale_id"]),
        customer_name=str(row["customer_name"]),
        product=str(row["product"]),
        amount=Decimal(str(row["amount"])),
        date=datetime.fromisoformat(str(row["sold_at"])),
    )


class LocalSaleRepository(SaleRepository):
    """SQLite-backed record store holding a single open connection."""

    def __init__(self, db_path: Union[str, Path] = DEFAULT_DB_PATH):
        self.db_path = str(db_path)
        self._conn = get_connection(self.db_path)
        init_database(self._conn)
        logger.info("Sales database ready at %s", self.db_path)

    def add(self, entry: SaleEntry) -> Sale:
        cursor = self._conn.execute(
            f"""
            INSERT INTO {SALES_TABLE} (customer_name, product, amount, sold_at)
            VALUES (?, ?, ?, ?)
            """,
            (entry.customer_name, entry.product, str(entry.amount), entry.date.isoformat()),
        )
        self._conn.commit()
        return entry.to_sale(int(cursor.lastrowid))

    def list_all(self) -> List[Sale]:
        rows = self._conn.execute(f"SELECT * FROM {SALES_TABLE} ORDER BY sale_id").fetchall()
        return [_row_to_sale(row) for row in rows]

    def delete(self, sale_id: SaleRef) -> bool:
        cursor = self._conn.execute(f"DELETE FROM {SALES_TABLE} WHERE sale_id = ?", (int(sale_id),))
        self._conn.commit()
        return cursor.rowcount > 0

    def close(self) -> None:
        self._conn.close()


__all__ = [
    "DEFAULT_DB_PATH",
    "LocalSaleRepository",
    "get_connection",
    "init_database",
]
