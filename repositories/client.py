"""
Record store configuration.

Builds the SaleRepository the application uses. Nothing connects at import
time; callers ask for a repository and own it afterwards.

Environment variables (optionally from a .env file in the project root):
- SALES_STORE_BACKEND: "local" (default, SQLite file) or "supabase"
- SALES_DB_PATH: SQLite file for the local backend (default ./data/sales.db)
- SUPABASE_URL: Your Supabase project URL (supabase backend only)
- SUPABASE_KEY: Your Supabase API key (use a server-side key only on the backend)
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from repositories.base import SaleRepository
from repositories.local_sale_repository import DEFAULT_DB_PATH, LocalSaleRepository
from repositories.sale_repository import SupabaseSaleRepository

# Look for .env in the project root
env_path = Path(__file__).parent.parent / ".env"

BACKEND_LOCAL = "local"
BACKEND_SUPABASE = "supabase"


def load_environment() -> None:
    """Load .env values without overriding variables already set."""

    load_dotenv(dotenv_path=env_path)


def create_supabase_client():
    """
    Create the official Supabase client from environment credentials.

    Raises:
        RuntimeError: if SUPABASE_URL or SUPABASE_KEY is missing
    """

    # The dependency is `supabase` (supabase-py).
    from supabase import create_client  # type: ignore[import-not-found]

    supabase_url: Optional[str] = os.getenv("SUPABASE_URL")
    supabase_key: Optional[str] = os.getenv("SUPABASE_KEY")

    if not supabase_url:
        raise RuntimeError(
            "Missing environment variable: SUPABASE_URL. "
            "Set SUPABASE_URL to your Supabase project URL."
        )

    if not supabase_key:
        raise RuntimeError(
            "Missing environment variable: SUPABASE_KEY. "
            "Set SUPABASE_KEY to your Supabase API key."
        )

    return create_client(supabase_url, supabase_key)


def open_sale_repository(backend: Optional[str] = None) -> SaleRepository:
    """
    Open the configured record store.

    Args:
        backend: Override for SALES_STORE_BACKEND

    Raises:
        ValueError: for an unknown backend name
        RuntimeError: for missing Supabase credentials
    """

    load_environment()
    backend = (backend or os.getenv("SALES_STORE_BACKEND") or BACKEND_LOCAL).strip().lower()

    if backend == BACKEND_LOCAL:
        return LocalSaleRepository(os.getenv("SALES_DB_PATH") or DEFAULT_DB_PATH)
    if backend == BACKEND_SUPABASE:
        return SupabaseSaleRepository(create_supabase_client())

    raise ValueError(
        f"Unknown SALES_STORE_BACKEND: {backend!r}. "
        f"Use {BACKEND_LOCAL!r} or {BACKEND_SUPABASE!r}."
    )


__all__ = ["create_supabase_client", "load_environment", "open_sale_repository"]
