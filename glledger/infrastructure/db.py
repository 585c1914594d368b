"""Ledger database engine.

One process-wide engine is built on first use from ``LEDGER_DB_URL``. Reads
are short (one page query plus its total), so the pool stays small: five
pooled connections, five overflow, each checked with a ping before reuse.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from glledger.application.ports.database import DatabaseEnginePort


def _get_env_var(name: str) -> str:
    """Return a required setting, loading ``.env`` first.

    Raises:
        RuntimeError: When the variable is unset or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Build the pooled ledger engine.

    ``pool_pre_ping`` drops connections the MySQL server closed after
    ``wait_timeout`` instead of failing the next read.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_ledger_engine: Optional[Engine] = None


def get_ledger_engine() -> Engine:
    """Return the shared ledger engine, creating it on first call."""
    global _ledger_engine
    if _ledger_engine is None:
        db_url = _get_env_var("LEDGER_DB_URL")
        _ledger_engine = _create_engine(db_url)
    return _ledger_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """``DatabaseEnginePort`` returning the shared ledger engine."""

    def get_ledger_engine(self) -> Engine:
        return get_ledger_engine()


__all__ = ["get_ledger_engine", "SqlAlchemyDatabaseEngineAdapter"]
