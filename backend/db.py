"""
Database access for Postgres and an in-memory test implementation.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Protocol

from sqlalchemy import create_engine, func, select
from sqlalchemy.engine import Engine


class DbClient(Protocol):
    """Interface for database access."""

    def now(self) -> datetime:
        ...


@dataclass
class InMemoryDbClient:
    """Clock-backed stand-in for development and tests.

    Set ``error`` to make every query fail with that exception, which is how
    tests simulate an unreachable database.
    """

    error: Optional[Exception] = None

    def now(self) -> datetime:
        if self.error is not None:
            raise self.error
        return datetime.now(timezone.utc)


class PostgresDbClient:
    """
    SQLAlchemy-backed implementation. Accepts any SQLAlchemy URL (e.g., Postgres or SQLite for tests).
    """

    def __init__(self, database_url: str):
        if not database_url:
            raise ValueError("A database URL is required for PostgresDbClient")
        self.database_url = database_url
        self._engine: Optional[Engine] = None

    @property
    def engine(self) -> Engine:
        # Built on first use so URL and driver errors surface at query time.
        if self._engine is None:
            self._engine = create_engine(
                self.database_url,
                future=True,
                pool_pre_ping=True,
                pool_recycle=1800,
            )
        return self._engine

    def now(self) -> datetime:
        """
        Run ``SELECT NOW()`` and return the server time.

        Engine setup, connection and query errors propagate to the caller.
        Naive values (SQLite's CURRENT_TIMESTAMP) are UTC.
        """
        with self.engine.connect() as conn:
            value = conn.execute(select(func.now())).scalar_one()
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value

    def dispose(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
