"""Database infrastructure for the finance tracker.

This module exposes concrete helpers to create and reuse the SQLAlchemy
engine connected to the finance database. It belongs to the infrastructure
layer because it deals with external systems (PostgreSQL, or SQLite for
local runs).
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort


DB_URL_ENV = "FINANCE_DB_URL"


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _set_sqlite_pragma(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def enable_sqlite_foreign_keys(engine: Engine) -> Engine:
    """Turn on foreign key enforcement for every new SQLite connection.

    SQLite ignores ``ON DELETE`` clauses unless the pragma is set per
    connection.

    Args:
        engine: Engine connected to a SQLite database.

    Returns:
        Engine: The same engine, for chaining.
    """
    event.listen(engine, "connect", _set_sqlite_pragma)
    return engine


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine for the finance database.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine instance with a small connection pool and
        health checks enabled.
    """
    engine = create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )
    if make_url(db_url).get_backend_name() == "sqlite":
        enable_sqlite_foreign_keys(engine)
    return engine


_finance_engine: Optional[Engine] = None


def get_finance_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the finance database.

    Returns:
        Engine: Lazily initialized engine connected to the backing store.
    """
    global _finance_engine
    if _finance_engine is None:
        db_url = _get_env_var(DB_URL_ENV)
        _finance_engine = _create_engine(db_url)
    return _finance_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The adapter hides configuration details (environment variables, pooling)
    behind the port so repositories can depend only on the protocol. An
    explicit engine can be injected, which tests use with SQLite files.
    """

    def __init__(self, engine: Engine | None = None) -> None:
        self._engine = engine

    def get_engine(self) -> Engine:
        """Get the engine for the finance database.

        Returns:
            Engine: Injected engine, or the lazily created singleton.
        """
        if self._engine is not None:
            return self._engine
        return get_finance_engine()


__all__ = [
    "DB_URL_ENV",
    "enable_sqlite_foreign_keys",
    "get_finance_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
