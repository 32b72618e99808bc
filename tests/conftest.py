"""Shared fixtures for the finance tracker tests."""

from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine

from src.infrastructure.db import (
    SqlAlchemyDatabaseEngineAdapter,
    enable_sqlite_foreign_keys,
)
from src.infrastructure.schema import create_schema


@pytest.fixture
def sqlite_engine(tmp_path):
    """File-backed SQLite engine with the finance schema and FK cascades."""
    db_path = tmp_path / "finance.db"
    engine = create_engine(f"sqlite:///{db_path}", future=True)
    enable_sqlite_foreign_keys(engine)
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_port(sqlite_engine):
    return SqlAlchemyDatabaseEngineAdapter(sqlite_engine)


@pytest.fixture
def fake_logger():
    return MagicMock()
