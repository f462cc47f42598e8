#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests run without external services: database tests use an in-memory
SQLite database created per test.

    # Run all tests
    python -m pytest tests/ -v

    # Skip database-backed tests
    python -m pytest tests/ -v -m "not db"

    # Using unittest
    python -m unittest discover tests -v
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from database.database import create_session_factory
from database.models import Base

TEST_DB_URL = "sqlite://"


def create_test_engine() -> Engine:
    """
    In-memory SQLite engine with all tables created.

    StaticPool keeps a single connection so every session (and the
    TestClient's worker thread) sees the same database.
    """
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return engine


def create_test_session_factory(engine: Engine = None):
    return create_session_factory(engine or create_test_engine())
