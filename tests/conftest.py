"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import pytest

from tests import create_test_engine, create_test_session_factory


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as requiring database (deselect with '-m \"not db\"')"
    )


@pytest.fixture
def db_session():
    """Session on a fresh in-memory database, closed after the test."""
    engine = create_test_engine()
    session = create_test_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()
