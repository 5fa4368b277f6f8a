"""Pytest fixtures for the dashboard seed tests.

Uses a SQLite database file and FastAPI TestClient. Overrides the `get_engine`
dependency so tests are isolated from any real database.
"""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, text

import dashboard_seed.database as database
import dashboard_seed.models  # noqa: F401
from dashboard_seed.main import app
from dashboard_seed.database import Base


TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite:///./test_dashboard_seed.db")

# Create test engine
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})


@pytest.fixture(autouse=True)
def setup_database():
    """Start every test without seed tables and drop them afterwards."""
    Base.metadata.drop_all(bind=engine)
    try:
        yield
    finally:
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def test_engine():
    return engine


def _override_get_engine():
    return engine


app.dependency_overrides[database.get_engine] = _override_get_engine

# Disable the global rate limiter so repeated seed calls across tests are not rejected
try:
    app.state.limiter.enabled = False  # type: ignore[attr-defined]
except Exception:
    pass


@pytest.fixture()
def client():
    """FastAPI test client using the app with overridden dependencies."""
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def table_count():
    """Return a helper counting rows of a seed table via raw SQL."""
    def _table_count(table: str) -> int:
        with engine.connect() as conn:
            return conn.execute(text(f"SELECT COUNT(*) FROM {table}")).scalar()

    return _table_count
