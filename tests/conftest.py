"""Pytest fixtures for dashboard API tests.

Uses a file-backed SQLite store and FastAPI TestClient. Overrides the
`get_store` dependency so tests never need a PostgreSQL server.
"""

import os

# Keep bcrypt cheap in tests; must be set before dashboard_api.auth is imported
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, inspect, text

import dashboard_api.database as database
from dashboard_api.main import app
from dashboard_api.models import Base


TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite:///./test_dashboard.db")

# Create test engine
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})


@pytest.fixture(autouse=True)
def setup_database():
    """Start every test without tables (seeding creates them) and drop them afterwards."""
    Base.metadata.drop_all(bind=engine)
    try:
        yield
    finally:
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def store():
    """The test store engine, as handed to the seeder."""
    return engine


@pytest.fixture()
def count_rows():
    """Return a helper counting rows of a table, or 0 when the table does not exist."""
    def _count_rows(table: str) -> int:
        if table not in inspect(engine).get_table_names():
            return 0
        with engine.connect() as conn:
            return conn.execute(text(f"SELECT COUNT(*) FROM {table}")).scalar()

    return _count_rows


# Override get_store dependency in the app
def _override_get_store():
    yield engine


app.dependency_overrides[database.get_store] = _override_get_store

# Many seeding calls happen across tests; disable the global rate limiter
try:
    app.state.limiter.enabled = False  # type: ignore[attr-defined]
except Exception:
    # If limiter API changes, don't break tests; just continue without disabling.
    pass


@pytest.fixture()
def client():
    """FastAPI test client using the app with overridden dependencies."""
    with TestClient(app) as c:
        yield c
