"""
Shared pytest fixtures.

Environment overrides are applied before the application is imported so
that the module-level settings and limiter pick them up.
"""

import os

os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("DB_AUTO_CREATE_SCHEMA", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from app.infrastructure.db import create_schema
from app.interfaces.users.dependencies import get_db_engine
from app.main import app


@pytest.fixture
def engine():
    """In-memory SQLite engine with the users table, shared across threads."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def client(engine):
    """TestClient wired to the in-memory database."""
    app.dependency_overrides[get_db_engine] = lambda: engine
    yield TestClient(app)
    app.dependency_overrides.clear()
