"""Pytest configuration and fixtures for tests."""

import os
import sys

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from setmystay.database import Base, get_db  # noqa: E402
from setmystay.services.catalog_service import seed_catalog  # noqa: E402


@pytest.fixture
def engine():
    """Create an in-memory SQLite database for each test.

    Services commit as they go, so isolation comes from a fresh database
    rather than a rolled-back session.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    # Import all models so they're registered
    import setmystay.models  # noqa: F401

    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine) -> Session:
    """Provide a database session bound to the per-test engine."""
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def seeded_db(db) -> Session:
    """Session over a database holding the bundled catalog."""
    seed_catalog(db)
    return db


@pytest.fixture
def client(seeded_db):
    """TestClient whose requests share the seeded test session."""
    from fastapi.testclient import TestClient

    from setmystay.main import app

    def _override_get_db():
        yield seeded_db

    app.dependency_overrides[get_db] = _override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
