"""
Pytest fixtures for the StackSave API. Uses an in-memory SQLite database shared across connections.
"""

from __future__ import annotations

import os
from datetime import datetime, timezone

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
import app.models  # noqa: F401

WALLET = "0x" + "a" * 40
WALLET_MIXED_CASE = "0x" + "A" * 20 + "a" * 20


class FakeClock:
    """Settable UTC clock for cooldown tests."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta):
        self.now = self.now + delta


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def seeded_db(db):
    """Session with the demo protocols, strategies and allocations loaded."""
    from seed_data import seed_database

    seed_database(db)
    return db


@pytest.fixture
def clock():
    return FakeClock(datetime(2026, 3, 10, 9, 30, tzinfo=timezone.utc))


@pytest.fixture
def client(seeded_db, session_factory):
    """FastAPI TestClient with get_db pointed at the seeded in-memory database."""
    from fastapi.testclient import TestClient

    from app.main import app

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
