"""
conftest.py for backend/tests/

Runs the app against an in-memory SQLite database. The engine uses a
StaticPool so every session (the app's request sessions and the test's own
oracle sessions) shares the single in-memory connection.

Fixtures:
    client        TestClient with get_db overridden; follows redirects
    open_store    factory returning an EventStore on a fresh session, so
                  reads always see what the app committed
    seeded_event  one stored event (id, name, place, start, end)
"""

import os
import sys
from datetime import datetime

os.environ.setdefault("DATABASE_URL", "sqlite://")

# Add backend/ to sys.path so `cd backend && pytest tests` works without an install.
_backend_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if _backend_dir not in sys.path:
    sys.path.insert(0, _backend_dir)

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from api.main import app
from db.database import Base, get_db
from db.store import EventStore


@pytest.fixture()
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


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def open_store(session_factory):
    sessions = []

    def _open() -> EventStore:
        session = session_factory()
        sessions.append(session)
        return EventStore(session)

    yield _open
    for session in sessions:
        session.close()


@pytest.fixture()
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    # Not used as a context manager: the lifespan would configure file
    # logging and create tables on the configured DATABASE_URL.
    test_client = TestClient(app, raise_server_exceptions=False)
    yield test_client
    app.dependency_overrides.clear()


@pytest.fixture()
def seeded_event(open_store):
    store = open_store()
    event_id = store.create(
        name="Seeded event",
        place="Plovdiv",
        start=datetime(2024, 11, 1, 9, 30),
        end=datetime(2024, 11, 1, 18, 0),
    )
    return store.get_by_id(event_id)
