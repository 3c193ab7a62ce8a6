"""
dependencies.py — FastAPI dependency injection

Chains the request-scoped session from db.database.get_db into an
EventStore and an EventService, so FastAPI manages the session lifecycle
(open on request start, close on request end, even if an error occurs).

Tests swap the database by overriding get_db only:
    app.dependency_overrides[get_db] = override_get_db

Usage in a route handler:
    from fastapi import Depends
    from api.dependencies import get_event_service

    @router.get("/example")
    def example(service: EventService = Depends(get_event_service)):
        ...
"""

from fastapi import Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from db.database import get_db
from db.store import EventStore
from services.event_service import EventService

__all__ = ["get_db", "get_event_store", "get_event_service", "check_db_connectivity"]


def get_event_store(db: Session = Depends(get_db)) -> EventStore:
    return EventStore(db)


def get_event_service(store: EventStore = Depends(get_event_store)) -> EventService:
    return EventService(store)


def check_db_connectivity(db: Session) -> bool:
    """Execute SELECT 1 to verify the database is reachable.

    Returns:
        True if the database responds.

    Raises:
        RuntimeError: with a descriptive message if the connection fails.
    """
    try:
        db.execute(text("SELECT 1"))
        return True
    except Exception as exc:
        raise RuntimeError(f"Database connectivity check failed: {exc}") from exc
