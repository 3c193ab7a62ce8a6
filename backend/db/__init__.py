"""Database package for Eventmi."""

from .database import Base, engine, SessionLocal, build_engine, get_db, init_db
from .models import Event
from .store import EventStore

__all__ = [
    "Base",
    "engine",
    "SessionLocal",
    "build_engine",
    "get_db",
    "init_db",
    "Event",
    "EventStore",
]
