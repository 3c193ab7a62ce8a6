"""db/store.py — Data-access layer for the events table.

EventStore wraps a request-scoped Session and is the only code that issues
queries against `events`. The HTTP layer reaches it through EventService;
the test suite uses it directly to check side effects.

Not-found is reported as None / False, never as an exception, so callers
decide what a missing row means for them.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from db.models import Event

logger = logging.getLogger(__name__)

MAX_EVENT_ID = 2**63 - 1


class EventStore:
    def __init__(self, db: Session):
        self.db = db

    def create(self, name: str, place: str, start: datetime, end: datetime) -> int:
        """Insert a new event and return its store-assigned id."""
        event = Event(name=name, place=place, start=start, end=end)
        self.db.add(event)
        self.db.commit()
        self.db.refresh(event)
        logger.debug("event row inserted", extra={"event_id": event.id})
        return event.id

    def get_by_id(self, event_id: int) -> Optional[Event]:
        # Ids outside the signed 64-bit INTEGER range can never exist.
        if not 1 <= event_id <= MAX_EVENT_ID:
            return None
        return self.db.get(Event, event_id)

    def get_by_name(self, name: str) -> Optional[Event]:
        """First event with exactly this name (lowest id wins)."""
        return self.db.scalars(
            select(Event).where(Event.name == name).order_by(Event.id).limit(1)
        ).first()

    def exists(self, name: str) -> bool:
        return self.get_by_name(name) is not None

    def list_all(self) -> list[Event]:
        return list(self.db.scalars(select(Event).order_by(Event.start, Event.id)))

    def update(
        self,
        event_id: int,
        name: str,
        place: str,
        start: datetime,
        end: datetime,
    ) -> bool:
        """Replace every mutable field of an event. The id never changes."""
        event = self.get_by_id(event_id)
        if event is None:
            return False

        event.name = name
        event.place = place
        event.start = start
        event.end = end
        self.db.commit()
        logger.debug("event row updated", extra={"event_id": event_id})
        return True

    def delete(self, event_id: int) -> bool:
        event = self.get_by_id(event_id)
        if event is None:
            return False

        self.db.delete(event)
        self.db.commit()
        logger.debug("event row deleted", extra={"event_id": event_id})
        return True
