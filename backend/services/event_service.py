"""services/event_service.py — Event use cases behind the HTTP controller.

EventService sits between api/routers/events.py and db/store.py:
it turns store-level "not found" (None / False) into EventNotFoundError,
checks route/form id agreement on edit, and logs every mutation.

Form validation happens before the service is called (schemas/event.py);
the service only receives a bound EventFormModel.
"""

from __future__ import annotations

import logging
from typing import Optional

from db.models import Event
from db.store import EventStore
from schemas.event import EventFormModel
from services.exceptions import EventIdMismatchError, EventNotFoundError, MissingEventIdError

logger = logging.getLogger(__name__)


class EventService:
    def __init__(self, store: EventStore):
        self.store = store

    def list_events(self) -> list[Event]:
        events = self.store.list_all()
        logger.debug("listed events", extra={"count": len(events)})
        return events

    def add(self, form: EventFormModel) -> int:
        event_id = self.store.create(**form.to_store_fields())
        logger.info("event created", extra={"event_id": event_id, "event_name": form.name})
        return event_id

    def get_details(self, event_id: int) -> Event:
        event = self.store.get_by_id(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def get_for_edit(self, event_id: int) -> Event:
        return self.get_details(event_id)

    def resolve_edit_target(self, route_id: Optional[int], form_id: Optional[int]) -> int:
        """Work out which event an edit submission is for.

        The form must carry an id. When the route names an id as well the
        two must agree.
        """
        if form_id is None:
            raise EventNotFoundError(route_id)
        if route_id is not None and route_id != form_id:
            raise EventIdMismatchError(route_id, form_id)
        return form_id

    def edit(self, event_id: int, form: EventFormModel) -> Event:
        if not self.store.update(event_id, **form.to_store_fields()):
            raise EventNotFoundError(event_id)
        logger.info("event updated", extra={"event_id": event_id, "event_name": form.name})
        return self.store.get_by_id(event_id)

    def delete(self, event_id: Optional[int]) -> None:
        # No not-found guard for a missing id: callers get a 500, not a 404.
        if event_id is None:
            raise MissingEventIdError("delete")
        if not self.store.delete(event_id):
            raise EventNotFoundError(event_id)
        logger.info("event deleted", extra={"event_id": event_id})
