"""Service layer for Eventmi."""

from .event_service import EventService
from .exceptions import EventIdMismatchError, EventNotFoundError, EventServiceError, MissingEventIdError

__all__ = [
    "EventService",
    "EventServiceError",
    "EventNotFoundError",
    "EventIdMismatchError",
    "MissingEventIdError",
]
