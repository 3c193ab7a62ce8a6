"""services/exceptions.py — Domain errors raised by EventService.

api/main.py maps each one to an HTTP status:
    EventNotFoundError     404
    EventIdMismatchError   404
    MissingEventIdError    500
"""


class EventServiceError(Exception):
    """Base class for event service failures."""


class EventNotFoundError(EventServiceError):
    def __init__(self, event_id):
        self.event_id = event_id
        super().__init__(f"Event '{event_id}' not found")


class EventIdMismatchError(EventServiceError):
    """The id in the route and the id in the submitted form disagree."""

    def __init__(self, route_id, form_id):
        self.route_id = route_id
        self.form_id = form_id
        super().__init__(f"Route id '{route_id}' does not match form id '{form_id}'")


class MissingEventIdError(EventServiceError):
    """An operation that needs an event id was called without one."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"No event id supplied for '{operation}'")
