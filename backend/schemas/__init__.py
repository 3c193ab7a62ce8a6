from schemas.event import (
    FORM_DATETIME_FORMAT,
    FORM_FIELDS,
    EventFormModel,
    bind_event_form,
    format_form_datetime,
    form_values_from_event,
    parse_form_datetime,
)

__all__ = [
    "FORM_DATETIME_FORMAT", "FORM_FIELDS",
    "EventFormModel", "bind_event_form",
    "format_form_datetime", "parse_form_datetime", "form_values_from_event",
]
