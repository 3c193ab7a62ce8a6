"""schemas/event.py — Event form binding and view helpers.

Form fields arrive capitalised (Name, Place, Start, End) plus a lower-case
`id` on edit. Dates use the MM/DD/YYYY hh:mm AM/PM format; ISO-8601 is
accepted too so <input type="datetime-local"> values bind without help.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, ValidationInfo, field_validator

FORM_DATETIME_FORMAT = "%m/%d/%Y %I:%M %p"

FORM_FIELDS = ("Name", "Place", "Start", "End")


def format_form_datetime(value: Optional[datetime]) -> str:
    return value.strftime(FORM_DATETIME_FORMAT) if value else ""


def parse_form_datetime(value: str) -> datetime:
    """Parse MM/DD/YYYY hh:mm AM/PM, falling back to ISO-8601."""
    value = value.strip()
    try:
        return datetime.strptime(value, FORM_DATETIME_FORMAT)
    except ValueError:
        pass
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        raise ValueError(f"'{value}' is not a valid date and time") from None
    # Stored as naive local times; an offset would be dropped silently.
    if parsed.tzinfo is not None:
        raise ValueError(f"'{value}' must not include a time zone")
    return parsed


class EventFormModel(BaseModel):
    """Bound and validated event form. Every named field is required."""
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    id: Optional[int] = None
    name: str = Field(alias="Name", min_length=1, max_length=255)
    place: str = Field(alias="Place", min_length=1, max_length=255)
    start: datetime = Field(alias="Start")
    end: datetime = Field(alias="End")

    @field_validator("id", mode="before")
    @classmethod
    def _blank_id_is_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("start", "end", mode="before")
    @classmethod
    def _parse_dates(cls, v: Any) -> Any:
        if isinstance(v, str):
            return parse_form_datetime(v) if v.strip() else None
        return v

    @field_validator("end")
    @classmethod
    def _end_after_start(cls, v: datetime, info: ValidationInfo) -> datetime:
        start = info.data.get("start")
        if start is not None and v <= start:
            raise ValueError("End must be after Start")
        return v

    def to_store_fields(self) -> dict:
        return {"name": self.name, "place": self.place, "start": self.start, "end": self.end}


def _error_message(field: str, error: Mapping[str, Any]) -> str:
    if error["type"] in ("missing", "string_too_short", "datetime_type"):
        return f"The {field} field is required."
    if error["type"] == "int_parsing":
        return f"The {field} value is not a valid id."
    return error["msg"].removeprefix("Value error, ")


def bind_event_form(
    raw: Mapping[str, Any],
) -> tuple[Optional[EventFormModel], dict[str, str]]:
    """Validate raw form data.

    Returns (model, {}) on success, or (None, errors) where errors maps each
    offending form field (Name, Place, Start, End, id) to its first message.
    Blank strings count as missing.
    """
    data = {key: value for key, value in raw.items() if value is not None}
    try:
        return EventFormModel.model_validate(data), {}
    except ValidationError as exc:
        errors: dict[str, str] = {}
        for error in exc.errors():
            field = str(error["loc"][0]) if error["loc"] else "__all__"
            errors.setdefault(field, _error_message(field, error))
        return None, errors


def form_values_from_event(event: Any) -> dict[str, str]:
    """Display strings for pre-filling the edit form from a stored event."""
    return {
        "id": str(event.id),
        "Name": event.name,
        "Place": event.place,
        "Start": format_form_datetime(event.start),
        "End": format_form_datetime(event.end),
    }
