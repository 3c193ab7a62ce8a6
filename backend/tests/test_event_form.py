"""
Unit tests for schemas/event.py — form binding and date handling.

Run from the project root:
    cd backend
    pytest tests/test_event_form.py -v
"""

from datetime import datetime
from types import SimpleNamespace

import pytest

from schemas.event import (
    bind_event_form,
    format_form_datetime,
    form_values_from_event,
    parse_form_datetime,
)


def _raw(**overrides):
    raw = {
        "Name": "Test event",
        "Place": "Sofia",
        "Start": "12/12/2024 12:00 PM",
        "End": "12/12/2024 04:00 PM",
    }
    raw.update(overrides)
    return raw


# ---------------------------------------------------------------------------
# parse_form_datetime / format_form_datetime
# ---------------------------------------------------------------------------

class TestFormDatetime:

    @pytest.mark.parametrize("text, expected", [
        ("12/12/2024 12:00 PM", datetime(2024, 12, 12, 12, 0)),
        ("12/12/2024 12:00 AM", datetime(2024, 12, 12, 0, 0)),
        ("01/02/2025 04:30 PM", datetime(2025, 1, 2, 16, 30)),
        ("2024-12-12T16:00", datetime(2024, 12, 12, 16, 0)),
        ("  2024-12-12 16:00:00 ", datetime(2024, 12, 12, 16, 0)),
    ])
    def test_parse(self, text, expected):
        assert parse_form_datetime(text) == expected

    def test_parse_rejects_garbage(self):
        with pytest.raises(ValueError, match="not a valid date and time"):
            parse_form_datetime("13/45/2024 99:00 XM")

    @pytest.mark.parametrize("text", ["2024-12-12T16:00+00:00", "2024-12-12T16:00-05:00"])
    def test_parse_rejects_time_zone_offsets(self, text):
        with pytest.raises(ValueError, match="must not include a time zone"):
            parse_form_datetime(text)

    def test_format_uses_twelve_hour_clock(self):
        assert format_form_datetime(datetime(2024, 12, 12, 16, 0)) == "12/12/2024 04:00 PM"

    def test_format_none_is_blank(self):
        assert format_form_datetime(None) == ""


# ---------------------------------------------------------------------------
# bind_event_form
# ---------------------------------------------------------------------------

class TestBindEventForm:

    def test_valid_form(self):
        form, errors = bind_event_form(_raw())
        assert errors == {}
        assert form.name == "Test event"
        assert form.place == "Sofia"
        assert form.start == datetime(2024, 12, 12, 12, 0)
        assert form.end == datetime(2024, 12, 12, 16, 0)
        assert form.id is None

    def test_values_are_trimmed(self):
        form, _ = bind_event_form(_raw(Name="  Test event  "))
        assert form.name == "Test event"

    def test_id_is_bound(self):
        form, _ = bind_event_form(_raw(id="3"))
        assert form.id == 3

    def test_blank_id_is_none(self):
        form, _ = bind_event_form(_raw(id=""))
        assert form.id is None

    def test_non_numeric_id_is_an_error(self):
        form, errors = bind_event_form(_raw(id="abc"))
        assert form is None
        assert errors == {"id": "The id value is not a valid id."}

    @pytest.mark.parametrize("field", ["Name", "Place", "Start", "End"])
    def test_each_field_is_required(self, field):
        raw = _raw()
        del raw[field]
        form, errors = bind_event_form(raw)
        assert form is None
        assert errors == {field: f"The {field} field is required."}

    @pytest.mark.parametrize("field", ["Name", "Place", "Start", "End"])
    def test_blank_counts_as_missing(self, field):
        form, errors = bind_event_form(_raw(**{field: "  "}))
        assert form is None
        assert errors[field] == f"The {field} field is required."

    def test_none_values_count_as_missing(self):
        form, errors = bind_event_form(_raw(Name=None, Place=None))
        assert form is None
        assert set(errors) == {"Name", "Place"}

    def test_end_must_follow_start(self):
        form, errors = bind_event_form(_raw(End="12/12/2024 11:00 AM"))
        assert form is None
        assert errors == {"End": "End must be after Start"}

    def test_end_equal_to_start_is_rejected(self):
        form, errors = bind_event_form(_raw(End="12/12/2024 12:00 PM"))
        assert errors == {"End": "End must be after Start"}

    def test_offset_end_with_naive_start_is_a_field_error(self):
        form, errors = bind_event_form(_raw(End="2024-12-12T16:00+00:00"))
        assert form is None
        assert set(errors) == {"End"}
        assert "must not include a time zone" in errors["End"]

    def test_offset_start_with_naive_end_is_a_field_error(self):
        form, errors = bind_event_form(_raw(Start="2024-12-12T12:00+01:00"))
        assert form is None
        assert set(errors) == {"Start"}

    def test_name_too_long(self):
        form, errors = bind_event_form(_raw(Name="x" * 256))
        assert form is None
        assert "Name" in errors

    def test_to_store_fields(self):
        form, _ = bind_event_form(_raw(id="3"))
        assert form.to_store_fields() == {
            "name": "Test event",
            "place": "Sofia",
            "start": datetime(2024, 12, 12, 12, 0),
            "end": datetime(2024, 12, 12, 16, 0),
        }


def test_form_values_from_event():
    event = SimpleNamespace(
        id=1,
        name="Seeded event",
        place="Plovdiv",
        start=datetime(2024, 11, 1, 9, 30),
        end=datetime(2024, 11, 1, 18, 0),
    )
    assert form_values_from_event(event) == {
        "id": "1",
        "Name": "Seeded event",
        "Place": "Plovdiv",
        "Start": "11/01/2024 09:30 AM",
        "End": "11/01/2024 06:00 PM",
    }
