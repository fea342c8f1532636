from __future__ import annotations

from typing import List

from ..domain import CalendarRef, EventRef
from .text import FIELD_DELIMITER, RECORD_DELIMITER


def parse_calendars(output: str) -> List[CalendarRef]:
    if not output:
        return []
    return [
        CalendarRef(name=name.strip(), index=index)
        for index, name in enumerate(output.split(RECORD_DELIMITER))
    ]


def _field(parts: List[str], position: int) -> str:
    return parts[position] if position < len(parts) else ""


def parse_events(output: str) -> List[EventRef]:
    """Split a listing reply into events; short records get empty fields."""

    if not output:
        return []
    events: List[EventRef] = []
    for index, record in enumerate(output.split(RECORD_DELIMITER)):
        parts = record.split(FIELD_DELIMITER)
        events.append(
            EventRef(
                index=index,
                summary=_field(parts, 0),
                start_date=_field(parts, 1),
                end_date=_field(parts, 2),
                location=_field(parts, 3),
                calendar=_field(parts, 4),
                is_all_day=_field(parts, 5) == "true",
            )
        )
    return events
