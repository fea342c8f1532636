from __future__ import annotations

from typing import Any, Dict, List, Optional

from .errors import translate_errors
from .models import MutationPayload
from .registry import register_api
from .serializers import serialize_calendar, serialize_event, serialize_mutation
from .state import api_state

# Parameter names are the wire names agents send, hence camelCase.
# ruff: noqa: N803


@register_api(
    "list_calendars",
    description="List all available calendars including iCloud, local, and subscribed calendars.",
    category="calendar",
    tags=("read",),
)
def list_calendars() -> List[Dict[str, Any]]:
    with translate_errors():
        calendars = api_state.calendar.list_calendars()
    return [serialize_calendar(calendar) for calendar in calendars]


@register_api(
    "list_events",
    description="List calendar events within a date range. Can filter by specific calendar.",
    category="calendar",
    tags=("read",),
    parameters={
        "startDate": "Start date in ISO8601 format (e.g., 2024-01-15T00:00:00Z)",
        "endDate": "End date in ISO8601 format (e.g., 2024-01-31T23:59:59Z)",
        "calendarName": (
            "Optional: Filter events by calendar name. "
            "If not provided, returns events from all calendars."
        ),
    },
)
def list_events(startDate: str, endDate: str, calendarName: Optional[str] = None) -> List[Dict[str, Any]]:
    with translate_errors():
        events = api_state.calendar.list_events(startDate, endDate, calendarName)
    return [serialize_event(event) for event in events]


@register_api(
    "create_event",
    description=(
        "Create a new calendar event. Specify title, start/end dates, and optionally "
        "calendar, location, and description."
    ),
    category="calendar",
    tags=("write",),
    parameters={
        "title": "Event title",
        "startDate": "Start date in ISO8601 format (e.g., 2024-01-15T10:00:00Z)",
        "endDate": "End date in ISO8601 format (e.g., 2024-01-15T11:00:00Z)",
        "calendarName": "Optional: Calendar name to create event in. Uses default calendar if not specified.",
        "isAllDay": "Optional: Whether this is an all-day event",
        "location": "Optional: Event location",
        "description": "Optional: Event description",
        "alarms": (
            "Optional: Array of alarm times in whole minutes relative to the event start. "
            "Negative values fire before the event (e.g., -15 for 15 minutes before, "
            "-60 for 1 hour before, -1440 for 1 day before)."
        ),
    },
)
def create_event(
    title: str,
    startDate: str,
    endDate: str,
    calendarName: Optional[str] = None,
    isAllDay: Optional[bool] = None,
    location: Optional[str] = None,
    description: Optional[str] = None,
    alarms: Optional[List[int]] = None,
) -> Dict[str, Any]:
    with translate_errors():
        event_id = api_state.calendar.create_event(
            title=title,
            start_date=startDate,
            end_date=endDate,
            calendar_name=calendarName,
            location=location,
            description=description,
            is_all_day=bool(isAllDay),
            alarms=alarms,
        )
    return serialize_mutation(MutationPayload(message="Event created", event_id=event_id))


@register_api(
    "update_event",
    description=(
        "Update an existing calendar event by its summary/title and calendar name. "
        "Only specified fields will be updated."
    ),
    category="calendar",
    tags=("write",),
    parameters={
        "eventSummary": "The current event title/summary to find",
        "calendarName": "The calendar name where the event is located",
        "newTitle": "Optional: New event title",
        "startDate": "Optional: New start date in ISO8601 format",
        "endDate": "Optional: New end date in ISO8601 format",
        "location": "Optional: New event location",
        "description": "Optional: New event description",
    },
)
def update_event(
    eventSummary: str,
    calendarName: str,
    newTitle: Optional[str] = None,
    startDate: Optional[str] = None,
    endDate: Optional[str] = None,
    location: Optional[str] = None,
    description: Optional[str] = None,
) -> Dict[str, Any]:
    with translate_errors():
        api_state.calendar.update_event(
            event_summary=eventSummary,
            calendar_name=calendarName,
            new_title=newTitle,
            start_date=startDate,
            end_date=endDate,
            location=location,
            description=description,
        )
    return serialize_mutation(MutationPayload(message="Event updated", event_summary=eventSummary))


@register_api(
    "delete_event",
    description="Delete a calendar event by its summary/title and calendar name.",
    category="calendar",
    tags=("write",),
    parameters={
        "eventSummary": "The event title/summary to delete",
        "calendarName": "The calendar name where the event is located",
    },
)
def delete_event(eventSummary: str, calendarName: str) -> Dict[str, Any]:
    with translate_errors():
        api_state.calendar.delete_event(event_summary=eventSummary, calendar_name=calendarName)
    return serialize_mutation(MutationPayload(message="Event deleted", event_summary=eventSummary))
