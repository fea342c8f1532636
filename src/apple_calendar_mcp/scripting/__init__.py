"""AppleScript rendering, reply parsing and ``osascript`` execution."""

from __future__ import annotations

from .commands import (
    CreateEventCommand,
    DeleteEventCommand,
    ListCalendarsCommand,
    ListEventsCommand,
    UpdateEventCommand,
)
from .parsing import parse_calendars, parse_events
from .runner import AppleScriptError, AppleScriptRunner, FailureReason, InvocationState
from .text import escape_applescript, format_applescript_date

__all__ = [
    "AppleScriptError",
    "AppleScriptRunner",
    "CreateEventCommand",
    "DeleteEventCommand",
    "FailureReason",
    "InvocationState",
    "ListCalendarsCommand",
    "ListEventsCommand",
    "UpdateEventCommand",
    "escape_applescript",
    "format_applescript_date",
    "parse_calendars",
    "parse_events",
]
