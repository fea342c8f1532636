from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class CalendarRef:
    """A calendar as enumerated by Calendar.app. ``index`` is only valid for one listing."""

    name: str
    index: int


@dataclass(slots=True, frozen=True)
class EventRef:
    """An event row from a listing.

    ``index`` is the position in the listing, not a durable key. Start and end
    dates are Calendar's own text rendering and are passed through untouched.
    """

    index: int
    summary: str
    start_date: str
    end_date: str
    location: str
    calendar: str
    is_all_day: bool
    description: str = ""


@dataclass(slots=True, frozen=True)
class AlarmSpec:
    """Display alarm offset in minutes relative to the event start (negative is before)."""

    minutes: int
