"""Transient records exchanged with Calendar.app."""

from __future__ import annotations

from .models import AlarmSpec, CalendarRef, EventRef

__all__ = ["AlarmSpec", "CalendarRef", "EventRef"]
