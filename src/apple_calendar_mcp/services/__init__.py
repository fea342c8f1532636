"""Calendar service and the protocol servers built on the API registry."""

from __future__ import annotations

from .calendar import CalendarService

__all__ = ["CalendarService"]
