from __future__ import annotations

from dataclasses import dataclass, field

from ..services import CalendarService


@dataclass(slots=True)
class ApiState:
    calendar: CalendarService = field(default_factory=CalendarService.from_settings)


api_state = ApiState()
