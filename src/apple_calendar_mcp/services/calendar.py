from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Protocol

from ..config import AppSettings, get_settings
from ..domain import AlarmSpec, CalendarRef, EventRef
from ..scripting import (
    AppleScriptRunner,
    CreateEventCommand,
    DeleteEventCommand,
    ListCalendarsCommand,
    ListEventsCommand,
    UpdateEventCommand,
    parse_calendars,
    parse_events,
)

logger = logging.getLogger(__name__)


class ScriptRunner(Protocol):
    def run(self, script: str) -> str: ...


@dataclass(slots=True)
class CalendarService:
    """Renders one script per operation, runs it, and parses the reply."""

    runner: ScriptRunner
    application: str = "Calendar"
    default_calendar: str = "Kalender"

    @classmethod
    def from_settings(cls, settings: Optional[AppSettings] = None) -> "CalendarService":
        settings = settings or get_settings()
        runner = AppleScriptRunner(
            osascript_path=settings.scripting.osascript_path,
            application=settings.scripting.application,
            timeout_seconds=settings.scripting.timeout_seconds,
            launch_delay_seconds=settings.scripting.launch_delay_seconds,
        )
        return cls(
            runner=runner,
            application=settings.scripting.application,
            default_calendar=settings.calendar.default_calendar,
        )

    def _run(self, script: str) -> str:
        return self.runner.run(script)

    def list_calendars(self) -> list[CalendarRef]:
        output = self._run(ListCalendarsCommand().render(self.application))
        return parse_calendars(output)

    def list_events(self, start_date: str, end_date: str, calendar_name: Optional[str] = None) -> list[EventRef]:
        command = ListEventsCommand(start_date=start_date, end_date=end_date, calendar_name=calendar_name)
        output = self._run(command.render(self.application))
        events = parse_events(output)
        logger.debug("Listed %d events between %s and %s", len(events), start_date, end_date)
        return events

    def create_event(
        self,
        *,
        title: str,
        start_date: str,
        end_date: str,
        calendar_name: Optional[str] = None,
        location: Optional[str] = None,
        description: Optional[str] = None,
        is_all_day: bool = False,
        alarms: Optional[Iterable[int]] = None,
    ) -> str:
        """Create an event and return its title, the only handle Calendar gives back."""

        command = CreateEventCommand(
            title=title,
            start_date=start_date,
            end_date=end_date,
            calendar_name=calendar_name or self.default_calendar,
            location=location,
            description=description,
            is_all_day=bool(is_all_day),
            alarms=tuple(AlarmSpec(minutes=int(minutes)) for minutes in (alarms or ())),
        )
        self._run(command.render(self.application))
        return title

    def update_event(
        self,
        *,
        event_summary: str,
        calendar_name: str,
        new_title: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        location: Optional[str] = None,
        description: Optional[str] = None,
    ) -> bool:
        """Apply the supplied fields to the first event matching ``event_summary``.

        Returns False without touching Calendar when no field was supplied.
        """

        command = UpdateEventCommand(
            event_summary=event_summary,
            calendar_name=calendar_name,
            new_title=new_title,
            start_date=start_date,
            end_date=end_date,
            location=location,
            description=description,
        )
        if command.is_noop:
            logger.debug("Update of %r requested no changes", event_summary)
            return False
        self._run(command.render(self.application))
        return True

    def delete_event(self, *, event_summary: str, calendar_name: str) -> None:
        command = DeleteEventCommand(event_summary=event_summary, calendar_name=calendar_name)
        self._run(command.render(self.application))
