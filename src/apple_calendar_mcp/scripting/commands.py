"""AppleScript rendering for each calendar operation.

Every command is a small frozen dataclass whose ``render`` returns the script
body. Values reach the script only through ``quote_applescript`` or
``applescript_date``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from ..domain import AlarmSpec
from .text import FIELD_DELIMITER, RECORD_DELIMITER, applescript_date, quote_applescript

DEFAULT_APPLICATION = "Calendar"


@dataclass(frozen=True)
class ListCalendarsCommand:
    def render(self, application: str = DEFAULT_APPLICATION) -> str:
        return f'''tell application {quote_applescript(application)}
    set calNames to name of calendars
    set AppleScript's text item delimiters to "{RECORD_DELIMITER}"
    return calNames as text
end tell'''


@dataclass(frozen=True)
class ListEventsCommand:
    start_date: str
    end_date: str
    calendar_name: Optional[str] = None

    def _calendar_selection(self) -> str:
        if self.calendar_name:
            return f"set cals to {{calendar {quote_applescript(self.calendar_name)}}}"
        return "set cals to calendars"

    def render(self, application: str = DEFAULT_APPLICATION) -> str:
        sep = FIELD_DELIMITER
        return f'''tell application {quote_applescript(application)}
    set startD to {applescript_date(self.start_date)}
    set endD to {applescript_date(self.end_date)}
    set eventList to {{}}
    {self._calendar_selection()}
    repeat with c in cals
        try
            set calEvents to (every event of c whose start date >= startD and start date <= endD)
            repeat with e in calEvents
                set eventSummary to summary of e
                set eventStart to start date of e
                set eventEnd to end date of e
                set eventAllDay to allday event of e
                set calName to name of c
                set eventLoc to ""
                try
                    set eventLoc to location of e
                on error
                    set eventLoc to ""
                end try
                set eventInfo to eventSummary & "{sep}" & (eventStart as string) & "{sep}" & (eventEnd as string) & "{sep}" & eventLoc & "{sep}" & calName & "{sep}" & eventAllDay
                set end of eventList to eventInfo
            end repeat
        end try
    end repeat
    set AppleScript's text item delimiters to "{RECORD_DELIMITER}"
    return eventList as text
end tell'''


@dataclass(frozen=True)
class CreateEventCommand:
    title: str
    start_date: str
    end_date: str
    calendar_name: str
    location: Optional[str] = None
    description: Optional[str] = None
    is_all_day: bool = False
    alarms: Sequence[AlarmSpec] = field(default_factory=tuple)

    def _properties(self) -> str:
        properties = [
            f"summary:{quote_applescript(self.title)}",
            f"start date:{applescript_date(self.start_date)}",
            f"end date:{applescript_date(self.end_date)}",
        ]
        if self.is_all_day:
            properties.append("allday event:true")
        if self.location:
            properties.append(f"location:{quote_applescript(self.location)}")
        if self.description:
            properties.append(f"description:{quote_applescript(self.description)}")
        return ", ".join(properties)

    def _alarm_statements(self) -> list[str]:
        return [
            "make new display alarm at end of display alarms of newEvent "
            f"with properties {{trigger interval:{alarm.minutes}}}"
            for alarm in self.alarms
        ]

    def render(self, application: str = DEFAULT_APPLICATION) -> str:
        body = [f"set newEvent to make new event with properties {{{self._properties()}}}"]
        body.extend(self._alarm_statements())
        body.append('return "created"')
        statements = "\n        ".join(body)
        return f'''tell application {quote_applescript(application)}
    tell calendar {quote_applescript(self.calendar_name)}
        {statements}
    end tell
end tell'''


def _lookup(summary: str) -> str:
    return f"set targetEvent to (first event whose summary is {quote_applescript(summary)})"


@dataclass(frozen=True)
class UpdateEventCommand:
    event_summary: str
    calendar_name: str
    new_title: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None

    def assignments(self) -> list[str]:
        """Property assignments to apply; empty when the update would change nothing."""

        setters: list[str] = []
        if self.new_title:
            setters.append(f"set summary of targetEvent to {quote_applescript(self.new_title)}")
        if self.start_date:
            setters.append(f"set start date of targetEvent to {applescript_date(self.start_date)}")
        if self.end_date:
            setters.append(f"set end date of targetEvent to {applescript_date(self.end_date)}")
        # An empty string clears these two.
        if self.location is not None:
            setters.append(f"set location of targetEvent to {quote_applescript(self.location)}")
        if self.description is not None:
            setters.append(f"set description of targetEvent to {quote_applescript(self.description)}")
        return setters

    @property
    def is_noop(self) -> bool:
        return not self.assignments()

    def render(self, application: str = DEFAULT_APPLICATION) -> str:
        statements = "\n        ".join([_lookup(self.event_summary), *self.assignments(), 'return "success"'])
        return f'''tell application {quote_applescript(application)}
    tell calendar {quote_applescript(self.calendar_name)}
        {statements}
    end tell
end tell'''


@dataclass(frozen=True)
class DeleteEventCommand:
    event_summary: str
    calendar_name: str

    def render(self, application: str = DEFAULT_APPLICATION) -> str:
        return f'''tell application {quote_applescript(application)}
    tell calendar {quote_applescript(self.calendar_name)}
        {_lookup(self.event_summary)}
        delete targetEvent
        return "success"
    end tell
end tell'''
