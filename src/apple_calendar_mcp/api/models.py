from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..domain import CalendarRef, EventRef


class CalendarPayload(BaseModel):
    name: str
    id: str

    @classmethod
    def from_domain(cls, calendar: CalendarRef) -> "CalendarPayload":
        return cls(name=calendar.name, id=str(calendar.index))


class EventPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    summary: str
    start_date: str = Field(alias="startDate")
    end_date: str = Field(alias="endDate")
    location: str = Field(default="")
    description: str = Field(default="")
    calendar: str = Field(default="")
    is_all_day: bool = Field(default=False, alias="isAllDay")

    @classmethod
    def from_domain(cls, event: EventRef) -> "EventPayload":
        return cls(
            id=str(event.index),
            summary=event.summary,
            start_date=event.start_date,
            end_date=event.end_date,
            location=event.location,
            description=event.description,
            calendar=event.calendar,
            is_all_day=event.is_all_day,
        )


class MutationPayload(BaseModel):
    """Acknowledgement for create/update/delete; exactly one of the handles is set."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str
    event_id: str | None = Field(default=None, alias="eventId")
    event_summary: str | None = Field(default=None, alias="eventSummary")
