from __future__ import annotations

from typing import Any, Dict

import orjson

from ..domain import CalendarRef, EventRef
from .models import CalendarPayload, EventPayload, MutationPayload


def serialize_calendar(calendar: CalendarRef) -> Dict[str, Any]:
    return CalendarPayload.from_domain(calendar).model_dump()


def serialize_event(event: EventRef) -> Dict[str, Any]:
    return EventPayload.from_domain(event).model_dump(by_alias=True)


def serialize_mutation(payload: MutationPayload) -> Dict[str, Any]:
    return payload.model_dump(by_alias=True, exclude_none=True)


def to_json_text(value: Any) -> str:
    return orjson.dumps(value, option=orjson.OPT_INDENT_2).decode("utf-8")
