from __future__ import annotations

import re
from datetime import datetime, timezone

RECORD_DELIMITER = "~~~"
FIELD_DELIMITER = "|||"

_DATE_ONLY_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def escape_applescript(value: str) -> str:
    """Escape a value for use inside an AppleScript double-quoted literal.

    Only backslashes and double quotes are escaped.
    """

    return (value or "").replace("\\", "\\\\").replace('"', '\\"')


def quote_applescript(value: str) -> str:
    return f'"{escape_applescript(value)}"'


def _parse_datetime(timestamp: str) -> datetime:
    try:
        return datetime.fromisoformat(timestamp.strip().replace("Z", "+00:00"))
    except (AttributeError, ValueError) as exc:  # noqa: TRY003
        raise ValueError(f"Invalid ISO timestamp: {timestamp}") from exc


def to_local_datetime(timestamp: str) -> datetime:
    """Parse an ISO-8601 timestamp into a naive local datetime.

    Aware values are converted to the local zone and naive values are already
    local. A bare date such as ``2024-03-01`` is read as midnight UTC.
    """

    parsed = _parse_datetime(timestamp)
    if _DATE_ONLY_RE.match(timestamp.strip()):
        parsed = parsed.replace(tzinfo=timezone.utc)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def format_applescript_date(timestamp: str) -> str:
    """Render ``timestamp`` as ``D/M/YYYY HH:MM:00`` for an AppleScript ``date "..."`` literal.

    Calendar parses the string with the OS locale, so this only lands on the
    right day under locales that order day before month.
    """

    moment = to_local_datetime(timestamp)
    return f"{moment.day}/{moment.month}/{moment.year} {moment.hour:02d}:{moment.minute:02d}:00"


def applescript_date(timestamp: str) -> str:
    return f'date "{format_applescript_date(timestamp)}"'
