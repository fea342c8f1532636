from datetime import datetime, timezone

import pytest

from apple_calendar_mcp.scripting.text import (
    escape_applescript,
    format_applescript_date,
    quote_applescript,
    to_local_datetime,
)


def test_escape_handles_quotes_and_backslashes():
    assert escape_applescript('say "hi"') == 'say \\"hi\\"'
    assert escape_applescript("C:\\temp") == "C:\\\\temp"
    assert escape_applescript('\\"') == '\\\\\\"'


def test_escape_leaves_other_characters_alone():
    assert escape_applescript("line\nbreak & ¬ end tell") == "line\nbreak & ¬ end tell"


def test_escape_treats_none_as_empty():
    assert escape_applescript(None) == ""  # type: ignore[arg-type]


def test_quoted_value_stays_one_literal(literals):
    nasty = 'a "quoted" \\ value\\'
    assert literals(quote_applescript(nasty)) == [nasty]


def test_naive_timestamp_is_rendered_day_first():
    assert format_applescript_date("2024-03-01T09:00:00") == "1/3/2024 09:00:00"


def test_seconds_are_always_zero():
    assert format_applescript_date("2024-12-25T18:05:59") == "25/12/2024 18:05:00"


def test_utc_timestamp_is_converted_to_local_time():
    expected = datetime.fromisoformat("2024-01-15T10:00:00+00:00").astimezone()
    rendered = format_applescript_date("2024-01-15T10:00:00Z")
    assert rendered == f"{expected.day}/{expected.month}/{expected.year} {expected.hour:02d}:{expected.minute:02d}:00"


def test_bare_date_is_midnight_utc():
    expected = datetime(2024, 3, 1, tzinfo=timezone.utc).astimezone()
    assert format_applescript_date("2024-03-01") == (
        f"{expected.day}/{expected.month}/{expected.year} {expected.hour:02d}:{expected.minute:02d}:00"
    )


def test_local_datetime_is_naive():
    assert to_local_datetime("2024-01-15T10:00:00+02:00").tzinfo is None


@pytest.mark.parametrize("value", ["", "next tuesday", "2024-13-01T00:00:00"])
def test_invalid_timestamp_raises_value_error(value):
    with pytest.raises(ValueError, match="Invalid ISO timestamp"):
        format_applescript_date(value)
