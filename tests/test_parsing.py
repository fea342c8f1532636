from apple_calendar_mcp.domain import CalendarRef
from apple_calendar_mcp.scripting import parse_calendars, parse_events


def test_calendars_are_indexed_in_enumeration_order():
    assert parse_calendars("Work~~~Home") == [CalendarRef("Work", 0), CalendarRef("Home", 1)]


def test_calendar_names_are_trimmed():
    assert [c.name for c in parse_calendars(" Work ~~~ Home")] == ["Work", "Home"]


def test_empty_reply_means_no_calendars():
    assert parse_calendars("") == []


def test_empty_reply_means_no_events():
    assert parse_events("") == []


def test_events_are_split_into_fields():
    reply = (
        "Standup|||Friday, 1 March 2024 at 09:00:00|||Friday, 1 March 2024 at 09:15:00|||Room 1|||Work|||false"
        "~~~Holiday|||Saturday, 2 March 2024 at 00:00:00|||Sunday, 3 March 2024 at 00:00:00||||||Home|||true"
    )
    first, second = parse_events(reply)
    assert first.index == 0
    assert first.summary == "Standup"
    assert first.start_date == "Friday, 1 March 2024 at 09:00:00"
    assert first.location == "Room 1"
    assert first.calendar == "Work"
    assert first.is_all_day is False
    assert first.description == ""
    assert second.index == 1
    assert second.location == ""
    assert second.is_all_day is True


def test_short_records_fill_missing_fields():
    (event,) = parse_events("Lonely")
    assert event.summary == "Lonely"
    assert event.start_date == ""
    assert event.calendar == ""
    assert event.is_all_day is False
