import pytest
from fastapi.testclient import TestClient

from apple_calendar_mcp.scripting import AppleScriptError, FailureReason
from apple_calendar_mcp.services.http import app


@pytest.fixture
def client():
    return TestClient(app)


def test_lists_functions(client):
    response = client.get("/api/functions")
    assert response.status_code == 200
    names = {function["name"] for function in response.json()["functions"]}
    assert names == {"list_calendars", "list_events", "create_event", "update_event", "delete_event"}


def test_invokes_function(client, fake_runner):
    fake_runner.replies = ["Work~~~Home"]
    response = client.post("/api/functions/list_calendars", json={})
    assert response.status_code == 200
    assert response.json() == {
        "name": "list_calendars",
        "result": [{"name": "Work", "id": "0"}, {"name": "Home", "id": "1"}],
    }


def test_unknown_function_is_404(client, fake_runner):
    response = client.post("/api/functions/nope", json={"arguments": {}})
    assert response.status_code == 404
    assert response.json()["detail"] == "Unknown tool: nope"


def test_script_failure_is_500_with_diagnostic(client, fake_runner):
    fake_runner.error = AppleScriptError("osascript timed out", reason=FailureReason.TIMEOUT)
    response = client.post(
        "/api/functions/delete_event",
        json={"arguments": {"eventSummary": "Standup", "calendarName": "Work"}},
    )
    assert response.status_code == 500
    assert response.json()["detail"] == "osascript timed out"
