"""Shared fixtures: a recording script runner and an AppleScript literal scanner."""

from __future__ import annotations

from typing import Callable, List, Optional

import pytest

from apple_calendar_mcp.api import api_state
from apple_calendar_mcp.services import CalendarService


class FakeRunner:
    """Stands in for ``AppleScriptRunner``; records every script and replays canned output."""

    def __init__(self, replies: Optional[List[str]] = None, error: Optional[Exception] = None) -> None:
        self.scripts: List[str] = []
        self.replies = list(replies or [])
        self.error = error

    def run(self, script: str) -> str:
        self.scripts.append(script)
        if self.error is not None:
            raise self.error
        return self.replies.pop(0) if self.replies else ""


@pytest.fixture
def fake_runner(monkeypatch: pytest.MonkeyPatch) -> FakeRunner:
    runner = FakeRunner()
    service = CalendarService(runner=runner, application="Calendar", default_calendar="Kalender")
    monkeypatch.setattr(api_state, "calendar", service)
    return runner


def _applescript_literals(script: str) -> List[str]:
    literals: List[str] = []
    buffer: List[str] = []
    inside = False
    index = 0
    while index < len(script):
        char = script[index]
        if not inside:
            if char == '"':
                inside = True
                buffer = []
        elif char == "\\":
            buffer.append(script[index + 1])
            index += 1
        elif char == '"':
            literals.append("".join(buffer))
            inside = False
        else:
            buffer.append(char)
        index += 1
    assert not inside, "unterminated string literal"
    return literals


@pytest.fixture
def literals() -> Callable[[str], List[str]]:
    """Decoded contents of every double-quoted literal in a script."""

    return _applescript_literals
