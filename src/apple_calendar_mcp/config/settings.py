from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from platformdirs import user_log_dir

load_dotenv()

APP_NAME = "apple-calendar-mcp"
APP_AUTHOR = "AppleCalendarMcp"


@dataclass(frozen=True)
class ScriptingSettings:
    osascript_path: str
    application: str
    timeout_seconds: float
    launch_delay_seconds: float


@dataclass(frozen=True)
class CalendarSettings:
    default_calendar: str


@dataclass(frozen=True)
class ServerSettings:
    name: str
    version: str
    mcp_host: str
    mcp_port: int
    api_host: str
    api_port: int


@dataclass(frozen=True)
class LoggingSettings:
    level: str
    directory: Path

    @property
    def log_file(self) -> Path:
        return self.directory / "apple_calendar_mcp.log"


@dataclass(frozen=True)
class AppSettings:
    scripting: ScriptingSettings
    calendar: CalendarSettings
    server: ServerSettings
    logging: LoggingSettings


def _float_from_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _log_dir_from_env(name: str) -> Path:
    raw: Optional[str] = os.getenv(name)
    if raw:
        return Path(raw).expanduser()
    return Path(user_log_dir(APP_NAME, APP_AUTHOR))


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    scripting = ScriptingSettings(
        osascript_path=os.getenv("CALENDAR_OSASCRIPT_PATH", "osascript"),
        application=os.getenv("CALENDAR_APPLICATION", "Calendar"),
        timeout_seconds=_float_from_env("CALENDAR_SCRIPT_TIMEOUT_SECONDS", 30.0),
        launch_delay_seconds=_float_from_env("CALENDAR_LAUNCH_DELAY_SECONDS", 0.5),
    )

    calendar = CalendarSettings(
        default_calendar=os.getenv("CALENDAR_DEFAULT_NAME", "Kalender"),
    )

    server = ServerSettings(
        name=os.getenv("CALENDAR_SERVER_NAME", "icloud-calendar-mcp"),
        version="1.0.0",
        mcp_host=os.getenv("CALENDAR_MCP_HOST", "127.0.0.1"),
        mcp_port=_int_from_env("CALENDAR_MCP_PORT", 8765),
        api_host=os.getenv("CALENDAR_API_HOST", "127.0.0.1"),
        api_port=_int_from_env("CALENDAR_API_PORT", 8000),
    )

    logging = LoggingSettings(
        level=os.getenv("CALENDAR_LOG_LEVEL", "INFO").upper(),
        directory=_log_dir_from_env("CALENDAR_LOG_DIR"),
    )

    return AppSettings(scripting=scripting, calendar=calendar, server=server, logging=logging)
