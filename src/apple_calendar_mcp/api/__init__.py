"""Public tool surface shared by the MCP server and the local HTTP API."""

from __future__ import annotations

from .registry import ApiFunction, call_api, get_api_functions, list_tools, register_api
from .state import api_state

# Import endpoints so decorators run at module import time.
from . import endpoints  # noqa: F401

__all__ = ["ApiFunction", "api_state", "call_api", "get_api_functions", "list_tools", "register_api"]
