from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, METHOD_NOT_FOUND, ErrorData

logger = logging.getLogger(__name__)


def method_not_found(name: str) -> McpError:
    return McpError(ErrorData(code=METHOD_NOT_FOUND, message=f"Unknown tool: {name}"))


def internal_error(message: str) -> McpError:
    return McpError(ErrorData(code=INTERNAL_ERROR, message=message or "Unknown error"))


@contextmanager
def translate_errors() -> Iterator[None]:
    """Re-raise anything but an ``McpError`` as an internal error carrying its message."""

    try:
        yield
    except McpError:
        raise
    except Exception as exc:  # noqa: BLE001
        logger.warning("Tool call failed: %s", exc)
        raise internal_error(str(exc)) from exc


__all__ = ["McpError", "internal_error", "method_not_found", "translate_errors"]
