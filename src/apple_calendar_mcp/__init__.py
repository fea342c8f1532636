"""macOS Calendar exposed to tool-calling agents over MCP."""

from __future__ import annotations

__version__ = "1.0.0"


def main() -> None:
    from .cli import main as cli_main

    cli_main()
