from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .api import list_tools
from .api.serializers import to_json_text
from .logging import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="macOS Calendar tools over MCP, driven through AppleScript.")
    subparsers = parser.add_subparsers(dest="command")

    mcp_parser = subparsers.add_parser("mcp", help="Start the MCP server (default).")
    mcp_parser.add_argument("--transport", choices=("stdio", "streamable-http"), default="stdio")
    mcp_parser.add_argument("--host", default=None)
    mcp_parser.add_argument("--port", type=int, default=None)

    api_parser = subparsers.add_parser("api", help="Start the local HTTP API exposing the same tools.")
    api_parser.add_argument("--host", default=None)
    api_parser.add_argument("--port", type=int, default=None)

    subparsers.add_parser("tools", help="Print the advertised tool descriptors as JSON.")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "tools":
        sys.stdout.write(to_json_text(list_tools()) + "\n")
        return

    configure_logging()
    logging.getLogger(__name__).info("Apple Calendar CLI starting")

    if args.command == "api":
        from .services.http import run_local_server

        run_local_server(host=args.host, port=args.port)
    elif args.command in (None, "mcp"):
        from .services.mcp import run_mcp_server

        run_mcp_server(
            transport=getattr(args, "transport", "stdio"),
            host=getattr(args, "host", None),
            port=getattr(args, "port", None),
        )
    else:  # pragma: no cover - argparse enforces choices
        parser.print_help()


if __name__ == "__main__":
    main()
