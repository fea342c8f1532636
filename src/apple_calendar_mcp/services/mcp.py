from __future__ import annotations

import logging
from typing import Optional

from fastmcp import FastMCP
from fastmcp.tools import FunctionTool
from mcp.types import CallToolRequest, CallToolResult, ServerResult, TextContent

from ..api import ApiFunction, call_api, get_api_functions
from ..api.serializers import to_json_text
from ..config import get_settings

INSTRUCTIONS = (
    "Reads and edits the local macOS Calendar through AppleScript. "
    "Events are addressed by their summary and calendar name; the first match wins."
)

logger = logging.getLogger(__name__)


def _build_tool(api_function: ApiFunction) -> FunctionTool:
    tool = FunctionTool.from_function(
        api_function.func,
        name=api_function.name,
        description=api_function.description,
        tags=set(api_function.tags),
        output_schema=None,
    )
    return tool.model_copy(update={"parameters": api_function.parameter_schema})


async def _call_tool(request: CallToolRequest) -> ServerResult:
    """Dispatch through the registry; an ``McpError`` becomes the JSON-RPC error response."""

    name = request.params.name
    arguments = request.params.arguments or {}
    logger.debug("MCP tool call: %s", name)
    result = call_api(name, **arguments)
    return ServerResult(
        CallToolResult(content=[TextContent(type="text", text=to_json_text(result))], isError=False)
    )


def build_mcp_server(name: Optional[str] = None) -> FastMCP:
    server = FastMCP(name=name or get_settings().server.name, instructions=INSTRUCTIONS)
    for api_function in get_api_functions():
        logger.debug("Registering MCP tool: %s", api_function.name)
        server.add_tool(_build_tool(api_function))
    # FastMCP would wrap tool failures into error results; replace its handler so
    # METHOD_NOT_FOUND and INTERNAL_ERROR reach the client as protocol errors.
    server._mcp_server.request_handlers[CallToolRequest] = _call_tool
    return server


def run_mcp_server(
    transport: str = "stdio",
    host: Optional[str] = None,
    port: Optional[int] = None,
) -> None:
    settings = get_settings().server
    server = build_mcp_server()
    if transport == "stdio":
        logger.info("iCloud Calendar MCP Server running on stdio (AppleScript mode)")
        server.run()
        return
    resolved_host = host or settings.mcp_host
    resolved_port = port or settings.mcp_port
    logger.info("iCloud Calendar MCP Server listening on %s:%s (%s)", resolved_host, resolved_port, transport)
    server.run(transport=transport, host=resolved_host, port=resolved_port)
