from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import ORJSONResponse
from mcp.types import METHOD_NOT_FOUND
from pydantic import BaseModel, Field

from ..api import ApiFunction, call_api, get_api_functions
from ..api.errors import McpError
from ..config import get_settings

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Apple Calendar Local API",
    version=get_settings().server.version,
    default_response_class=ORJSONResponse,
)


class ApiCallRequest(BaseModel):
    arguments: Dict[str, Any] = Field(default_factory=dict)


def _serialize_api_function(api_function: ApiFunction) -> dict:
    return {
        "name": api_function.name,
        "description": api_function.description,
        "category": api_function.category,
        "tags": list(api_function.tags),
        "inputSchema": api_function.parameter_schema,
    }


@app.get("/api/functions")
async def list_api_functions() -> ORJSONResponse:
    functions = [_serialize_api_function(func) for func in get_api_functions()]
    return ORJSONResponse({"functions": functions})


@app.post("/api/functions/{function_name}")
def invoke_api_function(function_name: str, request: ApiCallRequest) -> ORJSONResponse:
    try:
        result = call_api(function_name, **request.arguments)
    except McpError as exc:
        if exc.error.code == METHOD_NOT_FOUND:
            logger.warning("API function not found: %s", function_name)
            raise HTTPException(status_code=404, detail=exc.error.message) from exc
        logger.error("API function %s failed: %s", function_name, exc.error.message)
        raise HTTPException(status_code=500, detail=exc.error.message) from exc
    logger.debug("API function %s executed successfully", function_name)
    return ORJSONResponse({"name": function_name, "result": result})


def run_local_server(host: Optional[str] = None, port: Optional[int] = None) -> None:
    import asyncio

    from hypercorn.asyncio import serve
    from hypercorn.config import Config

    settings = get_settings().server
    config = Config()
    config.bind = [f"{host or settings.api_host}:{port or settings.api_port}"]
    asyncio.run(serve(app, config))
