"""Route registration for the grounding MCP server.

Tool listing and tool calls are answered straight from the registry, so raw
arguments reach the validators and failures leave as JSON-RPC errors with
their own code.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, List

from fastmcp import FastMCP
from mcp import types

from mcp_servers.grounding.registry import ToolRegistry, dispatch

logger = logging.getLogger("jina_grounding.mcp")


def list_tool_definitions(registry: ToolRegistry) -> List[types.Tool]:
    return [
        types.Tool(
            name=spec.name,
            description=spec.description,
            inputSchema=spec.input_schema,
        )
        for spec in registry.values()
    ]


async def call_tool(registry: ToolRegistry, name: str, arguments: Any) -> str:
    """Dispatch off the event loop and raise the caller-visible error on failure."""
    result = await asyncio.to_thread(dispatch, registry, name, arguments)
    if not result.success:
        logger.error("[MCP Error] %s", result.error)
        raise result.error.to_mcp_error()
    return result.text


def register_mcp_routes(*, mcp: FastMCP, registry: ToolRegistry) -> None:
    """Install registry-backed ListTools/CallTool handlers on the FastMCP app.

    The handlers sit on the underlying protocol server, outside FastMCP's tool
    manager, which would otherwise turn every raised error into an `isError`
    result without a code.
    """
    handlers = mcp._mcp_server.request_handlers

    async def handle_list_tools(_request: types.ListToolsRequest) -> types.ServerResult:
        return types.ServerResult(
            types.ListToolsResult(tools=list_tool_definitions(registry))
        )

    async def handle_call_tool(request: types.CallToolRequest) -> types.ServerResult:
        text = await call_tool(registry, request.params.name, request.params.arguments)
        return types.ServerResult(
            types.CallToolResult(
                content=[types.TextContent(type="text", text=text)],
                isError=False,
            )
        )

    handlers[types.ListToolsRequest] = handle_list_tools
    handlers[types.CallToolRequest] = handle_call_tool
