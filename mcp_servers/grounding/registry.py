"""Tool registry: tool name -> input schema, validator and handler."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict

from jina_grounding.errors import MethodNotFoundError
from mcp_servers.grounding.execution import ToolResult, tool_wrapper

logger = logging.getLogger("jina_grounding.mcp")


@dataclass(frozen=True)
class ToolSpec:
    name: str
    description: str
    input_schema: Dict[str, Any]
    validator: Callable[[Any], Any]
    handler: Callable[[Any], str]
    failure_message: str


ToolRegistry = Dict[str, ToolSpec]


def register_tool(registry: ToolRegistry, spec: ToolSpec) -> ToolSpec:
    if spec.name in registry:
        raise ValueError(f"Tool already registered: {spec.name}")
    registry[spec.name] = spec
    return spec


def dispatch(registry: ToolRegistry, name: str, arguments: Any) -> ToolResult:
    """Run one tool call: look up, validate, then handle.

    Never raises; every failure is returned as a ToolResult carrying a
    ToolCallError.
    """
    spec = registry.get(name)
    if spec is None:
        logger.warning("Unknown tool requested: %s", name)
        return ToolResult.failure(MethodNotFoundError(f"Unknown tool: {name}"))

    @tool_wrapper(spec.name, spec.failure_message)
    def run(args: Any) -> str:
        return spec.handler(spec.validator(args))

    return run(arguments)
