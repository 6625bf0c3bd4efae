"""Grounding tool: schema, handler and registry wiring."""

from __future__ import annotations

from typing import Any, Dict

from jina_grounding.client import GroundingClient
from jina_grounding.models import GroundingRequest
from mcp_servers.grounding.formatting import format_grounding_result
from mcp_servers.grounding.registry import ToolRegistry, ToolSpec, register_tool
from mcp_servers.grounding.validation import validate_grounding_args

GROUND_STATEMENT = "ground_statement"
GROUND_STATEMENT_DESCRIPTION = (
    "Ground a statement using real-time web search results to check factuality"
)
GROUND_STATEMENT_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "statement": {
            "type": "string",
            "description": "Statement to be grounded",
        },
        "references": {
            "type": "array",
            "items": {"type": "string"},
            "description": "Optional list of URLs to restrict search to",
        },
        "no_cache": {
            "type": "boolean",
            "description": "Whether to bypass cache for fresh results",
            "default": False,
        },
    },
    "required": ["statement"],
}


def ground_statement(client: GroundingClient, request: GroundingRequest) -> str:
    return format_grounding_result(client.ground(request))


def build_registry(client: GroundingClient) -> ToolRegistry:
    registry: ToolRegistry = {}
    register_tool(
        registry,
        ToolSpec(
            name=GROUND_STATEMENT,
            description=GROUND_STATEMENT_DESCRIPTION,
            input_schema=GROUND_STATEMENT_SCHEMA,
            validator=validate_grounding_args,
            handler=lambda request: ground_statement(client, request),
            failure_message="Failed to ground statement",
        ),
    )
    return registry
