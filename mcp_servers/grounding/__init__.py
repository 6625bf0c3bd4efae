"""Shared building blocks for the grounding MCP server."""

from .execution import ToolResult, tool_wrapper
from .formatting import format_grounding_result
from .operations_grounding import (
    GROUND_STATEMENT,
    GROUND_STATEMENT_SCHEMA,
    build_registry,
    ground_statement,
)
from .registry import ToolRegistry, ToolSpec, dispatch, register_tool
from .validation import (
    INVALID_GROUNDING_ARGS_MESSAGE,
    is_string_list,
    is_valid_statement,
    validate_grounding_args,
)

__all__ = [
    "ToolResult",
    "tool_wrapper",
    "format_grounding_result",
    "GROUND_STATEMENT",
    "GROUND_STATEMENT_SCHEMA",
    "build_registry",
    "ground_statement",
    "ToolRegistry",
    "ToolSpec",
    "dispatch",
    "register_tool",
    "INVALID_GROUNDING_ARGS_MESSAGE",
    "is_string_list",
    "is_valid_statement",
    "validate_grounding_args",
]
