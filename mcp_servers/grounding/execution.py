"""Execution wrapper for grounding MCP tools."""

from __future__ import annotations

import functools
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict

from jina_grounding.errors import InternalError, ToolCallError

logger = logging.getLogger("jina_grounding.mcp")


@dataclass
class ToolResult:
    """Standardized tool execution result.

    Exactly one of `text` and `error` is set.
    """

    success: bool
    text: str | None = None
    error: ToolCallError | None = None
    execution_time_ms: float = 0.0

    @classmethod
    def failure(cls, error: ToolCallError) -> "ToolResult":
        return cls(success=False, error=error)


def tool_wrapper(tool_name: str, failure_message: str) -> Callable:
    """Decorate a tool body with logging and conversion of failures into ToolResult.

    Typed tool errors are kept as they are; any other exception becomes an
    InternalError whose message is prefixed with `failure_message`.
    """

    def decorator(func: Callable[[Dict[str, Any]], str]) -> Callable[[Dict[str, Any]], ToolResult]:
        @functools.wraps(func)
        def wrapper(arguments: Dict[str, Any]) -> ToolResult:
            start_time = time.time()

            logger.info(
                f"Executing tool: {tool_name}",
                extra={
                    "tool_name": tool_name,
                    "parameters": _sanitize_parameters(arguments),
                },
            )

            try:
                text = func(arguments)
            except Exception as exc:
                execution_time = (time.time() - start_time) * 1000
                if isinstance(exc, ToolCallError):
                    error = exc
                    logger.warning(
                        f"Tool call rejected: {tool_name}: {exc}",
                        extra={
                            "tool_name": tool_name,
                            "execution_time_ms": execution_time,
                            "error_type": type(exc).__name__,
                        },
                    )
                else:
                    error = InternalError(f"{failure_message}: {exc}")
                    logger.error(
                        f"Tool execution failed: {tool_name}",
                        extra={
                            "tool_name": tool_name,
                            "execution_time_ms": execution_time,
                            "error": str(exc),
                            "error_type": type(exc).__name__,
                        },
                        exc_info=True,
                    )
                return ToolResult(
                    success=False,
                    error=error,
                    execution_time_ms=execution_time,
                )

            execution_time = (time.time() - start_time) * 1000
            logger.info(
                f"Tool execution completed: {tool_name}",
                extra={
                    "tool_name": tool_name,
                    "execution_time_ms": execution_time,
                    "success": True,
                },
            )
            return ToolResult(success=True, text=text, execution_time_ms=execution_time)

        return wrapper

    return decorator


def _sanitize_parameters(params: Any) -> Any:
    if not isinstance(params, dict):
        return params
    sensitive_keys = {"password", "token", "secret", "api_key", "authorization"}
    sanitized = {}
    for key, value in params.items():
        if any(sensitive in str(key).lower() for sensitive in sensitive_keys):
            sanitized[key] = "***REDACTED***"
        else:
            sanitized[key] = value
    return sanitized
