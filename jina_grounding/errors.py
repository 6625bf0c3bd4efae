"""Error taxonomy shared by the grounding client and the MCP server."""

from __future__ import annotations

from enum import Enum

from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, METHOD_NOT_FOUND, ErrorData


class ErrorKind(Enum):
    """The only error kinds a tool caller ever sees."""

    INVALID_PARAMS = INVALID_PARAMS
    METHOD_NOT_FOUND = METHOD_NOT_FOUND
    INTERNAL_ERROR = INTERNAL_ERROR

    @property
    def code(self) -> int:
        return self.value


class ToolCallError(Exception):
    """Base class for errors returned to the protocol layer."""

    kind: ErrorKind = ErrorKind.INTERNAL_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_mcp_error(self) -> McpError:
        return McpError(ErrorData(code=self.kind.code, message=self.message))


class InvalidParamsError(ToolCallError):
    """Malformed arguments, or remote evidence restrictions the caller must change."""

    kind = ErrorKind.INVALID_PARAMS


class MethodNotFoundError(ToolCallError):
    """Requested tool is not registered."""

    kind = ErrorKind.METHOD_NOT_FOUND


class InternalError(ToolCallError):
    """Any other failure, carrying the original message."""

    kind = ErrorKind.INTERNAL_ERROR


class GroundingAPIError(RuntimeError):
    """Raised when the grounding API reports a failure."""


class ConfigurationError(RuntimeError):
    """Raised when required startup configuration is missing."""
