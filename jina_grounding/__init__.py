"""Client for the Jina AI grounding API used by the grounding MCP server."""

from jina_grounding.client import GroundingClient
from jina_grounding.config import Settings, load_settings
from jina_grounding.errors import (
    ConfigurationError,
    ErrorKind,
    GroundingAPIError,
    InternalError,
    InvalidParamsError,
    MethodNotFoundError,
    ToolCallError,
)
from jina_grounding.models import (
    Envelope,
    GroundingReference,
    GroundingRequest,
    GroundingResult,
)

__version__ = "0.1.0"
SERVER_NAME = "mcp-jinaai-grounding"

__all__ = [
    "GroundingClient",
    "Settings",
    "load_settings",
    "ConfigurationError",
    "ErrorKind",
    "GroundingAPIError",
    "InternalError",
    "InvalidParamsError",
    "MethodNotFoundError",
    "ToolCallError",
    "Envelope",
    "GroundingReference",
    "GroundingRequest",
    "GroundingResult",
    "SERVER_NAME",
    "__version__",
]
