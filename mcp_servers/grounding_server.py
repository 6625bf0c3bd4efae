"""Jina AI grounding MCP server (FastMCP) entrypoint."""

from __future__ import annotations

import atexit
import logging
import sys

from fastmcp import FastMCP

from jina_grounding import SERVER_NAME, __version__
from jina_grounding.client import GroundingClient
from jina_grounding.config import Settings, load_settings
from jina_grounding.errors import ConfigurationError
from mcp_servers.grounding.operations_grounding import build_registry
from mcp_servers.grounding.router import register_mcp_routes

# stdout carries the protocol; logging.basicConfig writes to stderr.
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("jina_grounding.mcp")

__all__ = ["create_server", "main"]


def create_server(settings: Settings, client: GroundingClient | None = None) -> FastMCP:
    client = client or GroundingClient(settings)
    mcp = FastMCP(name=SERVER_NAME, version=__version__)
    register_mcp_routes(mcp=mcp, registry=build_registry(client))
    return mcp


def main() -> None:
    try:
        settings = load_settings()
    except ConfigurationError as exc:
        logger.error("%s", exc)
        sys.exit(1)

    level = logging.getLevelName(settings.log_level)
    if isinstance(level, int):
        logging.getLogger().setLevel(level)

    client = GroundingClient(settings)
    atexit.register(client.close)

    mcp = create_server(settings, client=client)
    logger.info("Jina Grounding MCP server running on stdio")
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
