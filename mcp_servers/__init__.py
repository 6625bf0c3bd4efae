"""MCP server entrypoints for this repository."""
