"""Result formatting for grounding MCP responses."""

from __future__ import annotations

import json
from typing import Any, Dict


def format_grounding_result(data: Dict[str, Any]) -> str:
    """Pretty-print the API `data` object exactly as received."""
    return json.dumps(data, indent=2, ensure_ascii=False)
