"""Validation helpers for grounding MCP server inputs."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from jina_grounding.errors import InvalidParamsError
from jina_grounding.models import GroundingRequest

INVALID_GROUNDING_ARGS_MESSAGE = (
    "Invalid parameters. Required: statement (string). "
    "Optional: references (string[]), no_cache (boolean)"
)


def is_valid_statement(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def is_string_list(value: Any) -> bool:
    """Accept a list of strings; URLs are checked by the API, not here."""
    if not isinstance(value, (list, tuple)):
        return False
    return all(isinstance(item, str) for item in value)


def validate_grounding_args(arguments: Any) -> GroundingRequest:
    """Validate raw tool arguments and build a request with a trimmed statement."""
    if not isinstance(arguments, Mapping):
        raise InvalidParamsError(INVALID_GROUNDING_ARGS_MESSAGE)

    statement = arguments.get("statement")
    references = arguments.get("references")
    no_cache = arguments.get("no_cache")

    if not is_valid_statement(statement):
        raise InvalidParamsError(INVALID_GROUNDING_ARGS_MESSAGE)
    if references is not None and not is_string_list(references):
        raise InvalidParamsError(INVALID_GROUNDING_ARGS_MESSAGE)
    if no_cache is not None and not isinstance(no_cache, bool):
        raise InvalidParamsError(INVALID_GROUNDING_ARGS_MESSAGE)

    return GroundingRequest(
        statement=statement.strip(),
        references=tuple(references or ()),
        no_cache=bool(no_cache),
    )
