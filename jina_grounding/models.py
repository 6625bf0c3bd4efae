"""Request and response shapes of the Jina AI grounding API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictInt

# The API returns up to this many references per verdict.
MAX_REFERENCES = 30

# `status` value reported when the X-Site restriction yielded no usable evidence.
IRRELEVANT_REFERENCES_STATUS = 42206


@dataclass(frozen=True)
class GroundingRequest:
    """A validated grounding call."""

    statement: str
    references: Tuple[str, ...] = ()
    no_cache: bool = False


class GroundingReference(BaseModel):
    """A cited source with the excerpt that supports or contradicts the statement."""

    model_config = ConfigDict(extra="allow", frozen=True)

    url: str
    keyQuote: str
    isSupportive: bool


class GroundingUsage(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    tokens: int


class GroundingResult(BaseModel):
    """Verdict payload carried in the `data` field of a successful envelope."""

    model_config = ConfigDict(extra="allow", frozen=True)

    factuality: float = Field(ge=0.0, le=1.0, description="Confidence score")
    result: bool
    reason: str
    references: list[GroundingReference] = Field(default_factory=list)
    usage: GroundingUsage


class Envelope(BaseModel):
    """Outer `{code, status, data}` wrapper; `code == 200` means logical success."""

    model_config = ConfigDict(extra="allow")

    code: StrictInt
    status: int | None = None
    data: Any = None
