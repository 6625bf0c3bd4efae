# jina_grounding/config.py
from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from jina_grounding.errors import ConfigurationError

DEFAULT_BASE_URL = "https://g.jina.ai"


@dataclass(frozen=True)
class Settings:
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    request_timeout: float | None = None
    log_level: str = "INFO"

    def __repr__(self) -> str:
        return (
            f"Settings(api_key='***', base_url={self.base_url!r}, "
            f"request_timeout={self.request_timeout!r}, log_level={self.log_level!r})"
        )


def _env_timeout(name: str) -> float | None:
    raw = os.getenv(name)
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if value > 0 else None


def load_settings() -> Settings:
    # Get a Jina AI API key for free: https://jina.ai/?sui=apikey
    load_dotenv()
    api_key = os.getenv("JINAAI_API_KEY")
    if not api_key:
        raise ConfigurationError("JINAAI_API_KEY environment variable is required")
    return Settings(
        api_key=api_key,
        base_url=os.getenv("JINA_GROUNDING_BASE_URL") or DEFAULT_BASE_URL,
        request_timeout=_env_timeout("JINA_GROUNDING_TIMEOUT_SECONDS"),
        log_level=(os.getenv("JINA_GROUNDING_LOG_LEVEL") or "INFO").upper(),
    )
