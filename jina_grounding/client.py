"""HTTP client for the Jina AI grounding endpoint."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict

import requests

from jina_grounding.config import Settings
from jina_grounding.errors import GroundingAPIError, InvalidParamsError
from jina_grounding.models import (
    IRRELEVANT_REFERENCES_STATUS,
    Envelope,
    GroundingRequest,
    GroundingResult,
)

logger = logging.getLogger("jina_grounding.client")

IRRELEVANT_REFERENCES_MESSAGE = (
    "The provided URLs did not contain relevant information for fact-checking. "
    "Try removing the URL restrictions or providing different URLs that contain "
    "information about the statement."
)


class GroundingClient:
    """Sends one grounding request per call; no retries, no local caching."""

    def __init__(self, settings: Settings, session: requests.Session | None = None):
        self.settings = settings
        self._session = session or requests.Session()

    def build_headers(self, request: GroundingRequest) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Authorization": f"Bearer {self.settings.api_key}",
        }
        if request.references:
            headers["X-Site"] = ",".join(request.references)
        if request.no_cache:
            headers["X-No-Cache"] = "true"
        return headers

    def ground(self, request: GroundingRequest) -> Dict[str, Any]:
        """Ground `request.statement` and return the `data` object of the envelope.

        Raises:
            InvalidParamsError: the X-Site restriction held no relevant evidence.
            GroundingAPIError: the API answered with an HTTP or logical failure.
            requests.RequestException: the request never got a response.
            ValueError: the response body is not a valid envelope.
        """
        body = json.dumps({"statement": request.statement}, ensure_ascii=False)
        logger.debug(
            "POST %s (references=%d, no_cache=%s)",
            self.settings.base_url,
            len(request.references),
            request.no_cache,
        )
        response = self._session.post(
            self.settings.base_url,
            headers=self.build_headers(request),
            data=body.encode("utf-8"),
            timeout=self.settings.request_timeout,
        )

        if not 200 <= response.status_code < 300:
            raise _error_from_response(response.status_code, response.text)

        envelope = Envelope.model_validate(json.loads(response.text))
        if envelope.code != 200:
            raise GroundingAPIError(f"API error! status: {envelope.status}")

        GroundingResult.model_validate(envelope.data)
        return envelope.data

    def close(self) -> None:
        self._session.close()


def _error_from_response(status_code: int, text: str) -> Exception:
    try:
        error_json = json.loads(text)
    except ValueError:
        return GroundingAPIError(f"HTTP error! status: {status_code}, message: {text}")

    if not isinstance(error_json, dict):
        error_json = {}

    if error_json.get("status") == IRRELEVANT_REFERENCES_STATUS:
        return InvalidParamsError(IRRELEVANT_REFERENCES_MESSAGE)

    message = error_json.get("readableMessage") or error_json.get("message") or text
    return GroundingAPIError(f"API error! status: {status_code}, message: {message}")
