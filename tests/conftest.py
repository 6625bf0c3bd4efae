from __future__ import annotations

import pytest

from jina_grounding.client import GroundingClient
from jina_grounding.config import Settings
from tests.helpers.http_fakes import FakeSession, json_response


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key="jina-test-key", base_url="https://g.jina.ai")


@pytest.fixture
def grounding_data() -> dict:
    return {
        "factuality": 0.9,
        "result": True,
        "reason": "Multiple sources confirm the statement.",
        "references": [
            {
                "url": "https://a.example/article",
                "keyQuote": "The Eiffel Tower is located in Paris.",
                "isSupportive": True,
            }
        ],
        "usage": {"tokens": 120},
    }


@pytest.fixture
def success_session(grounding_data) -> FakeSession:
    return FakeSession(
        json_response(200, {"code": 200, "status": 200, "data": grounding_data})
    )


@pytest.fixture
def make_client(settings):
    def _make(session: FakeSession) -> GroundingClient:
        return GroundingClient(settings, session=session)

    return _make
