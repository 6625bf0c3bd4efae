import pytest

from jina_grounding import config
from jina_grounding.config import DEFAULT_BASE_URL, load_settings
from jina_grounding.errors import ConfigurationError


@pytest.fixture(autouse=True)
def _no_dotenv(monkeypatch):
    # A developer's .env must not leak into these tests.
    monkeypatch.setattr(config, "load_dotenv", lambda: False)
    for name in (
        "JINAAI_API_KEY",
        "JINA_GROUNDING_BASE_URL",
        "JINA_GROUNDING_TIMEOUT_SECONDS",
        "JINA_GROUNDING_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_load_settings_requires_api_key():
    with pytest.raises(ConfigurationError, match="JINAAI_API_KEY"):
        load_settings()


def test_load_settings_from_env(monkeypatch):
    monkeypatch.setenv("JINAAI_API_KEY", "jina_abc")
    monkeypatch.setenv("JINA_GROUNDING_BASE_URL", "http://localhost:8080")
    monkeypatch.setenv("JINA_GROUNDING_TIMEOUT_SECONDS", "12.5")
    monkeypatch.setenv("JINA_GROUNDING_LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.api_key == "jina_abc"
    assert settings.base_url == "http://localhost:8080"
    assert settings.request_timeout == 12.5
    assert settings.log_level == "DEBUG"


def test_load_settings_defaults(monkeypatch):
    monkeypatch.setenv("JINAAI_API_KEY", "jina_abc")

    settings = load_settings()

    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.request_timeout is None
    assert settings.log_level == "INFO"


@pytest.mark.parametrize("raw", ["abc", "0", "-3"])
def test_invalid_timeout_means_no_timeout(monkeypatch, raw):
    monkeypatch.setenv("JINAAI_API_KEY", "jina_abc")
    monkeypatch.setenv("JINA_GROUNDING_TIMEOUT_SECONDS", raw)
    assert load_settings().request_timeout is None


def test_settings_repr_hides_api_key(monkeypatch):
    monkeypatch.setenv("JINAAI_API_KEY", "jina_secret_value")
    assert "jina_secret_value" not in repr(load_settings())
