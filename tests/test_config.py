"""Tests for configuration loading and API key handling."""

import os

import pytest
from pydantic import ValidationError

from mcp_server_alsoasked.config import DEFAULT_BASE_URL, ApiSettings, ServerSettings, load_settings
from mcp_server_alsoasked.utils import mask_api_key


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Clean environment variables and run away from any local .env file."""
    for var in list(os.environ.keys()):
        if var.startswith("ALSOASKED_") or var.startswith("MCP_SERVER_"):
            monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


class TestApiSettings:
    def test_defaults(self):
        settings = ApiSettings()
        assert settings.api_key is None
        assert settings.has_api_key() is False
        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.timeout == 30.0

    def test_api_key_from_env(self, monkeypatch):
        monkeypatch.setenv("ALSOASKED_API_KEY", "env-key-123456")
        settings = ApiSettings()
        assert settings.get_api_key() == "env-key-123456"
        assert "env-key-123456" not in repr(settings)

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("ALSOASKED_BASE_URL", "https://staging.example/v1")
        monkeypatch.setenv("ALSOASKED_TIMEOUT", "5")
        settings = ApiSettings()
        assert settings.base_url == "https://staging.example/v1"
        assert settings.timeout == 5.0

    def test_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("ALSOASKED_API_KEY=dotenv-key-98765\n", encoding="utf-8")
        assert ApiSettings().get_api_key() == "dotenv-key-98765"

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            ApiSettings(timeout=0)

    def test_frozen(self):
        settings = ApiSettings(api_key="abc")
        with pytest.raises(ValidationError):
            settings.base_url = "https://elsewhere"


class TestServerSettings:
    def test_defaults(self):
        settings = ServerSettings()
        assert settings.transport == "stdio"
        assert settings.port == 8383

    def test_invalid_transport(self, monkeypatch):
        monkeypatch.setenv("MCP_SERVER_TRANSPORT", "carrier-pigeon")
        with pytest.raises(ValidationError):
            ServerSettings()


class TestLoadSettings:
    def test_composes_sections(self, monkeypatch):
        monkeypatch.setenv("ALSOASKED_API_KEY", "k-1234567890")
        monkeypatch.setenv("MCP_SERVER_TRANSPORT", "sse")
        settings = load_settings()
        assert settings.api.get_api_key() == "k-1234567890"
        assert settings.server.transport == "sse"


class TestMaskApiKey:
    def test_long_key_shows_prefix_only(self):
        assert mask_api_key("abcd1234efgh5678") == "abcd***"

    @pytest.mark.parametrize("key", ["short", "12345678"])
    def test_short_key_fully_hidden(self, key):
        assert mask_api_key(key) == "***"

    @pytest.mark.parametrize("key", [None, ""])
    def test_missing_key(self, key):
        assert mask_api_key(key) == "(not set)"
