"""Configuration management using Pydantic settings."""

from typing import Literal, Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_NAME = "mcp-server-alsoasked"
APP_VERSION = "0.1.0"

DEFAULT_BASE_URL = "https://alsoaskedapi.com/v1"


class ApiSettings(BaseSettings):
    """AlsoAsked API configuration.

    Frozen so a single instance can be shared by the client, dispatcher and
    server for the lifetime of the process.
    """

    model_config = SettingsConfigDict(env_prefix="ALSOASKED_", env_file=".env", extra="ignore", frozen=True)

    api_key: Optional[SecretStr] = Field(default=None, description="AlsoAsked API key (ALSOASKED_API_KEY)")
    base_url: str = Field(default=DEFAULT_BASE_URL, description="Base URL of the AlsoAsked REST API")
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")

    def get_api_key(self) -> Optional[str]:
        """Extract API key value from SecretStr."""
        return self.api_key.get_secret_value() if self.api_key else None

    def has_api_key(self) -> bool:
        return bool(self.get_api_key())


TransportType = Literal["stdio", "streamable-http", "sse"]


class ServerSettings(BaseSettings):
    """Server configuration."""

    model_config = SettingsConfigDict(env_prefix="MCP_SERVER_", env_file=".env", extra="ignore", frozen=True)

    logging_level: str = Field(default="INFO")
    transport: TransportType = Field(default="stdio", description="MCP transport: stdio, streamable-http, or sse")
    host: str = Field(default="127.0.0.1", description="Host for HTTP transports")
    port: int = Field(default=8383, description="Port for HTTP transports")


class AppSettings(BaseSettings):
    """Root application settings.

    Priority: Environment Variables > .env file > Defaults
    """

    model_config = SettingsConfigDict(env_prefix="ALSOASKED_MCP_", extra="ignore", frozen=True)

    api: ApiSettings = Field(default_factory=ApiSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)


def load_settings() -> AppSettings:
    """Load settings from the environment."""
    return AppSettings()
