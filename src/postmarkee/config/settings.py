"""Configuration via pydantic-settings with .env support."""

from __future__ import annotations

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from postmarkee.core.base_url import BaseUrl
from postmarkee.core.models import ClientConfig


class PostmarkSettings(BaseSettings):
    """Client settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_prefix="POSTMARK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Credentials
    server_token: SecretStr

    # API settings
    base_url: str | None = None
    message_stream: str | None = None
    timeout_seconds: float = 10.0

    # Logging
    log_level: str = "INFO"

    def to_client_config(self) -> ClientConfig:
        """Build a ClientConfig, validating the base URL override.

        Raises:
            UrlError: If ``base_url`` is set but not a usable http(s) base URL.
        """
        base_url = BaseUrl.parse(self.base_url) if self.base_url else None
        return ClientConfig(server_token=self.server_token, base_url=base_url)
