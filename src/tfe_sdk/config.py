"""Client configuration loaded from TFE_* environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ADDRESS = "https://app.terraform.io"
DEFAULT_BASE_PATH = "/api/v2"


class TFESettings(BaseSettings):
    """TFE SDK settings.

    All fields are read from environment variables with the ``TFE_`` prefix,
    e.g. ``TFE_ADDRESS`` and ``TFE_TOKEN``. Explicit arguments passed to the
    clients take precedence.
    """

    model_config = SettingsConfigDict(
        env_prefix="TFE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    address: str = DEFAULT_ADDRESS
    """Scheme and host of the service, without the API path."""

    base_path: str = DEFAULT_BASE_PATH

    token: SecretStr | None = None
    """API token sent as a bearer token."""

    timeout: float = 30.0
    """Request timeout in seconds."""

    def api_url(self, address: str | None = None) -> str:
        """Return the API root for ``address`` (or the configured address)."""
        return f"{(address or self.address).rstrip('/')}{self.base_path}"

    def resolve_token(self, token: str | None = None) -> str:
        """Return the explicit token, falling back to ``TFE_TOKEN``."""
        if token:
            return token
        if self.token and self.token.get_secret_value():
            return self.token.get_secret_value()
        raise ValueError("Missing API token")


@lru_cache(maxsize=1)
def get_settings() -> TFESettings:
    """Return a cached settings instance.

    Call ``get_settings.cache_clear()`` in tests to force a re-read after
    overriding env vars.
    """
    return TFESettings()
