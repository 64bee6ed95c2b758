"""Application configuration — loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration loaded from ``GITPITCH_*`` env vars (or ``.env``).

    ``https`` and ``hostname`` have no defaults: a deployment that builds
    embed or badge snippets must set both.
    """

    model_config = SettingsConfigDict(
        env_prefix="GITPITCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    https: bool | None = None
    hostname: str | None = None
    github_token: SecretStr | None = None
    cache_max_age: int = 300
    long_lived_cache_max_age: int = 86_400
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 9000


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the singleton application settings (cached after first call)."""
    return Settings()
