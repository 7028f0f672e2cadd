"""Settings loaded from environment variables via pydantic-settings.

Values come from (highest priority first) environment variables, then a
``.env`` file in the working directory, then the defaults below.  Field
``request_timeout`` maps to ``REQUEST_TIMEOUT`` and so on; list fields are
given as JSON, e.g. ``ENGINES='["qwant"]'``.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from metasearch.engines import ENGINES

_DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64; rv:128.0) Gecko/20100101 Firefox/128.0"
)


class Settings(BaseSettings):
    """Metasearch engine-layer settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # === Upstream requests ===
    user_agent: str = _DEFAULT_USER_AGENT
    request_timeout: float = Field(default=30.0, gt=0)

    # === Engines ===
    engines: list[str] = Field(default_factory=lambda: ["qwant", "duckduckgo"])
    safe_search: int = Field(default=1, ge=0, le=4)

    # === App Config ===
    app_env: str = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("engines")
    @classmethod
    def _known_engines(cls, value: list[str]) -> list[str]:
        names = [name.strip().lower() for name in value if name.strip()]
        unknown = [name for name in names if name not in ENGINES]
        if unknown:
            raise ValueError(f"Unknown engines: {', '.join(unknown)}")
        if not names:
            raise ValueError("At least one engine must be enabled")
        return names

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide Settings instance."""
    return Settings()
