"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) away from the CLI.
- Lets adapters (HTTP, inflection, error classification) read config the
  same way.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra deps)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "active-model-adapter"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "active-model-adapter"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "active-model-adapter"
    return Path.home() / ".config" / "active-model-adapter"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Application settings.

    Every field can be set through an `ACTIVE_MODEL_<FIELD>` environment
    variable, the project `.env`, or the per-user `.env`. Collections
    (`invalid_statuses`, `irregular_plurals`, `uncountable_words`) are read as
    JSON, e.g. `ACTIVE_MODEL_IRREGULAR_PLURALS='{"cactus": "cacti"}'`.
    """

    model_config = SettingsConfigDict(
        env_prefix="ACTIVE_MODEL_",
        extra="ignore",
        case_sensitive=False,
        # Project first (dev), then the per-user config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    host: str = Field(
        default="http://localhost:3000",
        min_length=1,
        description="Scheme + host of the Rails API (no trailing slash).",
    )
    namespace: str = Field(
        default="",
        description="Path prefix for every resource, e.g. 'api/v1'.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Per-request timeout (seconds).",
    )
    user_agent: str = Field(
        default="active-model-adapter/0.1",
        min_length=1,
        description="User-Agent sent with every request.",
    )

    invalid_statuses: list[int] = Field(
        default_factory=lambda: [422],
        min_length=1,
        description="HTTP statuses treated as validation failures.",
    )
    irregular_plurals: dict[str, str] = Field(
        default_factory=dict,
        description="Extra singular -> plural overrides for the inflector.",
    )
    uncountable_words: list[str] = Field(
        default_factory=list,
        description="Extra words the inflector must never pluralize/singularize.",
    )

    log_level: str = Field(
        default="WARNING",
        description="Log level (DEBUG, INFO, WARNING, ERROR).",
    )
    log_format: str = Field(
        default="console",
        pattern="^(console|json)$",
        description="structlog renderer: 'console' or 'json'.",
    )

    @field_validator("host")
    @classmethod
    def _strip_host(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("namespace")
    @classmethod
    def _strip_namespace(cls, value: str) -> str:
        return value.strip("/")

    @field_validator("invalid_statuses")
    @classmethod
    def _check_statuses(cls, value: list[int]) -> list[int]:
        for status in value:
            if not 100 <= status <= 599:
                raise ValueError(f"not an HTTP status code: {status}")
        return value
