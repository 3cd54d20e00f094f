"""Application configuration management."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_PROMPT_CONFIG = Path(__file__).resolve().parent / "prompts" / "coach.yaml"

# Values shipped in sample .env files and build configs that must never reach the API.
PLACEHOLDER_API_KEYS = frozenset({"", "dummy-key-for-build", "change-me", "changeme", "your-api-key"})


class Settings(BaseSettings):
    """Centralised application settings derived from environment variables."""

    anthropic_api_key: str | None = Field(
        default=None,
        description="Credential for the Anthropic Messages API.",
    )
    anthropic_model: str = Field(default="claude-sonnet-4-5-20250929")
    completion_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Per-request timeout passed to the SDK (SDK default when unset).",
    )
    preflight_check: bool = Field(
        default=False,
        description="Run a connectivity self-test before every plan generation.",
    )
    prompt_config_path: Path = Field(default=DEFAULT_PROMPT_CONFIG)

    app_host: str = Field(default="0.0.0.0")
    app_port: int = Field(default=8000, ge=1, le=65535)

    debug: bool = Field(default=False)

    log_level: str = Field(default="INFO")
    log_dir: Path = Field(default=Path("logs"))

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        valid = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
        upper = value.upper()
        if upper not in valid:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(sorted(valid))}")
        return upper

    @property
    def anthropic_configured(self) -> bool:
        """True when a usable (non-placeholder) API key is present."""

        if self.anthropic_api_key is None:
            return False
        return self.anthropic_api_key.strip().lower() not in PLACEHOLDER_API_KEYS


@lru_cache()
def get_settings() -> Settings:
    """Return cached settings instance so it can be reused across the app."""

    settings = Settings()
    settings.log_dir.mkdir(parents=True, exist_ok=True)
    return settings
