"""Centralised application configuration using pydantic-settings.

All environment variables are read through the Settings class.
Consumers call ``get_settings()`` to obtain a cached, validated instance.
Tests construct ``Settings(_env_file=None, ...)`` directly for isolation.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from armanlegal.locale import SUPPORTED_LANGUAGES

logger = logging.getLogger(__name__)

# src/armanlegal/config.py  ->  parent x3  ->  project root
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


# ---------------------------------------------------------------------------
# Sub-models (one per configuration domain)
# ---------------------------------------------------------------------------
class AppConfig(BaseModel):
    """Application runtime configuration."""

    port: int = 8080
    storage_secret: SecretStr = SecretStr("dev-secret-change-me")
    log_dir: Path = Path("logs")
    console_log_level: str = "INFO"
    reload: bool = True


class ViewerConfig(BaseModel):
    """Document viewer configuration."""

    language: str = "fa"

    @field_validator("language")
    @classmethod
    def language_is_supported(cls, value: str) -> str:
        if value not in SUPPORTED_LANGUAGES:
            msg = (
                f"VIEWER__LANGUAGE must be one of {sorted(SUPPORTED_LANGUAGES)}, "
                f"got {value!r}"
            )
            raise ValueError(msg)
        return value


class ExportConfig(BaseModel):
    """Export and sharing configuration."""

    brand_name: str = "آرمان AI"
    pandoc_path: str = "pandoc"
    reference_docx: Path | None = None
    support_phone: str = "989027370260"
    export_dir: Path | None = None


class LlmConfig(BaseModel):
    """Claude API configuration for the document producer."""

    api_key: SecretStr = SecretStr("")
    model: str = "claude-sonnet-4-20250514"
    max_tokens: int = 4096
    system_prompt: str = (
        "You are a legal drafting assistant. Produce the requested document "
        "in well-structured markdown with headings, numbered clauses and "
        "tables where appropriate. Do not add commentary outside the document."
    )


# ---------------------------------------------------------------------------
# Root settings
# ---------------------------------------------------------------------------
class Settings(BaseSettings):
    """Application settings with automatic .env loading and type validation.

    Environment variables use double-underscore delimiter for nesting:
    ``APP__PORT``, ``VIEWER__LANGUAGE``, ``EXPORT__PANDOC_PATH``,
    ``LLM__API_KEY``, etc.
    """

    model_config = SettingsConfigDict(
        env_file=_PROJECT_ROOT / ".env",
        env_nested_delimiter="__",
        extra="ignore",
    )

    app: AppConfig = AppConfig()
    viewer: ViewerConfig = ViewerConfig()
    export: ExportConfig = ExportConfig()
    llm: LlmConfig = LlmConfig()


# ---------------------------------------------------------------------------
# Singleton access
# ---------------------------------------------------------------------------
@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance.

    Call ``get_settings.cache_clear()`` in tests to reset.
    """
    settings = Settings()

    env_file = settings.model_config.get("env_file")
    if env_file is not None and Path(str(env_file)).is_file():
        logger.info("Settings loaded .env from: %s", env_file)
    else:
        logger.info("Settings: no .env file found, using env vars and defaults")

    return settings
