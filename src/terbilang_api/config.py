"""Application configuration via environment variables with TERBILANG_ prefix."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models.terbilang import CaseMode


class Settings(BaseSettings):
    """Terbilang API configuration.

    All settings are read from environment variables prefixed with
    ``TERBILANG_``. Nothing here is secret; the service holds no state.
    """

    model_config = SettingsConfigDict(env_prefix="TERBILANG_")

    # ── Output ──────────────────────────────────────────────────────────────
    # Used when a request does not pass ?case=
    default_case: CaseMode = CaseMode.LOWER
    # When disabled, ?format=xml falls back to JSON
    enable_xml: bool = True

    # ── Logging ─────────────────────────────────────────────────────────────
    log_level: str = Field(default="INFO", pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")

    # ── API ─────────────────────────────────────────────────────────────────
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    cors_origins: list[str] = Field(default=["*"])
