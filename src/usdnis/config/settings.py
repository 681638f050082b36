# src/usdnis/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Every value can be overridden with a USDNIS_* environment variable or an
entry in a local .env file.

Files that USE this module:
- usdnis.app (loads settings for strategy, lookback window and logging)
- usdnis.adapters.transport (timeout and retry budget)
- usdnis.adapters.providers.* (endpoint URLs and currency code)
- usdnis.application.rates_service (lookback window and strategy)

Files that this module USES:
- usdnis.shared.validators (validation functions for settings)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Level names for log_level validation
from typing import Literal, Optional  # Type hints for constrained and optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from usdnis.shared.validators import validate_url  # Validate endpoint URL format

STRATEGY_RANGE = "range"
STRATEGY_DAILY = "daily"
MAX_LOOKBACK_DAYS = 366


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # --- Resolution ---
    strategy: Literal["range", "daily"] = Field(default=STRATEGY_RANGE, alias="USDNIS_STRATEGY")
    lookback_days: int = Field(default=30, alias="USDNIS_LOOKBACK_DAYS", ge=1, le=MAX_LOOKBACK_DAYS)

    # --- Bank of Israel endpoints ---
    daily_url: str = Field(default="https://www.boi.org.il/currency.xml", alias="USDNIS_DAILY_URL")
    daily_currency_code: str = Field(default="01", alias="USDNIS_DAILY_CURRENCY_CODE")
    sdmx_url: str = Field(
        default=(
            "https://edge.boi.gov.il/FusionEdgeServer/sdmx/v2/data/dataflow/"
            "BOI.STATISTICS/EXR/1.0/RER_USD_ILS"
        ),
        alias="USDNIS_SDMX_URL",
    )

    # --- HTTP Settings ---
    http_timeout_seconds: int = Field(default=10, alias="USDNIS_HTTP_TIMEOUT_SECONDS", ge=1, le=60)
    http_retry_attempts: int = Field(default=3, alias="USDNIS_HTTP_RETRY_ATTEMPTS", ge=1, le=10)
    http_retry_backoff_ms: int = Field(default=500, alias="USDNIS_HTTP_RETRY_BACKOFF_MS", ge=0, le=10000)

    # --- Logging ---
    log_level: str = Field(default="WARNING", alias="USDNIS_LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="USDNIS_LOG_FILE")

    @property
    def http_retry_backoff_seconds(self) -> float:
        """Retry backoff converted to seconds for time.sleep."""
        return self.http_retry_backoff_ms / 1000.0

    @field_validator("daily_url", "sdmx_url")
    @classmethod
    def validate_endpoint_url(cls, v: str) -> str:
        """Validate endpoint URL format."""
        if not validate_url(v):
            raise ValueError(f"Invalid endpoint URL: {v!r}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize log level name."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError("USDNIS_LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return level


# Global settings instance
settings = Settings()
