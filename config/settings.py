"""Pydantic settings for the vault dashboard data layer."""

import json
import logging
from functools import lru_cache
from typing import Annotated, Dict

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Performance series
    performance_window_days: int = Field(default=30, ge=7, le=365, description="Trailing window of the value curve")

    # Activity feed
    actor_ref_length: int = Field(default=8, ge=4, le=64, description="Prefix length used to mask actor ids")
    synthetic_feed_enabled: bool = Field(default=True, description="Include placeholder optimizer events")

    # Yield policy
    default_apr: float = Field(default=15.2, ge=0.0, le=1000.0, description="APR (%) for vaults without a policy")
    apr_policies: Annotated[Dict[str, float], NoDecode] = Field(default_factory=dict, description="Vault reference to APR (%) mapping")

    # Logging
    log_level: str = Field(default="WARNING", description="Root log level")

    @field_validator("apr_policies", mode="before")
    @classmethod
    def parse_apr_policies(cls, v):
        """Parse JSON or comma-separated `vault=apr` pairs."""
        if isinstance(v, str):
            if not v.strip():
                return {}
            if v.strip().startswith("{"):
                return json.loads(v)
            policies = {}
            for pair in v.split(","):
                if "=" not in pair:
                    continue
                vault, apr = pair.split("=", 1)
                policies[vault.strip()] = float(apr)
            return policies
        return v or {}

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Upper-case the level name."""
        if isinstance(v, str):
            return v.strip().upper() or "WARNING"
        return v


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(settings: Settings = None) -> None:
    """Apply the configured log level to the root logger."""
    settings = settings or get_settings()
    level = getattr(logging, settings.log_level, logging.WARNING)
    logging.basicConfig(level=level)
    logging.getLogger().setLevel(level)
