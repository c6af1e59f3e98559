"""Environment-driven configuration helpers for CampusPlay."""

from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or .env files."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    commission_rate: float = Field(
        default=0.10,
        ge=0.0,
        le=1.0,
        validation_alias=AliasChoices("WEBSITE_COMMISSION_RATE", "COMMISSION_RATE"),
    )
    security_deposit_rate: float = Field(default=0.05, ge=0.0, le=1.0)
    security_deposit_amount: float = Field(
        default=0.0,
        ge=0.0,
        validation_alias=AliasChoices("SECURITY_DEPOSIT_AMOUNT", "SECURITY_DEPOSIT"),
    )
    unverified_withdrawal_limit: float = Field(default=5000.0, ge=0.0)

    practice_points_base: int = Field(default=100, ge=1)
    duel_max_rerolls: int = Field(default=10, ge=0, le=1000)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings()  # type: ignore[call-arg]
