"""
Social Identity Engine — Application Configuration

Loads runtime configuration from environment variables (and an optional .env
file) using Pydantic Settings.  A cached ``get_settings()`` helper is provided
so that every call-site receives the same validated instance without
re-parsing the environment.

The scoring configuration itself (weights, ordinal maps, archetypes, insight
templates) is declarative data and lives in ``social_identity.scoring_defaults``;
``SCORING_CONFIG_PATH`` swaps it for a JSON file as a single unit.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from social_identity.schemas.scoring_config import ScoringConfig, load_scoring_config
from social_identity.scoring_defaults import DEFAULT_SCORING_CONFIG


class Settings(BaseSettings):
    """Central configuration for the scoring engine and its tooling."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ------------------------------------------------------------------ #
    # Runtime environment
    # ------------------------------------------------------------------ #
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

    # ------------------------------------------------------------------ #
    # Scoring configuration source (empty = built-in reference data)
    # ------------------------------------------------------------------ #
    SCORING_CONFIG_PATH: str = ""

    # ------------------------------------------------------------------ #
    # Suspect-submission heuristics
    # ------------------------------------------------------------------ #
    SUSPECT_MIN_COMPLETION_SECONDS: float = 30.0
    SUSPECT_MIN_ANSWERED_FRACTION: float = 0.60

    # ------------------------------------------------------------------ #
    # Derived helpers
    # ------------------------------------------------------------------ #
    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @field_validator("SUSPECT_MIN_ANSWERED_FRACTION")
    @classmethod
    def _fraction_must_be_between_0_and_1(cls, v: float) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError(f"Answered fraction must be between 0 and 1, got {v}")
        return v

    @field_validator("SUSPECT_MIN_COMPLETION_SECONDS")
    @classmethod
    def _seconds_must_be_non_negative(cls, v: float) -> float:
        if v < 0:
            raise ValueError(f"Completion seconds must be >= 0, got {v}")
        return v


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached, validated ``Settings`` instance.

    Using ``@lru_cache`` guarantees the .env file is read and validated
    exactly once per process lifetime::

        from social_identity.config import get_settings
        settings = get_settings()
    """
    return Settings()


@lru_cache(maxsize=1)
def get_scoring_config() -> ScoringConfig:
    """Return the process-wide, validated scoring configuration.

    Reads ``SCORING_CONFIG_PATH`` when it is set, otherwise validates the
    built-in reference data.  The result is immutable and safe to share.
    """
    settings = get_settings()
    if settings.SCORING_CONFIG_PATH:
        return load_scoring_config(settings.SCORING_CONFIG_PATH)
    return ScoringConfig.model_validate(DEFAULT_SCORING_CONFIG)
