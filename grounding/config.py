"""Centralised, env-driven configuration using pydantic-settings."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """All tunables are loaded from environment variables (or .env file)."""

    # ── Span resolution ─────────────────────────────────────────────────────
    search_radius: int = Field(default=1000, ge=0, alias="SEARCH_RADIUS")
    context_pad: int = Field(default=400, ge=0, alias="CONTEXT_PAD")

    # ── Language detection ──────────────────────────────────────────────────
    language_preference: Literal["heuristic", "statistical"] = Field(
        default="heuristic", alias="LANGUAGE_PREFERENCE"
    )
    statistical_min_length: int = Field(
        default=20,
        ge=0,
        alias="STATISTICAL_MIN_LENGTH",
        description="Samples shorter than this are never sent to langdetect.",
    )
    language_sample_limit: int = Field(
        default=5_000, gt=0, alias="LANGUAGE_SAMPLE_LIMIT"
    )
    langdetect_seed: int = Field(default=0, alias="LANGDETECT_SEED")

    # ── Logging ─────────────────────────────────────────────────────────────
    log_path: str = Field(default="./logs/grounding.log", alias="LOG_PATH")
    log_results: bool = Field(default=True, alias="LOG_RESULTS")

    model_config = {
        "env_file": ".env",
        "populate_by_name": True,
        "extra": "ignore",
    }


# Module-level singleton – import this everywhere
settings = Settings()
