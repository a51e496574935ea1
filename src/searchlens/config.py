"""Application configuration.

Configuration is loaded from environment variables. For local development, you can provide a
`.env` file and set `SEARCHLENS_ENV_FILE` to point to it.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from searchlens.categories.aggregator import AggregateOptions


class Settings(BaseSettings):
    """SearchLens settings.

    All fields are environment-configurable. Prefix is `SEARCHLENS_`.
    """

    model_config = SettingsConfigDict(
        env_prefix="SEARCHLENS_",
        env_file=None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Core
    app_env: Literal["dev", "prod"] = Field(default="dev")
    log_level: str = Field(default="INFO")

    # Categorization
    max_categories: int = Field(default=6, ge=1, le=50)
    enhance_limit: int = Field(default=5, ge=0, le=50)
    dedupe_on_merge: bool = Field(default=False)
    score_items: bool = Field(default=False)

    # Last-good cache
    cache_max_size: int = Field(default=128, ge=1, le=100_000)
    cache_ttl_s: float = Field(default=3600.0, gt=0.0)

    def aggregate_options(self) -> AggregateOptions:
        """Build aggregation options from settings."""

        return AggregateOptions(
            max_categories=self.max_categories,
            enhance_limit=self.enhance_limit,
            dedupe_content=self.dedupe_on_merge,
            score_items=self.score_items,
        )


def load_settings() -> Settings:
    """Load settings from env.

    Returns:
        Settings: Parsed settings.
    """

    env_file_override = os.getenv("SEARCHLENS_ENV_FILE")
    if env_file_override:
        env_path = Path(env_file_override)
        return Settings(_env_file=env_path)

    default_env = Path.cwd() / ".env"
    if default_env.exists():
        return Settings(_env_file=default_env)

    return Settings()
