# recordkit/core/config.py
"""
Central configuration for recordkit.

Environment variables override defaults. Only the composition root reads
these; library components take plain arguments.
"""
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven settings with sensible defaults."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"
    log_json: bool = False

    # Seed files (glob patterns)
    seed_paths: list[str] = Field(
        default_factory=lambda: ["config/entities.yaml"]
    )

    # Sequence registries
    registry_capacity: int | None = Field(
        default=None,
        ge=0,
        description="Maximum size of an ArrayRegistry (empty = unbounded)",
    )

    # Search / sort
    sort_algorithm: str = Field(
        default="quick",
        description="Name of the sorter used by the composition root",
    )
    check_sorted: bool = Field(
        default=False,
        description="Verify input order before binary search (O(n))",
    )


settings = Settings()
