"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, island.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class LoggingConfig(BaseModel):
    """[logging] section."""

    model_config = {"frozen": True}

    verbose: bool = False
    log_json: bool = False


class IslandConfig(BaseModel):
    """Top-level island.toml model."""

    model_config = {"frozen": True}

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
