"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for tracked YAML loading.

    Values are read from ``TRACKED_YAML_*`` environment variables and from a
    ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="TRACKED_YAML_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"

    # Implicit scalar types (suffix of ``tag:yaml.org,2002:``) never inferred
    # from plain scalars. Explicitly tagged scalars are unaffected.
    disabled_implicit_types: list[str] = ["timestamp"]

    # Upper bound on nodes visited while flattening a single document
    max_expanded_nodes: int = 1_000_000


def configure_logging(settings: Settings | None = None) -> None:
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())
