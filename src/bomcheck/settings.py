"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from bomcheck.validation import SpecVersion


class Settings(BaseSettings):
    """Configuration for the bomcheck CLI.

    Values are read from ``BOMCHECK_*`` environment variables and from a
    ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="BOMCHECK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "WARNING"
    spec_version: SpecVersion = SpecVersion.V1_5  # used when --spec-version is not given
