# src/config/settings.py - v1
"""Typed configuration loaded from the environment via pydantic-settings.

Every variable is prefixed with ``CACHESANITY_`` (e.g. ``CACHESANITY_ESTIMATE_RAM=1``).
"""

from __future__ import annotations

from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cachesanity.core.ram_usage import parse_human_units

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Checker and logging settings."""

    model_config = SettingsConfigDict(
        env_prefix="CACHESANITY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Checker ===
    estimate_ram: bool = False
    fail_on_insanity: bool = True

    # === Logging ===
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "text"
    log_file: str | None = None
    log_rotation: str = "10MB"
    log_retention: int = 30

    # --- Validators ---

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:  # noqa: N805
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {v!r}"
            )
        return level

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Cross-field checks, reported together."""
        errors: list[str] = []

        if self.log_retention < 0:
            errors.append("LOG_RETENTION must be >= 0")

        try:
            parse_human_units(self.log_rotation)
        except ValueError:
            errors.append(
                f"LOG_ROTATION must look like '10MB', got {self.log_rotation!r}"
            )

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self


def load_settings(**overrides: object) -> Settings:
    """Load settings from the environment with optional overrides.

    Args:
        **overrides: Field-level overrides (for testing or ad-hoc checks).

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
