# src/config/settings.py - v1
"""Typed configuration loaded from .env via pydantic-settings.

Single source of truth for deployment-specific settings. Every field can be
set through an ``ETAGFILES_``-prefixed environment variable.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from etagfiles.cache.fingerprint import FILE_RESPONSE_CHUNK_SIZE


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_prefix="ETAGFILES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Static files ===
    static_root: Path = Path(".")
    chunk_size: int = FILE_RESPONSE_CHUNK_SIZE

    # === HTTP host ===
    host: str = "127.0.0.1"
    port: int = 8000

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "json"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 30

    # --- Validators ---

    @field_validator("chunk_size")
    @classmethod
    def validate_chunk_size(cls, v: int) -> int:
        """Chunk size must be strictly positive."""
        if v <= 0:
            raise ValueError("chunk_size must be > 0")
        return v

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if not 0 < v < 65536:
            raise ValueError("port must be in 1..65535")
        return v

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Validate cross-field consistency rules."""
        errors: list[str] = []

        if self.log_retention < 0:
            errors.append("LOG_RETENTION must be >= 0")

        if self.log_file is not None and self.log_retention == 0:
            errors.append("LOG_FILE requires LOG_RETENTION > 0")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self

    # --- Helpers ---

    @property
    def resolved_static_root(self) -> Path:
        """Absolute, symlink-free static root."""
        return self.static_root.expanduser().resolve()


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Args:
        **overrides: Field-level overrides (for testing or embedding).

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
