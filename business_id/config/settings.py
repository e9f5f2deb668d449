"""Centralized configuration management using pydantic-settings.

This module provides type-safe configuration with environment variable loading,
validation, and sensible defaults for the business ID validator.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    debug_all: bool = Field(
        default=False,
        validation_alias="DEBUG_ALL",
        description="Enable debug logging for all libraries",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Log level for business_id namespace",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def uppercase_log_level(cls, v: str) -> str:
        if isinstance(v, str):
            return v.upper()
        return v


class CatalogSettings(BaseSettings):
    """Failure reason descriptions configuration."""

    model_config = SettingsConfigDict(env_prefix="BUSINESS_ID_", extra="ignore")

    descriptions_file: Path | None = Field(
        default=None,
        description="YAML file mapping reason names to description texts",
    )

    def load_catalog(self):
        """Build the reason catalog, applying the descriptions file if set.

        Returns:
            ReasonCatalog with the configured descriptions
        """
        # Imported here, the validation package logs through this config
        from business_id.validation.reasons import ReasonCatalog

        if self.descriptions_file is None:
            return ReasonCatalog()
        return ReasonCatalog.from_yaml(self.descriptions_file)


class OutputSettings(BaseSettings):
    """Console output configuration."""

    model_config = SettingsConfigDict(env_prefix="BUSINESS_ID_", extra="ignore")

    color: bool = Field(
        default=True,
        description="Colour PASS/FAIL in console output",
    )


class Settings(BaseSettings):
    """Root settings class with all nested configurations.

    Usage:
        from business_id.config import get_settings

        settings = get_settings()
        catalog = settings.catalog.load_catalog()
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    catalog: CatalogSettings = Field(default_factory=CatalogSettings)
    output: OutputSettings = Field(default_factory=OutputSettings)


# Singleton pattern for settings
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance.

    Returns:
        The singleton Settings instance with all configuration loaded.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings singleton (useful for testing)."""
    global _settings
    _settings = None
