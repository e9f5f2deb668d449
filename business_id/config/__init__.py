"""Configuration module for the business ID validator.

This module provides centralized, type-safe configuration management
using pydantic-settings with environment variable loading.

Usage:
    from business_id.config import get_settings

    settings = get_settings()

    # Access logging settings
    log_level = settings.logging.log_level

    # Build the reason catalog, honouring BUSINESS_ID_DESCRIPTIONS_FILE
    catalog = settings.catalog.load_catalog()
"""

from business_id.config.settings import (
    CatalogSettings,
    LoggingSettings,
    OutputSettings,
    Settings,
    get_settings,
    reset_settings,
)

__all__ = [
    "CatalogSettings",
    "LoggingSettings",
    "OutputSettings",
    "Settings",
    "get_settings",
    "reset_settings",
]
