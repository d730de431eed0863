"""Configuration module for pptx-index."""

from pptx_index.config.logging_config import configure_logging
from pptx_index.config.settings import (
    ExtractionSettings,
    LoggingSettings,
    Settings,
    get_settings,
)

__all__ = [
    "Settings",
    "ExtractionSettings",
    "LoggingSettings",
    "get_settings",
    "configure_logging",
]
