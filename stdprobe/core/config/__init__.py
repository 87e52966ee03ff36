"""Configuration management for stdprobe."""

from stdprobe.core.config.loader import ConfigLoader
from stdprobe.core.config.settings import (
    DEFAULT_CONFIG_PATHS,
    ClangdSettings,
    DetectorSettings,
    LoggingSettings,
    Settings,
    get_settings,
)

__all__ = [
    "ConfigLoader",
    "ClangdSettings",
    "DEFAULT_CONFIG_PATHS",
    "DetectorSettings",
    "LoggingSettings",
    "Settings",
    "get_settings",
]
