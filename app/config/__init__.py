"""
Configuration package for the Meo Stationery backend.
"""

from .settings import (
    Settings,
    Environment,
    LogLevel,
    parse_environment,
    S3Settings,
    MonitoringSettings,
    settings,
    get_settings,
    reload_settings,
)
from .loader import ConfigLoader, load_config_for_environment

__all__ = [
    "Settings",
    "Environment",
    "LogLevel",
    "parse_environment",
    "S3Settings",
    "MonitoringSettings",
    "settings",
    "get_settings",
    "reload_settings",
    "ConfigLoader",
    "load_config_for_environment",
]
