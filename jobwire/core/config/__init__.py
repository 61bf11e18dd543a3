"""Configuration management module."""

from jobwire.core.config.settings import (
    MAX_VARINT,
    ConfigManager,
    JobWireSettings,
    LoggingConfig,
    WireConfig,
    get_config_manager,
    get_settings,
)

__all__ = [
    "MAX_VARINT",
    "ConfigManager",
    "JobWireSettings",
    "LoggingConfig",
    "WireConfig",
    "get_config_manager",
    "get_settings",
]
