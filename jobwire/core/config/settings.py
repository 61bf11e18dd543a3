"""
Configuration management for jobwire.

Settings come from ``JOBWIRE_`` prefixed environment variables, an optional
``.env`` file and an optional TOML file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from jobwire.core.exceptions import ErrorCode, JobWireError

MAX_VARINT = 0xFFFFFFFFFFFFFFFF


class WireConfig(BaseModel):
    """Configuration for the error payload codec."""

    max_field_bytes: int | None = Field(
        None, ge=0, le=MAX_VARINT, description="Largest UTF-8 length of a single field, the var-int limit when unset"
    )


class LoggingConfig(BaseModel):
    """Configuration for logging."""

    level: str = Field("WARNING", description="Log level")
    file_path: Path | None = Field(None, description="Log file path")


class JobWireSettings(BaseSettings):
    """Main jobwire configuration."""

    model_config = SettingsConfigDict(
        env_prefix="JOBWIRE_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    debug: bool = Field(False, description="Enable debug mode")
    wire: WireConfig = Field(default_factory=WireConfig, description="Codec configuration")
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="Logging configuration")

    @classmethod
    def load_from_file(cls, config_path: Path) -> JobWireSettings:
        """Load configuration from a TOML file."""
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        try:
            config_data = toml.load(config_path)
        except toml.TomlDecodeError as exc:
            raise JobWireError(
                f"Invalid configuration file {config_path}: {exc}",
                ErrorCode.CONFIGURATION_ERROR.value,
                {"path": str(config_path)},
            ) from exc
        return cls(**config_data)

    def save_to_file(self, config_path: Path) -> None:
        """Save configuration to a TOML file."""
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w", encoding="utf-8") as f:
            toml.dump(self.model_dump(mode="json", exclude_none=True), f)


class ConfigManager:
    """Configuration manager for jobwire."""

    def __init__(self, config_path: Path | None = None):
        self.config_path = config_path or Path.home() / ".config" / "jobwire" / "config.toml"
        self._settings: JobWireSettings | None = None

    @property
    def settings(self) -> JobWireSettings:
        """Current settings, loaded on first access."""
        if self._settings is None:
            self.load()
        return self._settings

    def load(self) -> JobWireSettings:
        """Load settings from the config file when present, else from the environment."""
        if self.config_path.exists():
            self._settings = JobWireSettings.load_from_file(self.config_path)
        else:
            self._settings = JobWireSettings()
        return self._settings

    def update(self, **kwargs: Any) -> JobWireSettings:
        """Return and keep a copy of the settings with ``kwargs`` applied."""
        self._settings = self.settings.model_copy(update=kwargs)
        return self._settings

    def save(self) -> None:
        self.settings.save_to_file(self.config_path)

    def reset(self) -> None:
        self._settings = JobWireSettings()


_config_manager: ConfigManager | None = None


def get_config_manager() -> ConfigManager:
    """Get global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def get_settings() -> JobWireSettings:
    """Get current settings."""
    return get_config_manager().settings
