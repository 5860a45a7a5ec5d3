"""Presstrack configuration loading."""

from presstrack.config.settings import (
    CommandSettings,
    ConfigError,
    ConsoleSettings,
    LogLevel,
    PresstrackConfig,
    load_config,
)

__all__ = [
    "CommandSettings",
    "ConfigError",
    "ConsoleSettings",
    "LogLevel",
    "PresstrackConfig",
    "load_config",
]
