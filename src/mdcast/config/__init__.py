"""Build settings, config file loading and logging setup."""

from mdcast.config.manager import ConfigManager
from mdcast.config.schema import BuildSettings

__all__ = ["BuildSettings", "ConfigManager"]
