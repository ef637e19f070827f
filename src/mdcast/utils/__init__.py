"""Utility functions and helpers for mdcast."""

from mdcast.utils.errors import (
    ConfigError,
    DescriptorError,
    DescriptorNotFoundError,
    EpisodeDirectoryError,
    EpisodeSkipped,
    FeedWriteError,
    InvalidConfigError,
    InvalidDescriptorError,
    MdcastError,
)

__all__ = [
    "MdcastError",
    "ConfigError",
    "InvalidConfigError",
    "DescriptorError",
    "DescriptorNotFoundError",
    "InvalidDescriptorError",
    "EpisodeDirectoryError",
    "EpisodeSkipped",
    "FeedWriteError",
]
