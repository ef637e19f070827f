"""Custom exceptions for mdcast."""

from pathlib import Path


class MdcastError(Exception):
    """Base exception for all mdcast errors."""

    pass


class ConfigError(MdcastError):
    """Configuration-related errors."""

    pass


class InvalidConfigError(ConfigError):
    """Invalid configuration data."""

    pass


class DescriptorError(MdcastError):
    """Descriptor file errors (podcast.md, episode.md)."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class DescriptorNotFoundError(DescriptorError):
    """Descriptor file missing or unreadable."""

    pass


class InvalidDescriptorError(DescriptorError):
    """Descriptor preamble is malformed or missing required keys."""

    pass


class EpisodeDirectoryError(MdcastError):
    """Episodes directory cannot be read."""

    pass


class EpisodeSkipped(MdcastError):
    """An episode directory was excluded from the feed.

    Raised by the episode builder and caught by the orchestrator; never
    fatal for the run.
    """

    def __init__(self, directory: str, reason: str) -> None:
        super().__init__(f"skipping episode '{directory}': {reason}")
        self.directory = directory
        self.reason = reason


class FeedWriteError(MdcastError):
    """Feed serialization or output file errors."""

    pass
