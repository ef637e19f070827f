"""Configuration schema models using Pydantic."""

from typing import Literal

from pydantic import BaseModel

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
MissingAudioDate = Literal["descriptor", "now", "skip"]


class BuildSettings(BaseModel):
    """Settings for a single feed build."""

    # File layout
    descriptor_file: str = "podcast.md"
    audio_file: str = "audio.mp3"
    episode_file: str = "episode.md"
    feed_file: str = "feed.xml"  # Written inside the episodes directory

    media_type: str = "audio/mp3"

    # Behavior
    sort_episodes: bool = True  # False keeps directory listing order
    treat_missing_audio_as_empty: bool = True
    missing_audio_date: MissingAudioDate = "descriptor"

    log_level: LogLevel = "INFO"
