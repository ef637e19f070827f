"""Data models for shows, episodes and feeds."""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _coerce_text(value: Any) -> Any:
    """YAML preambles turn ``author:`` into None and ``title: 42`` into an int."""
    if value is None:
        return ""
    if isinstance(value, (int, float, date)) and not isinstance(value, bool):
        return str(value)
    return value


class ShowRecord(BaseModel):
    """Podcast-wide metadata from the show descriptor preamble."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., min_length=1)
    base_url: str = Field(..., min_length=1)
    episodes_path: str = Field(..., min_length=1)
    author: str = ""

    @field_validator("title", "base_url", "episodes_path", "author", mode="before")
    @classmethod
    def coerce_text_fields(cls, value: Any) -> Any:
        return _coerce_text(value)


class EpisodeMetadata(BaseModel):
    """Preamble of a single ``episode.md``."""

    title: str = ""  # Builder falls back to the directory name
    author: str = ""

    @field_validator("title", "author", mode="before")
    @classmethod
    def coerce_text_fields(cls, value: Any) -> Any:
        return _coerce_text(value)


class EpisodeRecord(BaseModel):
    """One feed item, built from an episode directory."""

    model_config = ConfigDict(frozen=True)

    directory: str = Field(..., description="Episode directory name")
    title: str
    author: str
    published: datetime
    content_id: str = Field(..., description="Hex MD5 of the audio bytes, used as GUID")
    media_url: str
    media_type: str = "audio/mp3"
    media_length: int = Field(0, ge=0)
    description_html: str = ""


class FeedDocument(BaseModel):
    """The assembled feed: channel fields plus items in scan order."""

    title: str
    description_html: str
    link: str
    author: str = ""
    items: list[EpisodeRecord] = Field(default_factory=list)

    def add_item(self, item: EpisodeRecord) -> None:
        """Append an item, preserving insertion order."""
        self.items.append(item)

    @classmethod
    def for_show(cls, show: ShowRecord, description_html: str) -> "FeedDocument":
        """Create an empty feed document for a show."""
        return cls(
            title=show.title,
            description_html=description_html,
            link=show.base_url,
            author=show.author,
        )
