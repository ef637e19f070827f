"""Feed data models and RSS serialization for mdcast."""

from mdcast.feeds.models import EpisodeMetadata, EpisodeRecord, FeedDocument, ShowRecord
from mdcast.feeds.writer import FeedWriter

__all__ = ["EpisodeMetadata", "EpisodeRecord", "FeedDocument", "FeedWriter", "ShowRecord"]
