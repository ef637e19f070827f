"""Episode directory scanning and record building."""

from mdcast.episodes.builder import EpisodeBuilder, compute_content_id, resolve_author
from mdcast.episodes.scanner import scan_episode_dirs

__all__ = ["EpisodeBuilder", "compute_content_id", "resolve_author", "scan_episode_dirs"]
