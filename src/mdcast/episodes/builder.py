"""Build feed items from episode directories."""

import hashlib
import logging
from datetime import datetime, timezone
from pathlib import Path, PurePosixPath

from mdcast.config.schema import BuildSettings
from mdcast.content.descriptor import load_episode_metadata, render_markdown
from mdcast.feeds.models import EpisodeRecord, ShowRecord
from mdcast.utils.errors import DescriptorError, EpisodeSkipped


def compute_content_id(data: bytes) -> str:
    """Return the hex MD5 digest of the audio bytes.

    The digest is only an identifier for the feed item GUID, not a
    security measure.
    """
    return hashlib.md5(data, usedforsecurity=False).hexdigest()


def resolve_author(episode_author: str, show_author: str) -> str:
    """Episode author if set, else the show author."""
    return episode_author or show_author


def media_url(base_url: str, *parts: str) -> str:
    """Join the show base URL and a relative media path with a single slash."""
    path = str(PurePosixPath(*parts)).lstrip("/")
    return f"{base_url.rstrip('/')}/{path}"


class EpisodeBuilder:
    """Turn one episode directory into an EpisodeRecord.

    Example:
        >>> builder = EpisodeBuilder(show, episodes_dir=Path("eps"))
        >>> record = builder.build("e1")
        >>> record.media_url
        'https://x.test/eps/e1/audio.mp3'
    """

    def __init__(
        self,
        show: ShowRecord,
        episodes_dir: Path,
        settings: BuildSettings | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize the builder.

        Args:
            show: Show metadata (base URL, default author)
            episodes_dir: Resolved filesystem path of the episodes directory
            settings: Build settings (defaults if None)
            logger: Logger for per-episode diagnostics
        """
        self.show = show
        self.episodes_dir = episodes_dir
        self.settings = settings or BuildSettings()
        self.logger = logger or logging.getLogger(__name__)

    def build(self, directory: str, now: datetime | None = None) -> EpisodeRecord:
        """Build the record for one episode directory.

        Args:
            directory: Episode directory name (relative to the episodes dir)
            now: Build time, used by the ``"now"`` missing-audio date policy

        Returns:
            The assembled EpisodeRecord

        Raises:
            EpisodeSkipped: If the episode cannot be included in the feed
        """
        episode_dir = self.episodes_dir / directory
        audio_path = episode_dir / self.settings.audio_file
        meta_path = episode_dir / self.settings.episode_file

        audio = self._read_audio(directory, audio_path)
        content_id = compute_content_id(audio or b"")

        try:
            meta, body = load_episode_metadata(meta_path)
        except DescriptorError as e:
            raise EpisodeSkipped(directory, str(e)) from e

        published = self._publication_time(directory, audio_path, meta_path, audio, now)

        return EpisodeRecord(
            directory=directory,
            title=meta.title or directory,
            author=resolve_author(meta.author, self.show.author),
            published=published,
            content_id=content_id,
            media_url=media_url(
                self.show.base_url,
                self.show.episodes_path,
                directory,
                self.settings.audio_file,
            ),
            media_type=self.settings.media_type,
            media_length=len(audio or b""),
            description_html=render_markdown(body),
        )

    def _read_audio(self, directory: str, audio_path: Path) -> bytes | None:
        """Read the whole audio file; None when it is missing and tolerated."""
        try:
            return audio_path.read_bytes()
        except OSError as e:
            if not self.settings.treat_missing_audio_as_empty:
                raise EpisodeSkipped(directory, f"couldn't read audio file '{audio_path}': {e}") from e
            self.logger.debug("No readable audio at %s, hashing empty content", audio_path)
            return None

    def _publication_time(
        self,
        directory: str,
        audio_path: Path,
        meta_path: Path,
        audio: bytes | None,
        now: datetime | None,
    ) -> datetime:
        """Audio mtime, or the configured fallback when the audio is missing."""
        if audio is not None:
            try:
                return _mtime(audio_path)
            except OSError as e:
                raise EpisodeSkipped(directory, f"couldn't stat '{audio_path}': {e}") from e

        policy = self.settings.missing_audio_date
        if policy == "skip":
            raise EpisodeSkipped(directory, f"no audio file at '{audio_path}' to date the episode")
        if policy == "now":
            return now or datetime.now(timezone.utc)

        try:
            return _mtime(meta_path)
        except OSError as e:
            raise EpisodeSkipped(directory, f"couldn't stat '{meta_path}': {e}") from e


def _mtime(path: Path) -> datetime:
    return datetime.fromtimestamp(path.stat().st_mtime, tz=timezone.utc)
