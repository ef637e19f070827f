"""Feed build pipeline.

One linear pass: load the show descriptor, scan episode directories, build
a record per directory, then assemble and write the feed. Setup and output
failures propagate to the caller; per-episode failures are logged and
recorded as skips.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path

from pydantic import BaseModel, Field

from mdcast.config.schema import BuildSettings
from mdcast.content.descriptor import load_show
from mdcast.episodes.builder import EpisodeBuilder
from mdcast.episodes.scanner import scan_episode_dirs
from mdcast.feeds.models import FeedDocument, ShowRecord
from mdcast.feeds.writer import FeedWriter
from mdcast.utils.errors import EpisodeSkipped


class SkippedEpisode(BaseModel):
    """An episode directory left out of the feed."""

    directory: str
    reason: str


class BuildResult(BaseModel):
    """Outcome of a pipeline run."""

    show: ShowRecord
    document: FeedDocument
    feed_path: Path | None = Field(None, description="Written feed, None for previews")
    skipped: list[SkippedEpisode] = Field(default_factory=list)

    @property
    def episode_count(self) -> int:
        return len(self.document.items)


class PipelineOrchestrator:
    """Run the descriptor-to-feed build.

    Example:
        >>> orchestrator = PipelineOrchestrator(BuildSettings())
        >>> result = orchestrator.run(Path("."))
        >>> result.feed_path
        PosixPath('eps/feed.xml')
    """

    def __init__(
        self,
        settings: BuildSettings | None = None,
        logger: logging.Logger | None = None,
        writer: FeedWriter | None = None,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            settings: Build settings (defaults if None)
            logger: Logger scoped to this run (module logger if None)
            writer: Feed writer (creates one if None)
        """
        self.settings = settings or BuildSettings()
        self.logger = logger or logging.getLogger(__name__)
        self.writer = writer or FeedWriter()

    def run(self, root: Path) -> BuildResult:
        """Build the feed and write it into the episodes directory.

        Args:
            root: Directory containing the show descriptor

        Returns:
            BuildResult with the feed path and any skipped episodes

        Raises:
            DescriptorError: If the show descriptor is missing or malformed
            EpisodeDirectoryError: If the episodes directory can't be read
            FeedWriteError: If the feed can't be serialized or written
        """
        result = self.preview(root)

        out = self.episodes_dir(root, result.show) / self.settings.feed_file
        result.feed_path = self.writer.write(result.document, out)

        self.logger.info("feed generated at %s", out)
        return result

    def preview(self, root: Path) -> BuildResult:
        """Load, scan and build every episode without writing the feed."""
        descriptor = root / self.settings.descriptor_file
        show, description_html = load_show(descriptor)
        self.logger.debug("Building feed for '%s'", show.title)

        episodes_dir = self.episodes_dir(root, show)
        names = scan_episode_dirs(episodes_dir, sort=self.settings.sort_episodes)
        self.logger.debug("Found %d episode directories in %s", len(names), episodes_dir)

        builder = EpisodeBuilder(show, episodes_dir, self.settings, logger=self.logger)
        document = FeedDocument.for_show(show, description_html)
        skipped: list[SkippedEpisode] = []
        now = datetime.now(timezone.utc)

        for name in names:
            try:
                record = builder.build(name, now=now)
            except EpisodeSkipped as e:
                self.logger.warning("%s", e)
                skipped.append(SkippedEpisode(directory=e.directory, reason=e.reason))
                continue

            document.add_item(record)
            self.logger.debug("Added episode '%s' (%s)", record.title, record.content_id)

        return BuildResult(show=show, document=document, skipped=skipped)

    @staticmethod
    def episodes_dir(root: Path, show: ShowRecord) -> Path:
        """Filesystem location of the show's episodes directory."""
        return root / show.episodes_path
