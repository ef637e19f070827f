"""Serialize a FeedDocument to podcast RSS with feedgen."""

import logging
from pathlib import Path

from feedgen.feed import FeedGenerator

from mdcast.feeds.models import FeedDocument
from mdcast.utils.errors import FeedWriteError

logger = logging.getLogger(__name__)


class FeedWriter:
    """Render feed documents as RSS 2.0 with itunes extensions.

    Example:
        >>> writer = FeedWriter()
        >>> writer.write(document, Path("eps/feed.xml"))
    """

    def __init__(self, generator: str | None = None) -> None:
        """Initialize the writer.

        Args:
            generator: Value for the channel <generator> element (feedgen's
                own default when None)
        """
        self.generator = generator

    def build(self, document: FeedDocument) -> FeedGenerator:
        """Map a FeedDocument onto a FeedGenerator."""
        fg = FeedGenerator()
        fg.load_extension("podcast")

        fg.title(document.title)
        fg.link(href=document.link)
        # RSS requires a non-empty channel description
        fg.description(document.description_html or document.title)
        if self.generator:
            fg.generator(self.generator)

        if document.author:
            fg.podcast.itunes_author(document.author)
        if document.description_html:
            fg.podcast.itunes_summary(document.description_html)

        for item in document.items:
            fe = fg.add_entry(order="append")
            # feedgen rejects items with neither title nor description
            fe.title(item.title or item.directory)
            fe.guid(item.content_id, permalink=False)
            fe.pubDate(item.published)
            fe.enclosure(url=item.media_url, length=str(item.media_length), type=item.media_type)

            if item.description_html:
                fe.description(item.description_html)
                fe.podcast.itunes_summary(item.description_html)
            if item.author:
                fe.podcast.itunes_author(item.author)

        return fg

    def render(self, document: FeedDocument) -> bytes:
        """Serialize the document to XML bytes.

        Raises:
            FeedWriteError: If the feed cannot be serialized
        """
        try:
            return self.build(document).rss_str(pretty=True)
        except (ValueError, TypeError) as e:
            raise FeedWriteError(f"error making podcast feed: {e}") from e

    def write(self, document: FeedDocument, path: Path) -> Path:
        """Serialize the document and write it to ``path``.

        Returns:
            The written path

        Raises:
            FeedWriteError: If serialization or the file write fails
        """
        xml = self.render(document)

        try:
            with open(path, "wb") as f:
                f.write(xml)
        except OSError as e:
            raise FeedWriteError(f"error writing feed to '{path}': {e}") from e

        logger.debug("Wrote %d bytes to %s", len(xml), path)
        return path
