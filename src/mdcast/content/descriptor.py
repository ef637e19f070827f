"""Descriptor files: YAML front matter followed by a markdown body.

Both the show descriptor (``podcast.md``) and each episode descriptor
(``episode.md``) use the same layout::

    ---
    title: My Show
    author: Alice
    ---

    Markdown body text.
"""

import logging
from pathlib import Path
from typing import Any

import frontmatter
import markdown
import yaml
from pydantic import ValidationError

from mdcast.feeds.models import EpisodeMetadata, ShowRecord
from mdcast.utils.errors import DescriptorNotFoundError, InvalidDescriptorError

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSIONS = ["extra", "sane_lists"]


def parse_descriptor(path: Path) -> tuple[dict[str, Any], str]:
    """Split a descriptor file into its preamble and body.

    Args:
        path: Descriptor file path

    Returns:
        Tuple of (preamble mapping, body text)

    Raises:
        DescriptorNotFoundError: If the file cannot be read
        InvalidDescriptorError: If the preamble is not valid YAML or not a
            mapping
    """
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise InvalidDescriptorError(f"{path} is not valid UTF-8: {e}", path) from e
    except OSError as e:
        raise DescriptorNotFoundError(f"failed to read {path}: {e}", path) from e

    text = text.strip()
    handler = frontmatter.YAMLHandler()
    if not handler.detect(text):
        return {}, text

    try:
        preamble, body = handler.split(text)
    except ValueError:
        # Opening boundary without a closing one: no preamble
        return {}, text

    try:
        metadata = handler.load(preamble)
    except yaml.YAMLError as e:
        raise InvalidDescriptorError(f"{path} has malformed yaml preamble: {e}", path) from e

    if metadata is None:
        metadata = {}
    if not isinstance(metadata, dict):
        raise InvalidDescriptorError(
            f"{path} has malformed yaml preamble: expected a mapping, "
            f"got {type(metadata).__name__}",
            path,
        )

    return metadata, body.strip()


def render_markdown(text: str) -> str:
    """Render a markdown body to HTML."""
    return markdown.markdown(text, extensions=MARKDOWN_EXTENSIONS)


def load_show(path: Path) -> tuple[ShowRecord, str]:
    """Load the show descriptor.

    Args:
        path: Path to the show descriptor (usually ``podcast.md``)

    Returns:
        Tuple of (ShowRecord, description rendered as HTML)

    Raises:
        DescriptorNotFoundError: If the file cannot be read
        InvalidDescriptorError: If the preamble is malformed or incomplete
    """
    metadata, body = parse_descriptor(path)

    try:
        show = ShowRecord(**metadata)
    except (ValidationError, TypeError) as e:
        raise InvalidDescriptorError(f"{path} has an invalid preamble: {e}", path) from e

    logger.debug("Loaded show '%s' from %s", show.title, path)
    return show, render_markdown(body)


def load_episode_metadata(path: Path) -> tuple[EpisodeMetadata, str]:
    """Load an episode descriptor.

    Args:
        path: Path to ``episode.md``

    Returns:
        Tuple of (EpisodeMetadata, raw markdown body)

    Raises:
        DescriptorNotFoundError: If the file cannot be read
        InvalidDescriptorError: If the preamble is malformed or has no title
    """
    metadata, body = parse_descriptor(path)

    try:
        meta = EpisodeMetadata(**metadata)
    except (ValidationError, TypeError) as e:
        raise InvalidDescriptorError(f"{path} has an invalid preamble: {e}", path) from e

    return meta, body
