"""Descriptor parsing and markdown rendering."""

from mdcast.content.descriptor import (
    load_episode_metadata,
    load_show,
    parse_descriptor,
    render_markdown,
)

__all__ = ["load_episode_metadata", "load_show", "parse_descriptor", "render_markdown"]
