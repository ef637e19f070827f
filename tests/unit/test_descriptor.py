"""Tests for descriptor parsing and the show-metadata loader."""

from pathlib import Path

import pytest

from mdcast.content.descriptor import (
    load_episode_metadata,
    load_show,
    parse_descriptor,
    render_markdown,
)
from mdcast.utils.errors import DescriptorNotFoundError, InvalidDescriptorError


class TestParseDescriptor:
    """Tests for splitting preamble and body."""

    def test_splits_preamble_and_body(self, tmp_path: Path) -> None:
        """Test that the preamble and body are separated."""
        path = tmp_path / "episode.md"
        path.write_text("---\ntitle: Ep1\n---\n\nFirst line.\n\nSecond line.\n")

        metadata, body = parse_descriptor(path)

        assert metadata == {"title": "Ep1"}
        assert body == "First line.\n\nSecond line."

    def test_no_preamble_returns_whole_body(self, tmp_path: Path) -> None:
        """Test a file without front matter."""
        path = tmp_path / "episode.md"
        path.write_text("Just text.\n")

        metadata, body = parse_descriptor(path)

        assert metadata == {}
        assert body == "Just text."

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """Test that a missing file raises DescriptorNotFoundError."""
        path = tmp_path / "podcast.md"

        with pytest.raises(DescriptorNotFoundError, match="podcast.md") as exc_info:
            parse_descriptor(path)

        assert exc_info.value.path == path

    def test_malformed_yaml_raises(self, tmp_path: Path) -> None:
        """Test that broken YAML raises InvalidDescriptorError."""
        path = tmp_path / "podcast.md"
        path.write_text("---\ntitle: [unclosed\n---\n\nBody\n")

        with pytest.raises(InvalidDescriptorError, match="malformed yaml"):
            parse_descriptor(path)

    def test_list_preamble_raises(self, tmp_path: Path) -> None:
        """Test that a preamble which is not a mapping is rejected."""
        path = tmp_path / "episode.md"
        path.write_text("---\n- a\n- b\n---\n\nBody\n")

        with pytest.raises(InvalidDescriptorError, match="expected a mapping"):
            parse_descriptor(path)

    def test_scalar_preamble_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "episode.md"
        path.write_text("---\njust a string\n---\n\nBody\n")

        with pytest.raises(InvalidDescriptorError, match="expected a mapping"):
            parse_descriptor(path)

    def test_empty_preamble(self, tmp_path: Path) -> None:
        path = tmp_path / "episode.md"
        path.write_text("---\n---\n\nBody\n")

        metadata, body = parse_descriptor(path)

        assert metadata == {}
        assert body == "Body"


class TestRenderMarkdown:
    """Tests for markdown rendering."""

    def test_renders_emphasis(self) -> None:
        assert render_markdown("A show about *things*.") == (
            "<p>A show about <em>things</em>.</p>"
        )

    def test_empty_body(self) -> None:
        assert render_markdown("") == ""

    def test_renders_lists(self) -> None:
        html = render_markdown("- one\n- two")
        assert "<ul>" in html
        assert "<li>two</li>" in html


class TestLoadShow:
    """Tests for the show-metadata loader."""

    def test_extracts_four_fields_and_body(self, show_root: Path) -> None:
        """Test that all declared fields and the body are loaded."""
        show, description = load_show(show_root / "podcast.md")

        assert show.title == "My Show"
        assert show.base_url == "https://x.test/"
        assert show.episodes_path == "eps"
        assert show.author == "Alice"
        assert description == "<p>A show about <em>things</em>.</p>"

    def test_author_is_optional(self, tmp_path: Path) -> None:
        """Test that a show without author gets an empty author."""
        path = tmp_path / "podcast.md"
        path.write_text("---\ntitle: T\nbase_url: https://x.test/\nepisodes_path: eps\n---\n")

        show, _ = load_show(path)

        assert show.author == ""

    def test_numeric_title_is_coerced(self, tmp_path: Path) -> None:
        """Test that YAML scalars become strings."""
        path = tmp_path / "podcast.md"
        path.write_text("---\ntitle: 1999\nbase_url: https://x.test/\nepisodes_path: eps\n---\n")

        show, _ = load_show(path)

        assert show.title == "1999"

    def test_missing_required_key_raises(self, tmp_path: Path) -> None:
        """Test that a preamble without episodes_path is rejected."""
        path = tmp_path / "podcast.md"
        path.write_text("---\ntitle: T\nbase_url: https://x.test/\n---\n")

        with pytest.raises(InvalidDescriptorError, match="invalid preamble"):
            load_show(path)

    @pytest.mark.parametrize("key", ["title", "base_url", "episodes_path"])
    def test_blank_required_key_raises(self, tmp_path: Path, key: str) -> None:
        """Test that required keys present without a value are rejected."""
        values = {"title": "T", "base_url": "https://x.test/", "episodes_path": "eps"}
        values[key] = ""
        preamble = "\n".join(f"{k}: {v}" for k, v in values.items())
        path = tmp_path / "podcast.md"
        path.write_text(f"---\n{preamble}\n---\n")

        with pytest.raises(InvalidDescriptorError, match=key):
            load_show(path)

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(DescriptorNotFoundError):
            load_show(tmp_path / "podcast.md")


class TestLoadEpisodeMetadata:
    """Tests for episode descriptors."""

    def test_loads_title_author_and_raw_body(self, tmp_path: Path) -> None:
        path = tmp_path / "episode.md"
        path.write_text("---\ntitle: Ep1\nauthor: Bob\n---\n\n**Notes**\n")

        meta, body = load_episode_metadata(path)

        assert meta.title == "Ep1"
        assert meta.author == "Bob"
        assert body == "**Notes**"

    def test_blank_author_becomes_empty(self, tmp_path: Path) -> None:
        """Test that ``author:`` with no value is treated as empty."""
        path = tmp_path / "episode.md"
        path.write_text("---\ntitle: Ep1\nauthor:\n---\n")

        meta, _ = load_episode_metadata(path)

        assert meta.author == ""

    def test_missing_title_is_empty(self, tmp_path: Path) -> None:
        """Test that a preamble without title still loads."""
        path = tmp_path / "episode.md"
        path.write_text("---\nauthor: Bob\n---\n\nNotes\n")

        meta, body = load_episode_metadata(path)

        assert meta.title == ""
        assert meta.author == "Bob"
        assert body == "Notes"

    def test_body_only_file_loads(self, tmp_path: Path) -> None:
        path = tmp_path / "episode.md"
        path.write_text("Just notes.\n")

        meta, body = load_episode_metadata(path)

        assert meta.title == ""
        assert body == "Just notes."

    def test_non_mapping_preamble_raises(self, tmp_path: Path) -> None:
        """Test that a list preamble is not accepted as metadata."""
        path = tmp_path / "episode.md"
        path.write_text("---\n- a\n- b\n---\n\nBody\n")

        with pytest.raises(InvalidDescriptorError):
            load_episode_metadata(path)
