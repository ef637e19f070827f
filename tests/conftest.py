"""Shared fixtures for mdcast tests."""

from pathlib import Path

import pytest

SHOW_DESCRIPTOR = """\
---
title: My Show
base_url: https://x.test/
episodes_path: eps
author: Alice
---

A show about *things*.
"""


def write_episode(
    episodes_dir: Path,
    name: str,
    title: str | None = None,
    author: str | None = None,
    body: str = "Episode notes.",
    audio: bytes | None = None,
) -> Path:
    """Create an episode directory; ``title=None`` leaves out episode.md."""
    episode_dir = episodes_dir / name
    episode_dir.mkdir(parents=True)

    if title is not None:
        preamble = [f"title: {title}"]
        if author is not None:
            preamble.append(f"author: {author}")
        (episode_dir / "episode.md").write_text(
            "---\n" + "\n".join(preamble) + "\n---\n\n" + body + "\n"
        )

    if audio is not None:
        (episode_dir / "audio.mp3").write_bytes(audio)

    return episode_dir


@pytest.fixture
def show_root(tmp_path: Path) -> Path:
    """Project root with podcast.md and an empty eps/ directory."""
    (tmp_path / "podcast.md").write_text(SHOW_DESCRIPTOR)
    (tmp_path / "eps").mkdir()
    return tmp_path


@pytest.fixture
def sample_show(show_root: Path) -> Path:
    """Show with e1 (complete), e2 (no audio) and e3 (no episode.md)."""
    eps = show_root / "eps"
    write_episode(eps, "e1", title="Ep1", audio=b"AB")
    write_episode(eps, "e2", title="Ep2", author="Bob")
    write_episode(eps, "e3", audio=b"orphan audio")
    return show_root


@pytest.fixture
def make_episode():
    """Factory fixture wrapping write_episode."""
    return write_episode
