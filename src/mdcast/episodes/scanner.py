"""Enumerate episode subdirectories."""

import os
from pathlib import Path

from mdcast.utils.errors import EpisodeDirectoryError


def scan_episode_dirs(episodes_dir: Path, sort: bool = True) -> list[str]:
    """List the names of immediate subdirectories of ``episodes_dir``.

    Regular files (including a previously generated feed) are ignored.

    Args:
        episodes_dir: Directory holding one subdirectory per episode
        sort: Sort names lexicographically. When False, the order is
            whatever the directory listing returns.

    Returns:
        Episode directory names

    Raises:
        EpisodeDirectoryError: If the directory cannot be read
    """
    try:
        with os.scandir(episodes_dir) as entries:
            names = [entry.name for entry in entries if entry.is_dir()]
    except OSError as e:
        raise EpisodeDirectoryError(
            f"failed to read directory '{episodes_dir}': {e}"
        ) from e

    if sort:
        names.sort()
    return names
