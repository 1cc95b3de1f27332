"""Cover asset enumeration."""

from __future__ import annotations

from collections.abc import Iterable
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = ("jpeg", "jpg", "png", "webp", "tif", "tiff")


def list_cover_assets(
    directory: Path, extensions: Iterable[str] = SUPPORTED_EXTENSIONS
) -> list[str]:
    """Return basenames of the image files directly inside ``directory``.

    Matches like the glob ``*.<ext>``: extensions are case-sensitive and
    hidden files (leading dot) are skipped. Names are returned without
    directory or extension, ordered by file name.

    Args:
        directory: Directory holding cover images
        extensions: Accepted file extensions, without the leading dot

    Returns:
        Asset basenames (e.g., ["laptop-view", "sea-view"])
    """
    allowed = set(extensions)
    if not directory.is_dir():
        logger.warning("Cover asset directory not found: %s", directory)
        return []

    covers = [
        path.stem
        for path in sorted(directory.iterdir(), key=lambda p: p.name)
        if path.is_file()
        and not path.name.startswith(".")
        and path.suffix[1:] in allowed
    ]
    logger.debug("Found %d cover assets in %s", len(covers), directory)
    return covers
