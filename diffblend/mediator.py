"""Holds a buffer of loaded frames and runs the selected blend over it."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path
from urllib.parse import unquote, urlparse
from urllib.request import url2pathname

from PIL import Image

from diffblend.blender import BlendMode, blend

__all__ = ["Mediator"]

logger = logging.getLogger(__name__)

IMAGE_SUFFIXES = (".png", ".jpg", ".jpeg", ".bmp", ".gif")


def _local_path(entry: str | os.PathLike[str]) -> Path:
    """Turn a path or a ``file:`` URL into a local filesystem path."""
    if isinstance(entry, str) and entry.startswith("file:"):
        parsed = urlparse(entry)
        return Path(url2pathname(unquote(parsed.path)))
    return Path(entry)


def _open_image(path: Path) -> Image.Image | None:
    try:
        with Image.open(path) as image:
            image.load()
            return image.copy()
    except (OSError, ValueError):
        logger.debug("Failed to load image: %s", path)
        return None


class Mediator:
    """Loads frames into a buffer and blends them with a chosen threshold."""

    def __init__(self, threshold: int = 30) -> None:
        self.threshold = threshold
        self._images: list[Image.Image] = []

    @property
    def images(self) -> tuple[Image.Image, ...]:
        """The frames currently held, in load order."""
        return tuple(self._images)

    def load_images(self, paths: Iterable[str | os.PathLike[str]]) -> int:
        """Replace the buffer with the images at ``paths``; unreadable files are skipped.

        Returns the number of images loaded.
        """
        self._images.clear()
        for entry in paths:
            image = _open_image(_local_path(entry))
            if image is not None:
                self._images.append(image)
        return len(self._images)

    def set_threshold(self, value: int) -> None:
        """Change the threshold used by the thresholded modes."""
        self.threshold = value

    def process(self, mode: BlendMode | int = BlendMode.TRAIL_V4_FAST) -> Image.Image:
        """Blend the buffered frames with the algorithm selected by ``mode``.

        Raises ``ValueError`` when the buffer is empty or the mode is unknown.
        """
        return blend(self._images, mode, self.threshold)