"""Difference-blend trails: accumulate per-pixel change across a sequence of frames."""

from __future__ import annotations

import enum
import logging
import time
from collections.abc import Callable, Sequence
from contextlib import contextmanager
from typing import Iterator

import numpy as np
from PIL import Image

__all__ = [
    "BlendMode",
    "blend",
    "difference_blend_trail",
    "difference_blend_trail_v2",
    "difference_blend_trail_v3",
    "difference_blend_trail_v4",
    "difference_blend_trail_v4_fast",
]

logger = logging.getLogger(__name__)

_OPAQUE_BLACK = (0, 0, 0, 255)
_WHITE = 255


class BlendMode(enum.IntEnum):
    """Blending algorithms, numbered as offered to the user."""

    TRAIL = 0
    TRAIL_V2 = 1
    TRAIL_V3 = 2
    TRAIL_V4 = 3
    TRAIL_V4_FAST = 4


@contextmanager
def _timed(label: str) -> Iterator[None]:
    start = time.perf_counter()
    yield
    logger.debug("%s took %.0f ms", label, (time.perf_counter() - start) * 1000)


def _black_canvas(size: tuple[int, int]) -> np.ndarray:
    width, height = size
    canvas = np.zeros((height, width, 4), dtype=np.uint8)
    canvas[..., 3] = 255
    return canvas


def _rgba(image: Image.Image) -> np.ndarray:
    return np.asarray(image.convert("RGBA"), dtype=np.uint8)


def _frames(images: Sequence[Image.Image]) -> tuple[np.ndarray, list[np.ndarray]] | tuple[np.ndarray, None]:
    """Return the black canvas and the RGBA frames, or no frames when sizes differ."""
    if not images:
        raise ValueError("at least one image is required")
    size = images[0].size
    canvas = _black_canvas(size)
    if any(image.size != size for image in images[1:]):
        logger.warning("Image sizes don't match!")
        return canvas, None
    return canvas, [_rgba(image) for image in images]


def _pairs(frames: list[np.ndarray]) -> Iterator[tuple[np.ndarray, np.ndarray]]:
    return zip(frames, frames[1:])


def _max_channel_trail(images: Sequence[Image.Image]) -> Image.Image:
    canvas, frames = _frames(images)
    if frames is not None:
        for prev, curr in _pairs(frames):
            diff = np.abs(curr[..., :3].astype(np.int16) - prev[..., :3].astype(np.int16))
            np.maximum(canvas[..., :3], diff.astype(np.uint8), out=canvas[..., :3])
    return Image.fromarray(canvas, "RGBA")


def difference_blend_trail(images: Sequence[Image.Image]) -> Image.Image:
    """Keep, per channel, the largest change between consecutive frames."""
    with _timed("difference_blend_trail"):
        return _max_channel_trail(images)


def difference_blend_trail_v2(images: Sequence[Image.Image]) -> Image.Image:
    """Same result as :func:`difference_blend_trail`, computed on whole arrays."""
    with _timed("difference_blend_trail_v2"):
        return _max_channel_trail(images)


def difference_blend_trail_v3(images: Sequence[Image.Image], threshold: int = 60) -> Image.Image:
    """Mark white every pixel whose largest channel change ever exceeded ``threshold``."""
    with _timed("difference_blend_trail_v3"):
        canvas, frames = _frames(images)
        if frames is not None:
            for prev, curr in _pairs(frames):
                diff = np.abs(curr[..., :3].astype(np.int16) - prev[..., :3].astype(np.int16))
                canvas[diff.max(axis=2) > threshold] = _WHITE
        return Image.fromarray(canvas, "RGBA")


def _weighted_gray(frame: np.ndarray) -> np.ndarray:
    rgb = frame[..., :3].astype(np.int32)
    return (rgb[..., 0] * 11 + rgb[..., 1] * 16 + rgb[..., 2] * 5) // 32


def difference_blend_trail_v4(images: Sequence[Image.Image], threshold: int = 15) -> Image.Image:
    """Mark white every pixel whose weighted luminance change ever exceeded ``threshold``."""
    with _timed("difference_blend_trail_v4"):
        canvas, frames = _frames(images)
        if frames is not None:
            grays = [_weighted_gray(frame) for frame in frames]
            for prev, curr in zip(grays, grays[1:]):
                canvas[np.abs(curr - prev) > threshold] = _WHITE
        return Image.fromarray(canvas, "RGBA")


def difference_blend_trail_v4_fast(images: Sequence[Image.Image], threshold: int = 15) -> Image.Image:
    """Copy the newer pixel wherever the mean-of-channels brightness changed by more than ``threshold``."""
    with _timed("difference_blend_trail_v4_fast"):
        canvas, frames = _frames(images)
        if frames is not None:
            for prev, curr in _pairs(frames):
                prev_gray = prev[..., :3].astype(np.int32).sum(axis=2) // 3
                curr_gray = curr[..., :3].astype(np.int32).sum(axis=2) // 3
                changed = np.any(prev != curr, axis=2)
                mask = changed & (np.abs(curr_gray - prev_gray) > threshold)
                canvas[mask] = curr[mask]
        return Image.fromarray(canvas, "RGBA")


_DISPATCH: dict[BlendMode, Callable[[Sequence[Image.Image], int], Image.Image]] = {
    BlendMode.TRAIL: lambda images, _threshold: difference_blend_trail(images),
    BlendMode.TRAIL_V2: lambda images, _threshold: difference_blend_trail_v2(images),
    BlendMode.TRAIL_V3: difference_blend_trail_v3,
    BlendMode.TRAIL_V4: difference_blend_trail_v4,
    BlendMode.TRAIL_V4_FAST: difference_blend_trail_v4_fast,
}


def blend(images: Sequence[Image.Image], mode: BlendMode | int, threshold: int = 30) -> Image.Image:
    """Run the algorithm selected by ``mode``; the threshold is ignored by modes without one."""
    return _DISPATCH[BlendMode(mode)](images, threshold)