"""Loading, downscaling and caching of images for preview."""

from __future__ import annotations

import io
import math
import os
from pathlib import Path

from PIL import Image

_JPEG_MODES = ("RGB", "L", "CMYK")


def fit_size(
    size: tuple[int, int],
    ratio: tuple[float, float] | None,
    max_width: int,
    max_height: int,
) -> tuple[int, int]:
    """Pixel bounds for an area of ``size`` cells, given the pixels per cell."""
    if ratio is None:
        return max_width, max_height
    w = int(size[0] * ratio[0])
    h = int(size[1] * ratio[1])
    return min(w, max_width), min(h, max_height)


def _round(value: float) -> int:
    return math.floor(value + 0.5)


def _resize(img: Image.Image, width: int, height: int) -> Image.Image:
    """Scale ``img`` to fit in ``width`` x ``height``, keeping its aspect ratio."""
    ratio = min(width / img.width, height / img.height)
    new = (max(_round(img.width * ratio), 1), max(_round(img.height * ratio), 1))
    return img.resize(new, Image.Resampling.BILINEAR)


def _load(data: bytes) -> Image.Image:
    img = Image.open(io.BytesIO(data))
    img.load()
    return img


def crop(
    path: str | os.PathLike[str],
    size: tuple[int, int],
    ratio: tuple[float, float] | None,
    max_width: int,
    max_height: int,
) -> Image.Image:
    """Load an image and shrink it to fit an area of ``size`` cells."""
    w, h = fit_size(size, ratio, max_width, max_height)
    img = _load(Path(path).read_bytes())
    if img.width > w or img.height > h:
        return _resize(img, w, h)
    return img


def precache(data: bytes, cache: str | os.PathLike[str], max_width: int, max_height: int) -> bool:
    """Save a downscaled JPEG of ``data`` to ``cache`` if it exceeds the limits.

    Returns whether anything was written.
    """
    img = _load(data)
    if img.width <= max_width and img.height <= max_height:
        return False
    resized = _resize(img, max_width, max_height)
    if resized.mode not in _JPEG_MODES:
        resized = resized.convert("RGB")
    resized.save(cache, format="JPEG")
    return True


def precache_anyway(
    data: bytes, cache: str | os.PathLike[str], max_width: int, max_height: int
) -> None:
    """Like :func:`precache`, but store the original bytes when not downscaled."""
    try:
        if precache(data, cache, max_width, max_height):
            return
    except (OSError, ValueError):
        pass
    Path(cache).write_bytes(data)