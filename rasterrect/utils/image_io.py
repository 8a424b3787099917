"""Image decoding: bytes in, bounded-size RGBA PixelBuffer out.

This is the collaborator that sits in front of the conversion core: it owns
format handling and downsizing so the core only ever sees raw pixels.
"""

from __future__ import annotations

import io
import logging

import numpy as np
from PIL import Image, UnidentifiedImageError

from rasterrect.engine.buffer import PixelBuffer
from rasterrect.engine.errors import ConversionFailedError

logger = logging.getLogger(__name__)

# Longest side allowed before the image is scaled down
DEFAULT_MAX_DIMENSION = 1200


def _round_half_up(value: float) -> int:
    return int(np.floor(value + 0.5))


def fit_within(width: int, height: int, max_dimension: int = DEFAULT_MAX_DIMENSION) -> tuple[int, int]:
    """Scale (width, height) so neither side exceeds ``max_dimension``.

    The longer side becomes exactly ``max_dimension``; the shorter one keeps
    the aspect ratio. Sizes already within bounds are returned unchanged, as
    are all sizes when ``max_dimension <= 0``.
    """
    if max_dimension <= 0 or (width <= max_dimension and height <= max_dimension):
        return width, height

    aspect = width / height
    if width > height:
        return max_dimension, max(1, _round_half_up(max_dimension / aspect))
    return max(1, _round_half_up(max_dimension * aspect)), max_dimension


def decode_image(data: bytes, max_dimension: int = DEFAULT_MAX_DIMENSION) -> PixelBuffer:
    """Decode any Pillow-readable image into an RGBA PixelBuffer."""
    if not data:
        raise ConversionFailedError("Empty image payload")

    try:
        img = Image.open(io.BytesIO(data))
        img.load()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
        raise ConversionFailedError(f"Could not decode image: {e}") from e

    src_w, src_h = img.size
    target = fit_within(src_w, src_h, max_dimension)
    if target != (src_w, src_h):
        logger.info("Resizing %dx%d -> %dx%d", src_w, src_h, target[0], target[1])
        img = img.convert("RGBA").resize(target, Image.Resampling.LANCZOS)

    pixels = np.array(img.convert("RGBA"))
    return PixelBuffer.from_array(pixels)
