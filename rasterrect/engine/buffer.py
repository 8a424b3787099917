"""PixelBuffer: the decoded RGBA raster the conversion core reads."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from rasterrect.engine.errors import InvalidInputError

_RGBA = 4
_RGB = 3


@dataclass(frozen=True)
class PixelBuffer:
    """Immutable row-major RGBA raster, shape ``(height, width, 4)``, uint8."""

    pixels: NDArray[np.uint8]

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @classmethod
    def from_array(cls, array: NDArray) -> PixelBuffer:
        """Validate and freeze an ``(H, W, 4)`` or ``(H, W, 3)`` array.

        RGB input is padded with an opaque alpha channel. Channels must be
        integers in 0..255; the caller's array is never mutated.
        """
        arr = np.asarray(array)
        if arr.ndim != 3:
            raise InvalidInputError(f"Expected a 3-D (H, W, C) array, got shape {arr.shape}")
        if not np.issubdtype(arr.dtype, np.integer):
            raise InvalidInputError(f"Expected integer channel data, got dtype {arr.dtype}")
        if arr.size and (arr.min() < 0 or arr.max() > 255):
            raise InvalidInputError(
                f"Channel values must lie in 0..255, got {arr.min()}..{arr.max()}"
            )

        height, width, channels = arr.shape
        if width == 0 or height == 0:
            raise InvalidInputError(f"Empty pixel buffer: {width}x{height}")
        if channels == _RGB:
            alpha = np.full((height, width, 1), 255, dtype=np.uint8)
            arr = np.concatenate([arr.astype(np.uint8), alpha], axis=2)
        elif channels != _RGBA:
            raise InvalidInputError(f"Expected 3 or 4 color channels, got {channels}")

        pixels = np.array(arr, dtype=np.uint8, copy=True)
        pixels.setflags(write=False)
        return cls(pixels=pixels)

    @classmethod
    def from_bytes(cls, width: int, height: int, data: bytes | bytearray | memoryview) -> PixelBuffer:
        """Build a buffer from a flat RGBA byte sequence (canvas ImageData layout)."""
        if width <= 0 or height <= 0:
            raise InvalidInputError(f"Empty pixel buffer: {width}x{height}")
        expected = width * height * _RGBA
        if len(data) != expected:
            raise InvalidInputError(
                f"RGBA data length {len(data)} does not match {width}x{height}x4 = {expected}"
            )
        flat = np.frombuffer(bytes(data), dtype=np.uint8)
        return cls.from_array(flat.reshape(height, width, _RGBA))
