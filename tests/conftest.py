"""Shared test fixtures."""

from __future__ import annotations

import io

import numpy as np
import pytest
from PIL import Image

from rasterrect.engine.buffer import PixelBuffer


RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
BLUE = (0, 0, 255, 255)
CLEAR = (0, 0, 0, 0)


def make_buffer(rows: list[list[tuple[int, int, int, int]]]) -> PixelBuffer:
    """Build a PixelBuffer from nested rows of RGBA tuples."""
    return PixelBuffer.from_array(np.array(rows, dtype=np.uint8))


def solid_buffer(width: int, height: int, rgba: tuple[int, int, int, int] = RED) -> PixelBuffer:
    pixels = np.empty((height, width, 4), dtype=np.uint8)
    pixels[:, :] = rgba
    return PixelBuffer.from_array(pixels)


def palette_buffer(width: int, height: int, seed: int = 0) -> PixelBuffer:
    """Random buffer drawn from a small palette (transparent included)."""
    palette = np.array([RED, GREEN, BLUE, CLEAR, (120, 60, 30, 128)], dtype=np.uint8)
    rng = np.random.default_rng(seed)
    idx = rng.integers(0, len(palette), size=(height, width))
    return PixelBuffer.from_array(palette[idx])


def png_bytes(width: int, height: int, rgba: tuple[int, int, int, int] = RED) -> bytes:
    img = Image.new("RGBA", (width, height), rgba)
    out = io.BytesIO()
    img.save(out, format="PNG")
    return out.getvalue()


@pytest.fixture
def red_pair() -> PixelBuffer:
    """2x1 opaque red buffer."""
    return make_buffer([[RED, RED]])


@pytest.fixture
def palette_20() -> PixelBuffer:
    return palette_buffer(20, 20)


@pytest.fixture
def red_png() -> bytes:
    return png_bytes(4, 3)
