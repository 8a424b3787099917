"""Tests for PixelBuffer validation."""

from __future__ import annotations

import numpy as np
import pytest

from rasterrect.engine.buffer import PixelBuffer
from rasterrect.engine.errors import InvalidInputError


def test_from_array_dimensions():
    buf = PixelBuffer.from_array(np.zeros((3, 5, 4), dtype=np.uint8))
    assert buf.width == 5
    assert buf.height == 3


def test_buffer_is_read_only():
    buf = PixelBuffer.from_array(np.zeros((2, 2, 4), dtype=np.uint8))
    with pytest.raises(ValueError):
        buf.pixels[0, 0, 0] = 1


def test_source_array_not_shared():
    src = np.zeros((2, 2, 4), dtype=np.uint8)
    buf = PixelBuffer.from_array(src)
    src[0, 0, 0] = 9
    assert buf.pixels[0, 0, 0] == 0


def test_rgb_gets_opaque_alpha():
    buf = PixelBuffer.from_array(np.full((2, 2, 3), 7, dtype=np.uint8))
    assert buf.pixels.shape == (2, 2, 4)
    assert (buf.pixels[..., 3] == 255).all()


@pytest.mark.parametrize(
    "shape",
    [(0, 4, 4), (4, 0, 4), (2, 2, 0), (2, 2, 2), (2, 2), (2, 2, 4, 1)],
)
def test_malformed_arrays_rejected(shape):
    with pytest.raises(InvalidInputError):
        PixelBuffer.from_array(np.zeros(shape, dtype=np.uint8))


def test_from_bytes():
    data = bytes([255, 0, 0, 255, 0, 255, 0, 128])
    buf = PixelBuffer.from_bytes(2, 1, data)
    assert buf.width == 2
    assert buf.height == 1
    assert tuple(buf.pixels[0, 1]) == (0, 255, 0, 128)


def test_from_bytes_length_mismatch():
    with pytest.raises(InvalidInputError):
        PixelBuffer.from_bytes(2, 2, bytes(8))


def test_from_bytes_empty():
    with pytest.raises(InvalidInputError):
        PixelBuffer.from_bytes(0, 0, b"")


@pytest.mark.parametrize(
    "array",
    [
        np.full((1, 2, 4), 256, dtype=np.int64),
        np.full((1, 2, 4), -1, dtype=np.int16),
        np.full((1, 2, 4), 1.0),
        np.full((1, 2, 3), 0.5, dtype=np.float32),
        np.ones((1, 2, 4), dtype=bool),
    ],
    ids=["above-255", "negative", "float-rgba", "float-rgb", "bool"],
)
def test_non_byte_channels_rejected(array):
    with pytest.raises(InvalidInputError):
        PixelBuffer.from_array(array)


def test_wide_int_within_range_accepted():
    buf = PixelBuffer.from_array(np.full((1, 2, 4), 255, dtype=np.int64))
    assert buf.pixels.dtype == np.uint8
    assert (buf.pixels == 255).all()
