"""Sampler: walks the pixel buffer on a fixed stride and emits color-keyed cells.

Only the anchor pixel at each ``(x, y)`` grid point is read. Cells are never
clipped: a cell on the right or bottom edge may extend past the buffer.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from rasterrect.engine.buffer import PixelBuffer
from rasterrect.engine.errors import InvalidInputError
from rasterrect.engine.types import ColorKey, Rect, Sample

_MAX_CHANNEL = 255


def select_stride(width: int, height: int, divisor: int = 400) -> int:
    """Grid spacing that keeps the sample count roughly bounded."""
    return max(1, min(width, height) // divisor)


def quantize_channels(values: ArrayLike, step: int = 2) -> NDArray[np.int64]:
    """Snap color channels down to a multiple of ``step``.

    Rounding down keeps every channel within 0..254, so 255 becomes 254 and
    never the invalid 256 that half-up rounding would produce.
    """
    return (np.asarray(values, dtype=np.int64) // step) * step


def alpha_levels(alpha: ArrayLike, steps: int = 20) -> NDArray[np.int64]:
    """Index of ``alpha / 255`` rounded half-up onto a ``1/steps`` grid."""
    # floor(a / 255 * steps + 0.5) in integer arithmetic
    a = np.asarray(alpha, dtype=np.int64)
    return (2 * a * steps + _MAX_CHANNEL) // (2 * _MAX_CHANNEL)


def quantize_channel(value: int, step: int = 2) -> int:
    return int(quantize_channels(value, step))


def quantize_alpha(alpha: int, steps: int = 20) -> float:
    return int(alpha_levels(alpha, steps)) / steps


def quantize(r: int, g: int, b: int, a: int, step: int = 2, alpha_steps: int = 20) -> ColorKey | None:
    """Color key for one pixel, or ``None`` for a fully transparent pixel."""
    if a == 0:
        return None
    red, green, blue = quantize_channels([r, g, b], step).tolist()
    return ColorKey(red, green, blue, quantize_alpha(a, alpha_steps))


def sample_cells(
    buffer: PixelBuffer,
    stride: int,
    step: int = 2,
    alpha_steps: int = 20,
) -> list[Sample]:
    """Row-major list of ``(cell, key)`` samples; transparent anchors are dropped."""
    if stride < 1:
        raise InvalidInputError(f"Stride must be >= 1, got {stride}")
    if step < 1 or alpha_steps < 1:
        raise InvalidInputError(f"Quantization steps must be >= 1, got {step}/{alpha_steps}")

    grid = buffer.pixels[::stride, ::stride].astype(np.int64)
    alpha = grid[..., 3]

    # np.nonzero walks in C order, i.e. row by row, left to right
    rows, cols = np.nonzero(alpha)
    if len(rows) == 0:
        return []

    kept = grid[rows, cols]
    rgb = quantize_channels(kept[:, :3], step)
    alpha_k = alpha_levels(kept[:, 3], alpha_steps)

    samples: list[Sample] = []
    for row, col, (r, g, b), k in zip(rows.tolist(), cols.tolist(), rgb.tolist(), alpha_k.tolist()):
        cell = Rect(x=col * stride, y=row * stride, width=stride, height=stride)
        samples.append(Sample(cell, ColorKey(r, g, b, k / alpha_steps)))
    return samples
