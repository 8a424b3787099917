"""Conversion pipeline: Sampler -> Grouper/Merger -> Serializer."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from rasterrect.engine.buffer import PixelBuffer
from rasterrect.engine.config import ConversionConfig
from rasterrect.engine.errors import InvalidInputError
from rasterrect.engine.merger import group_samples, merge_groups
from rasterrect.engine.sampler import sample_cells, select_stride
from rasterrect.models.vector_document import VectorDocument
from rasterrect.svg.serializer import build_document

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    """A finished document plus the numbers the API and CLI report."""

    document: VectorDocument
    stride: int
    sample_count: int
    processing_time_ms: float = 0.0

    @property
    def rect_count(self) -> int:
        return self.document.rect_count

    @property
    def color_count(self) -> int:
        return self.document.color_count


def convert_with_stats(
    buffer: PixelBuffer,
    stride: int | None = None,
    config: ConversionConfig | None = None,
) -> ConversionResult:
    """Run the full conversion and keep per-run statistics."""
    if not isinstance(buffer, PixelBuffer):
        raise InvalidInputError(f"Expected a PixelBuffer, got {type(buffer).__name__}")

    config = config or ConversionConfig()
    if stride is None:
        stride = select_stride(buffer.width, buffer.height, config.stride_divisor)

    start = time.perf_counter()

    t0 = time.perf_counter()
    samples = sample_cells(buffer, stride, config.color_step, config.alpha_steps)
    logger.debug("  sample completed in %.1fms (%d samples)", (time.perf_counter() - t0) * 1000, len(samples))

    t0 = time.perf_counter()
    groups = merge_groups(group_samples(samples))
    logger.debug("  merge completed in %.1fms (%d colors)", (time.perf_counter() - t0) * 1000, len(groups))

    t0 = time.perf_counter()
    document = build_document(buffer.width, buffer.height, groups)
    logger.debug("  serialize completed in %.1fms", (time.perf_counter() - t0) * 1000)

    total = (time.perf_counter() - start) * 1000
    logger.info(
        "Conversion complete: %dx%d stride %d, %d samples -> %d rects in %.0fms",
        buffer.width,
        buffer.height,
        stride,
        len(samples),
        document.rect_count,
        total,
    )
    return ConversionResult(
        document=document,
        stride=stride,
        sample_count=len(samples),
        processing_time_ms=round(total, 1),
    )


def convert(
    buffer: PixelBuffer,
    stride: int | None = None,
    config: ConversionConfig | None = None,
) -> VectorDocument:
    """Convert a pixel buffer into a rectangle-based vector document."""
    return convert_with_stats(buffer, stride, config).document
