"""rasterrect conversion engine."""

from rasterrect.engine.buffer import PixelBuffer
from rasterrect.engine.config import ConversionConfig
from rasterrect.engine.errors import ConversionFailedError, InvalidInputError, RasterRectError
from rasterrect.engine.pipeline import ConversionResult, convert, convert_with_stats
from rasterrect.engine.types import ColorKey, Rect, Sample

__all__ = [
    "PixelBuffer",
    "ConversionConfig",
    "ConversionFailedError",
    "InvalidInputError",
    "RasterRectError",
    "ConversionResult",
    "convert",
    "convert_with_stats",
    "ColorKey",
    "Rect",
    "Sample",
]
