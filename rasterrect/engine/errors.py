"""Conversion errors."""

from __future__ import annotations


class RasterRectError(Exception):
    """Base class for every error raised by the conversion stack."""


class InvalidInputError(RasterRectError, ValueError):
    """The pixel buffer (or a conversion parameter) is malformed or empty."""


class ConversionFailedError(RasterRectError):
    """The source image could not be decoded into a pixel buffer."""
