"""Conversion configuration: sampling and quantization knobs."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ConversionConfig:
    """Controls grid density and color bucketing."""

    # Stride = max(1, min(W, H) // stride_divisor).
    # Shorter side <= 400px samples every pixel.
    stride_divisor: int = 400

    # Color channels snap to multiples of this step
    color_step: int = 2

    # Opacity snaps to 1/alpha_steps increments
    alpha_steps: int = 20
