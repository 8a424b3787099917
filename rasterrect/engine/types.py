"""Core value types shared by the sampler, merger and serializer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


class ColorKey(NamedTuple):
    """Quantized color + opacity bucket. Tuple equality drives grouping."""

    red: int
    green: int
    blue: int
    alpha: float

    @property
    def css(self) -> str:
        """CSS color-function form, e.g. ``rgba(254,0,0,1)``."""
        return f"rgba({self.red},{self.green},{self.blue},{_format_alpha(self.alpha)})"


def _format_alpha(alpha: float) -> str:
    # Whole values print without a decimal point: 1 and 0, not 1.0 and 0.0
    if float(alpha).is_integer():
        return str(int(alpha))
    return repr(float(alpha))


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in canvas pixels.

    A freshly sampled rect is a *cell* (``stride x stride``); the merger
    widens cells into merged rects.
    """

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width


class Sample(NamedTuple):
    """One retained grid sample: its cell and its color bucket."""

    cell: Rect
    key: ColorKey


RectGroups = dict[ColorKey, list[Rect]]
