"""Rectangle-based vector document model."""

from __future__ import annotations

from pydantic import BaseModel, Field


class FilledRect(BaseModel):
    model_config = {"frozen": True}

    x: int
    y: int
    width: int
    height: int
    fill: str


class VectorDocument(BaseModel):
    """Canvas size plus an ordered run of filled rectangles. Immutable."""

    model_config = {"frozen": True}

    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    rects: tuple[FilledRect, ...] = ()

    @property
    def rect_count(self) -> int:
        return len(self.rects)

    @property
    def color_count(self) -> int:
        return len({r.fill for r in self.rects})

    def to_svg(self) -> str:
        from rasterrect.svg.serializer import serialize_svg

        return serialize_svg(self)
