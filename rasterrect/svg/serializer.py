"""Write SVG output from merged rectangle groups."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rasterrect.models.vector_document import FilledRect, VectorDocument

if TYPE_CHECKING:
    from rasterrect.engine.types import RectGroups

SVG_NS = "http://www.w3.org/2000/svg"


def build_document(width: int, height: int, groups: RectGroups) -> VectorDocument:
    """One filled rect per merged rect, colors in first-seen order."""
    rects = tuple(
        FilledRect(x=r.x, y=r.y, width=r.width, height=r.height, fill=key.css)
        for key, merged in groups.items()
        for r in merged
    )
    return VectorDocument(width=width, height=height, rects=rects)


def serialize_svg(document: VectorDocument) -> str:
    """Generate SVG markup declaring the canvas size and every rectangle."""
    w, h = document.width, document.height
    lines = [
        '<?xml version="1.0" encoding="UTF-8" standalone="no"?>',
        f'<svg width="{w}" height="{h}" xmlns="{SVG_NS}" viewBox="0 0 {w} {h}">',
    ]

    for rect in document.rects:
        lines.append(
            f'  <rect x="{rect.x}" y="{rect.y}" width="{rect.width}"'
            f' height="{rect.height}" fill="{rect.fill}" />'
        )

    lines.append("</svg>")
    return "\n".join(lines)
