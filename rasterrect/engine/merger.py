"""Grouper/Merger: buckets cells by color key and fuses horizontal runs.

Merging is strictly along x within one row. Vertically stacked cells of the
same color stay separate rectangles.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from rasterrect.engine.types import Rect, RectGroups, Sample


def group_samples(samples: Iterable[Sample]) -> RectGroups:
    """Bucket cells by key; key order and in-bucket order follow discovery."""
    groups: RectGroups = {}
    for cell, key in samples:
        groups.setdefault(key, []).append(cell)
    return groups


def merge_row_runs(cells: Iterable[Rect]) -> list[Rect]:
    """Sort cells by (y, x) and merge horizontally adjacent same-row neighbours."""
    ordered = sorted(cells, key=lambda c: (c.y, c.x))
    if not ordered:
        return []

    merged: list[Rect] = []
    current = ordered[0]
    for cell in ordered[1:]:
        if cell.y == current.y and cell.height == current.height and cell.x == current.right:
            current = replace(current, width=current.width + cell.width)
        else:
            merged.append(current)
            current = cell
    merged.append(current)
    return merged


def merge_groups(groups: RectGroups) -> RectGroups:
    return {key: merge_row_runs(cells) for key, cells in groups.items()}
