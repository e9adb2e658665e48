"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

# Extents below this are treated as zero (a straight-line fractal has no height)
_DEGENERATE_EXTENT = 1e-9


@dataclass(frozen=True)
class BoxFit:
    scale: float
    translate_x: float
    translate_y: float


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def polyline_length(points: NDArray[np.float64]) -> float:
    """Sum of segment lengths along a point sequence."""
    if len(points) < 2:
        return 0.0
    diffs = np.diff(points, axis=0)
    return float(np.sum(np.sqrt(np.sum(diffs**2, axis=1))))


def fit_to_box(
    min_x: float,
    max_x: float,
    min_y: float,
    max_y: float,
    target: float,
    margin: float = 0.95,
) -> BoxFit:
    """Uniform scale + translate that centres a box inside a ``target`` square.

    A zero extent on one axis is ignored; a box with no extent at all keeps
    scale 1 and is simply centred.
    """
    width = max_x - min_x
    height = max_y - min_y
    center_x = (min_x + max_x) / 2
    center_y = (min_y + max_y) / 2

    ratios = [target / extent for extent in (width, height) if extent > _DEGENERATE_EXTENT]
    scale = margin * min(ratios) if ratios else 1.0

    return BoxFit(
        scale=scale,
        translate_x=target / 2 - center_x * scale,
        translate_y=target / 2 - center_y * scale,
    )


def stroke_width_for_coverage(
    length: float,
    target: float,
    coverage: float,
    min_width: float,
    max_width: float,
) -> float:
    """Stroke width giving roughly ``coverage`` ink on a ``target``² canvas."""
    area = target * target
    width = coverage * area / max(1.0, length)
    return clamp(width, min_width, max_width)
