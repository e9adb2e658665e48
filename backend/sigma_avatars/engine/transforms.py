"""SVG transform strings built from seeded values."""

from __future__ import annotations

from sigma_avatars.engine.seed import get_unit
from sigma_avatars.svg.serializer import format_number as fmt


def translate(x: float, y: float, sep: str = " ") -> str:
    return f"translate({fmt(x)}{sep}{fmt(y)})"


def rotate(angle: float, cx: float | None = None, cy: float | None = None) -> str:
    if cx is None or cy is None:
        return f"rotate({fmt(angle)})"
    return f"rotate({fmt(angle)} {fmt(cx)} {fmt(cy)})"


def scale(factor: float) -> str:
    return f"scale({fmt(factor)})"


def compose(*parts: str) -> str:
    return " ".join(p for p in parts if p)


def organic_transform(seed: int, size: float, index: int = 0) -> str:
    """Jittered translate + rotate + scale about the canvas centre.

    Offsets are signed fractions of a tenth of the canvas; scale is always a
    little above 1.2 so shapes overfill the canvas edge.
    """
    k = seed * (index + 1)
    tx = get_unit(k, size / 10, 1)
    ty = get_unit(k, size / 10, 2)
    factor = 1.2 + get_unit(k, size / 20) / 10
    angle = get_unit(k, 360, 1)
    return compose(translate(tx, ty), rotate(angle, size / 2, size / 2), scale(factor))
