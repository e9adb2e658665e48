"""Pixel: an 8x8 mosaic of seeded palette picks."""

from __future__ import annotations

from sigma_avatars.engine.canvas import frame
from sigma_avatars.engine.context import RenderContext
from sigma_avatars.engine.registry import variant
from sigma_avatars.models.avatar import Variant
from sigma_avatars.models.svg_document import SvgDocument, el

SIZE = 80
CELL = 10
ELEMENTS = 64

# Even columns first, then odd ones
_COLUMNS = (0, 20, 40, 60, 10, 30, 50, 70)


def cell_positions() -> list[tuple[int, int]]:
    """Top row left to right, then each column top to bottom."""
    positions = [(x, 0) for x in _COLUMNS]
    for x in _COLUMNS:
        positions.extend((x, y) for y in range(CELL, SIZE, CELL))
    return positions


def pixel_colors(ctx: RenderContext) -> list[str]:
    return [ctx.color(ctx.seed % (i + 1)) for i in range(ELEMENTS)]


@variant(Variant.PIXEL, canvas=SIZE, description="8x8 color mosaic")
def pixel(ctx: RenderContext) -> SvgDocument:
    f = frame(ctx, SIZE)
    f.body.attributes["shape-rendering"] = "crispEdges"
    for (x, y), color in zip(cell_positions(), pixel_colors(ctx)):
        attrs: dict = {}
        if x:
            attrs["x"] = x
        if y:
            attrs["y"] = y
        attrs.update({"width": CELL, "height": CELL})
        f.add(el("rect", attrs, {"fill": color}))
    return f.finish()
