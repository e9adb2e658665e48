"""Sunset: two stacked vertical gradients."""

from __future__ import annotations

from sigma_avatars.engine.canvas import frame
from sigma_avatars.engine.context import RenderContext
from sigma_avatars.engine.registry import variant
from sigma_avatars.models.avatar import Variant
from sigma_avatars.models.svg_document import SvgDocument, SvgElement, el

SIZE = 80
ELEMENTS = 4


def _gradient(gradient_id: str, y1: float, y2: float, top: str, bottom: str) -> SvgElement:
    return el(
        "linearGradient",
        {"id": gradient_id, "gradientUnits": "userSpaceOnUse", "x1": SIZE // 2, "x2": SIZE // 2, "y1": y1, "y2": y2},
        children=[
            el("stop", {"offset": 0}, {"stop-color": top}),
            el("stop", {"offset": 1}, {"stop-color": bottom}),
        ],
    )


@variant(Variant.SUNSET, canvas=SIZE, description="Two-band gradient")
def sunset(ctx: RenderContext) -> SvgDocument:
    colors = [ctx.color(ctx.seed + i) for i in range(ELEMENTS)]
    upper, lower = ctx.id("sunset-upper"), ctx.id("sunset-lower")
    f = frame(ctx, SIZE)
    f.define(
        _gradient(upper, 0, SIZE // 2, colors[0], colors[1]),
        _gradient(lower, SIZE // 2, SIZE, colors[2], colors[3]),
    )
    f.add(
        el("path", {"d": "M0 0h80v40H0z", "fill": f"url(#{upper})"}),
        el("path", {"d": "M0 40h80v40H0z", "fill": f"url(#{lower})"}),
    )
    return f.finish()
