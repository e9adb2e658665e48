"""Ring: paired half-disc bands around a centre dot."""

from __future__ import annotations

from sigma_avatars.engine.canvas import frame
from sigma_avatars.engine.context import RenderContext
from sigma_avatars.engine.registry import variant
from sigma_avatars.models.avatar import Variant
from sigma_avatars.models.svg_document import SvgDocument, el

SIZE = 90
PICKS = 5

# Region index -> pick index
COLOR_MAP = (0, 1, 1, 2, 2, 3, 3, 0, 4)

REGIONS = (
    "M0 0h90v45H0z",
    "M0 45h90v45H0z",
    "M83 45a38 38 0 00-76 0h76z",
    "M83 45a38 38 0 01-76 0h76z",
    "M77 45a32 32 0 10-64 0h64z",
    "M77 45a32 32 0 11-64 0h64z",
    "M71 45a26 26 0 00-52 0h52z",
    "M71 45a26 26 0 01-52 0h52z",
)


def ring_colors(ctx: RenderContext) -> list[str]:
    picks = [ctx.color(ctx.seed + i) for i in range(PICKS)]
    return [picks[i] for i in COLOR_MAP]


@variant(Variant.RING, canvas=SIZE, description="Concentric arcs")
def ring(ctx: RenderContext) -> SvgDocument:
    colors = ring_colors(ctx)
    f = frame(ctx, SIZE)
    for d, color in zip(REGIONS, colors):
        f.add(el("path", {"d": d}, {"fill": color}))
    f.add(el("circle", {"cx": SIZE // 2, "cy": SIZE // 2, "r": 23}, {"fill": colors[-1]}))
    return f.finish()
