"""Bauhaus: background, bar, circle and line with independent jitter."""

from __future__ import annotations

from dataclasses import dataclass

from sigma_avatars.engine.canvas import frame
from sigma_avatars.engine.context import RenderContext
from sigma_avatars.engine.registry import variant
from sigma_avatars.engine.seed import get_boolean, get_unit
from sigma_avatars.engine.transforms import compose, rotate, translate
from sigma_avatars.models.avatar import Variant
from sigma_avatars.models.svg_document import SvgDocument, el

SIZE = 80
ELEMENTS = 4


@dataclass(frozen=True)
class Shape:
    color: str
    translate_x: int
    translate_y: int
    rotate: int
    is_square: bool


def shapes(ctx: RenderContext) -> list[Shape]:
    n = ctx.seed
    out = []
    for i in range(ELEMENTS):
        k = n * (i + 1)
        spread = SIZE // 2 - (i + 17)
        out.append(Shape(
            color=ctx.color(n + i),
            translate_x=get_unit(k, spread, 1),
            translate_y=get_unit(k, spread, 2),
            rotate=get_unit(k, 360),
            is_square=get_boolean(n, 2),
        ))
    return out


@variant(Variant.BAUHAUS, canvas=SIZE, description="Constructivist shapes")
def bauhaus(ctx: RenderContext) -> SvgDocument:
    bg, bar, dot, line = shapes(ctx)
    centre = SIZE // 2
    f = frame(ctx, SIZE)
    f.add(
        f.full_rect(bg.color),
        el(
            "rect",
            {
                "x": (SIZE - 60) // 2,
                "y": (SIZE - 20) // 2,
                "width": SIZE,
                "height": SIZE if bar.is_square else SIZE // 8,
                "transform": compose(translate(bar.translate_x, bar.translate_y), rotate(bar.rotate, centre, centre)),
            },
            {"fill": bar.color},
        ),
        el(
            "circle",
            {"cx": centre, "cy": centre, "r": SIZE // 5, "transform": translate(dot.translate_x, dot.translate_y)},
            {"fill": dot.color},
        ),
        el(
            "line",
            {
                "x1": 0,
                "y1": centre,
                "x2": SIZE,
                "y2": centre,
                "stroke-width": 2,
                "transform": compose(translate(line.translate_x, line.translate_y), rotate(line.rotate, centre, centre)),
            },
            {"stroke": line.color},
        ),
    )
    return f.finish()
