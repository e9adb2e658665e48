"""Barcode: vertical stripes from a seeded subset of the palette."""

from __future__ import annotations

from dataclasses import dataclass

from sigma_avatars.engine.canvas import frame
from sigma_avatars.engine.context import RenderContext
from sigma_avatars.engine.registry import variant
from sigma_avatars.engine.seed import get_boolean
from sigma_avatars.models.avatar import Variant
from sigma_avatars.models.svg_document import SvgDocument, el

SIZE = 80
MIN_STRIPE_WIDTH = 1
MAX_STRIPE_WIDTH = 8
WIDTH_PRIME = 997
COLOR_PRIME = 1009

# seed % 8 -> palette indices; None means the whole palette
COLOR_SUBSETS: tuple[tuple[int, ...] | None, ...] = (
    (0, 1),
    (3, 4),
    (1, 2, 3),
    (0, 2, 4),
    (0, 1, 4),
    None,
    (1, 2, 3),
    (0, 3, 4),
)


@dataclass
class Stripe:
    x: int
    width: int
    color: str


def active_colors(ctx: RenderContext) -> list[str]:
    subset = COLOR_SUBSETS[abs(ctx.seed) % len(COLOR_SUBSETS)]
    if subset is None:
        return list(ctx.colors)
    return [ctx.at(i) for i in subset]


def stripes(ctx: RenderContext) -> tuple[list[Stripe], str]:
    """Stripes left to right plus the least used active color for the background."""
    n = ctx.seed
    active = active_colors(ctx)
    alternating = get_boolean(n, 2)
    out: list[Stripe] = []
    x = i = 0
    while x < SIZE:
        width_seed = n + i * WIDTH_PRIME
        if i % 3 == 0:
            width = MIN_STRIPE_WIDTH + abs(width_seed) % (MAX_STRIPE_WIDTH * 2 - MIN_STRIPE_WIDTH)
        else:
            width = MIN_STRIPE_WIDTH + abs(width_seed) % (MAX_STRIPE_WIDTH - MIN_STRIPE_WIDTH)
        width = min(width, SIZE - x)
        if alternating:
            color = active[i % 2 % len(active)]
        else:
            color = active[abs(n + i * COLOR_PRIME) % len(active)]

        if out and out[-1].color == color:
            out[-1].width += width
        else:
            out.append(Stripe(x=x, width=width, color=color))
        x += width
        i += 1

    usage: dict[str, int] = {}
    for stripe in out:
        usage[stripe.color] = usage.get(stripe.color, 0) + stripe.width
    background = min(active, key=lambda c: usage.get(c, 0))
    return out, background


@variant(Variant.BARCODE, canvas=SIZE, description="Seeded barcode stripes")
def barcode(ctx: RenderContext) -> SvgDocument:
    out, background = stripes(ctx)
    f = frame(ctx, SIZE)
    f.add(el("rect", {"width": SIZE, "height": SIZE, "fill": background}))
    for stripe in out:
        f.add(el("rect", {"x": stripe.x, "y": 0, "width": stripe.width, "height": SIZE, "fill": stripe.color}))
    return f.finish()
