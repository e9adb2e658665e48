"""Marble: blurred, jittered blobs over a solid base."""

from __future__ import annotations

from sigma_avatars.engine.backgrounds import BackgroundProps, blur_filter, render_marble_background
from sigma_avatars.engine.canvas import frame
from sigma_avatars.engine.context import RenderContext
from sigma_avatars.engine.registry import variant
from sigma_avatars.models.avatar import Variant
from sigma_avatars.models.svg_document import SvgDocument

SIZE = 80


@variant(Variant.MARBLE, canvas=SIZE, description="Blurred organic blobs")
def marble(ctx: RenderContext) -> SvgDocument:
    f = frame(ctx, SIZE)
    filter_id = ctx.id("filter")
    props = BackgroundProps(size=SIZE, colors=ctx.colors, seed=ctx.seed, pattern_id=ctx.id("pattern"))
    background = render_marble_background(props, filter_url=f"url(#{filter_id})")
    f.add(*background.elements)
    f.define(*background.defs, blur_filter(filter_id))
    return f.finish()
