"""Shared document frame: outer size, title, clip mask, defs and the masked body group."""

from __future__ import annotations

from dataclasses import dataclass

from sigma_avatars.engine.context import RenderContext
from sigma_avatars.models.svg_document import SvgDocument, SvgElement, el

# Corner radius multiplier for the round mask; far above half the canvas so the rect becomes a circle
ROUND_MASK_FACTOR = 2


def mask_rect(canvas: float, square: bool) -> SvgElement:
    attrs: dict = {"width": canvas, "height": canvas}
    if not square:
        attrs["rx"] = canvas * ROUND_MASK_FACTOR
    attrs["fill"] = "#FFFFFF"
    return el("rect", attrs)


@dataclass
class Frame:
    """Mutable while a generator draws into it; frozen into a document by :meth:`finish`."""

    ctx: RenderContext
    canvas: int
    defs: SvgElement
    body: SvgElement
    mask: SvgElement

    def add(self, *elements: SvgElement) -> Frame:
        self.body.add(*elements)
        return self

    def define(self, *elements: SvgElement) -> Frame:
        self.defs.add(*elements)
        return self

    def full_rect(self, fill: str, opacity: float | None = None) -> SvgElement:
        """Rect covering the whole canvas."""
        style: dict = {"fill": fill}
        if opacity is not None:
            style["opacity"] = opacity
        return el("rect", {"width": self.canvas, "height": self.canvas}, style)

    def finish(self) -> SvgDocument:
        elements = [self.defs] if self.defs.children else []
        elements += [self.mask, self.body]
        return SvgDocument(
            width=self.ctx.size,
            height=self.ctx.size,
            viewbox=(0.0, 0.0, float(self.canvas), float(self.canvas)),
            title=self.ctx.name if self.ctx.title else None,
            elements=elements,
        )


def frame(ctx: RenderContext, canvas: int = 80) -> Frame:
    mask_id = ctx.id("mask")
    mask = el(
        "mask",
        {
            "id": mask_id,
            "maskUnits": "userSpaceOnUse",
            "x": 0,
            "y": 0,
            "width": canvas,
            "height": canvas,
        },
        children=[mask_rect(canvas, ctx.square)],
    )
    return Frame(
        ctx=ctx,
        canvas=canvas,
        defs=el("defs"),
        body=el("g", {"mask": f"url(#{mask_id})"}),
        mask=mask,
    )
