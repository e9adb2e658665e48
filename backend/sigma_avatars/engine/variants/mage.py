"""Mage: a shadowed face with glowing eyes under a seeded hat."""

from __future__ import annotations

import math
from dataclasses import dataclass

from sigma_avatars.engine.backgrounds import BackgroundProps, render_background, select_pattern
from sigma_avatars.engine.canvas import frame
from sigma_avatars.engine.colors import darkest_color
from sigma_avatars.engine.context import RenderContext
from sigma_avatars.engine.registry import variant
from sigma_avatars.engine.seed import get_spread_unit as unit
from sigma_avatars.engine.transforms import rotate
from sigma_avatars.models.avatar import Variant
from sigma_avatars.models.svg_document import SvgDocument, SvgElement, el
from sigma_avatars.svg.path_builder import PathBuilder

SIZE = 80
CENTER = SIZE / 2

WHITE = "#FFFFFF"
YELLOW = "#FFFF00"
EYE_COLORS = (WHITE, YELLOW, WHITE, YELLOW)
HAT_COLORS = ("#2C2416", "#1A1A1A", "#3D3D3D", "#2B2B2B", "#4A3C28", "#1F1F1F")

EYE_SHAPES = 5
HAT_SHAPES = 4
GLOW_BLUR = 4


@dataclass(frozen=True)
class MageParams:
    eye_color: str
    eye_shape: int
    eye_glow: int
    eye_width: float
    eye_height: float
    eye_tilt: int
    eye_offset: int
    spacing: float
    face_color: str
    face_y: float
    face_rx: float
    face_ry: float
    head_tilt: int
    show_mouth: bool
    mouth_width: float
    show_collar: bool
    collar_color: str
    hat_shape: int
    hat_color: str
    hat_tint: str
    hat_tilt: int

    @property
    def needs_pupil(self) -> bool:
        return self.eye_color == WHITE

    @property
    def head_top(self) -> float:
        return self.face_y + 15 - self.face_ry


def mage_params(ctx: RenderContext) -> MageParams:
    n = ctx.seed
    head_scale = 0.65 + unit(n + 85, 15) / 100
    face_rx = SIZE * 0.6 * head_scale
    face_ry = SIZE * 0.7 * head_scale

    eye_spacing = SIZE * (0.12 + unit(n + 29, 16) / 100)
    large_eyes = eye_spacing > SIZE * 0.18 and unit(n + 79, 100) < 15
    spacing_multiplier = min(1.2, max(0.7, eye_spacing / (SIZE * 0.15)))
    eye_multiplier = (1.5 if large_eyes else 1.0) * spacing_multiplier

    base_width = (7 + unit(n + 23, 20) / 10) * eye_multiplier
    base_height = (7 + unit(n + 43, 30) / 10) * eye_multiplier
    eye_width = max(face_rx * 0.11, min(base_width, face_rx * 0.22))
    eye_height = max(face_ry * 0.08, min(base_height, face_ry * 0.18))
    distance = 0.8 + unit(n + 67, 8) / 10

    return MageParams(
        eye_color=EYE_COLORS[unit(n + 17, len(EYE_COLORS))],
        eye_shape=unit(n, EYE_SHAPES),
        eye_glow=unit(n + 19, 4),
        eye_width=eye_width,
        eye_height=eye_height,
        eye_tilt=unit(n + 53, 21) - 10,
        eye_offset=unit(n + 61, 11) - 5,
        spacing=eye_spacing * distance * head_scale,
        face_color=darkest_color(ctx.colors),
        face_y=SIZE * 0.65 + unit(n + 37, 8),
        face_rx=face_rx,
        face_ry=face_ry,
        head_tilt=unit(n + 47, 21) - 10,
        show_mouth=unit(n + 71, 10) < 4,
        mouth_width=SIZE * (0.06 + unit(n + 73, 4) / 100),
        show_collar=unit(n + 131, 10) < 3,
        collar_color=ctx.color(n + 133),
        hat_shape=unit(n + 109, HAT_SHAPES),
        hat_color=HAT_COLORS[unit(n + 7, len(HAT_COLORS))],
        hat_tint=ctx.color(n + 11),
        hat_tilt=unit(n + 13, 31) - 15,
    )


# ── Eyes ──


def _almond(cx: float, cy: float, w: float, h: float) -> str:
    return (
        PathBuilder()
        .move_to(cx - w, cy)
        .cubic_to(cx - w * 0.8, cy - h * 0.9, cx + w * 0.4, cy - h * 1.1, cx + w, cy - h * 0.2)
        .smooth_cubic_to(cx + w * 0.9, cy + h * 0.6, cx + w * 0.3, cy + h * 0.4)
        .cubic_to(cx - w * 0.2, cy + h * 0.3, cx - w * 0.7, cy + h * 0.1, cx - w, cy)
        .close()
        .build()
    )


def _slit(cx: float, cy: float, w: float, h: float) -> str:
    return (
        PathBuilder()
        .move_to(cx, cy - h)
        .quad_to(cx - w * 0.35, cy - h * 0.5, cx - w * 0.3, cy)
        .quad_to(cx - w * 0.35, cy + h * 0.5, cx, cy + h)
        .quad_to(cx + w * 0.35, cy + h * 0.5, cx + w * 0.3, cy)
        .quad_to(cx + w * 0.35, cy - h * 0.5, cx, cy - h)
        .close()
        .build()
    )


def _tsurime(cx: float, cy: float, w: float, h: float) -> str:
    return (
        PathBuilder()
        .move_to(cx - w, cy + h * 0.3)
        .cubic_to(cx - w * 0.5, cy - h * 0.2, cx, cy - h * 0.8, cx + w * 0.7, cy - h)
        .cubic_to(cx + w, cy - h * 0.7, cx + w * 0.9, cy - h * 0.3, cx + w * 0.6, cy)
        .cubic_to(cx + w * 0.3, cy + h * 0.2, cx, cy + h * 0.4, cx - w * 0.5, cy + h * 0.35)
        .quad_to(cx - w * 0.8, cy + h * 0.32, cx - w, cy + h * 0.3)
        .close()
        .build()
    )


def _tareme(cx: float, cy: float, w: float, h: float) -> str:
    return (
        PathBuilder()
        .move_to(cx - w * 0.8, cy - h * 0.6)
        .cubic_to(cx - w * 0.3, cy - h * 0.8, cx + w * 0.2, cy - h * 0.7, cx + w * 0.8, cy - h * 0.3)
        .cubic_to(cx + w, cy - h * 0.1, cx + w * 0.95, cy + h * 0.3, cx + w * 0.5, cy + h * 0.5)
        .cubic_to(cx, cy + h * 0.6, cx - w * 0.4, cy + h * 0.5, cx - w * 0.7, cy + h * 0.2)
        .quad_to(cx - w * 0.85, cy, cx - w * 0.8, cy - h * 0.6)
        .close()
        .build()
    )


def _ellipse(cx: float, cy: float, rx: float, ry: float, fill: str, **style) -> SvgElement:
    return el("ellipse", {"cx": cx, "cy": cy, "rx": rx, "ry": ry}, {"fill": fill, **style})


def draw_eye(p: MageParams, cx: float, left: bool, glow_filter: str) -> SvgElement:
    cy = p.face_y + (-p.eye_offset / 2 if left else p.eye_offset / 2)
    angle = -p.eye_tilt if left else p.eye_tilt
    w, h, color = p.eye_width, p.eye_height, p.eye_color
    parts: list[SvgElement] = []

    if p.eye_glow > 0:
        parts.append(el(
            "ellipse",
            {"cx": cx, "cy": cy, "rx": w * 1.8, "ry": h * 1.5, "filter": f"url(#{glow_filter})"},
            {"fill": color, "opacity": round(0.3 - p.eye_glow * 0.05, 2)},
        ))

    if p.eye_shape == 0:
        parts.append(el("path", {"d": _almond(cx, cy, w, h)}, {"fill": color}))
        if p.needs_pupil:
            parts.append(_ellipse(cx + w * 0.1, cy - h * 0.2, w * 0.25, h * 0.3, "#000000"))
    elif p.eye_shape == 1:
        parts.append(el("path", {"d": _slit(cx, cy, w, h)}, {"fill": color}))
        if p.needs_pupil:
            parts.append(_ellipse(cx, cy, w * 0.15, h * 0.4, "#000000"))
    elif p.eye_shape == 2:
        parts.append(el("path", {"d": _tsurime(cx, cy, w, h)}, {"fill": color}))
    elif p.eye_shape == 3:
        parts.append(el("path", {"d": _tareme(cx, cy, w, h)}, {"fill": color}))
    else:
        parts.append(_ellipse(cx, cy, w * 0.7, h, color))
        parts.append(_ellipse(cx, cy, w * 0.6, h * 0.85, color, opacity=0.6))
        if p.needs_pupil:
            parts.append(_ellipse(cx, cy, w * 0.3, h * 0.35, "#000000"))
        else:
            parts.append(_ellipse(cx, cy - h * 0.1, w * 0.3, h * 0.5, WHITE, opacity=0.5))

    return el("g", {"transform": rotate(angle, cx, cy)}, children=parts)


# ── Hats ──


def _star_points(cx: float, cy: float, outer: float, inner: float) -> str:
    coords = []
    for i in range(10):
        r = outer if i % 2 == 0 else inner
        a = math.radians(-90 + i * 36)
        coords.append(f"{cx + math.cos(a) * r:.2f},{cy + math.sin(a) * r:.2f}")
    return " ".join(coords)


def conical_hat(p: MageParams) -> list[SvgElement]:
    base = p.head_top + 4
    half = p.face_rx * 0.9
    cone = PathBuilder().move_to(CENTER - half, base).line_to(CENTER + 2, base - 30).line_to(CENTER + half, base).close()
    return [
        _ellipse(CENTER, base, p.face_rx * 1.3, 4, p.hat_color),
        el("path", {"d": cone.build()}, {"fill": p.hat_color}),
    ]


def ragged_hood(p: MageParams) -> list[SvgElement]:
    """Hood drawn behind the face; its hem is a seeded zigzag."""
    half = p.face_rx * 1.25
    top = p.head_top - 8
    hem = SIZE + 2
    d = PathBuilder().move_to(CENTER - half, hem)
    d.cubic_to(CENTER - half, top + 10, CENTER - half * 0.6, top, CENTER, top)
    d.cubic_to(CENTER + half * 0.6, top, CENTER + half, top + 10, CENTER + half, hem)
    teeth = 6
    for i in range(1, teeth + 1):
        x = CENTER + half - (2 * half) * i / teeth
        d.line_to(x + half / teeth, hem - 5 - (i % 2) * 3)
        d.line_to(x, hem)
    d.close()
    return [el("path", {"d": d.build()}, {"fill": p.hat_color})]


def pointed_star_hat(p: MageParams) -> list[SvgElement]:
    base = p.head_top + 3
    half = p.face_rx * 0.85
    d = (
        PathBuilder()
        .move_to(CENTER - half, base)
        .quad_to(CENTER - 4, base - 18, CENTER + 12, base - 34)
        .quad_to(CENTER + 4, base - 16, CENTER + half, base)
        .close()
    )
    return [
        el("path", {"d": d.build()}, {"fill": p.hat_color}),
        el("polygon", {"points": _star_points(CENTER + 1, base - 12, 4, 1.8)}, {"fill": p.hat_tint}),
    ]


def wide_brim_hat(p: MageParams) -> list[SvgElement]:
    base = p.head_top + 5
    crown = p.face_rx * 0.7
    d = (
        PathBuilder()
        .move_to(CENTER - crown, base)
        .line_to(CENTER - crown * 0.7, base - 20)
        .quad_to(CENTER, base - 26, CENTER + crown * 0.7, base - 20)
        .line_to(CENTER + crown, base)
        .close()
    )
    band = el(
        "rect",
        {"x": CENTER - crown * 0.95, "y": base - 6, "width": crown * 1.9, "height": 4},
        {"fill": p.hat_tint},
    )
    return [
        _ellipse(CENTER, base, p.face_rx * 1.6, 5, p.hat_color),
        el("path", {"d": d.build()}, {"fill": p.hat_color}),
        band,
    ]


HATS = (conical_hat, ragged_hood, pointed_star_hat, wide_brim_hat)


@variant(Variant.MAGE, canvas=SIZE, description="Hooded mage with glowing eyes")
def mage(ctx: RenderContext) -> SvgDocument:
    p = mage_params(ctx)
    n = ctx.seed
    f = frame(ctx, SIZE)
    glow_id = ctx.id("filter")

    f.add(el("rect", {"width": SIZE, "height": SIZE, "fill": ctx.color(n * 23)}))
    props = BackgroundProps(size=SIZE, colors=ctx.colors, seed=n, pattern_id=ctx.id("pattern"))
    background = render_background(select_pattern(n * 31 + 17), props)
    f.define(*background.defs)
    f.add(*background.elements)

    if p.show_collar:
        collar = (
            PathBuilder()
            .move_to(0, SIZE * 0.75)
            .cubic_to(SIZE * 0.1, SIZE * 0.7, SIZE * 0.2, SIZE * 0.68, CENTER, SIZE * 0.65)
            .cubic_to(SIZE * 0.8, SIZE * 0.68, SIZE * 0.9, SIZE * 0.7, SIZE, SIZE * 0.75)
            .line_to(SIZE, SIZE)
            .line_to(0, SIZE)
            .close()
        )
        f.add(el("path", {"d": collar.build()}, {"fill": p.collar_color}))

    draw_hat = HATS[p.hat_shape]
    hat = el("g", {"class": "hat", "transform": rotate(p.hat_tilt, CENTER, p.head_top)}, children=draw_hat(p))

    head: list[SvgElement] = []
    if draw_hat is ragged_hood:
        head.append(hat)
    head.append(_ellipse(CENTER, p.face_y + 15, p.face_rx, p.face_ry, p.face_color))
    head.append(draw_eye(p, CENTER - p.spacing, True, glow_id))
    head.append(draw_eye(p, CENTER + p.spacing, False, glow_id))
    if p.show_mouth:
        mouth_y = p.face_y + SIZE * 0.15
        head.append(el(
            "line",
            {"x1": CENTER - p.mouth_width / 2, "x2": CENTER + p.mouth_width / 2, "y1": mouth_y, "y2": mouth_y},
            {
                "stroke": WHITE if p.eye_color == YELLOW else p.eye_color,
                "stroke-width": 1.5,
                "opacity": 0.7,
                "stroke-linecap": "round",
            },
        ))
    if draw_hat is not ragged_hood:
        head.append(hat)

    f.add(el("g", {"transform": rotate(p.head_tilt, CENTER, CENTER)}, children=head))
    f.define(el("filter", {"id": glow_id, "x": "-50%", "y": "-50%", "width": "200%", "height": "200%"}, children=[
        el("feGaussianBlur", {"stdDeviation": GLOW_BLUR}),
    ]))
    return f.finish()
