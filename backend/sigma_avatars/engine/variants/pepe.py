"""Pepe: a wobbly frog head with lidded eyes, glossy lips and moods.

Moods are exclusive: mad (20%), crying (15% of the rest), otherwise neutral.
Sunglasses only appear on a neutral or mad bordered head.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from sigma_avatars.engine.canvas import frame
from sigma_avatars.engine.colors import brightness, get_contrast_safe
from sigma_avatars.engine.context import RenderContext
from sigma_avatars.engine.registry import variant
from sigma_avatars.engine.seed import get_boolean
from sigma_avatars.engine.seed import get_spread_unit as unit
from sigma_avatars.engine.transforms import compose, rotate, scale, translate
from sigma_avatars.engine.variants._glasses import GLASSES, Glasses
from sigma_avatars.models.avatar import Variant
from sigma_avatars.models.svg_document import SvgDocument, SvgElement, el
from sigma_avatars.svg.path_builder import PathBuilder, quad_path

SIZE = 80
CENTER = SIZE / 2

CLASSIC_GREENS = ("#6B9F2E", "#7FAF3F", "#8FBF4F", "#5F8F1F")
CLASSIC_REDS = ("#C03A2B", "#B84236", "#A63526", "#D04030", "#9B3021")
CONTRAST_SKINS = ("#6B9F2E", "#7FAF3F", "#FFB6C1", "#87CEEB", "#DDA0DD")
CONTRAST_LIPS = ("#C03A2B", "#FF69B4", "#FF1493", "#DC143C", "#8B008B")

TEAR = "#4A90E2"
PUPIL = "#000000"
LIP_OUTLINE = "#000"
LIP_SPLIT = "#2b1a12"

# Background pattern kinds
V_STRIPES, H_STRIPES, DOTS, CHECKERBOARD, DIAGONAL = range(5)


@dataclass(frozen=True)
class PepeColors:
    background: str
    skin: str
    lips: str
    outline: str


def pepe_colors(ctx: RenderContext) -> PepeColors:
    """Darkest color as background; skin and lips from weighted pools.

    Palette colors appear twice in each pool and the classic frog colors once.
    """
    n = ctx.seed
    pool = sorted([*ctx.colors, *CLASSIC_GREENS, *CLASSIC_REDS], key=brightness)
    background = pool[0]

    bright_skin = pool[math.floor(len(pool) * 0.3):]
    skin_pool = [*bright_skin, *bright_skin, *CLASSIC_GREENS]
    skin = skin_pool[unit(n + 141, len(skin_pool))]

    bright_lips = pool[math.floor(len(pool) * 0.4):]
    lips_pool = [*bright_lips, *bright_lips, *CLASSIC_REDS]
    lips = lips_pool[unit(n + 142, len(lips_pool))]

    if skin == background or unit(n + 143, 100) < 10:
        skin = CONTRAST_SKINS[unit(n + 144, len(CONTRAST_SKINS))]
    if lips in (skin, background):
        lips = CONTRAST_LIPS[unit(n + 145, len(CONTRAST_LIPS))]

    return PepeColors(background=background, skin=skin, lips=lips, outline=get_contrast_safe(skin, "#000000"))


def blob_path(cx: float, cy: float, s: int) -> str:
    """Near-circle built from four quadratic arcs with seeded wobble."""
    S = SIZE
    width = 0.42 + (unit(s + 1, 10) - 5) / 100
    height = 0.42 + (unit(s + 2, 10) - 5) / 100
    top = 1.0 + (unit(s + 3, 6) - 3) / 100
    bottom = 1.0 + (unit(s + 4, 6) - 3) / 100
    w1, w2, w3, w4, w5, w6, w7, w8 = ((unit(s + k, 10) - 5) / 150 for k in range(10, 18))
    m1 = (unit(s + 20, 6) - 3) / 300
    m2 = (unit(s + 21, 6) - 3) / 300

    wS, hS = width * S, height * S
    return (
        PathBuilder()
        .move_to(cx - wS + w1 * S, cy + w2 * S + m1 * S)
        .quad_to(cx - wS * (1 + w3 + m2), cy - hS * top + w4 * S, cx + w5 * S + m1 * S, cy - hS * top)
        .quad_to(cx + wS * (1 + w6 - m2), cy - hS * top + w7 * S + m1 * S, cx + wS + w8 * S, cy + w1 * S - m2 * S)
        .quad_to(cx + wS * (1 - w2 + m1), cy + hS * bottom + w3 * S, cx + w4 * S - m2 * S, cy + hS * bottom)
        .quad_to(cx - wS * (1 - w5 - m1), cy + hS * bottom + w6 * S + m2 * S, cx - wS + w7 * S, cy + w8 * S + m1 * S)
        .close()
        .build()
    )


def eye_group(cx: float, cy: float, rx: float, ry: float, lid_drop: float, outline: str, clip_id: str) -> SvgElement:
    """White, pupil, glint and an upper lid clipped to the white."""
    lid = PathBuilder().move_to(cx - rx, cy - lid_drop).quad_to(cx, cy - ry - lid_drop * 0.2, cx + rx, cy - lid_drop)
    return el("g", children=[
        el("clipPath", {"id": clip_id}, children=[el("ellipse", {"cx": cx, "cy": cy, "rx": rx, "ry": ry})]),
        el("ellipse", {"cx": cx, "cy": cy, "rx": rx, "ry": ry}, {"fill": "#fff", "stroke": outline, "stroke-width": 1.5}),
        el("circle", {"cx": cx + rx * 0.15, "cy": cy - ry * 0.05, "r": max(2, rx * 0.42)}, {"fill": PUPIL}),
        el("circle", {"cx": cx + rx * 0.04, "cy": cy - ry * 0.15, "r": max(1, rx * 0.15)}, {"fill": "#fff"}),
        el("g", {"clip-path": f"url(#{clip_id})"}, children=[
            el(
                "path",
                {"d": lid.build()},
                {"stroke": outline, "stroke-width": 2, "fill": "none", "stroke-linecap": "round"},
            ),
        ]),
    ])


def lips(x1: float, y: float, x2: float, curve: float, thickness: float, color: str, tilt: float = 0) -> list[SvgElement]:
    """One curve stroked three times: outline, fill, centre split."""
    cx = (x1 + x2) / 2
    d = quad_path(x1, y, cx, y + curve, x2, y)
    attrs: dict = {"d": d, "class": "lips"}
    if tilt:
        attrs["transform"] = rotate(tilt, cx, y)
    layers = ((LIP_OUTLINE, thickness + 3), (color, thickness), (LIP_SPLIT, max(1, thickness * 0.25)))
    return [
        el("path", dict(attrs), {"stroke": stroke, "stroke-width": width, "fill": "none", "stroke-linecap": "round"})
        for stroke, width in layers
    ]


def background_pattern(kind: int, pattern_id: str, bg: str, skin: str) -> SvgElement:
    t = SIZE * 0.1
    overlay = {"fill": skin, "opacity": 0.2}
    if kind == V_STRIPES:
        size, children = (t * 2, SIZE), [
            el("rect", {"width": t, "height": SIZE}, {"fill": bg}),
            el("rect", {"x": t, "width": t, "height": SIZE}, overlay),
        ]
    elif kind == H_STRIPES:
        size, children = (SIZE, t * 2), [
            el("rect", {"width": SIZE, "height": t}, {"fill": bg}),
            el("rect", {"y": t, "width": SIZE, "height": t}, overlay),
        ]
    elif kind == DOTS:
        tile = SIZE * 0.25
        size, children = (tile, tile), [
            el("rect", {"width": tile, "height": tile}, {"fill": bg}),
            el("circle", {"cx": tile / 2, "cy": tile / 2, "r": SIZE * 0.05}, {"fill": skin, "opacity": 0.25}),
        ]
    elif kind == CHECKERBOARD:
        size, children = (t * 2, t * 2), [
            el("rect", {"width": t, "height": t}, {"fill": bg}),
            el("rect", {"x": t, "width": t, "height": t}, overlay),
            el("rect", {"y": t, "width": t, "height": t}, overlay),
            el("rect", {"x": t, "y": t, "width": t, "height": t}, {"fill": bg}),
        ]
    else:
        w = t * 2
        size, children = (w, w), [
            el("polygon", {"points": f"0,0 {t:g},0 0,{t:g}"}, overlay),
            el("polygon", {"points": f"{t:g},0 {w:g},0 {w:g},{t:g} {t:g},{w:g} 0,{w:g} 0,{t:g}"}, {"fill": bg}),
            el("polygon", {"points": f"{w:g},{t:g} {w:g},{w:g} {t:g},{w:g}"}, overlay),
        ]
    return el(
        "pattern",
        {"id": pattern_id, "patternUnits": "userSpaceOnUse", "width": size[0], "height": size[1]},
        children=children,
    )


def sunglasses(glasses: Glasses, cx: float, cy: float, span: float, mask_id: str) -> tuple[list[SvgElement], SvgElement]:
    """(defs, group) for a glasses outline scaled to ``span`` and centred on (cx, cy)."""
    factor = span / glasses.width
    transform = compose(
        translate(cx, cy, sep=", "),
        scale(factor),
        translate(-glasses.width / 2, -glasses.height / 2, sep=", "),
    )
    frame_attrs: dict = {"d": glasses.path, "fill": "#000000"}
    if not glasses.lenses:
        return [], el("g", {"transform": transform}, children=[el("path", frame_attrs)])

    lens_shapes = [
        el("ellipse", {"cx": lx, "cy": ly, "rx": rx, "ry": ry, "fill": "black"})
        for lx, ly, rx, ry in glasses.lenses
    ]
    lens_mask = el(
        "mask",
        {"id": mask_id},
        children=[el("rect", {"x": 0, "y": 0, "width": glasses.width, "height": glasses.height, "fill": "white"}), *lens_shapes],
    )
    tinted = el("g", {"opacity": 0.7}, children=[
        el("ellipse", {"cx": lx, "cy": ly, "rx": rx, "ry": ry, "fill": "#000000"}) for lx, ly, rx, ry in glasses.lenses
    ])
    frame_attrs["mask"] = f"url(#{mask_id})"
    return [lens_mask], el("g", {"transform": transform}, children=[tinted, el("path", frame_attrs)])


def _js_round(value: float) -> int:
    return math.floor(value + 0.5)


@variant(Variant.PEPE, canvas=SIZE, description="Frog face with moods and accessories")
def pepe(ctx: RenderContext) -> SvgDocument:
    n = ctx.seed
    full_face = unit(n + 200, 100) < 15
    mad = unit(n + 131, 100) < 20
    crying = not mad and unit(n + 132, 100) < 15

    sep = SIZE * ((0.32 if full_face else 0.26) + (unit(n + 5, 10) - 5) / 100)
    eye_rx = SIZE * ((0.16 if full_face else 0.13) + (unit(n + 9, 6) - 3) / 100)
    eye_ry = SIZE * ((0.11 if full_face else 0.085) + (unit(n + 11, 6) - 3) / 100)
    if full_face:
        eye_y = SIZE * (0.35 + (unit(n + 77, 11) - 5) / 100)
    else:
        eye_y = SIZE * 0.42 - SIZE * 0.08

    glasses = None
    if not (crying or full_face) and unit(n + 203, 100) < 25:
        glasses = GLASSES[unit(n + 204, len(GLASSES))]
    pattern_kind = unit(n + 206, 5) if unit(n + 205, 100) < 70 else None

    colors = pepe_colors(ctx)

    lip_w = SIZE * (0.46 + unit(n + 19, 8) / 100)
    lip_h = SIZE * (0.12 + unit(n + 21, 6) / 100)
    base_curve = lip_h * (0.18 + unit(n + 25, 12) / 100)
    if mad:
        lip_curve = -base_curve * 0.8
    elif crying:
        lip_curve = -base_curve * 0.5
    else:
        lip_curve = base_curve
    lip_tilt = 0 if mad or crying else unit(n + 23, 7) - 3
    head_tilt = unit(n + 1, 13) - 6

    lid_drop = SIZE * (0.03 + unit(n + 15, 50) / 1000)
    if mad:
        lid_drop *= 1.5
    right_on_top = get_boolean(n + 57, 1)

    f = frame(ctx, SIZE)
    f.add(f.full_rect(colors.background))
    if pattern_kind is not None:
        pattern_id = ctx.id("pattern")
        f.define(background_pattern(pattern_kind, pattern_id, colors.background, colors.skin))
        f.add(el("rect", {"width": SIZE, "height": SIZE, "fill": f"url(#{pattern_id})"}))

    if full_face:
        f.add(f.full_rect(colors.skin, opacity=0.95))
    else:
        head = el("path", {"d": blob_path(CENTER, CENTER, n)}, {"fill": colors.skin, "stroke": colors.outline, "stroke-width": 2})
        f.add(el("g", {"transform": rotate(head_tilt, CENTER, CENTER)}, children=[head]))

    left_x, right_x = CENTER - sep / 2, CENTER + sep / 2
    left = eye_group(left_x, eye_y, eye_rx, eye_ry, lid_drop, colors.outline, ctx.id("clip-eye-left"))
    right = eye_group(right_x, eye_y, eye_rx, eye_ry, lid_drop, colors.outline, ctx.id("clip-eye-right"))
    # The eye drawn last keeps its lid on top
    f.add(*((left, right) if right_on_top else (right, left)))

    if crying:
        streak = {"stroke": TEAR, "stroke-width": 2, "fill": "none", "opacity": 0.3, "stroke-linecap": "round"}
        for x, side in ((left_x, -1), (right_x, 1)):
            tear_x = x + side * eye_rx * 0.7
            f.add(
                el("ellipse", {"cx": x, "cy": eye_y + eye_ry * 0.5, "rx": eye_rx * 0.9, "ry": eye_ry * 0.4}, {"fill": TEAR, "opacity": 0.4}),
                el("ellipse", {"cx": tear_x, "cy": eye_y + eye_ry * 1.5, "rx": 3, "ry": 5}, {"fill": TEAR, "opacity": 0.7}),
                el("path", {"d": quad_path(
                    tear_x, eye_y + eye_ry, tear_x, eye_y + eye_ry * 2, x + side * eye_rx * 0.8, eye_y + eye_ry * 2.5,
                )}, streak),
            )

    if glasses is not None:
        defs, group = sunglasses(glasses, CENTER, eye_y, sep + eye_rx * 4, ctx.id("aviator-mask"))
        f.define(*defs)
        f.add(group)

    if mad and glasses is None:
        brow = {"stroke": "#000000", "stroke-width": 3, "stroke-linecap": "round"}
        for x, side in ((left_x, -1), (right_x, 1)):
            d = (
                PathBuilder()
                .move_to(x + side * eye_rx * 1.2, eye_y - eye_ry * 1.5)
                .line_to(x - side * eye_rx * 0.8, eye_y - eye_ry * 0.8)
            )
            f.add(el("path", {"d": d.build(), "class": "eyebrow"}, brow))

    if full_face:
        lip_y = SIZE * (0.62 + (unit(n + 81, 11) - 5) / 100)
    else:
        lip_y = CENTER + SIZE * 0.12
    f.add(*lips(
        CENTER - lip_w / 2,
        lip_y,
        CENTER + lip_w / 2,
        lip_curve,
        max(10, _js_round(lip_h * 0.9)),
        colors.lips,
        tilt=lip_tilt,
    ))
    return f.finish()
