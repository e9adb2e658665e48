"""Anime: a cel-shaded round face with enumerated eyes and mouths.

Roughly one name in ten gets the kodama style instead: a pale face with
hollow, hand-wobbled eyes and mouth.
"""

from __future__ import annotations

import math

from sigma_avatars.engine.canvas import frame
from sigma_avatars.engine.colors import darken, get_contrast_safe
from sigma_avatars.engine.context import RenderContext
from sigma_avatars.engine.registry import variant
from sigma_avatars.engine.seed import get_boolean
from sigma_avatars.engine.seed import get_spread_unit as unit
from sigma_avatars.models.avatar import Variant
from sigma_avatars.models.svg_document import SvgDocument, SvgElement, el
from sigma_avatars.svg.path_builder import PathBuilder, quad_path

SIZE = 80
CX = CY = SIZE / 2
FACE_RADIUS = SIZE * 0.45

FEATURE_FALLBACK = "var(--color-foreground)"
OUTLINE_FALLBACK = "#111"
KODAMA_FACE = "#EDEAE0"
KODAMA_HOLLOW = "#1B1B1B"

EYE_STYLES = ("round", "closed", "diamond", "wink", "sparkle", "tall")
MOUTH_STYLES = ("v", "smile", "w", "o", "filled_o", "cat", "flat")
KODAMA_PERCENT = 10


def _stroke(color: str, width: float = 2) -> dict:
    return {"stroke": color, "stroke-width": width, "fill": "none", "stroke-linecap": "round"}


def _star(cx: float, cy: float, r: float) -> str:
    """Four-point sparkle with pinched sides."""
    inner = r * 0.3
    b = PathBuilder().move_to(cx, cy - r)
    b.quad_to(cx + inner, cy - inner, cx + r, cy)
    b.quad_to(cx + inner, cy + inner, cx, cy + r)
    b.quad_to(cx - inner, cy + inner, cx - r, cy)
    b.quad_to(cx - inner, cy - inner, cx, cy - r)
    return b.close().build()


class Face:
    """Seeded geometry shared by every eye and mouth drawer."""

    def __init__(self, ctx: RenderContext) -> None:
        n = ctx.seed
        self.face = ctx.color(n + 3)
        self.features = get_contrast_safe(self.face, FEATURE_FALLBACK)
        self.outline = get_contrast_safe(self.face, OUTLINE_FALLBACK)
        self.accent = ctx.color(n + 11)
        self.eye_style = EYE_STYLES[unit(n + 5, len(EYE_STYLES))]
        self.mouth_style = MOUTH_STYLES[unit(n + 7, len(MOUTH_STYLES))]
        self.blush = get_boolean(n + 9, 1)
        self.eyebrows = unit(n + 19, 100) < 30
        self.sparkle = unit(n + 21, 100) < 25
        self.kodama = unit(n + 29, 100) < KODAMA_PERCENT

        spread = 1.0 + unit(n + 17, 40) / 100
        self.spread = spread
        self.eye_y = CY - SIZE * 0.12 * spread
        self.eye_lx = CX - SIZE * 0.15 * spread
        self.eye_rx = CX + SIZE * 0.15 * spread
        self.eye_r = SIZE * (0.08 + unit(n + 13, 5) / 100)
        self.mouth_y = CY + SIZE * 0.15 * spread
        self.mouth_w = SIZE * 0.20
        self.mouth_h = SIZE * 0.08
        self.seed = n

    # ── Eyes ──

    def eye_round(self, x: float) -> list[SvgElement]:
        r = self.eye_r
        return [
            el("circle", {"cx": x, "cy": self.eye_y, "r": r}, {"fill": self.features}),
            el("circle", {"cx": x - r * 0.3, "cy": self.eye_y + r * 0.35, "r": r * 0.35}, {"fill": "white"}),
        ]

    def eye_closed(self, x: float) -> list[SvgElement]:
        r, y = self.eye_r, self.eye_y
        return [el("path", {"d": quad_path(x - r, y, x, y + r * 0.7, x + r, y)}, _stroke(self.features))]

    def eye_diamond(self, x: float) -> list[SvgElement]:
        w, h, y = self.eye_r * 0.85, self.eye_r * 1.05, self.eye_y
        points = f"{x:g},{y + h:g} {x + w:g},{y:g} {x:g},{y - h:g} {x - w:g},{y:g}"
        return [el("polygon", {"points": points}, {"fill": self.features})]

    def eye_sparkle(self, x: float) -> list[SvgElement]:
        return [el("path", {"d": _star(x, self.eye_y, self.eye_r * 1.2)}, {"fill": self.features})]

    def eye_tall(self, x: float) -> list[SvgElement]:
        r = self.eye_r
        return [
            el("ellipse", {"cx": x, "cy": self.eye_y, "rx": r * 0.6, "ry": r * 1.3}, {"fill": self.features}),
            el("ellipse", {"cx": x, "cy": self.eye_y - r * 0.55, "rx": r * 0.25, "ry": r * 0.35}, {"fill": "white"}),
        ]

    def eyes(self) -> list[SvgElement]:
        style = self.eye_style
        if style == "wink":
            return self.eye_closed(self.eye_lx) + self.eye_round(self.eye_rx)
        draw = {
            "round": self.eye_round,
            "closed": self.eye_closed,
            "diamond": self.eye_diamond,
            "sparkle": self.eye_sparkle,
            "tall": self.eye_tall,
        }[style]
        return draw(self.eye_lx) + draw(self.eye_rx)

    # ── Mouths ──

    def mouth(self) -> SvgElement:
        y, w, h = self.mouth_y, self.mouth_w, self.mouth_h
        style = self.mouth_style
        if style == "v":
            return el("path", {"d": quad_path(CX - w / 2, y, CX, y + h, CX + w / 2, y)}, _stroke(self.features))
        if style == "smile":
            return el("path", {"d": quad_path(CX - w, y, CX, y + h * 1.2, CX + w, y)}, _stroke(self.features))
        if style == "w":
            x1, x2 = CX - w * 0.7, CX + w * 0.7
            s = (x2 - x1) / 2
            d = (
                PathBuilder()
                .move_to(x1, y)
                .quad_to(x1 + s * 0.5, y + h * 0.9, x1 + s, y)
                .quad_to(x1 + s * 1.5, y + h * 0.9, x2, y)
            )
            return el("path", {"d": d.build()}, _stroke(self.features))
        if style in ("o", "filled_o"):
            fill = self.features if style == "filled_o" else "none"
            return el(
                "ellipse",
                {"cx": CX, "cy": y, "rx": w * 0.35, "ry": h * 0.9},
                {"fill": fill, "stroke": self.features, "stroke-width": 2},
            )
        if style == "cat":
            s = w * 0.3
            d = (
                PathBuilder()
                .move_to(CX - s * 2, y)
                .quad_to(CX - s, y + h, CX, y)
                .quad_to(CX + s, y + h, CX + s * 2, y)
            )
            return el("path", {"d": d.build()}, _stroke(self.features))
        return el("line", {"x1": CX - w * 0.4, "y1": y, "x2": CX + w * 0.4, "y2": y}, _stroke(self.features))

    # ── Extras ──

    def brows(self) -> list[SvgElement]:
        y = self.eye_y - self.eye_r * 1.8
        r = self.eye_r
        return [
            el("path", {"d": quad_path(x - r, y + r * 0.2, x, y - r * 0.3, x + r, y + r * 0.2)}, _stroke(self.features, 1.5))
            for x in (self.eye_lx, self.eye_rx)
        ]

    def cheeks(self) -> list[SvgElement]:
        dx = SIZE * 0.22 * self.spread
        return [
            el("circle", {"cx": CX + side * dx, "cy": CY, "r": SIZE * 0.05}, {"fill": self.accent, "opacity": 0.5})
            for side in (-1, 1)
        ]

    def glint(self) -> SvgElement:
        angle = math.radians(200 + unit(self.seed + 23, 60))
        x = CX + math.cos(angle) * FACE_RADIUS * 0.7
        y = CY + math.sin(angle) * FACE_RADIUS * 0.7
        return el("path", {"d": _star(x, y, SIZE * 0.05)}, {"fill": self.accent, "opacity": 0.9})


def _wobble_ellipse(cx: float, cy: float, rx: float, ry: float, seed: int) -> str:
    """Closed loop of four cubic arcs whose handles drift by a seeded amount."""
    k = 0.5523
    j = [(unit(seed + i, 9) - 4) / 10 for i in range(8)]
    b = PathBuilder().move_to(cx - rx, cy)
    b.cubic_to(cx - rx, cy - ry * k * (1 + j[0]), cx - rx * k * (1 + j[1]), cy - ry, cx, cy - ry)
    b.cubic_to(cx + rx * k * (1 + j[2]), cy - ry, cx + rx, cy - ry * k * (1 + j[3]), cx + rx, cy)
    b.cubic_to(cx + rx, cy + ry * k * (1 + j[4]), cx + rx * k * (1 + j[5]), cy + ry, cx, cy + ry)
    b.cubic_to(cx - rx * k * (1 + j[6]), cy + ry, cx - rx, cy + ry * k * (1 + j[7]), cx - rx, cy)
    return b.close().build()


def kodama_features(face: Face) -> list[SvgElement]:
    n = face.seed
    r = face.eye_r
    eyes = [
        el("path", {"d": _wobble_ellipse(x, face.eye_y, r * 0.9, r * 1.1, n + 31 + i * 10)}, {"fill": KODAMA_HOLLOW})
        for i, x in enumerate((face.eye_lx, face.eye_rx))
    ]
    mouth = el(
        "path",
        {"d": _wobble_ellipse(CX, face.mouth_y, face.mouth_w * 0.3, face.mouth_h * 0.8, n + 53)},
        {"fill": KODAMA_HOLLOW},
    )
    return [el("g", {"class": "eyes"}, children=eyes), el("g", {"class": "mouth"}, children=[mouth])]


@variant(Variant.ANIME, canvas=SIZE, description="Cel-shaded anime face")
def anime(ctx: RenderContext) -> SvgDocument:
    face = Face(ctx)
    f = frame(ctx, SIZE)

    if face.kodama:
        f.add(
            el("circle", {"cx": CX, "cy": CY, "r": FACE_RADIUS}, {"fill": KODAMA_FACE, "stroke": OUTLINE_FALLBACK, "stroke-width": 2}),
            *kodama_features(face),
        )
        return f.finish()

    shade_id = ctx.id("cel")
    f.define(el(
        "radialGradient",
        {"id": shade_id, "cx": "38%", "cy": "32%", "r": "75%"},
        children=[
            el("stop", {"offset": "0%"}, {"stop-color": face.face}),
            el("stop", {"offset": "70%"}, {"stop-color": face.face}),
            el("stop", {"offset": "100%"}, {"stop-color": darken(face.face, 0.18)}),
        ],
    ))
    f.add(el(
        "circle",
        {"cx": CX, "cy": CY, "r": FACE_RADIUS},
        {"fill": f"url(#{shade_id})", "stroke": face.outline, "stroke-width": 2},
    ))
    if face.blush:
        f.add(*face.cheeks())
    f.add(el("g", {"class": "eyes"}, children=face.eyes()))
    if face.eyebrows:
        f.add(*face.brows())
    f.add(el("g", {"class": "mouth"}, children=[face.mouth()]))
    if face.sparkle:
        f.add(face.glint())
    return f.finish()
