"""Background pattern registry shared by the marble and mage variants.

Each pattern is a small render function registered with ``@pattern``. Path
patterns draw straight into the body; pattern/gradient patterns emit a
``<defs>`` entry and are painted by a covering rect that references it.
"""

from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass, field, replace
from typing import Callable, Sequence

from sigma_avatars.engine.seed import get_random_color, get_unit
from sigma_avatars.engine.transforms import organic_transform, rotate
from sigma_avatars.models.svg_document import SvgElement, el
from sigma_avatars.svg.serializer import format_number as fmt

logger = logging.getLogger(__name__)

MARBLE_BLOB_1 = "M32.414 59.35L50.376 70.5H72.5v-71H33.728L26.5 13.381l19.057 27.08L32.414 59.35z"
MARBLE_BLOB_2 = (
    "M22.216 24L0 46.75l14.108 38.129L78 86l-3.081-59.276-22.378 4.005 "
    "12.972 20.186-23.35 27.395L22.215 24z"
)

# Gaussian blur applied to marble blobs
BLUR_STD_DEVIATION = 7


class PatternKind(str, enum.Enum):
    PATH = "path"
    PATTERN = "pattern"
    GRADIENT = "gradient"


class PatternCategory(str, enum.Enum):
    ORGANIC = "organic"
    GEOMETRIC = "geometric"
    GRADIENT = "gradient"
    DECORATIVE = "decorative"


@dataclass(frozen=True)
class BackgroundProps:
    size: float
    colors: Sequence[str]
    seed: int
    pattern_id: str
    filter_url: str | None = None

    def color(self, offset: int = 0) -> str:
        return get_random_color(self.seed + offset, self.colors, len(self.colors))


@dataclass(frozen=True)
class BackgroundPattern:
    id: str
    name: str
    kind: PatternKind
    category: PatternCategory
    render: Callable[[BackgroundProps], list[SvgElement]]

    @property
    def needs_defs(self) -> bool:
        return self.kind is not PatternKind.PATH


@dataclass
class BackgroundRender:
    defs: list[SvgElement] = field(default_factory=list)
    elements: list[SvgElement] = field(default_factory=list)


_PATTERNS: dict[str, BackgroundPattern] = {}


def pattern(id: str, name: str, kind: PatternKind, category: PatternCategory):
    """Decorator to register a background pattern."""

    def decorator(fn: Callable[[BackgroundProps], list[SvgElement]]):
        if id in _PATTERNS:
            raise ValueError(f"Duplicate pattern ID: {id}")
        _PATTERNS[id] = BackgroundPattern(id=id, name=name, kind=kind, category=category, render=fn)
        return fn

    return decorator


def _tile(props: BackgroundProps, width: float, height: float, children: list[SvgElement], **extra) -> list[SvgElement]:
    attrs = {"id": props.pattern_id, "patternUnits": "userSpaceOnUse", "width": width, "height": height}
    attrs.update(extra)
    return [el("pattern", attrs, children=children)]


def _rect(width: float, height: float, fill: str, x: float = 0, y: float = 0, **style) -> SvgElement:
    attrs: dict = {}
    if x:
        attrs["x"] = x
    if y:
        attrs["y"] = y
    attrs.update({"width": width, "height": height})
    return el("rect", attrs, {"fill": fill, **style})


def _points(*coords: tuple[float, float]) -> str:
    return " ".join(f"{fmt(x)},{fmt(y)}" for x, y in coords)


# ── Organic ──


def _blob(props: BackgroundProps, d: str, offset: int, **style) -> list[SvgElement]:
    attrs: dict = {"d": d}
    if props.filter_url:
        attrs["filter"] = props.filter_url
    attrs["transform"] = organic_transform(props.seed, props.size, offset)
    return [el("path", attrs, {"fill": props.color(offset), **style})]


@pattern("marble-blob-1", "Marble Blob 1", PatternKind.PATH, PatternCategory.ORGANIC)
def marble_blob_1(props: BackgroundProps) -> list[SvgElement]:
    return _blob(props, MARBLE_BLOB_1, 1)


@pattern("marble-blob-2", "Marble Blob 2", PatternKind.PATH, PatternCategory.ORGANIC)
def marble_blob_2(props: BackgroundProps) -> list[SvgElement]:
    return _blob(props, MARBLE_BLOB_2, 2, **{"mix-blend-mode": "overlay"})


@pattern("cloud-shape", "Cloud Shape", PatternKind.PATH, PatternCategory.ORGANIC)
def cloud_shape(props: BackgroundProps) -> list[SvgElement]:
    d = "M20 60 Q30 40 50 45 T80 50 Q85 55 80 65 Q70 75 50 70 Q35 68 25 75 Q15 70 20 60"
    return _blob(props, d, 3, opacity=0.7)


@pattern("wave-shape", "Wave Shape", PatternKind.PATH, PatternCategory.ORGANIC)
def wave_shape(props: BackgroundProps) -> list[SvgElement]:
    return _blob(props, "M0 40 Q20 20 40 40 T80 40 L80 80 L0 80 Z", 4, opacity=0.6)


@pattern("liquid-cheese", "Liquid Cheese", PatternKind.PATH, PatternCategory.ORGANIC)
def liquid_cheese(props: BackgroundProps) -> list[SvgElement]:
    s = props.size
    top = (
        f"M0 {fmt(s * 0.3)}Q{fmt(s * 0.2)} {fmt(s * 0.1)} {fmt(s * 0.4)} {fmt(s * 0.2)}"
        f"T{fmt(s * 0.8)} {fmt(s * 0.3)}T{fmt(s)} {fmt(s * 0.5)}V{fmt(s)}H0Z"
    )
    bottom = f"M0 {fmt(s * 0.6)}Q{fmt(s * 0.3)} {fmt(s * 0.4)} {fmt(s * 0.5)} {fmt(s * 0.5)}T{fmt(s)} {fmt(s * 0.6)}V{fmt(s)}H0Z"
    return [
        _rect(s, s, props.color(0)),
        el("path", {"d": top}, {"fill": props.color(1), "opacity": 0.8}),
        el("path", {"d": bottom}, {"fill": props.color(2), "opacity": 0.6}),
    ]


# ── Geometric ──


@pattern("stripes-vertical", "Vertical Stripes", PatternKind.PATTERN, PatternCategory.GEOMETRIC)
def stripes_vertical(props: BackgroundProps) -> list[SvgElement]:
    s = props.size
    return _tile(props, s * 0.2, s, [_rect(s * 0.1, s, props.color(0)), _rect(s * 0.1, s, props.color(1), x=s * 0.1)])


@pattern("stripes-horizontal", "Horizontal Stripes", PatternKind.PATTERN, PatternCategory.GEOMETRIC)
def stripes_horizontal(props: BackgroundProps) -> list[SvgElement]:
    s = props.size
    return _tile(props, s, s * 0.2, [_rect(s, s * 0.1, props.color(0)), _rect(s, s * 0.1, props.color(1), y=s * 0.1)])


@pattern("stripes-diagonal", "Diagonal Stripes", PatternKind.PATTERN, PatternCategory.GEOMETRIC)
def stripes_diagonal(props: BackgroundProps) -> list[SvgElement]:
    t = props.size * 0.2
    d = f"M0,{fmt(t)} L{fmt(t)},0 M0,0 L{fmt(t)},{fmt(t)}"
    return _tile(props, t, t, [
        _rect(t, t, props.color(0)),
        el("path", {"d": d}, {"stroke": props.color(1), "stroke-width": props.size * 0.08, "stroke-linecap": "square"}),
    ])


@pattern("diagonal-lines", "Diagonal Lines", PatternKind.PATTERN, PatternCategory.GEOMETRIC)
def diagonal_lines(props: BackgroundProps) -> list[SvgElement]:
    t = props.size * 0.1
    line = el("line", {"x1": 0, "y1": 0, "x2": 0, "y2": t}, {"stroke": props.color(1), "stroke-width": props.size * 0.03})
    return _tile(props, t, t, [_rect(t, t, props.color(0)), line], patternTransform=rotate(45))


@pattern("polka-dots", "Polka Dots", PatternKind.PATTERN, PatternCategory.GEOMETRIC)
def polka_dots(props: BackgroundProps) -> list[SvgElement]:
    t = props.size * 0.25
    r = props.size * 0.06
    dot = props.color(1)
    centres = [(t / 2, t / 2), (0, 0), (t, 0), (0, t), (t, t)]
    dots = [el("circle", {"cx": cx, "cy": cy, "r": r}, {"fill": dot}) for cx, cy in centres]
    return _tile(props, t, t, [_rect(t, t, props.color(0)), *dots])


@pattern("checkerboard", "Checkerboard", PatternKind.PATTERN, PatternCategory.GEOMETRIC)
def checkerboard(props: BackgroundProps) -> list[SvgElement]:
    q = props.size * 0.1
    a, b = props.color(0), props.color(1)
    return _tile(props, q * 2, q * 2, [
        _rect(q, q, a),
        _rect(q, q, a, x=q, y=q),
        _rect(q, q, b, x=q),
        _rect(q, q, b, y=q),
    ])


@pattern("triangles", "Triangles", PatternKind.PATTERN, PatternCategory.GEOMETRIC)
def triangles(props: BackgroundProps) -> list[SvgElement]:
    t = props.size * 0.15
    a, b = props.color(0), props.color(1)
    return _tile(props, t, t, [
        el("polygon", {"points": _points((0, t), (t / 2, 0), (t, t))}, {"fill": a}),
        el("polygon", {"points": _points((0, 0), (t / 2, 0), (0, t))}, {"fill": b}),
        el("polygon", {"points": _points((t, 0), (t, t), (t / 2, 0))}, {"fill": b}),
    ])


@pattern("hexagons", "Hexagons", PatternKind.PATTERN, PatternCategory.GEOMETRIC)
def hexagons(props: BackgroundProps) -> list[SvgElement]:
    h = props.size * 0.1
    pts = _points((h, 0), (h * 2, 0), (h * 2.5, h * 0.87), (h * 2, h * 1.73), (h, h * 1.73), (h * 0.5, h * 0.87))
    hexagon = el("polygon", {"points": pts}, {"fill": props.color(0), "stroke": props.color(1), "stroke-width": 1})
    return _tile(props, h * 3, h * 2.6, [hexagon])


@pattern("zigzag", "Zigzag", PatternKind.PATTERN, PatternCategory.GEOMETRIC)
def zigzag(props: BackgroundProps) -> list[SvgElement]:
    z = props.size * 0.2
    d = f"M0,{fmt(z / 2)} L{fmt(z / 4)},0 L{fmt(z / 2)},{fmt(z / 2)} L{fmt(z * 3 / 4)},0 L{fmt(z)},{fmt(z / 2)}"
    return _tile(props, z, z, [
        _rect(z, z, props.color(0)),
        el("path", {"d": d}, {"stroke": props.color(1), "stroke-width": z * 0.15, "fill": "none"}),
    ])


@pattern("protruding-squares", "Protruding Squares", PatternKind.PATTERN, PatternCategory.GEOMETRIC)
def protruding_squares(props: BackgroundProps) -> list[SvgElement]:
    q = props.size * 0.2
    return _tile(props, q, q, [
        _rect(q, q, props.color(0)),
        _rect(q * 0.4, q * 0.4, props.color(1), x=q * 0.1, y=q * 0.1),
        _rect(q * 0.4, q * 0.4, props.color(2), x=q * 0.5, y=q * 0.5),
    ])


@pattern("wavey-fingerprint", "Wavey Fingerprint", PatternKind.PATTERN, PatternCategory.GEOMETRIC)
def wavey_fingerprint(props: BackgroundProps) -> list[SvgElement]:
    s = props.size
    waves = []
    for i, offset in enumerate((0, 0.05, 0.1, 0.15)):
        d = (
            f"M0,{fmt(s * (0.1 + offset))} Q{fmt(s * 0.1)},{fmt(s * (0.05 + offset))} "
            f"{fmt(s * 0.2)},{fmt(s * (0.1 + offset))} T{fmt(s * 0.4)},{fmt(s * (0.1 + offset))}"
        )
        style = {"stroke": props.color(1), "stroke-width": s * 0.01, "fill": "none", "opacity": 1 - i * 0.2}
        waves.append(el("path", {"d": d}, style))
    return _tile(props, s * 0.4, s * 0.2, [_rect(s * 0.4, s * 0.2, props.color(0)), *waves])


@pattern("dragon-scales", "Dragon Scales", PatternKind.PATTERN, PatternCategory.GEOMETRIC)
def dragon_scales(props: BackgroundProps) -> list[SvgElement]:
    t = props.size * 0.15
    a = props.color(0)
    d = f"M0,{fmt(t)} Q{fmt(t / 2)},{fmt(t * 0.7)} {fmt(t)},{fmt(t)} L{fmt(t)},0 Q{fmt(t / 2)},{fmt(t * 0.3)} 0,0 Z"
    return _tile(props, t, t, [_rect(t, t, a), el("path", {"d": d}, {"fill": props.color(1), "stroke": a, "stroke-width": 1})])


@pattern("barcode-stripes", "Barcode Stripes", PatternKind.PATH, PatternCategory.GEOMETRIC)
def barcode_stripes(props: BackgroundProps) -> list[SvgElement]:
    stripes = []
    x, i = 0.0, 0
    while x < props.size:
        width_seed = props.seed + i * 997
        color_seed = props.seed + i * 1009
        span = 15 if i % 3 == 0 else 7
        width = min(1 + abs(width_seed) % span, props.size - x)
        fill = props.colors[abs(color_seed) % len(props.colors)] or props.colors[0]
        stripes.append(el("rect", {"x": x, "y": 0, "width": width, "height": props.size}, {"fill": fill}))
        x += width
        i += 1
    return stripes


@pattern("dot-grid", "Dot Grid", PatternKind.PATTERN, PatternCategory.GEOMETRIC)
def dot_grid(props: BackgroundProps) -> list[SvgElement]:
    spacing = 15 + props.seed % 10
    r = 1.5 + (props.seed % 3) * 0.5
    dot = el("circle", {"cx": spacing / 2, "cy": spacing / 2, "r": r}, {"fill": props.color(0), "opacity": 0.3})
    return _tile(props, spacing, spacing, [dot])


@pattern("cross-hatch", "Cross Hatch", PatternKind.PATTERN, PatternCategory.GEOMETRIC)
def cross_hatch(props: BackgroundProps) -> list[SvgElement]:
    spacing = 8 + props.seed % 12
    width = 0.5 + (props.seed % 10) * 0.1
    d = f"M0,{spacing} L{spacing},0 M0,0 L{spacing},{spacing}"
    return _tile(props, spacing, spacing, [
        el("path", {"d": d}, {"stroke": props.color(0), "stroke-width": width, "opacity": 0.2}),
    ])


@pattern("soft-circles", "Soft Circles", PatternKind.PATTERN, PatternCategory.GEOMETRIC)
def soft_circles(props: BackgroundProps) -> list[SvgElement]:
    t = 40 + props.seed % 30
    r = t * 0.35
    corner = {"fill": props.color(1), "opacity": 0.1}
    corners = [el("circle", {"cx": cx, "cy": cy, "r": r * 0.7}, corner) for cx, cy in ((0, 0), (t, 0), (0, t), (t, t))]
    centre = el("circle", {"cx": t / 2, "cy": t / 2, "r": r}, {"fill": props.color(0), "opacity": 0.15})
    return _tile(props, t, t, [centre, *corners])


@pattern("overlapping-circles", "Overlapping Circles", PatternKind.PATTERN, PatternCategory.GEOMETRIC)
def overlapping_circles(props: BackgroundProps) -> list[SvgElement]:
    t = 35 + props.seed % 25
    r = t * 0.4
    style = {"fill": "none", "stroke": props.color(0), "stroke-width": 0.5, "opacity": 0.3}
    centres = ((t / 2, 0), (0, t / 2), (t, t / 2), (t / 2, t))
    return _tile(props, t, t, [el("circle", {"cx": cx, "cy": cy, "r": r}, style) for cx, cy in centres])


@pattern("plus-pattern", "Plus Pattern", PatternKind.PATTERN, PatternCategory.GEOMETRIC)
def plus_pattern(props: BackgroundProps) -> list[SvgElement]:
    t = 20 + props.seed % 15
    arm = t * 0.4
    width = 1 + (props.seed % 10) * 0.2
    d = f"M{fmt(t / 2)},{fmt((t - arm) / 2)} v{fmt(arm)} M{fmt((t - arm) / 2)},{fmt(t / 2)} h{fmt(arm)}"
    style = {"stroke": props.color(0), "stroke-width": width, "opacity": 0.25, "stroke-linecap": "round"}
    return _tile(props, t, t, [el("path", {"d": d}, style)])


# ── Gradients ──


@pattern("radial-gradient", "Radial Gradient", PatternKind.GRADIENT, PatternCategory.GRADIENT)
def radial_gradient(props: BackgroundProps) -> list[SvgElement]:
    return [el("radialGradient", {"id": props.pattern_id}, children=[
        el("stop", {"offset": "0%"}, {"stop-color": props.color(0)}),
        el("stop", {"offset": "100%"}, {"stop-color": props.color(1)}),
    ])]


@pattern("linear-gradient", "Linear Gradient", PatternKind.GRADIENT, PatternCategory.GRADIENT)
def linear_gradient(props: BackgroundProps) -> list[SvgElement]:
    angle = math.radians(get_unit(props.seed, 360))
    attrs = {
        "id": props.pattern_id,
        "x1": "0%",
        "y1": "0%",
        "x2": f"{fmt(math.cos(angle) * 100)}%",
        "y2": f"{fmt(math.sin(angle) * 100)}%",
    }
    return [el("linearGradient", attrs, children=[
        el("stop", {"offset": "0%"}, {"stop-color": props.color(0)}),
        el("stop", {"offset": "100%"}, {"stop-color": props.color(1)}),
    ])]


# ── Decorative ──


@pattern("confetti-doodles", "Confetti Doodles", PatternKind.PATH, PatternCategory.DECORATIVE)
def confetti_doodles(props: BackgroundProps) -> list[SvgElement]:
    s, seed = props.size, props.seed
    shapes = [_rect(s, s, props.color(0))]
    for i in range(20):
        x = get_unit(seed + i * 2, s)
        y = get_unit(seed + i * 3, s)
        piece = get_unit(seed + i * 5, s / 15, 1) + s / 30
        fill = props.color(i)
        angle = get_unit(seed + i * 7, 360)
        if i % 3 == 0:
            shapes.append(el(
                "rect",
                {"x": x, "y": y, "width": piece, "height": piece / 2,
                 "transform": rotate(angle, x + piece / 2, y + piece / 4)},
                {"fill": fill},
            ))
        elif i % 3 == 1:
            shapes.append(el("circle", {"cx": x, "cy": y, "r": piece / 2}, {"fill": fill}))
        else:
            shapes.append(el(
                "polygon",
                {"points": _points((x, y), (x + piece, y), (x + piece / 2, y - piece)),
                 "transform": rotate(angle, x + piece / 2, y)},
                {"fill": fill},
            ))
    return shapes


@pattern("endless-constellation", "Endless Constellation", PatternKind.PATH, PatternCategory.DECORATIVE)
def endless_constellation(props: BackgroundProps) -> list[SvgElement]:
    s, seed = props.size, props.seed
    points = [(get_unit(seed + i * 2, s), get_unit(seed + i * 3, s)) for i in range(15)]
    stars = [
        el("circle", {"cx": x, "cy": y, "r": get_unit(seed + i * 5, 3, 1) + 1}, {"fill": props.color(1)})
        for i, (x, y) in enumerate(points)
    ]
    lines = []
    for i in range(len(points) - 1):
        if get_unit(seed + i * 7, 10) > 5:
            nxt = (i + 1 + get_unit(seed + i * 11, 3)) % len(points)
            (x1, y1), (x2, y2) = points[i], points[nxt]
            lines.append(el(
                "line",
                {"x1": x1, "y1": y1, "x2": x2, "y2": y2},
                {"stroke": props.color(2), "stroke-width": 0.5, "opacity": 0.3},
            ))
    return [_rect(s, s, props.color(0)), *lines, *stars]


# ── Lookup & rendering ──


def all_patterns() -> list[BackgroundPattern]:
    """Every pattern, grouped by category in declaration order."""
    order = list(PatternCategory)
    return sorted(_PATTERNS.values(), key=lambda p: order.index(p.category))


def patterns_in(category: PatternCategory) -> list[BackgroundPattern]:
    return [p for p in all_patterns() if p.category is category]


def get_pattern(pattern_id: str) -> BackgroundPattern | None:
    return _PATTERNS.get(pattern_id)


def select_pattern(seed: int, patterns: Sequence[BackgroundPattern] | None = None) -> BackgroundPattern | None:
    pool = all_patterns() if patterns is None else list(patterns)
    if not pool:
        return None
    return pool[abs(seed) % len(pool)]


def render_background(pattern_: BackgroundPattern | None, props: BackgroundProps) -> BackgroundRender:
    if pattern_ is None:
        return BackgroundRender()
    rendered = pattern_.render(props)
    if pattern_.needs_defs:
        cover = el("rect", {"width": props.size, "height": props.size, "fill": f"url(#{props.pattern_id})"})
        return BackgroundRender(defs=rendered, elements=[cover])
    return BackgroundRender(elements=rendered)


def blur_filter(filter_id: str) -> SvgElement:
    """Soft-focus filter for marble blobs."""
    return el(
        "filter",
        {"id": filter_id, "filterUnits": "userSpaceOnUse", "color-interpolation-filters": "sRGB"},
        children=[
            el("feFlood", {"flood-opacity": 0, "result": "BackgroundImageFix"}),
            el("feBlend", {"in": "SourceGraphic", "in2": "BackgroundImageFix", "result": "shape"}),
            el("feGaussianBlur", {"stdDeviation": BLUR_STD_DEVIATION, "result": "effect1_foregroundBlur"}),
        ],
    )


def render_marble_background(props: BackgroundProps, filter_url: str | None = None) -> BackgroundRender:
    """Solid base plus two blurred, jittered blobs."""
    if filter_url is not None:
        props = replace(props, filter_url=filter_url)
    base = _rect(props.size, props.size, props.color(0))
    logger.debug("Marble background seed=%d", props.seed)
    return BackgroundRender(elements=[base, *marble_blob_1(props), *marble_blob_2(props)])
