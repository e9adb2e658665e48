"""Fractal: a dense background L-system under a sparse foreground one.

Every seeded value comes from ``seed * multiplier + offset`` through the
bit-spread unit, with the (multiplier, offset) pairs fixed in ``OFFSETS``.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from sigma_avatars.engine.canvas import frame, mask_rect
from sigma_avatars.engine.context import RenderContext
from sigma_avatars.engine.lsystem import LSystem, TurtlePath, interpret
from sigma_avatars.engine.registry import variant
from sigma_avatars.engine.seed import get_spread_unit
from sigma_avatars.engine.transforms import compose, rotate, scale, translate
from sigma_avatars.models.avatar import Variant
from sigma_avatars.models.svg_document import SvgDocument, SvgElement, el
from sigma_avatars.utils.geometry import fit_to_box, stroke_width_for_coverage

logger = logging.getLogger(__name__)

SIZE = 80
PATH_PRECISION = 2
ACCENT_DOTS = 5
BLEND_MODES = ("multiply", "screen", "overlay")

BACKGROUND_FRACTALS = (
    LSystem("Hilbert", "A", {"A": "-BF+AFA+FB-", "B": "+AF-BFB-FA+"}, 90, 5, angle_variance=5),
    LSystem("Gosper", "A", {"A": "A-B--B+A++AA+B-", "B": "+A-BB--B-A++A+B"}, 60, 4, draw="AB"),
    LSystem("Sierpinski", "F-G-G", {"F": "F-G+F+G-F", "G": "GG"}, 120, 5, angle_variance=15),
    LSystem("Peano", "F", {"F": "F+F-F-F-F+F+F+F-F"}, 90, 3, angle_variance=8),
    LSystem("Moore", "LFL+F+LFL", {"L": "-RF+LFL+FR-", "R": "+LF-RFR-FL+"}, 90, 4, angle_variance=5),
    LSystem("Hexagon", "F", {"F": "F+F-F-F+F+F-F"}, 60, 3),
)

FOREGROUND_FRACTALS = (
    LSystem("Dragon", "FX", {"X": "X+YF+", "Y": "-FX-Y"}, 90, 11, angle_variance=15, iter_variance=2),
    LSystem("Koch", "F++F++F", {"F": "F-F++F-F"}, 60, 4),
    LSystem("Plant", "X", {"X": "F+[[X]-X]-F[-FX]+X", "F": "FF"}, 25, 4),
    LSystem("Levy", "F", {"F": "+F--F+"}, 45, 10, angle_variance=15, iter_variance=2),
    LSystem("Tree", "F", {"F": "F[+F]F[-F]F"}, 25.7, 4, angle_variance=8),
    LSystem("Fern", "X", {"X": "F[+X][-X]FX", "F": "FF"}, 25, 5, angle_variance=12),
    LSystem("Crystal", "F+F+F+F", {"F": "FF+F+F+F+F+F-F"}, 90, 3),
)

# name -> (seed multiplier, additive offset); per-dot values add index * step
OFFSETS: dict[str, tuple[int, int]] = {
    "bg_fractal": (31, 0),
    "fg_fractal": (37, 7),
    "bg_iterations": (53, 3),
    "bg_angle": (59, 5),
    "fg_iterations": (61, 11),
    "fg_angle": (67, 13),
    "bg_margin": (71, 17),
    "bg_rotation": (73, 19),
    "bg_offset_x": (79, 29),
    "bg_offset_y": (83, 31),
    "fg_margin": (89, 23),
    "fg_rotation": (97, 37),
    "fg_offset_x": (101, 73),
    "fg_offset_y": (103, 79),
    "bg_coverage": (107, 41),
    "fg_coverage": (109, 43),
    "use_dash": (113, 47),
    "dash_repeats": (127, 53),
    "dash_ratio": (131, 59),
    "gap_ratio": (137, 61),
    "bg_opacity": (139, 67),
    "fg_translucent": (149, 0),
    "fg_opacity": (151, 71),
    "use_gradients": (241, 0),
    "accent_background": (251, 0),
    "bg_color": (257, 0),
    "fg_color": (263, 0),
    "use_blend": (269, 0),
    "blend_mode": (271, 0),
    "dot_visible": (151, 0),
    "dot_angle": (157, 0),
    "dot_radius": (163, 0),
    "dot_size": (167, 0),
    "dot_opacity": (173, 0),
}

DOT_STEPS = {"dot_visible": 17, "dot_angle": 19, "dot_radius": 23, "dot_size": 29, "dot_opacity": 31}


@dataclass(frozen=True)
class Layer:
    system: LSystem
    iterations: int
    angle: float
    path: TurtlePath


class _Seeded:
    def __init__(self, seed: int) -> None:
        self.seed = seed

    def __call__(self, key: str, range_: int, index: int = 0) -> int:
        multiplier, offset = OFFSETS[key]
        step = DOT_STEPS.get(key, 0)
        return get_spread_unit(self.seed * multiplier + offset + index * step, max(1, range_))


def _layer(u: _Seeded, family: tuple[LSystem, ...], prefix: str) -> Layer:
    system = family[u(f"{prefix}_fractal", len(family))]
    iter_var = system.iter_variance
    iterations = max(1, system.iterations + u(f"{prefix}_iterations", iter_var * 2 + 1) - iter_var)
    angle_var = system.angle_variance
    angle = system.angle + (u(f"{prefix}_angle", angle_var * 2) - angle_var) / 2
    path = interpret(system.expand(iterations), angle, system.draw)
    return Layer(system=system, iterations=iterations, angle=angle, path=path)


def _placement(path: TurtlePath, margin: float, rotation: float, dx: float, dy: float) -> str:
    fit = fit_to_box(path.min_x, path.max_x, path.min_y, path.max_y, SIZE, margin)
    return compose(
        translate(SIZE / 2 + dx, SIZE / 2 + dy, sep=", "),
        rotate(rotation),
        translate(-SIZE / 2, -SIZE / 2, sep=", "),
        translate(fit.translate_x, fit.translate_y, sep=", "),
        scale(fit.scale),
    )


def _gradient(gradient_id: str, stops: list[str]) -> SvgElement:
    return el(
        "linearGradient",
        {"id": gradient_id, "x1": "0%", "x2": "100%", "y1": "0%", "y2": "100%"},
        children=[
            el("stop", {"offset": f"{i * 50}%"}, {"stop-color": color})
            for i, color in enumerate(stops)
        ],
    )


def _first(ctx: RenderContext, *indices: int) -> str:
    """First non-empty palette entry among ``indices``, else the first color."""
    for i in indices:
        if i < len(ctx.colors) and ctx.colors[i]:
            return ctx.colors[i]
    return ctx.colors[0]


@variant(Variant.FRACTAL, canvas=SIZE, description="Layered L-system fractals")
def fractal(ctx: RenderContext) -> SvgDocument:
    u = _Seeded(ctx.seed)
    n_colors = len(ctx.colors)

    bg = _layer(u, BACKGROUND_FRACTALS, "bg")
    fg = _layer(u, FOREGROUND_FRACTALS, "fg")
    logger.debug(
        "Fractal %s: bg=%s(%d, %.1fdeg) fg=%s(%d, %.1fdeg)",
        ctx.name, bg.system.name, bg.iterations, bg.angle, fg.system.name, fg.iterations, fg.angle,
    )

    use_gradients = u("use_gradients", 100) < 20
    bg_color = ctx.at(u("bg_color", min(n_colors, 3)))
    fg_color = _first(ctx, u("fg_color", min(n_colors - 1, 3)) + 1, 2)
    blend_mode = BLEND_MODES[u("blend_mode", len(BLEND_MODES))] if u("use_blend", 100) < 20 else "normal"

    bg_transform = _placement(
        bg.path,
        margin=1.2 + u("bg_margin", 15) / 10,
        rotation=u("bg_rotation", 60) - 30,
        dx=(u("bg_offset_x", 20) - 10) * 0.5,
        dy=(u("bg_offset_y", 20) - 10) * 0.5,
    )
    fg_transform = _placement(
        fg.path,
        margin=0.8 + u("fg_margin", 10) / 10,
        rotation=u("fg_rotation", 180) - 90,
        dx=(u("fg_offset_x", 40) - 20) * 1.5,
        dy=(u("fg_offset_y", 40) - 20) * 1.5,
    )

    bg_width = stroke_width_for_coverage(bg.path.length, SIZE, 0.1 + u("bg_coverage", 15) / 100, 0.5, 4)
    fg_width = stroke_width_for_coverage(fg.path.length, SIZE, 0.05 + u("fg_coverage", 10) / 100, 0.3, 2.5)

    dash = "none"
    if u("use_dash", 3) > 0 and fg.path.length > 0:
        unit = fg.path.length / (8 + u("dash_repeats", 16))
        dash_ratio = 0.2 + u("dash_ratio", 6) / 10
        gap_ratio = 0.2 + u("gap_ratio", 4) / 10
        dash = f"{unit * dash_ratio:.3f} {unit * gap_ratio:.3f}"

    bg_opacity = 0.4 + u("bg_opacity", 4) / 10
    fg_opacity = 0.6 + u("fg_opacity", 3) / 10 if u("fg_translucent", 100) < 10 else 1.0

    bg_gradient, fg_gradient, accent_gradient = ctx.id("fractal-bg"), ctx.id("fractal-fg"), ctx.id("fractal-accent")
    clip_id = ctx.id("clip")
    accent_color = _first(ctx, 4, 3)

    f = frame(ctx, SIZE)
    f.define(
        _gradient(bg_gradient, [_first(ctx, 0), _first(ctx, 1), _first(ctx, 2, 1)]),
        _gradient(fg_gradient, [_first(ctx, 2, 1), _first(ctx, 3, 2), _first(ctx, 4, 3)]),
        el(
            "radialGradient",
            {"id": accent_gradient, "cx": "50%", "cy": "50%", "r": "50%"},
            children=[
                el("stop", {"offset": "0%"}, {"stop-color": accent_color, "stop-opacity": 0.8}),
                el("stop", {"offset": "100%"}, {"stop-color": ctx.colors[0], "stop-opacity": 0.2}),
            ],
        ),
        el("clipPath", {"id": clip_id}, children=[mask_rect(SIZE, ctx.square)]),
    )
    f.body.attributes["clip-path"] = f"url(#{clip_id})"

    accent_fill = f"url(#{accent_gradient})" if u("accent_background", 100) < 10 else ctx.colors[0]
    f.add(el("rect", {"width": SIZE, "height": SIZE, "opacity": 0.15}, {"fill": accent_fill}))

    line_style = {"fill": "none", "stroke-linecap": "round", "stroke-linejoin": "round"}
    f.add(
        el(
            "path",
            {"d": bg.path.to_path_data(PATH_PRECISION), "transform": bg_transform},
            {
                **line_style,
                "stroke": f"url(#{bg_gradient})" if use_gradients else bg_color,
                "stroke-width": bg_width,
                "opacity": bg_opacity,
            },
        ),
        el(
            "path",
            {
                "d": fg.path.to_path_data(PATH_PRECISION),
                "pathLength": round(fg.path.length, 3),
                "transform": fg_transform,
            },
            {
                **line_style,
                "stroke": f"url(#{fg_gradient})" if use_gradients else fg_color,
                "stroke-width": fg_width,
                "stroke-dasharray": dash,
                "opacity": fg_opacity,
                "mix-blend-mode": blend_mode,
            },
        ),
    )

    for i in range(ACCENT_DOTS):
        if u("dot_visible", 100, i) >= 20:
            continue
        angle = math.radians(u("dot_angle", 360, i))
        radius = SIZE * (0.2 + u("dot_radius", 25, i) / 100)
        f.add(el(
            "circle",
            {
                "cx": SIZE / 2 + math.cos(angle) * radius,
                "cy": SIZE / 2 + math.sin(angle) * radius,
                "r": 0.5 + u("dot_size", 4, i) / 2,
            },
            {"fill": accent_color, "opacity": 0.3 + u("dot_opacity", 40, i) / 100},
        ))

    return f.finish()
