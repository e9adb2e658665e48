"""Beam: a rotated rounded body with a tiny face on top."""

from __future__ import annotations

from sigma_avatars.engine.canvas import frame
from sigma_avatars.engine.colors import get_contrast_safe
from sigma_avatars.engine.context import RenderContext
from sigma_avatars.engine.registry import variant
from sigma_avatars.engine.seed import get_boolean, get_unit
from sigma_avatars.engine.transforms import compose, rotate, scale, translate
from sigma_avatars.models.avatar import Variant
from sigma_avatars.models.svg_document import SvgDocument, el
from sigma_avatars.svg.path_builder import PathBuilder

SIZE = 36
BACKGROUND_OFFSET = 13


def _jitter(n: int, index: int) -> float:
    pre = get_unit(n, 10, index)
    return pre + SIZE / 9 if pre < 5 else pre


def beam_data(ctx: RenderContext) -> dict:
    """Seeded parameters for the body and face."""
    n = ctx.seed
    wrapper_color = ctx.color(n)
    tx = _jitter(n, 1)
    ty = _jitter(n, 2)
    return {
        "wrapper_color": wrapper_color,
        "face_color": get_contrast_safe(wrapper_color, "#000000"),
        "background_color": ctx.color(n + BACKGROUND_OFFSET),
        "wrapper_translate_x": tx,
        "wrapper_translate_y": ty,
        "wrapper_rotate": get_unit(n, 360),
        "wrapper_scale": 1 + get_unit(n, SIZE // 12) / 10,
        "is_mouth_open": get_boolean(n, 2),
        "is_circle": get_boolean(n, 1),
        "eye_spread": get_unit(n, 5),
        "mouth_spread": get_unit(n, 3),
        "face_rotate": get_unit(n, 10, 3),
        "face_translate_x": tx / 2 if tx > SIZE / 6 else get_unit(n, 8, 1),
        "face_translate_y": ty / 2 if ty > SIZE / 6 else get_unit(n, 7, 2),
    }


@variant(Variant.BEAM, canvas=SIZE, description="Rounded body with a minimal face")
def beam(ctx: RenderContext) -> SvgDocument:
    d = beam_data(ctx)
    f = frame(ctx, SIZE)
    origin = f"{SIZE // 2}px {SIZE // 2}px"
    face = d["face_color"]

    body = el(
        "rect",
        {
            "x": 0,
            "y": 0,
            "width": SIZE,
            "height": SIZE,
            "rx": SIZE if d["is_circle"] else SIZE // 6,
            "transform": compose(
                translate(d["wrapper_translate_x"], d["wrapper_translate_y"]),
                rotate(d["wrapper_rotate"]),
                scale(d["wrapper_scale"]),
            ),
        },
        {"fill": d["wrapper_color"], "transform-origin": origin},
    )

    mouth_y = 19 + d["mouth_spread"]
    if d["is_mouth_open"]:
        path = PathBuilder().move_to(15, mouth_y).cubic_to(17, mouth_y + 1, 19, mouth_y + 1, 21, mouth_y).build()
        mouth = el("path", {"d": path, "fill": "none", "stroke-linecap": "round"}, {"stroke": face})
    else:
        path = PathBuilder().move_to(13, mouth_y).arc_to(1, 0.75, 0, 0, 0, 23, mouth_y).build()
        mouth = el("path", {"d": path}, {"fill": face})

    def eye(x: float):
        return el("rect", {"x": x, "y": 14, "width": 1.5, "height": 2, "rx": 1, "stroke": "none"}, {"fill": face})

    face_group = el(
        "g",
        {"transform": compose(translate(d["face_translate_x"], d["face_translate_y"]), rotate(d["face_rotate"]))},
        {"transform-origin": origin},
        children=[mouth, eye(14 - d["eye_spread"]), eye(20 + d["eye_spread"])],
    )

    f.add(f.full_rect(d["background_color"]), body, face_group)
    return f.finish()
