"""Tests for the background pattern registry."""

import pytest

from sigma_avatars.engine.backgrounds import (
    BackgroundProps,
    PatternCategory,
    PatternKind,
    all_patterns,
    blur_filter,
    get_pattern,
    pattern,
    patterns_in,
    render_background,
    render_marble_background,
    select_pattern,
)
from sigma_avatars.engine.colors import DEFAULT_COLORS


def _props(seed: int = 1234, **kwargs) -> BackgroundProps:
    return BackgroundProps(size=80, colors=DEFAULT_COLORS, seed=seed, pattern_id="bg-pattern", **kwargs)


def test_registry_contents():
    ids = {p.id for p in all_patterns()}
    assert {"marble-blob-1", "marble-blob-2", "polka-dots", "checkerboard", "radial-gradient"} <= ids
    assert len(ids) == len(all_patterns())


def test_all_patterns_grouped_by_category():
    order = list(PatternCategory)
    positions = [order.index(p.category) for p in all_patterns()]
    assert positions == sorted(positions)


def test_patterns_in_category():
    for category in PatternCategory:
        assert all(p.category is category for p in patterns_in(category))
    assert patterns_in(PatternCategory.GRADIENT)


def test_get_pattern():
    assert get_pattern("checkerboard").kind is PatternKind.PATTERN
    assert get_pattern("nope") is None


def test_duplicate_pattern_rejected():
    with pytest.raises(ValueError):
        pattern("polka-dots", "Again", PatternKind.PATTERN, PatternCategory.GEOMETRIC)(lambda props: [])


def test_select_pattern():
    pool = all_patterns()
    assert select_pattern(len(pool) + 2) is pool[2]
    assert select_pattern(-(len(pool) + 2)) is pool[2]
    assert select_pattern(5, []) is None


@pytest.mark.parametrize("pattern_id", [p.id for p in all_patterns()])
def test_every_pattern_renders(pattern_id):
    bg = get_pattern(pattern_id)
    rendered = render_background(bg, _props())
    assert rendered.elements
    if bg.needs_defs:
        assert rendered.defs[0].attributes["id"] == "bg-pattern"
        assert rendered.elements[-1].attributes["fill"] == "url(#bg-pattern)"
    else:
        assert rendered.defs == []


def test_render_background_none():
    rendered = render_background(None, _props())
    assert rendered.defs == [] and rendered.elements == []


def test_props_color_is_seeded():
    props = _props(seed=7)
    assert props.color(0) == DEFAULT_COLORS[2]
    assert props.color(1) == DEFAULT_COLORS[3]


def test_marble_background():
    rendered = render_marble_background(_props(), filter_url="url(#f)")
    base, blob1, blob2 = rendered.elements
    assert base.tag == "rect"
    assert blob1.attributes["filter"] == "url(#f)"
    assert blob2.style["mix-blend-mode"] == "overlay"
    assert blob1.attributes["transform"] != blob2.attributes["transform"]


def test_blur_filter():
    f = blur_filter("blur")
    assert f.attributes["id"] == "blur"
    assert [c.tag for c in f.children] == ["feFlood", "feBlend", "feGaussianBlur"]
    assert f.children[-1].attributes["stdDeviation"] == 7
