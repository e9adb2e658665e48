"""Tests for L-systems, the turtle, fit-to-box and transform strings."""

import numpy as np
import pytest

from sigma_avatars.engine.lsystem import LSystem, expand, interpret
from sigma_avatars.engine.transforms import compose, organic_transform, rotate, scale, translate
from sigma_avatars.utils.geometry import bbox, fit_to_box, polyline_length, stroke_width_for_coverage


def test_expand_parallel_rewrite():
    assert expand("A", {"A": "AB", "B": "A"}, 3) == "ABAAB"
    assert expand("F", {"F": "F+F"}, 0) == "F"
    assert expand("XF", {"F": "FF"}, 1) == "XFF"


def test_lsystem_expand_defaults_to_its_iterations():
    system = LSystem("Koch", "F", {"F": "F+F"}, 60, 2)
    assert system.expand() == "F+F+F+F"
    assert system.expand(1) == "F+F"


def test_interpret_square():
    path = interpret("F+F+F+F", 90)
    assert path.segment_count == 4
    assert path.length == pytest.approx(4)
    assert path.min_x == pytest.approx(0)
    assert path.max_x == pytest.approx(1)
    assert path.min_y == pytest.approx(0)
    assert path.max_y == pytest.approx(1)


def test_interpret_branches_become_subpaths():
    path = interpret("F[+F]F", 90)
    assert len(path.subpaths) == 2
    # the branch is committed when it closes, the trunk at the end
    assert path.subpaths[0] == [(0.0, 0.0), (1.0, 0.0), pytest.approx((1.0, 1.0))]
    assert path.subpaths[1][0] == (1.0, 0.0)
    assert path.length == pytest.approx(3)


def test_interpret_ignores_unmatched_close():
    path = interpret("F]F", 90)
    assert path.segment_count == 2


def test_interpret_custom_draw_symbols():
    assert interpret("AB", 60, draw="FG").segment_count == 0
    assert interpret("AB", 60, draw="AB").segment_count == 2


def test_interpret_empty_program():
    path = interpret("", 90)
    assert path.subpaths == []
    assert path.length == 0
    assert path.to_path_data() == ""


def test_to_path_data():
    path = interpret("FF", 90)
    assert path.to_path_data() == "M 0 0 L 1 0 L 2 0"


def test_bbox_and_polyline_length():
    points = np.array([[0.0, 0.0], [3.0, 4.0], [3.0, -1.0]])
    assert bbox(points) == (0.0, -1.0, 3.0, 4.0)
    assert polyline_length(points) == pytest.approx(10.0)
    assert bbox(np.zeros((0, 2))) == (0.0, 0.0, 0.0, 0.0)


def test_fit_to_box_centres_and_scales():
    fit = fit_to_box(0, 10, 0, 5, 80, margin=1.0)
    assert fit.scale == pytest.approx(8)
    assert fit.translate_x == pytest.approx(0)
    assert fit.translate_y == pytest.approx(20)


def test_fit_to_box_degenerate_axis():
    fit = fit_to_box(0, 10, 2, 2, 80, margin=1.0)
    assert fit.scale == pytest.approx(8)
    assert fit.translate_y == pytest.approx(40 - 16)


def test_fit_to_box_point():
    fit = fit_to_box(5, 5, 5, 5, 80)
    assert fit.scale == 1.0
    assert fit.translate_x == pytest.approx(35)


def test_stroke_width_for_coverage_clamps():
    assert stroke_width_for_coverage(100, 80, 0.1, 0.5, 4) == pytest.approx(4)
    assert stroke_width_for_coverage(100000, 80, 0.1, 0.5, 4) == pytest.approx(0.5)
    assert stroke_width_for_coverage(3200, 80, 0.5, 0.1, 10) == pytest.approx(1.0)
    assert stroke_width_for_coverage(0, 80, 0.0, 0.3, 2) == pytest.approx(0.3)


def test_transform_strings():
    assert translate(1, 2) == "translate(1 2)"
    assert translate(1.5, -2, sep=", ") == "translate(1.5, -2)"
    assert rotate(45) == "rotate(45)"
    assert rotate(45, 40, 40) == "rotate(45 40 40)"
    assert scale(1.25) == "scale(1.25)"
    assert compose("a", "", "b") == "a b"


def test_organic_transform_deterministic_and_indexed():
    first = organic_transform(12345, 80, 0)
    assert first == organic_transform(12345, 80, 0)
    assert first != organic_transform(12345, 80, 1)
    assert first.startswith("translate(")
    assert "rotate(" in first and "40 40)" in first
    assert first.endswith("scale(1.3)")
