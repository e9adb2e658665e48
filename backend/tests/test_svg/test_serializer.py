"""Tests for the document serializer and path builder."""

from sigma_avatars.models.svg_document import SvgDocument, el
from sigma_avatars.svg.path_builder import PathBuilder, quad_path
from sigma_avatars.svg.serializer import format_number, serialize_element, serialize_svg


def test_format_number():
    assert format_number(3) == "3"
    assert format_number(3.0) == "3"
    assert format_number(0.1 + 0.2) == "0.3"
    assert format_number(1.23456) == "1.235"
    assert format_number(1.23456, 1) == "1.2"
    assert format_number(-0.0001) == "0"


def test_serialize_element_attributes_then_style():
    element = el("rect", {"width": 10, "rx": 2.5}, {"fill": "#FFF", "opacity": 0.5})
    assert serialize_element(element) == '<rect width="10" rx="2.5" style="fill:#FFF;opacity:0.5"/>'


def test_serialize_element_children_and_text():
    group = el("g", {"id": "a"}, children=[el("circle", {"r": 1})])
    assert serialize_element(group) == '<g id="a"><circle r="1"/></g>'
    assert serialize_element(el("text", text="a<b")) == "<text>a&lt;b</text>"


def test_serialize_svg_root_and_title_escaping():
    doc = SvgDocument(width=64, height=64, viewbox=(0, 0, 36, 36), title="Tom & <Jerry>")
    out = serialize_svg(doc)
    assert out.startswith('<svg viewBox="0 0 36 36" fill="none" role="img" xmlns="http://www.w3.org/2000/svg"')
    assert 'width="64" height="64"' in out
    assert "<title>Tom &amp; &lt;Jerry&gt;</title>" in out
    assert out.endswith("</svg>")


def test_serialize_svg_without_title():
    assert "<title>" not in serialize_svg(SvgDocument())


def test_attribute_values_are_quoted():
    out = serialize_element(el("path", {"d": 'M 0 0 "x"'}))
    assert out == "<path d='M 0 0 \"x\"'/>"


def test_path_builder_commands():
    d = (
        PathBuilder()
        .move_to(0, 0)
        .line_to(10, 0)
        .quad_to(15, 5, 10, 10)
        .smooth_quad_to(0, 10)
        .cubic_to(1, 2, 3, 4, 5, 6)
        .smooth_cubic_to(7, 8, 9, 10)
        .arc_to(1, 0.75, 0, False, True, 23, 19)
        .close()
    )
    assert len(d) == 8
    assert d.build() == "M 0 0 L 10 0 Q 15 5 10 10 T 0 10 C 1 2 3 4 5 6 S 7 8 9 10 A 1 0.75 0 0 1 23 19 Z"


def test_path_builder_precision():
    assert PathBuilder(precision=1).move_to(1.26, 0.04).build() == "M 1.3 0"


def test_polyline():
    assert PathBuilder().polyline([]).build() == ""
    assert PathBuilder().polyline([(0, 0), (1, 1)]).build() == "M 0 0 L 1 1"


def test_quad_path():
    assert quad_path(0, 0, 5, 5, 10, 0) == "M 0 0 Q 5 5 10 0"
