"""Write SVG markup from a :class:`SvgDocument`.

Output is canonical: attributes keep insertion order, numbers go through
:func:`format_number`, and no whitespace depends on the platform.
"""

from __future__ import annotations

from xml.sax.saxutils import escape, quoteattr

from sigma_avatars.models.svg_document import AttrValue, SvgDocument, SvgElement

SVG_NS = "http://www.w3.org/2000/svg"

# Decimal places kept for coordinates; enough for 1024px rasters of an 80-unit canvas
DEFAULT_PRECISION = 3


def format_number(value: float | int, precision: int = DEFAULT_PRECISION) -> str:
    """Compact decimal: ints verbatim, floats rounded with trailing zeros stripped."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text


def _format_value(value: AttrValue) -> str:
    if isinstance(value, (int, float)):
        return format_number(value)
    return value


def _style_string(style: dict[str, AttrValue]) -> str:
    return ";".join(f"{k}:{_format_value(v)}" for k, v in style.items())


def _open_tag(element: SvgElement) -> str:
    parts = [element.tag]
    for key, value in element.attributes.items():
        parts.append(f"{key}={quoteattr(_format_value(value))}")
    if element.style:
        parts.append(f"style={quoteattr(_style_string(element.style))}")
    return " ".join(parts)


def serialize_element(element: SvgElement) -> str:
    head = _open_tag(element)
    if not element.children and element.text is None:
        return f"<{head}/>"
    inner = "".join(serialize_element(child) for child in element.children)
    if element.text is not None:
        inner = escape(element.text) + inner
    return f"<{head}>{inner}</{element.tag}>"


def serialize_svg(doc: SvgDocument) -> str:
    """Generate SVG markup for a document (title text escaped)."""
    min_x, min_y, vb_w, vb_h = doc.viewbox
    root = SvgElement(
        tag="svg",
        attributes={
            "viewBox": " ".join(format_number(v) for v in (min_x, min_y, vb_w, vb_h)),
            "fill": "none",
            "role": "img",
            "xmlns": SVG_NS,
            "width": doc.width,
            "height": doc.height,
        },
    )
    parts = [f"<{_open_tag(root)}>"]
    if doc.title is not None:
        parts.append(f"<title>{escape(doc.title)}</title>")
    parts.extend(serialize_element(el) for el in doc.elements)
    parts.append("</svg>")
    return "".join(parts)
