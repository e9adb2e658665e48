"""Vector image document model produced by the variant generators."""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, Field

AttrValue = str | int | float


class SvgElement(BaseModel):
    tag: str
    attributes: dict[str, AttrValue] = Field(default_factory=dict)
    # CSS declarations, emitted as a single style attribute in insertion order
    style: dict[str, AttrValue] = Field(default_factory=dict)
    children: list[SvgElement] = Field(default_factory=list)
    text: str | None = None

    def iter(self) -> Iterator[SvgElement]:
        """Depth-first walk including this element."""
        yield self
        for child in self.children:
            yield from child.iter()

    def add(self, *children: SvgElement) -> SvgElement:
        self.children.extend(children)
        return self


class SvgDocument(BaseModel):
    """A complete avatar: outer size, internal canvas and the element tree."""

    width: int | float = 80
    height: int | float = 80
    viewbox: tuple[float, float, float, float] = (0.0, 0.0, 80.0, 80.0)
    title: str | None = None
    elements: list[SvgElement] = Field(default_factory=list)

    def iter(self) -> Iterator[SvgElement]:
        for element in self.elements:
            yield from element.iter()

    def find_all(self, tag: str) -> list[SvgElement]:
        return [el for el in self.iter() if el.tag == tag]

    def find_by_id(self, element_id: str) -> SvgElement | None:
        for el in self.iter():
            if el.attributes.get("id") == element_id:
                return el
        return None

    def fills(self) -> set[str]:
        """Every fill/stroke/stop color referenced anywhere in the tree."""
        found: set[str] = set()
        for el in self.iter():
            for source in (el.attributes, el.style):
                for key in ("fill", "stroke", "stop-color"):
                    value = source.get(key)
                    if isinstance(value, str):
                        found.add(value)
        return found


def el(tag: str, attrs: dict[str, AttrValue] | None = None, style: dict[str, AttrValue] | None = None,
       children: list[SvgElement] | None = None, text: str | None = None) -> SvgElement:
    """Shorthand constructor used throughout the generators."""
    return SvgElement(
        tag=tag,
        attributes=attrs or {},
        style=style or {},
        children=children or [],
        text=text,
    )


SvgElement.model_rebuild()
