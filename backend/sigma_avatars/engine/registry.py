"""Variant registry. Every generator is a standalone function registered via decorator.

Usage:
    @variant(Variant.RING, canvas=90, description="Concentric arcs")
    def ring(ctx: RenderContext) -> SvgDocument:
        ...

Adding a new variant = one enum member plus one module with the decorator.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from sigma_avatars.models.avatar import Variant

if TYPE_CHECKING:
    from sigma_avatars.engine.context import RenderContext
    from sigma_avatars.models.svg_document import SvgDocument

logger = logging.getLogger(__name__)

Generator = Callable[["RenderContext"], "SvgDocument"]


@dataclass(frozen=True)
class VariantSpec:
    variant: Variant
    fn: Generator
    canvas: int = 80
    description: str = ""


class VariantRegistry:
    """Registry of all variant generators, keyed by the closed :class:`Variant` enum."""

    def __init__(self) -> None:
        self._variants: dict[Variant, VariantSpec] = {}

    def register(self, spec: VariantSpec) -> None:
        if spec.variant in self._variants:
            raise ValueError(f"Duplicate variant: {spec.variant.value}")
        self._variants[spec.variant] = spec
        logger.debug("Registered variant %s (canvas %d)", spec.variant.value, spec.canvas)

    def get(self, variant: Variant) -> VariantSpec:
        return self._variants[variant]

    def all(self) -> list[VariantSpec]:
        return [self._variants[v] for v in Variant if v in self._variants]

    def missing(self) -> list[Variant]:
        return [v for v in Variant if v not in self._variants]

    @property
    def count(self) -> int:
        return len(self._variants)


# Module-level singleton
_registry = VariantRegistry()


def get_registry() -> VariantRegistry:
    return _registry


def variant(v: Variant, *, canvas: int = 80, description: str = ""):
    """Decorator to register a variant generator."""

    def decorator(fn: Generator) -> Generator:
        _registry.register(VariantSpec(variant=v, fn=fn, canvas=canvas, description=description))
        return fn

    return decorator
