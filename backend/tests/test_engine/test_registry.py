"""Tests for the variant registry."""

import pytest

from sigma_avatars.engine.context import RenderContext
from sigma_avatars.engine.registry import VariantRegistry, VariantSpec, get_registry
from sigma_avatars.models.avatar import Variant
from sigma_avatars.models.svg_document import SvgDocument


def _noop(ctx: RenderContext) -> SvgDocument:
    return SvgDocument()


def test_register_and_get():
    reg = VariantRegistry()
    spec = VariantSpec(variant=Variant.RING, fn=_noop, canvas=90)
    reg.register(spec)
    assert reg.get(Variant.RING) is spec
    assert reg.count == 1


def test_duplicate_registration_rejected():
    reg = VariantRegistry()
    reg.register(VariantSpec(variant=Variant.BEAM, fn=_noop))
    with pytest.raises(ValueError):
        reg.register(VariantSpec(variant=Variant.BEAM, fn=_noop))


def test_missing_and_all_follow_enum_order():
    reg = VariantRegistry()
    reg.register(VariantSpec(variant=Variant.PIXEL, fn=_noop))
    reg.register(VariantSpec(variant=Variant.MARBLE, fn=_noop))
    assert [s.variant for s in reg.all()] == [Variant.MARBLE, Variant.PIXEL]
    assert Variant.PIXEL not in reg.missing()
    assert len(reg.missing()) == len(Variant) - 2


def test_unknown_variant_raises_key_error():
    with pytest.raises(KeyError):
        VariantRegistry().get(Variant.MAGE)


def test_every_variant_registered():
    reg = get_registry()
    assert reg.missing() == []
    assert reg.count == 11


def test_canvas_sizes():
    reg = get_registry()
    assert reg.get(Variant.BEAM).canvas == 36
    assert reg.get(Variant.RING).canvas == 90
    assert reg.get(Variant.PIXEL).canvas == 80
