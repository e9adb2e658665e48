"""Tests for the public entry points."""

from sigma_avatars.engine import avatar, build_avatar_url, render_avatar, render_avatar_svg
from sigma_avatars.engine.colors import DEFAULT_COLORS
from sigma_avatars.engine.registry import get_registry
from sigma_avatars.models.avatar import AvatarImageRef, AvatarRequest, Variant
from sigma_avatars.models.svg_document import SvgDocument

API = "https://avatars.example.com/api/avatar"


def test_request_defaults():
    request = AvatarRequest()
    assert request.name == "Clara Barton"
    assert request.variant is Variant.MARBLE
    assert list(request.colors) == DEFAULT_COLORS
    assert request.size == 80
    assert request.title is False and request.square is False


def test_request_coercions():
    request = AvatarRequest(variant="BEAM", size="40", colors="#111, ,#222")
    assert request.variant is Variant.BEAM
    assert request.size == 40
    assert request.colors == ("#111", "#222")
    assert AvatarRequest(size="2.5em").size == 80
    assert AvatarRequest(size=-3).size == 80
    assert AvatarRequest(size=64.0).size == 64


def test_unknown_variant_renders_marble():
    unknown = render_avatar_svg(AvatarRequest(name="Ada", variant="sparkles"))
    marble = render_avatar_svg(AvatarRequest(name="Ada", variant=Variant.MARBLE))
    assert unknown == marble


def test_unregistered_variant_falls_back_to_marble(monkeypatch):
    monkeypatch.delitem(get_registry()._variants, Variant.PEPE)
    pepe = render_avatar_svg(AvatarRequest(name="Ada", variant=Variant.PEPE))
    marble = render_avatar_svg(AvatarRequest(name="Ada", variant=Variant.MARBLE))
    assert pepe == marble


def test_render_avatar_returns_document():
    doc = render_avatar(AvatarRequest(name="Ada", variant=Variant.RING, size=48))
    assert isinstance(doc, SvgDocument)
    assert doc.width == 48 and doc.height == 48


def test_avatar_inline():
    assert isinstance(avatar(AvatarRequest(name="Ada")), SvgDocument)


def test_avatar_remote_reference():
    ref = avatar(AvatarRequest(name="Clara Barton", variant="beam", size=64, colors=["#FF0000", "00FF00"]), api=API)
    assert isinstance(ref, AvatarImageRef)
    assert ref.src == (
        f"{API}?name=Clara+Barton&variant=beam&size=64&title=false&format=webp&colors=FF0000%2C00FF00"
    )
    assert ref.alt == "Clara Barton"
    assert ref.width == 64 and ref.height == 64


def test_avatar_remote_default_palette_is_sent():
    url = build_avatar_url(API, AvatarRequest(name="Ada", title=True))
    assert "&title=true&format=webp&colors=92A1C6%2C146A7C" in url
    assert url.startswith(f"{API}?name=Ada&variant=marble&size=80")


def test_api_with_query_string_is_used_verbatim():
    api = f"{API}?name=fixed"
    assert build_avatar_url(api, AvatarRequest(name="Ada")) == api
    assert avatar(AvatarRequest(name="Ada"), api=api).src == api


def test_fractional_size_reference():
    ref = avatar(AvatarRequest(name="Ada", size=40.5), api=API)
    assert "size=40.5" in ref.src
    assert ref.width == 40
