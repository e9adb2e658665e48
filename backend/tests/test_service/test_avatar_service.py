"""Tests for the avatar service (cache keys, de-duplication, raster fallback)."""

import asyncio
import hashlib
import sys
import time

import pytest

from sigma_avatars.models.avatar import Variant
from sigma_avatars.models.requests import AvatarParams, ImageFormat
from sigma_avatars.service import avatar_service
from sigma_avatars.service.avatar_service import AvatarService
from sigma_avatars.utils.rasterizer import RasterizationError, png_to_webp, raster_size, render_svg_to_png


def test_cache_key_is_sorted_sha256_prefix():
    params = AvatarParams(name="Ada", variant="ring")
    joined = "colors=&name=Ada&size=80&square=false&title=false&variant=ring"
    assert params.cache_key() == hashlib.sha256(joined.encode()).hexdigest()[:16]


def test_cache_key_changes_with_params():
    assert AvatarParams(name="Ada").cache_key() != AvatarParams(name="Ada", square="true").cache_key()


def test_params_to_request():
    request = AvatarParams(name="Ada", variant="pixel", size="64", square="true", colors="ff0000, #00ff00,").to_request()
    assert request.variant is Variant.PIXEL
    assert request.size == 64
    assert request.square is True
    assert request.title is False
    assert request.colors == ("#ff0000", "#00ff00")


def test_image_format_media_types():
    assert ImageFormat.SVG.media_type == "image/svg+xml"
    assert ImageFormat.PNG.media_type == "image/png"
    assert ImageFormat.WEBP.media_type == "image/webp"


def test_raster_size_clamped():
    assert raster_size(80, 1024) == 80
    assert raster_size(5000, 1024) == 1024
    assert raster_size(0.2, 1024) == 1


def test_miss_then_hit():
    service = AvatarService(cache_size=10)
    params = AvatarParams(name="Ada", variant="beam")

    first = asyncio.run(service.get_avatar(params))
    second = asyncio.run(service.get_avatar(params))

    assert first.cache_hit is False
    assert second.cache_hit is True
    assert first.body == second.body
    assert first.body.startswith(b"<svg")
    assert first.media_type == "image/svg+xml"
    assert first.key == params.cache_key()


def test_concurrent_requests_render_once(monkeypatch):
    service = AvatarService()
    calls = []

    def slow_render(params):
        calls.append(params.name)
        time.sleep(0.05)
        return "<svg/>"

    monkeypatch.setattr(service, "render_svg", slow_render)
    params = AvatarParams(name="Ada")

    async def burst():
        return await asyncio.gather(*(service.get_avatar(params) for _ in range(5)))

    results = asyncio.run(burst())
    assert calls == ["Ada"]
    assert {r.body for r in results} == {b"<svg/>"}
    assert service._inflight == {}


def test_raster_output_is_cached(monkeypatch):
    service = AvatarService()
    calls = []

    def fake_rasterize(svg, fmt, size, max_size):
        calls.append((fmt, size, max_size))
        return b"PNGDATA"

    monkeypatch.setattr(avatar_service, "rasterize", fake_rasterize)
    params = AvatarParams(name="Ada", size="2048")

    first = asyncio.run(service.get_avatar(params, ImageFormat.PNG))
    second = asyncio.run(service.get_avatar(params, ImageFormat.PNG))

    assert first.body == b"PNGDATA"
    assert first.media_type == "image/png"
    assert second.cache_hit is True
    assert calls == [("png", 2048, 1024)]


def test_raster_failure_falls_back_to_svg(monkeypatch):
    service = AvatarService()

    def broken(svg, fmt, size, max_size):
        raise RasterizationError("no cairo")

    monkeypatch.setattr(avatar_service, "rasterize", broken)
    params = AvatarParams(name="Ada")

    first = asyncio.run(service.get_avatar(params, ImageFormat.WEBP))
    second = asyncio.run(service.get_avatar(params, ImageFormat.WEBP))

    assert first.media_type == "image/svg+xml"
    assert first.raster_error == "no cairo"
    assert first.body.startswith(b"<svg")
    # the failed raster is not cached, the SVG is
    assert second.cache_hit is False
    assert asyncio.run(service.get_avatar(params)).cache_hit is True


def test_png_import_failure_is_rasterization_error(monkeypatch):
    monkeypatch.setitem(sys.modules, "cairosvg", None)
    with pytest.raises(RasterizationError, match="PNG rendering failed"):
        render_svg_to_png("<svg/>", 80)


def test_webp_import_failure_is_rasterization_error(monkeypatch):
    monkeypatch.setitem(sys.modules, "PIL", None)
    with pytest.raises(RasterizationError, match="WebP encoding failed"):
        png_to_webp(b"\x89PNG")


def test_missing_cairo_falls_back_to_svg(monkeypatch):
    monkeypatch.setitem(sys.modules, "cairosvg", None)
    service = AvatarService(cache_size=10)
    result = asyncio.run(service.get_avatar(AvatarParams(name="Ada"), ImageFormat.PNG))
    assert result.media_type == "image/svg+xml"
    assert result.body.startswith(b"<svg")
    assert result.raster_error.startswith("PNG rendering failed")
    assert len(service.cache) == 1
