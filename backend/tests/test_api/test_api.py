"""Tests for API endpoints."""

from __future__ import annotations

import sys

import pytest
from fastapi.testclient import TestClient

from sigma_avatars.dependencies import get_avatar_service
from sigma_avatars.main import app
from sigma_avatars.service import avatar_service
from sigma_avatars.service.avatar_service import AvatarService
from sigma_avatars.utils.rasterizer import RasterizationError


client = TestClient(app)


@pytest.fixture(autouse=True)
def fresh_service():
    service = AvatarService(cache_size=10)
    app.dependency_overrides[get_avatar_service] = lambda: service
    yield service
    app.dependency_overrides.clear()


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["version"] == "0.1.0"
    assert data["variants_registered"] == 11


def test_variants_listing():
    response = client.get("/api/variants")
    assert response.status_code == 200
    names = [v["name"] for v in response.json()["variants"]]
    assert names[0] == "marble"
    assert len(names) == 11
    assert "anime" in names


def test_avatar_defaults_to_beam_svg():
    response = client.get("/api/avatar")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("image/svg+xml")
    assert 'viewBox="0 0 36 36"' in response.text
    assert response.headers["x-cache"] == "MISS"
    assert response.headers["cache-control"] == "public, max-age=31536000, immutable"


def test_avatar_hit_after_miss():
    first = client.get("/api/avatar", params={"name": "Ada", "variant": "ring"})
    second = client.get("/api/avatar", params={"name": "Ada", "variant": "ring"})
    assert first.headers["x-cache"] == "MISS"
    assert second.headers["x-cache"] == "HIT"
    assert first.headers["etag"] == second.headers["etag"]
    assert first.content == second.content


def test_avatar_etag_is_cache_key():
    response = client.get("/api/avatar", params={"name": "Ada"})
    etag = response.headers["etag"]
    assert etag.startswith('"') and etag.endswith('"')
    assert len(etag) == 18


def test_avatar_params_are_applied():
    response = client.get(
        "/api/avatar",
        params={"name": "Ada & Co", "variant": "pixel", "size": "120", "square": "true", "title": "true", "colors": "ff0000,00ff00"},
    )
    body = response.text
    assert 'width="120"' in body
    assert "<title>Ada &amp; Co</title>" in body
    assert "#ff0000" in body
    assert "rx=" not in body.split("<g")[0]


def test_avatar_format_does_not_change_etag(monkeypatch):
    monkeypatch.setattr(avatar_service, "rasterize", lambda svg, fmt, size, max_size: b"\x89PNG")
    svg = client.get("/api/avatar", params={"name": "Ada"})
    png = client.get("/api/avatar", params={"name": "Ada", "format": "png"})
    assert png.status_code == 200
    assert png.headers["content-type"] == "image/png"
    assert png.content == b"\x89PNG"
    assert png.headers["etag"] == svg.headers["etag"]


def test_avatar_raster_failure_serves_svg(monkeypatch):
    def broken(svg, fmt, size, max_size):
        raise RasterizationError("cairo missing")

    monkeypatch.setattr(avatar_service, "rasterize", broken)
    response = client.get("/api/avatar", params={"name": "Ada", "format": "webp"})
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("image/svg+xml")
    assert response.headers["x-raster-error"] == "cairo missing"


def test_avatar_missing_cairo_serves_svg(monkeypatch):
    monkeypatch.setitem(sys.modules, "cairosvg", None)
    response = client.get("/api/avatar", params={"name": "Ada", "format": "png"})
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("image/svg+xml")
    assert response.headers["x-raster-error"].startswith("PNG rendering failed")
    assert "<svg" in response.text

    again = client.get("/api/avatar", params={"name": "Ada", "format": "png"})
    assert again.headers["x-cache"] == "MISS"


def test_avatar_invalid_format():
    response = client.get("/api/avatar", params={"format": "gif"})
    assert response.status_code == 422


def test_avatar_unexpected_error(fresh_service, monkeypatch):
    def explode(params):
        raise RuntimeError("boom")

    monkeypatch.setattr(fresh_service, "render_svg", explode)
    response = client.get("/api/avatar", params={"name": "Ada"})
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to generate avatar", "details": "boom"}


def test_avatar_unknown_variant_renders_marble():
    unknown = client.get("/api/avatar", params={"name": "Ada", "variant": "nope"})
    marble = client.get("/api/avatar", params={"name": "Ada", "variant": "marble"})
    assert unknown.status_code == 200
    assert unknown.text == marble.text
