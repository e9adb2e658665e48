"""Rasterization: SVG markup to PNG (cairosvg) and WebP (Pillow)."""

from __future__ import annotations

import io
import logging

logger = logging.getLogger(__name__)

MIN_RASTER_SIZE = 1
WEBP_QUALITY = 90


class RasterizationError(Exception):
    """cairosvg or Pillow could not convert the document."""


def raster_size(size: int | float, max_size: int) -> int:
    """Output edge length in pixels, clamped to ``[1, max_size]``."""
    return max(MIN_RASTER_SIZE, min(int(round(size)), max_size))


def render_svg_to_png(svg: str, width: int, height: int | None = None) -> bytes:
    """Render SVG string to PNG bytes using cairosvg."""
    try:
        import cairosvg

        return cairosvg.svg2png(
            bytestring=svg.encode("utf-8"),
            output_width=width,
            output_height=height or width,
        )
    except Exception as e:
        logger.warning("Failed to render SVG to PNG: %s", e)
        raise RasterizationError(f"PNG rendering failed: {e}") from e


def png_to_webp(png: bytes, quality: int = WEBP_QUALITY) -> bytes:
    try:
        from PIL import Image

        with Image.open(io.BytesIO(png)) as image:
            out = io.BytesIO()
            image.convert("RGBA").save(out, format="WEBP", quality=quality)
            return out.getvalue()
    except Exception as e:
        logger.warning("Failed to encode WebP: %s", e)
        raise RasterizationError(f"WebP encoding failed: {e}") from e


def rasterize(svg: str, fmt: str, size: int | float, max_size: int) -> bytes:
    """PNG or WebP bytes for ``svg`` at ``size`` pixels square."""
    width = raster_size(size, max_size)
    png = render_svg_to_png(svg, width)
    if fmt == "png":
        return png
    if fmt == "webp":
        return png_to_webp(png)
    raise RasterizationError(f"Unsupported raster format: {fmt}")
