"""Avatar service: the engine behind a digest-keyed cache.

Generation runs in the default thread executor. Concurrent requests for the
same key and format share one in-flight future, so each distinct avatar is
rendered once.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from sigma_avatars.engine.dispatcher import render_avatar_svg
from sigma_avatars.models.requests import AvatarParams, ImageFormat
from sigma_avatars.service.cache import FifoCache
from sigma_avatars.utils.rasterizer import RasterizationError, rasterize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AvatarResult:
    body: bytes
    media_type: str
    key: str
    cache_hit: bool = False
    raster_error: str | None = None


class AvatarService:
    def __init__(self, cache_size: int = 1000, max_size: int = 1024):
        self.cache: FifoCache[bytes] = FifoCache(cache_size)
        self.max_size = max_size
        self._inflight: dict[str, asyncio.Future] = {}

    @staticmethod
    def _entry(key: str, fmt: ImageFormat) -> str:
        return f"{key}.{fmt.value}"

    def render_svg(self, params: AvatarParams) -> str:
        return render_avatar_svg(params.to_request())

    def _generate(self, params: AvatarParams, key: str, fmt: ImageFormat) -> AvatarResult:
        svg_entry = self._entry(key, ImageFormat.SVG)
        svg_bytes = self.cache.get(svg_entry)
        if svg_bytes is None:
            request = params.to_request()
            logger.debug("Rendering %s avatar for %r (key %s)", request.variant.value, request.name, key)
            svg_bytes = self.cache.set(svg_entry, self.render_svg(params).encode("utf-8"))

        if fmt is ImageFormat.SVG:
            return AvatarResult(body=svg_bytes, media_type=fmt.media_type, key=key)

        try:
            body = rasterize(svg_bytes.decode("utf-8"), fmt.value, params.to_request().size, self.max_size)
        except RasterizationError as e:
            logger.warning("Serving SVG for %s: %s", key, e)
            return AvatarResult(
                body=svg_bytes,
                media_type=ImageFormat.SVG.media_type,
                key=key,
                raster_error=str(e),
            )
        self.cache.set(self._entry(key, fmt), body)
        return AvatarResult(body=body, media_type=fmt.media_type, key=key)

    async def get_avatar(self, params: AvatarParams, fmt: ImageFormat = ImageFormat.SVG) -> AvatarResult:
        key = params.cache_key()
        entry = self._entry(key, fmt)

        cached = self.cache.get(entry)
        if cached is not None:
            return AvatarResult(body=cached, media_type=fmt.media_type, key=key, cache_hit=True)

        pending = self._inflight.get(entry)
        if pending is None:
            loop = asyncio.get_running_loop()
            pending = loop.run_in_executor(None, self._generate, params, key, fmt)
            self._inflight[entry] = pending
            pending.add_done_callback(lambda _: self._inflight.pop(entry, None))
        return await asyncio.shield(pending)
