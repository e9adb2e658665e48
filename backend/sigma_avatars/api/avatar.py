"""GET /api/avatar: render an avatar as SVG, PNG or WebP."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse, Response

from sigma_avatars.config import Settings
from sigma_avatars.dependencies import get_avatar_service, get_settings
from sigma_avatars.models.requests import AvatarParams, ImageFormat
from sigma_avatars.models.responses import AvatarErrorResponse
from sigma_avatars.service.avatar_service import AvatarService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/avatar", responses={500: {"model": AvatarErrorResponse}})
async def avatar(
    name: str | None = Query(default=None),
    variant: str | None = Query(default=None),
    size: str = Query(default="80"),
    square: str = Query(default="false"),
    title: str = Query(default="false"),
    colors: str = Query(default=""),
    format: ImageFormat = Query(default=ImageFormat.SVG),
    settings: Settings = Depends(get_settings),
    service: AvatarService = Depends(get_avatar_service),
) -> Response:
    params = AvatarParams(
        name=name or settings.avatar_default_name,
        variant=variant or settings.avatar_default_variant,
        size=size or "80",
        square=square or "false",
        title=title or "false",
        colors=colors,
    )
    try:
        result = await service.get_avatar(params, format)
    except Exception as e:
        logger.exception("Error generating avatar for %r", params.name)
        return JSONResponse(
            status_code=500,
            content=AvatarErrorResponse(details=str(e) or type(e).__name__).model_dump(),
        )

    headers = {
        "Cache-Control": settings.avatar_cache_control,
        "X-Cache": "HIT" if result.cache_hit else "MISS",
        "ETag": f'"{result.key}"',
    }
    if result.raster_error:
        headers["X-Raster-Error"] = result.raster_error
    return Response(content=result.body, media_type=result.media_type, headers=headers)
