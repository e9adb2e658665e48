"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from sigma_avatars.engine.registry import get_registry
from sigma_avatars.models.responses import HealthResponse, VariantInfo, VariantsResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        variants_registered=get_registry().count,
    )


@router.get("/variants", response_model=VariantsResponse)
async def variants() -> VariantsResponse:
    return VariantsResponse(
        variants=[
            VariantInfo(name=spec.variant.value, canvas=spec.canvas, description=spec.description)
            for spec in get_registry().all()
        ]
    )
