"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    variants_registered: int = 0


class VariantInfo(BaseModel):
    name: str
    canvas: int
    description: str = ""


class VariantsResponse(BaseModel):
    variants: list[VariantInfo] = Field(default_factory=list)


class AvatarErrorResponse(BaseModel):
    error: str = "Failed to generate avatar"
    details: str = "Unknown error"
