"""API request models."""

from __future__ import annotations

import enum
import hashlib

from pydantic import BaseModel, Field

from sigma_avatars.models.avatar import AvatarRequest

CACHE_KEY_LENGTH = 16


class ImageFormat(str, enum.Enum):
    SVG = "svg"
    PNG = "png"
    WEBP = "webp"

    @property
    def media_type(self) -> str:
        return {"svg": "image/svg+xml", "png": "image/png", "webp": "image/webp"}[self.value]


class AvatarParams(BaseModel):
    """Raw query parameters of ``GET /api/avatar``, kept as strings for cache keying."""

    name: str = Field(default="default", description="Seed string")
    variant: str = Field(default="beam", description="Variant tag; unknown tags render marble")
    size: str = Field(default="80", description="Pixel size")
    square: str = Field(default="false", description="'true' disables the round mask")
    title: str = Field(default="false", description="'true' adds a <title> element")
    colors: str = Field(default="", description="Comma-separated hex colors, '#' optional")

    def cache_key(self) -> str:
        """First 16 hex chars of SHA-256 over the sorted ``k=v`` pairs."""
        data = self.model_dump()
        joined = "&".join(f"{key}={data[key]}" for key in sorted(data))
        return hashlib.sha256(joined.encode("utf-8")).hexdigest()[:CACHE_KEY_LENGTH]

    def palette(self) -> list[str]:
        colors = []
        for raw in self.colors.split(","):
            cleaned = raw.strip()
            if not cleaned:
                continue
            colors.append(cleaned if cleaned.startswith("#") else f"#{cleaned}")
        return colors

    def to_request(self) -> AvatarRequest:
        return AvatarRequest(
            name=self.name,
            variant=self.variant,
            size=self.size,
            square=self.square == "true",
            title=self.title == "true",
            colors=self.palette(),
        )
