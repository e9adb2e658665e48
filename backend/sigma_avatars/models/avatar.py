"""Avatar request / reference models."""

from __future__ import annotations

import enum
import logging
import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

DEFAULT_NAME = "Clara Barton"
DEFAULT_SIZE = 80


class Variant(str, enum.Enum):
    MARBLE = "marble"
    BEAM = "beam"
    PIXEL = "pixel"
    SUNSET = "sunset"
    RING = "ring"
    BAUHAUS = "bauhaus"
    FRACTAL = "fractal"
    MAGE = "mage"
    BARCODE = "barcode"
    PEPE = "pepe"
    ANIME = "anime"

    @classmethod
    def parse(cls, value: Any) -> Variant:
        """Variant for a tag; unknown or empty tags fall back to marble."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            logger.debug("Unknown variant %r, falling back to marble", value)
            return cls.MARBLE


def coerce_size(value: Any) -> int | float:
    """Numeric size from ints, floats or numeric strings; anything else is the default."""
    if isinstance(value, bool) or value is None:
        return DEFAULT_SIZE
    if isinstance(value, str):
        text = value.strip()
        try:
            value = int(text)
        except ValueError:
            try:
                value = float(text)
            except ValueError:
                return DEFAULT_SIZE
    if not isinstance(value, (int, float)) or not math.isfinite(value) or value <= 0:
        return DEFAULT_SIZE
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _palette(colors: Any) -> tuple[str, ...]:
    from sigma_avatars.engine.colors import normalize_palette

    return tuple(normalize_palette(colors))


class AvatarRequest(BaseModel):
    """Immutable render request; every default is applied at construction."""

    model_config = ConfigDict(frozen=True)

    name: str = DEFAULT_NAME
    variant: Variant = Variant.MARBLE
    colors: tuple[str, ...] = Field(default_factory=lambda: _palette(None))
    size: int | float = DEFAULT_SIZE
    title: bool = False
    square: bool = False

    @field_validator("variant", mode="before")
    @classmethod
    def _variant(cls, v: Any) -> Variant:
        return Variant.parse(v)

    @field_validator("colors", mode="before")
    @classmethod
    def _colors(cls, v: Any) -> tuple[str, ...]:
        if isinstance(v, str):
            v = v.split(",")
        return _palette(v)

    @field_validator("size", mode="before")
    @classmethod
    def _size(cls, v: Any) -> int | float:
        return coerce_size(v)


class AvatarImageRef(BaseModel):
    """Reference to a remotely rendered avatar (no local generation)."""

    src: str
    alt: str
    width: int
    height: int
