"""FastAPI dependency injection."""

from __future__ import annotations

from functools import lru_cache

from sigma_avatars.config import settings
from sigma_avatars.service.avatar_service import AvatarService


def get_settings():
    return settings


@lru_cache(maxsize=1)
def get_avatar_service() -> AvatarService:
    return AvatarService(cache_size=settings.avatar_cache_size, max_size=settings.avatar_max_size)
