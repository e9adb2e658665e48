"""RenderContext: the immutable inputs every variant generator receives."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from sigma_avatars.engine.seed import generate_id, get_random_color, hash_code, pick

if TYPE_CHECKING:
    from sigma_avatars.models.avatar import AvatarRequest


@dataclass(frozen=True)
class RenderContext:
    name: str
    seed: int
    # Non-empty after palette normalization
    colors: tuple[str, ...]
    size: int | float = 80
    title: bool = False
    square: bool = False

    @classmethod
    def from_request(cls, request: AvatarRequest) -> RenderContext:
        return cls(
            name=request.name,
            seed=hash_code(request.name),
            colors=tuple(request.colors),
            size=request.size,
            title=request.title,
            square=request.square,
        )

    def id(self, suffix: str) -> str:
        """Element id unique to this name (mask, gradient, pattern, ...)."""
        return generate_id(self.name, suffix)

    def color(self, n: int) -> str:
        """Seeded palette pick: ``colors[n % len(colors)]``."""
        return get_random_color(n, self.colors, len(self.colors))

    def at(self, index: int) -> str:
        """Palette entry by position, falling back to the first color."""
        return pick(self.colors, index)
