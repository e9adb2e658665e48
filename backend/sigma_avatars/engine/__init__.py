"""Deterministic avatar engine."""

from sigma_avatars.engine.colors import (
    DEFAULT_COLORS,
    SHADCN_COLORS,
    SHADCN_PREFIX_COLORS,
    ColorFormat,
    ColorPalette,
    classify_color,
    get_contrast,
    get_contrast_safe,
    is_css_variable,
    is_hex,
    is_hsl_color,
    is_oklch_color,
    is_rgb_color,
    normalize_palette,
    palette_to_list,
)
from sigma_avatars.engine.dispatcher import (
    avatar,
    build_avatar_url,
    register_variants,
    render_avatar,
    render_avatar_svg,
)
from sigma_avatars.engine.registry import get_registry, variant
from sigma_avatars.models.avatar import AvatarImageRef, AvatarRequest, Variant

__all__ = [
    "DEFAULT_COLORS",
    "SHADCN_COLORS",
    "SHADCN_PREFIX_COLORS",
    "ColorFormat",
    "ColorPalette",
    "classify_color",
    "get_contrast",
    "get_contrast_safe",
    "is_css_variable",
    "is_hex",
    "is_hsl_color",
    "is_oklch_color",
    "is_rgb_color",
    "normalize_palette",
    "palette_to_list",
    "avatar",
    "build_avatar_url",
    "register_variants",
    "render_avatar",
    "render_avatar_svg",
    "get_registry",
    "variant",
    "AvatarImageRef",
    "AvatarRequest",
    "Variant",
]
