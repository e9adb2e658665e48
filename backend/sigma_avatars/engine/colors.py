"""Color model: classification, contrast, palettes.

Colors are opaque CSS strings. Only hex values are ever parsed into numbers;
everything else is routed by syntax and emitted verbatim.
"""

from __future__ import annotations

import enum
import re
from typing import Iterable, Sequence

from pydantic import BaseModel

_HEX_RE = re.compile(r"^#([0-9A-F]{3}|[0-9A-F]{6}|[0-9A-F]{8})$", re.IGNORECASE)
_CSS_VAR_RE = re.compile(r"^var\(--[\w-]+\)$")
_CSS_VAR_NAME_RE = re.compile(r"var\(--(.+)\)")
_RGB_RE = re.compile(r"^rgba?\(")
_HSL_RE = re.compile(r"^hsla?\(")
_OKLCH_RE = re.compile(r"^oklch\(")

# YIQ luma at or above this reads as a light background
_YIQ_THRESHOLD = 128

BLACK = "#000000"
WHITE = "#FFFFFF"

# Sorts after every parseable hex color (max r+g+b is 765)
NON_HEX_BRIGHTNESS = 999

# Palette tokens that conventionally name a dark color
_DARK_HINTS = ("foreground", "dark", "muted")

DEFAULT_COLORS: list[str] = ["#92A1C6", "#146A7C", "#F0AB3D", "#C271B4", "#C20D90"]

SHADCN_COLORS: list[str] = [
    "var(--primary)",
    "var(--secondary)",
    "var(--accent)",
    "var(--muted)",
    "var(--card)",
]

SHADCN_PREFIX_COLORS: list[str] = [
    "var(--color-primary)",
    "var(--color-secondary)",
    "var(--color-accent)",
    "var(--color-muted)",
    "var(--color-card)",
]


class ColorFormat(str, enum.Enum):
    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"
    OKLCH = "oklch"
    CSS_VARIABLE = "css-variable"
    OTHER = "other"


class ColorPalette(BaseModel):
    """Named theme slots, flattened into a palette with :func:`palette_to_list`."""

    primary: str = ""
    secondary: str = ""
    accent: str = ""
    muted: str = ""
    background: str = ""


def is_hex(value: str) -> bool:
    return bool(_HEX_RE.match(value))


def is_css_variable(value: str) -> bool:
    return bool(_CSS_VAR_RE.match(value))


def is_rgb_color(value: str) -> bool:
    return bool(_RGB_RE.match(value))


def is_hsl_color(value: str) -> bool:
    return bool(_HSL_RE.match(value))


def is_oklch_color(value: str) -> bool:
    return bool(_OKLCH_RE.match(value))


def classify_color(value: str) -> ColorFormat:
    if is_hex(value):
        return ColorFormat.HEX
    if is_css_variable(value):
        return ColorFormat.CSS_VARIABLE
    if is_rgb_color(value):
        return ColorFormat.RGB
    if is_hsl_color(value):
        return ColorFormat.HSL
    if is_oklch_color(value):
        return ColorFormat.OKLCH
    return ColorFormat.OTHER


def _expand_hex(value: str) -> str:
    digits = value[1:] if value.startswith("#") else value
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return digits


def parse_hex(value: str) -> tuple[int, int, int] | None:
    """(r, g, b) for 3/6/8-digit hex strings, alpha ignored; None otherwise."""
    if not is_hex(value):
        return None
    digits = _expand_hex(value)
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def get_contrast(hexcolor: str) -> str:
    """Black or white text color for a hex background (YIQ rule)."""
    digits = _expand_hex(hexcolor)
    r = int(digits[0:2], 16)
    g = int(digits[2:4], 16)
    b = int(digits[4:6], 16)
    yiq = (r * 299 + g * 587 + b * 114) / 1000
    return BLACK if yiq >= _YIQ_THRESHOLD else WHITE


def get_contrast_safe(color: str, fallback: str = BLACK) -> str:
    """Readable foreground for any palette color.

    ``var(--x)`` maps to ``var(--x-foreground)``; hex goes through
    :func:`get_contrast`; every other syntax gets ``fallback``.
    """
    if is_css_variable(color):
        match = _CSS_VAR_NAME_RE.match(color)
        if match and not match.group(1).endswith("-foreground"):
            return f"var(--{match.group(1)}-foreground)"
        return fallback
    if not is_hex(color):
        return fallback
    return get_contrast(color)


def palette_to_list(palette: ColorPalette | dict[str, str]) -> list[str]:
    values = palette.values() if isinstance(palette, dict) else palette.model_dump().values()
    return [v for v in values if v]


def normalize_palette(colors: Iterable[str] | None) -> list[str]:
    """Drop empty entries; substitute the default palette when nothing is left."""
    cleaned = [c.strip() for c in (colors or []) if c and c.strip()]
    return cleaned or list(DEFAULT_COLORS)


def brightness(color: str) -> int:
    """r + g + b for 6-digit hex colors, :data:`NON_HEX_BRIGHTNESS` otherwise."""
    if not color.startswith("#") or len(color) != 7:
        return NON_HEX_BRIGHTNESS
    rgb = parse_hex(color)
    return sum(rgb) if rgb else NON_HEX_BRIGHTNESS


def darkest_color(colors: Sequence[str]) -> str:
    """Darkest palette entry: a dark-named token first, then the lowest-sum hex."""
    for color in colors:
        lowered = color.lower()
        if any(hint in lowered for hint in _DARK_HINTS):
            return color
    best: str | None = None
    best_sum = NON_HEX_BRIGHTNESS
    for color in colors:
        rgb = parse_hex(color)
        if rgb is not None and sum(rgb) < best_sum:
            best, best_sum = color, sum(rgb)
    if best is not None:
        return best
    return colors[0] if colors else DEFAULT_COLORS[0]


def darken(hexcolor: str, amount: float = 0.2) -> str:
    """Scale each channel by ``1 - amount``; non-hex input is returned unchanged."""
    rgb = parse_hex(hexcolor)
    if rgb is None:
        return hexcolor
    scaled = (max(0, min(255, round(c * (1 - amount)))) for c in rgb)
    return "#" + "".join(f"{c:02x}" for c in scaled)
