"""Seed derivation. Every pseudo-random value an avatar uses comes from here.

A name is folded into a 32-bit integer once; generators then pull independent
values from that seed by calling the helpers below with distinct, fixed
offsets (``seed + 7``, ``seed * 31 + 17``, ...). The integer arithmetic mirrors
ECMAScript semantics exactly so that deployed avatars keep their look.
"""

from __future__ import annotations

import math
from typing import Sequence

from sigma_avatars.engine.colors import DEFAULT_COLORS

_UINT32 = 0x1_0000_0000
_INT32_MAX = 0x7FFF_FFFF

# Murmur3 fmix multiplier, applied after xor-folding the high half
_SPREAD_MULTIPLIER = 0x85EB_CA6B


def to_int32(n: int | float) -> int:
    """ECMAScript ToInt32: wrap to the signed 32-bit range."""
    if isinstance(n, float):
        if not math.isfinite(n):
            return 0
        n = math.trunc(n)
    n %= _UINT32
    return n - _UINT32 if n > _INT32_MAX else n


def to_uint32(n: int | float) -> int:
    """ECMAScript ToUint32."""
    return to_int32(n) % _UINT32


def _utf16_units(s: str):
    for ch in s:
        code = ord(ch)
        if code > 0xFFFF:
            code -= 0x10000
            yield 0xD800 + (code >> 10)
            yield 0xDC00 + (code & 0x3FF)
        else:
            yield code


def hash_code(name: str) -> int:
    """Rolling ``h * 31 + c`` hash over UTF-16 code units, 32-bit wrapped, absolute value."""
    h = 0
    for unit in _utf16_units(name):
        h = to_int32((h << 5) - h + unit)
    return abs(h)


def generate_id(name: str, suffix: str) -> str:
    """Element id that is stable per name and unique per suffix."""
    return f"avatar-{hash_code(name + suffix)}-{suffix}"


def get_modulus(n: int | float, m: int | float) -> int | float:
    return math.fmod(n, m) if isinstance(n, float) or isinstance(m, float) else _js_rem(n, m)


def _js_rem(n: int, m: int) -> int:
    # Truncated remainder (sign follows the dividend)
    r = abs(n) % abs(m)
    return -r if n < 0 else r


def get_digit(n: int | float, position: int) -> int:
    """Decimal digit of ``n`` at ``position`` (0 = ones)."""
    return math.floor(math.fmod(n / 10**position, 10))


def get_boolean(n: int | float, position: int) -> bool:
    """True when the digit at ``position`` is even."""
    return get_digit(n, position) % 2 == 0


def get_angle(x: float, y: float) -> float:
    return math.degrees(math.atan2(y, x))


def _apply_sign(n: int | float, value, index: int | None):
    if index and get_digit(n, index) % 2 == 0:
        return -value
    return value


def get_unit(n: int | float, range_: int | float, index: int | None = None):
    """Plain modulus unit in ``[0, range)``, negated when the digit at ``index`` is even."""
    return _apply_sign(n, get_modulus(n, range_), index)


def get_spread_unit(n: int | float, range_: int | float, index: int | None = None):
    """Bit-spread unit in ``[0, range)``.

    Folds the high half into the low half and multiplies by an odd constant
    before the modulus, so consecutive seeds do not map to consecutive
    values. The product is computed in double precision.
    """
    folded = to_int32(n) ^ (to_uint32(n) >> 16)
    spread = float(folded) * float(_SPREAD_MULTIPLIER)
    value = math.fmod(abs(spread), range_)
    if isinstance(range_, int):
        value = int(value)
    return _apply_sign(n, value, index)


def get_random_color(n: int, colors: Sequence[str], range_: int | None = None) -> str:
    """Pick ``colors[n % range]``, falling back to the first color."""
    if not colors:
        return DEFAULT_COLORS[0]
    if not range_:
        range_ = len(colors)
    idx = _js_rem(int(n), int(range_))
    if 0 <= idx < len(colors) and colors[idx]:
        return colors[idx]
    return colors[0]


def pick(colors: Sequence[str], idx: int) -> str:
    """Palette entry at ``idx`` or the first entry when out of range."""
    if 0 <= idx < len(colors) and colors[idx]:
        return colors[idx]
    return colors[0]
