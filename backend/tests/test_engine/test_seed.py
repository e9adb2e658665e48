"""Tests for seed derivation."""

from sigma_avatars.engine.colors import DEFAULT_COLORS
from sigma_avatars.engine.seed import (
    generate_id,
    get_angle,
    get_boolean,
    get_digit,
    get_modulus,
    get_random_color,
    get_spread_unit,
    get_unit,
    hash_code,
    to_int32,
    to_uint32,
)
from tests.conftest import NAMES


def test_hash_code_empty_is_zero():
    assert hash_code("") == 0


def test_hash_code_small_strings():
    assert hash_code("a") == 97
    assert hash_code("ab") == 97 * 31 + 98


def test_hash_code_uses_utf16_units():
    # U+1F600 is the surrogate pair D83D DE00
    assert hash_code("\U0001F600") == 0xD83D * 31 + 0xDE00


def test_hash_code_wraps_to_32_bits():
    h = hash_code("The quick brown fox jumps over the lazy dog" * 20)
    assert 0 <= h <= 2**31


def test_hash_code_deterministic_and_distinct():
    hashes = [hash_code(n) for n in NAMES]
    assert hashes == [hash_code(n) for n in NAMES]
    assert len(set(hashes)) == len(NAMES)


def test_to_int32():
    assert to_int32(2**31) == -(2**31)
    assert to_int32(2**32 + 5) == 5
    assert to_int32(-1) == -1
    assert to_int32(3.9) == 3
    assert to_int32(float("nan")) == 0
    assert to_uint32(-1) == 2**32 - 1


def test_generate_id_shape():
    mask_id = generate_id("Ada", "mask")
    assert mask_id.startswith("avatar-")
    assert mask_id.endswith("-mask")
    assert mask_id == generate_id("Ada", "mask")
    assert mask_id != generate_id("Ada", "filter")


def test_get_modulus_truncates_like_js():
    assert get_modulus(7, 3) == 1
    assert get_modulus(-7, 3) == -1
    assert get_modulus(7.5, 2) == 1.5


def test_get_digit_and_boolean():
    assert get_digit(1234, 0) == 4
    assert get_digit(1234, 2) == 2
    assert get_boolean(12, 0) is True
    assert get_boolean(13, 0) is False


def test_get_unit_sign_from_digit():
    assert get_unit(7, 5) == 2
    # tens digit of 7 is 0 (even) -> negated
    assert get_unit(7, 5, 1) == -2
    # tens digit of 13 is 1 (odd) -> kept
    assert get_unit(13, 5, 1) == 3


def test_get_spread_unit_in_range():
    for n in range(500):
        value = get_spread_unit(n, 7)
        assert isinstance(value, int)
        assert 0 <= value < 7


def test_get_spread_unit_decorrelates_neighbours():
    plain = [get_unit(n, 10) for n in range(100, 110)]
    spread = [get_spread_unit(n, 10) for n in range(100, 110)]
    assert plain == list(range(10))
    assert spread != plain


def test_get_random_color():
    colors = ["#111111", "#222222", "#333333"]
    assert get_random_color(7, colors) == "#222222"
    assert get_random_color(7, colors, 3) == "#222222"
    assert get_random_color(3, []) == DEFAULT_COLORS[0]
    assert get_random_color(1, ["#111111", ""]) == "#111111"


def test_get_angle():
    assert get_angle(0, 1) == 90
    assert get_angle(1, 0) == 0
