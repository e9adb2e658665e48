"""Shared test fixtures."""

from __future__ import annotations

import pytest

from sigma_avatars.engine.dispatcher import register_variants, render_avatar
from sigma_avatars.models.avatar import AvatarRequest, Variant

# Names whose renders are compared against each other throughout the suite
NAMES = [
    "Clara Barton",
    "Mary Baker",
    "Amelia Earhart",
    "Mary Roebling",
    "Sarah Winnemucca",
    "Margaret Brent",
    "Lucy Stone",
    "Mastercard",
    "UnitedHealth Group",
    "",
]

BRAND_COLORS = ["#0A0310", "#49007E", "#FF005B", "#FF7D10", "#FFB238"]

CSS_VAR_COLORS = ["var(--primary)", "var(--secondary)", "var(--accent)"]

ALL_VARIANTS = list(Variant)


@pytest.fixture(autouse=True, scope="session")
def _variants_registered() -> None:
    register_variants()


@pytest.fixture
def render():
    """Render shorthand: ``render("Ada", Variant.BEAM, colors=[...])``."""

    def _render(name: str = "Clara Barton", variant: Variant = Variant.MARBLE, **kwargs):
        return render_avatar(AvatarRequest(name=name, variant=variant, **kwargs))

    return _render
