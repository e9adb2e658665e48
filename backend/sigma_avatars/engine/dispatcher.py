"""Public entry point: request in, document (or remote image reference) out."""

from __future__ import annotations

import importlib
import logging
import pkgutil
from urllib.parse import urlencode

from sigma_avatars.engine.context import RenderContext
from sigma_avatars.engine.registry import get_registry
from sigma_avatars.models.avatar import AvatarImageRef, AvatarRequest, Variant
from sigma_avatars.models.svg_document import SvgDocument
from sigma_avatars.svg.serializer import serialize_svg

logger = logging.getLogger(__name__)

_VARIANT_PACKAGE = "sigma_avatars.engine.variants"
_registered = False


def register_variants() -> None:
    """Import all variant modules so @variant decorators fire."""
    global _registered
    if _registered:
        return
    package = importlib.import_module(_VARIANT_PACKAGE)
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        if module_name.startswith("_"):
            continue
        importlib.import_module(f"{_VARIANT_PACKAGE}.{module_name}")
    _registered = True

    missing = get_registry().missing()
    if missing:
        logger.warning("Variants without a generator: %s", ", ".join(v.value for v in missing))


def render_avatar(request: AvatarRequest) -> SvgDocument:
    """Render ``request`` with its variant's generator; unregistered variants use marble."""
    register_variants()
    registry = get_registry()
    try:
        spec = registry.get(request.variant)
    except KeyError:
        logger.warning("No generator for %s, falling back to marble", request.variant.value)
        spec = registry.get(Variant.MARBLE)
    return spec.fn(RenderContext.from_request(request))


def render_avatar_svg(request: AvatarRequest) -> str:
    return serialize_svg(render_avatar(request))


def build_avatar_url(api: str, request: AvatarRequest) -> str:
    """Image URL for a remote renderer.

    An ``api`` that already carries a query string is used as is.
    """
    if "?" in api:
        return api
    params = {
        "name": request.name,
        "variant": request.variant.value,
        "size": str(request.size),
        "title": "true" if request.title else "false",
        "format": "webp",
    }
    if request.colors:
        params["colors"] = ",".join(c[1:] if c.startswith("#") else c for c in request.colors)
    return f"{api}?{urlencode(params)}"


def avatar(request: AvatarRequest, api: str | None = None) -> SvgDocument | AvatarImageRef:
    """Inline document, or a reference to ``api`` when one is given (nothing is rendered)."""
    if api:
        size = int(request.size)
        return AvatarImageRef(src=build_avatar_url(api, request), alt=request.name, width=size, height=size)
    return render_avatar(request)
