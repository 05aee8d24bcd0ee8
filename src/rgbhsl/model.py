"""Adapters from foreign color types into RGB and HSL.

Anything that can produce a 16-bit RGBA quadruple can be converted, either
through an ``rgba()`` method or by passing the quadruple itself. This is how
image and graphics code hands its own colors to this package.
"""

# System
import typing as ty

# Internal
from .color import HSL, RGB
from .types import MAX_CHANNEL16, RGBA16, RGBA16Adapter


@ty.runtime_checkable
class SupportsRGBA(ty.Protocol):
    def rgba(self) -> RGBA16: ...


ExternalColor: ty.TypeAlias = SupportsRGBA | ty.Sequence[int]


def _rgba16(color: ExternalColor) -> RGBA16:
    if isinstance(color, SupportsRGBA):
        color = color.rgba()
    return RGBA16Adapter.validate_python(tuple(color))


def rgb_model(color: ExternalColor) -> RGB:
    """Convert any 16-bit RGBA color to RGB, discarding alpha."""
    r, g, b, _ = _rgba16(color)
    return RGB(r / MAX_CHANNEL16, g / MAX_CHANNEL16, b / MAX_CHANNEL16)


def hsl_model(color: ExternalColor) -> HSL:
    """Convert any 16-bit RGBA color to HSL, discarding alpha."""
    return rgb_model(color).to_hsl()
