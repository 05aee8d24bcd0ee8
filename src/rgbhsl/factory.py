# System
import functools as ft
import logging

# Third Party
import numpy as np

# Internal
from .color import HSL, RGB
from .settings import ColorSettings
from .types import MAX_BYTE


@ft.cache
def default_rng() -> np.random.Generator:
    """Process-wide generator used when no ``rng`` is passed."""
    settings = ColorSettings()
    if settings.seed is not None:
        logging.info(f"Seeding random color generator with {settings.seed}.")
    return np.random.default_rng(settings.seed)


def _scale_bytes(a: int, b: int, c: int) -> tuple[float, float, float]:
    return a / MAX_BYTE, b / MAX_BYTE, c / MAX_BYTE


def _uniform_triple(rng: np.random.Generator | None) -> tuple[float, float, float]:
    if rng is None:
        rng = default_rng()
    a, b, c = rng.random(3)
    return float(a), float(b), float(c)


def new_rgb(r: int, g: int, b: int) -> RGB:
    """Build an RGB from byte values in [0, 255]."""
    return RGB(*_scale_bytes(r, g, b))


def new_hsl(h: int, s: int, l: int) -> HSL:
    """Build an HSL from byte values in [0, 255].

    Each byte is scaled independently; no conversion from RGB happens.
    """
    return HSL(*_scale_bytes(h, s, l))


def random_rgb(rng: np.random.Generator | None = None) -> RGB:
    """Uniformly random red, green and blue in [0, 1)."""
    return RGB(*_uniform_triple(rng))


def random_hsl(rng: np.random.Generator | None = None) -> HSL:
    """Uniformly random hue, saturation and lightness in [0, 1).

    Uniform in HSL is not uniform in perceived color.
    """
    return HSL(*_uniform_triple(rng))
