from .color import HSL, RGB, hue_to_rgb
from .factory import default_rng, new_hsl, new_rgb, random_hsl, random_rgb
from .html import HTMLDigitError, HTMLLengthError, HTMLParseError, html_to_rgb
from .model import SupportsRGBA, hsl_model, rgb_model
from .settings import ColorSettings

__all__ = [
    "RGB",
    "HSL",
    "hue_to_rgb",
    "html_to_rgb",
    "HTMLParseError",
    "HTMLLengthError",
    "HTMLDigitError",
    "rgb_model",
    "hsl_model",
    "SupportsRGBA",
    "new_rgb",
    "new_hsl",
    "random_rgb",
    "random_hsl",
    "default_rng",
    "ColorSettings",
]

__version__ = "2026.10.0"
