"""RGB and HSL value types and the conversions between them.

Conversions follow the closure-library / easyrgb.com formulation. Channel
values are floats in [0, 1]; nothing is validated, so something like
``RGB(10, 20, 30).to_hsl()`` is undefined.
"""

# Third Party
import pydantic as pc

# Internal
from .types import MAX_BYTE, MAX_CHANNEL16, RGBA16, Component

# Nudge that turns byte truncation into round to nearest.
HTML_NUDGE = 1 / 512.0


def hue_to_rgb(v1: float, v2: float, h: float) -> float:
    """Evaluate one RGB channel from the HSL basis values at hue ``h``."""
    if h < 0:
        h += 1
    if h > 1:
        h -= 1

    if 6 * h < 1:
        return v1 + (v2 - v1) * 6 * h
    if 2 * h < 1:
        return v2
    if 3 * h < 2:
        return v1 + (v2 - v1) * ((2.0 / 3.0) - h) * 6
    return v1


def _to_byte(channel: float) -> int:
    return int((channel + HTML_NUDGE) * MAX_BYTE) & MAX_BYTE


@pc.dataclasses.dataclass(frozen=True)
class RGB:
    """Red, green and blue intensities."""

    r: Component
    g: Component
    b: Component

    def to_hsl(self) -> "HSL":
        r, g, b = self.r, self.g, self.b

        M = max(r, g, b)
        m = min(r, g, b)

        # Lightness is the average of the largest and smallest intensities.
        l = (M + m) / 2

        delta = M - m
        if delta == 0:
            # gray
            return HSL(0.0, 0.0, l)

        if l < 0.5:
            s = delta / (M + m)
        else:
            s = delta / (2 - M - m)

        r2 = (((M - r) / 6) + (delta / 2)) / delta
        g2 = (((M - g) / 6) + (delta / 2)) / delta
        b2 = (((M - b) / 6) + (delta / 2)) / delta

        # Ties for the maximum resolve in R, G, B order.
        h = 0.0
        if r == M:
            h = b2 - g2
        elif g == M:
            h = (1.0 / 3.0) + r2 - b2
        elif b == M:
            h = (2.0 / 3.0) + g2 - r2

        if h < 0:
            h += 1
        elif h > 1:
            h -= 1

        return HSL(h, s, l)

    def to_html(self) -> str:
        """Format as six lowercase hex digits, without a leading ``#``."""
        return "{:02x}{:02x}{:02x}".format(
            _to_byte(self.r), _to_byte(self.g), _to_byte(self.b)
        )

    def rgba(self) -> RGBA16:
        """16-bit channels plus an always opaque alpha."""
        return (
            int(self.r * MAX_CHANNEL16),
            int(self.g * MAX_CHANNEL16),
            int(self.b * MAX_CHANNEL16),
            MAX_CHANNEL16,
        )


@pc.dataclasses.dataclass(frozen=True)
class HSL:
    """Hue, saturation and lightness. Hue wraps at 1.0 (360 degrees)."""

    h: Component
    s: Component
    l: Component

    def to_rgb(self) -> RGB:
        h, s, l = self.h, self.s, self.l

        if s == 0:
            # gray
            return RGB(l, l, l)

        if l < 0.5:
            v2 = l * (1 + s)
        else:
            v2 = (l + s) - (s * l)
        v1 = 2 * l - v2

        return RGB(
            hue_to_rgb(v1, v2, h + (1.0 / 3.0)),
            hue_to_rgb(v1, v2, h),
            hue_to_rgb(v1, v2, h - (1.0 / 3.0)),
        )

    def to_html(self) -> str:
        return self.to_rgb().to_html()

    def rgba(self) -> RGBA16:
        return self.to_rgb().rgba()
