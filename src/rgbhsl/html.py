"""Decoding of ``RRGGBB`` / ``#RRGGBB`` hex color strings."""

# System
import logging
import re

# Internal
from .color import RGB
from .types import MAX_BYTE

HTML_LENGTH = 6

_HEX_PAIR = re.compile(r"[0-9a-fA-F]{2}")


class HTMLParseError(ValueError):
    """A string could not be decoded as a hex color."""


class HTMLLengthError(HTMLParseError):
    """The string is not six characters long after removing a leading ``#``."""


class HTMLDigitError(HTMLParseError):
    """A two character group is not a hexadecimal byte."""


def html_to_rgb(text: str) -> RGB:
    """Decode a string like ``'#123456'`` or ``'ABCDEF'``.

    Args:
        text: Six hex digits in R, G, B order, optionally prefixed by ``#``.

    Returns:
        RGB with each byte scaled to [0, 1].

    Raises:
        HTMLLengthError: If the digits are not exactly six characters.
        HTMLDigitError: If any pair is not valid hexadecimal.
    """
    digits = text[1:] if text.startswith("#") else text

    if len(digits) != HTML_LENGTH:
        logging.debug(f"Rejecting hex color {text!r}: bad length.")
        raise HTMLLengthError(
            f"Invalid string length: expected {HTML_LENGTH} hex digits, got {text!r}"
        )

    channels = []
    for i in range(0, HTML_LENGTH, 2):
        pair = digits[i : i + 2]
        if not _HEX_PAIR.fullmatch(pair):
            logging.debug(f"Rejecting hex color {text!r}: bad digits {pair!r}.")
            raise HTMLDigitError(f"Invalid hex byte {pair!r} in {text!r}")
        channels.append(int(pair, 16) / MAX_BYTE)

    return RGB(*channels)
