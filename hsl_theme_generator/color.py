from collections import namedtuple

import numpy as np

from .errors import ColorRangeError

HSL = namedtuple("HSL", ["h", "s", "l"])

# Red, green, blue offsets into the 12-step hue wheel
CHANNEL_OFFSETS = np.array([0.0, 8.0, 4.0])

HUE_RANGE = (0, 360)  # half-open
PERCENT_RANGE = (0, 100)


def rgb_to_hex(r, g, b):
    return f"#{r:02x}{g:02x}{b:02x}"


def hsl_to_rgb(hsl):
    """Convert an HSL triple to integer (r, g, b) channel values.

    Args:
        hsl: (hue in degrees, saturation %, lightness %)

    Returns:
        tuple of three ints. Values stay in 0-255 for in-range input; out of
        range input is not clamped.
    """
    h, s, l = hsl
    l = l / 100
    a = s * min(l, 1 - l) / 100
    k = np.fmod(CHANNEL_OFFSETS + h / 30, 12)
    channels = l - a * np.clip(np.minimum(k - 3, 9 - k), -1, 1)
    # Round half up, numpy's round() goes half to even
    rgb = np.floor(255 * channels + 0.5).astype(int)
    return tuple(int(c) for c in rgb)


def hsl_to_hex(hsl, logger=None):
    """Convert an HSL triple to a ``#rrggbb`` string.

    Args:
        hsl: (hue in degrees, saturation %, lightness %)
        logger: Optional logger receiving a debug trace of input and result

    Returns:
        Lowercase hex color string
    """
    hex_color = rgb_to_hex(*hsl_to_rgb(hsl))
    if logger is not None:
        h, s, l = hsl
        logger.debug("hsl(%s, %s, %s) -> %s", h, s, l, hex_color)
    return hex_color


def validate_hsl(hsl, path=None):
    """Raise ColorRangeError unless every component is within its range."""
    h, s, l = hsl
    if not HUE_RANGE[0] <= h < HUE_RANGE[1]:
        raise ColorRangeError(path, "h", h, "[0, 360)")
    for component, value in (("s", s), ("l", l)):
        if not PERCENT_RANGE[0] <= value <= PERCENT_RANGE[1]:
            raise ColorRangeError(path, component, value, "[0, 100]")
    return HSL(h, s, l)
