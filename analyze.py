#!/usr/bin/env python3
"""
Colour-space derivation for the 6x6x6 cube of the terminal palette.

Every function takes a cube-band palette index (16-231) and derives one
attribute of it. Channels are normalised by dividing cube levels by 5, not by
converting to xterm RGB: the numbers describe the cube, not the display.
"""

import logging
from dataclasses import dataclass
from enum import IntEnum

import numpy as np

from palette import CUBE, rgb_cube

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

LUMA_WEIGHTS = (0.299, 0.587, 0.114)

WARM_MAX_HUE = 60  # Warm is hue <= 60 or hue >= WARM_MIN_HUE
WARM_MIN_HUE = 300
COOL_MAX_HUE = 180  # Cool is 60 < hue <= 180

NEUTRAL_SATURATION = 0.2  # Below this, similarity groups by value instead of hue
HUE_SECTOR = 30  # Degrees per similarity hue sector
NEUTRAL_GROUPS = 3  # dark, medium, light
SIMILARITY_GROUPS = NEUTRAL_GROUPS + 360 // HUE_SECTOR


class Temperature(IntEnum):
    """Coarse temperature class. The value is the sort ordinal."""
    WARM = 0
    MEDIUM = 1
    COOL = 2


# =============================================================================
# Color Conversion
# =============================================================================

def normalized_rgb(index: int) -> tuple:
    """Cube coordinate scaled to [0, 1]."""
    r, g, b = rgb_cube(index)
    return r / 5, g / 5, b / 5


def hsv(index: int) -> tuple:
    """Return (hue 0-360, saturation 0-1, value 0-1).

    Achromatic colours get hue 0, so grays sort and group with reds.
    """
    r, g, b = normalized_rgb(index)
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    saturation = 0.0 if max_c == 0 else delta / max_c

    if delta == 0:
        hue = 0.0
    elif max_c == r:
        hue = 60 * ((g - b) / delta)
    elif max_c == g:
        hue = 60 * ((b - r) / delta + 2)
    else:
        hue = 60 * ((r - g) / delta + 4)

    if hue < 0:
        hue += 360

    return hue, saturation, max_c


def luminance(index: int) -> float:
    """Weighted brightness of the normalised channels (no gamma)."""
    r, g, b = normalized_rgb(index)
    wr, wg, wb = LUMA_WEIGHTS
    return wr * r + wg * g + wb * b


def greyscale(index: int) -> float:
    """Unweighted mean of the normalised channels."""
    r, g, b = normalized_rgb(index)
    return (r + g + b) / 3


def distance(index_a: int, index_b: int) -> float:
    """Euclidean distance between two cube coordinates (0-5 scale)."""
    a = np.array(rgb_cube(index_a))
    b = np.array(rgb_cube(index_b))
    return float(np.linalg.norm(a - b))


# =============================================================================
# Color Utilities
# =============================================================================

def circular_hue_distance(hue1: float, hue2: float) -> float:
    """Compute minimum angular distance between two hues (0-180)."""
    diff = abs(hue1 - hue2)
    return min(diff, 360 - diff)


def temperature(index: int) -> Temperature:
    hue = hsv(index)[0]
    if hue <= WARM_MAX_HUE or hue >= WARM_MIN_HUE:
        return Temperature.WARM
    elif hue <= COOL_MAX_HUE:
        return Temperature.COOL
    else:
        return Temperature.MEDIUM


def similarity_group(index: int) -> int:
    """
    Cluster id in [0, 14].

    Low-saturation colours fall into 0 (dark), 1 (medium) or 2 (light) by
    value; everything else into one of twelve 30 degree hue sectors, 3-14.
    """
    hue, saturation, value = hsv(index)

    if saturation < NEUTRAL_SATURATION:
        if value < 0.33:
            return 0
        elif value < 0.67:
            return 1
        else:
            return 2

    return NEUTRAL_GROUPS + int(hue // HUE_SECTOR)


def color_name(index: int) -> str:
    """Generate a descriptive name from HSV coordinates."""
    hue, saturation, value = hsv(index)

    # Neutral colors
    if saturation < NEUTRAL_SATURATION:
        if value < 0.1:
            return "Black"
        elif value < 0.4:
            return "Dark Gray"
        elif value < 0.7:
            return "Gray"
        elif value < 0.9:
            return "Light Gray"
        else:
            return "White"

    # Hue name
    if hue < 20 or hue >= 330:
        hue_name = "Red"
    elif hue < 45:
        hue_name = "Orange"
    elif hue < 70:
        hue_name = "Yellow"
    elif hue < 150:
        hue_name = "Green"
    elif hue < 200:
        hue_name = "Cyan"
    elif hue < 260:
        hue_name = "Blue"
    else:
        hue_name = "Purple"

    # Lightness modifier
    if value < 0.3:
        lightness_mod = "Deep "
    elif value < 0.7:
        lightness_mod = "Dark "
    elif saturation < 0.5:
        lightness_mod = "Light "
    else:
        lightness_mod = ""

    # Saturation modifier
    if saturation < 0.5:
        saturation_mod = "Muted "
    elif saturation == 1 and value == 1:
        saturation_mod = "Vivid "
    else:
        saturation_mod = ""

    return f"{lightness_mod}{saturation_mod}{hue_name}".strip()


# =============================================================================
# Per-Color Metrics
# =============================================================================

@dataclass(frozen=True)
class ColorMetrics:
    """Every derived attribute of one cube colour."""
    index: int
    rgb: tuple  # Cube coordinate, 0-5 per channel
    hue: float  # 0-360
    saturation: float  # 0-1
    value: float  # 0-1
    luminance: float
    greyscale: float
    temperature: Temperature
    similarity_group: int


def compute_metrics(index: int) -> ColorMetrics:
    hue, saturation, value = hsv(index)
    return ColorMetrics(
        index=index,
        rgb=rgb_cube(index),
        hue=hue,
        saturation=saturation,
        value=value,
        luminance=luminance(index),
        greyscale=greyscale(index),
        temperature=temperature(index),
        similarity_group=similarity_group(index),
    )


def compute_color_metrics(indices=CUBE) -> dict:
    """Metrics for each index, keyed by index, in input order."""
    metrics = {index: compute_metrics(index) for index in indices}
    logger.debug("Computed metrics for %d colours", len(metrics))
    return metrics
