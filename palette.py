#!/usr/bin/env python3
"""
The 256-colour terminal palette: bands, cube coordinates and xterm RGB values.

Indices 0-15 are the system colours, 16-231 form a 6x6x6 RGB cube and
232-255 are a grayscale ramp that leaves out pure black and white.
"""

from enum import Enum


# =============================================================================
# Constants
# =============================================================================

STANDARD = range(0, 8)
HIGH_INTENSITY = range(8, 16)
CUBE = range(16, 232)
GRAYSCALE = range(232, 256)

CUBE_SIZE = 6  # Levels per channel
CUBE_LEVELS = (0, 95, 135, 175, 215, 255)  # xterm channel values per cube level

# xterm default RGB values for the 16 system colours
SYSTEM_RGB = (
    (0, 0, 0), (205, 0, 0), (0, 205, 0), (205, 205, 0),
    (0, 0, 238), (205, 0, 205), (0, 205, 205), (229, 229, 229),
    (127, 127, 127), (255, 0, 0), (0, 255, 0), (255, 255, 0),
    (92, 92, 255), (255, 0, 255), (0, 255, 255), (255, 255, 255),
)


class Band(Enum):
    """Numeric band of a palette index."""
    STANDARD = 'standard'
    HIGH_INTENSITY = 'high-intensity'
    CUBE = 'cube'
    GRAYSCALE = 'grayscale'


BANDS = {
    Band.STANDARD: STANDARD,
    Band.HIGH_INTENSITY: HIGH_INTENSITY,
    Band.CUBE: CUBE,
    Band.GRAYSCALE: GRAYSCALE,
}


# =============================================================================
# Index Mapping
# =============================================================================

def band(index: int) -> Band:
    """Return the band a palette index belongs to.

    Raises:
        ValueError: If index is outside 0-255
    """
    for name, indices in BANDS.items():
        if index in indices:
            return name
    raise ValueError(f"Palette index {index} outside 0-255")


def in_cube(index: int) -> bool:
    return index in CUBE


def rgb_cube(index: int) -> tuple:
    """Cube coordinate (r, g, b), each 0-5, of a cube-band index (16-231)."""
    n = index - CUBE.start
    return n // 36, (n % 36) // 6, n % 6


def cube_index(r: int, g: int, b: int) -> int:
    """Inverse of rgb_cube()."""
    return CUBE.start + r * 36 + g * 6 + b


def xterm_rgb(index: int) -> tuple:
    """RGB (0-255) that xterm displays for a palette index."""
    if index in STANDARD or index in HIGH_INTENSITY:
        return SYSTEM_RGB[index]
    if index in CUBE:
        return tuple(CUBE_LEVELS[c] for c in rgb_cube(index))
    level = 8 + (index - GRAYSCALE.start) * 10
    return (level, level, level)


def to_hex(index: int) -> str:
    r, g, b = xterm_rgb(index)
    return f"#{r:02x}{g:02x}{b:02x}"
