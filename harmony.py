#!/usr/bin/env python3
"""
Harmony sets: palette colours related to a reference by colour-theory rules.

N-adic schemes step around the hue circle and pick the cube colour whose hue
is closest to each target. Muted and dark colours make poor matches, so
candidates need saturation and value of at least 0.3. Monochrome and gradient
sets work on hue tolerance and cube structure instead.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from analyze import circular_hue_distance, hsv
from palette import CUBE, CUBE_SIZE, cube_index, in_cube, rgb_cube

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

MIN_SATURATION = 0.3  # Harmony candidates below this are too muted
MIN_VALUE = 0.3  # ... or too dark
SPLIT_ANGLE = 30  # Split-complementary offset either side of the complement

MONOCHROME_SIZE = 6
MONOCHROME_TOLERANCE = 5  # Degrees either side of the reference hue
MONOCHROME_WIDE_TOLERANCE = 15  # Retry tolerance when too few colours match

N_ADIC_SCHEMES = (
    ('Complementary', 2),
    ('Triadic', 3),
    ('Tetradic', 4),
    ('Pentadic', 5),
    ('Hexadic', 6),
)


@dataclass(frozen=True)
class HarmonySet:
    """A named, ordered group of palette indices led by the reference."""
    name: str
    colors: tuple

    def __len__(self) -> int:
        return len(self.colors)

    @property
    def is_degenerate(self) -> bool:
        return len(self.colors) <= 1


# =============================================================================
# Hue Search
# =============================================================================

def closest_hue(target: float, reference: int, candidates=CUBE) -> Optional[int]:
    """
    Candidate whose hue is circularly closest to target.

    The reference and colours below MIN_SATURATION / MIN_VALUE are skipped.
    The first candidate at the minimum distance wins.

    Returns:
        Palette index, or None if no candidate passes the filter
    """
    best = None
    best_distance = float('inf')

    for index in candidates:
        if index == reference:
            continue
        hue, saturation, value = hsv(index)
        if saturation < MIN_SATURATION or value < MIN_VALUE:
            continue
        dist = circular_hue_distance(hue, target)
        if dist < best_distance:
            best = index
            best_distance = dist

    return best


def match_hues(reference: int, targets: list, candidates=CUBE) -> list:
    """Reference followed by the closest match to each target hue."""
    colors = [reference]
    for target in targets:
        match = closest_hue(target, reference, candidates)
        if match is None:
            logger.debug("No harmony candidate near %.1f° for %d", target, reference)
            continue
        colors.append(match)
    return colors


# =============================================================================
# Schemes
# =============================================================================

def n_adic(reference: int, n: int, candidates=CUBE) -> list:
    """Reference plus matches for the n-1 hues evenly spaced around it."""
    hue = hsv(reference)[0]
    step = 360 / n
    targets = [(hue + step * k) % 360 for k in range(1, n)]
    return match_hues(reference, targets, candidates)


def split_complementary(reference: int, candidates=CUBE) -> list:
    complement = (hsv(reference)[0] + 180) % 360
    targets = [(complement - SPLIT_ANGLE) % 360, (complement + SPLIT_ANGLE) % 360]
    return match_hues(reference, targets, candidates)


def _within_hue(reference_hue: float, tolerance: float, candidates) -> list:
    return [
        index for index in candidates
        if circular_hue_distance(hsv(index)[0], reference_hue) <= tolerance
    ]


def monochrome(reference: int, candidates=CUBE) -> list:
    """
    Up to MONOCHROME_SIZE colours sharing the reference hue, darkest first.

    The reference is always part of the result: if the value cut dropped it,
    it replaces the middle colour.
    """
    if not in_cube(reference):
        return [reference]

    reference_hue = hsv(reference)[0]
    selected = _within_hue(reference_hue, MONOCHROME_TOLERANCE, candidates)
    if len(selected) < MONOCHROME_SIZE:
        logger.debug("Only %d colours within %d° of %d, widening to %d°",
                     len(selected), MONOCHROME_TOLERANCE, reference,
                     MONOCHROME_WIDE_TOLERANCE)
        selected = _within_hue(reference_hue, MONOCHROME_WIDE_TOLERANCE, candidates)

    selected = sorted(selected, key=lambda i: hsv(i)[2])[:MONOCHROME_SIZE]

    if selected and reference not in selected:
        selected[len(selected) // 2] = reference
        selected.sort(key=lambda i: hsv(i)[2])
    elif not selected:
        selected = [reference]

    return selected


def gradient(reference: int) -> list:
    """Sweep the reference's strongest cube channel through 0-5.

    Ties go to red, then green, then blue.
    """
    if not in_cube(reference):
        return [reference]

    r, g, b = rgb_cube(reference)
    if r >= g and r >= b:
        return [cube_index(level, g, b) for level in range(CUBE_SIZE)]
    elif g >= b:
        return [cube_index(r, level, b) for level in range(CUBE_SIZE)]
    else:
        return [cube_index(r, g, level) for level in range(CUBE_SIZE)]


# =============================================================================
# All Harmonies
# =============================================================================

def generate_harmonies(reference: int, candidates=CUBE) -> list:
    """
    Every harmony set for a reference, in display order.

    Degenerate sets (reference only) are included; callers decide whether to
    show them.
    """
    adic = {name: n_adic(reference, n, candidates) for name, n in N_ADIC_SCHEMES}

    harmonies = [
        HarmonySet('Complementary', tuple(adic['Complementary'])),
        HarmonySet('Split-complementary', tuple(split_complementary(reference, candidates))),
        HarmonySet('Triadic', tuple(adic['Triadic'])),
        HarmonySet('Tetradic', tuple(adic['Tetradic'])),
        HarmonySet('Pentadic', tuple(adic['Pentadic'])),
        HarmonySet('Hexadic', tuple(adic['Hexadic'])),
        HarmonySet('Monochrome sequential', tuple(monochrome(reference, candidates))),
        HarmonySet('RGB gradient', tuple(gradient(reference))),
    ]

    logger.debug("Harmonies for %d: %s", reference,
                 ", ".join(f"{h.name}={len(h)}" for h in harmonies))
    return harmonies
