#!/usr/bin/env python3
"""
Orderings of the 216-colour cube.

Each strategy is a chain of (extract, descending) pairs. The chain is folded
into one tuple key, so the first attribute that differs decides the order and
full ties keep the input order (Python's sort is stable).
"""

import logging
from enum import Enum
from typing import Callable, Optional

from analyze import ColorMetrics, compute_color_metrics, distance
from palette import CUBE

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

GREY_SATURATION = 0.1  # Hue ordering puts colours below this last


class Strategy(Enum):
    RGB = 'rgb'
    DISTANCE = 'distance'
    GREYSCALE = 'greyscale'
    HUE = 'hue'
    LUMINANCE = 'luminance'
    SATURATION = 'saturation'
    SIMILARITY = 'similarity'
    TEMPERATURE = 'temperature'


ASC = False
DESC = True


# =============================================================================
# Key Chains
# =============================================================================

HUE_ASC = (lambda m: m.hue, ASC)
SATURATION_DESC = (lambda m: m.saturation, DESC)
VALUE_DESC = (lambda m: m.value, DESC)

KEY_CHAINS = {
    Strategy.RGB: [
        (lambda m: m.rgb[0], ASC),
        (lambda m: m.rgb[2], ASC),
        (lambda m: m.rgb[1], ASC),
    ],
    Strategy.GREYSCALE: [(lambda m: m.greyscale, DESC), HUE_ASC, SATURATION_DESC],
    # Grey flag first: non-grey (False) sorts before grey (True)
    Strategy.HUE: [
        (lambda m: m.saturation < GREY_SATURATION, ASC),
        HUE_ASC, SATURATION_DESC, VALUE_DESC,
    ],
    Strategy.LUMINANCE: [(lambda m: m.luminance, ASC), HUE_ASC, SATURATION_DESC],
    Strategy.SATURATION: [(lambda m: m.saturation, ASC), VALUE_DESC, HUE_ASC],
    Strategy.SIMILARITY: [(lambda m: m.similarity_group, ASC), VALUE_DESC, SATURATION_DESC],
    Strategy.TEMPERATURE: [
        (lambda m: int(m.temperature), ASC),
        HUE_ASC, VALUE_DESC, SATURATION_DESC,
    ],
}


def key_chain(strategy: Strategy, reference: Optional[int] = None) -> list:
    """
    Ordered (extract, descending) pairs for a strategy.

    Raises:
        ValueError: If strategy is DISTANCE and the reference is missing or
            outside the cube
    """
    if strategy is Strategy.DISTANCE:
        if reference is None:
            raise ValueError("Distance ordering needs a reference colour")
        if reference not in CUBE:
            raise ValueError(f"Distance reference {reference} outside {CUBE.start}-{CUBE.stop - 1}")
        return [
            (lambda m: distance(m.index, reference), ASC),
            VALUE_DESC,
            SATURATION_DESC,
        ]
    return KEY_CHAINS[strategy]


def sort_key(chain: list) -> Callable[[ColorMetrics], tuple]:
    """Fold a key chain into a single tuple-valued key function.

    Descending keys are negated; booleans and ints negate like numbers.
    """
    def key(metrics: ColorMetrics) -> tuple:
        return tuple(
            -extract(metrics) if descending else extract(metrics)
            for extract, descending in chain
        )
    return key


# =============================================================================
# Ordering
# =============================================================================

def order_cube(strategy: Strategy, reference: Optional[int] = None,
               indices=CUBE) -> list:
    """Return the cube indices as a permutation ordered by strategy."""
    chain = key_chain(strategy, reference)
    metrics = compute_color_metrics(indices)
    key = sort_key(chain)
    ordered = sorted(metrics.values(), key=key)
    logger.debug("Ordered %d colours by %s (reference=%s)",
                 len(ordered), strategy.value, reference)
    return [m.index for m in ordered]
