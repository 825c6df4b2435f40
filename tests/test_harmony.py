"""
Tests for harmony set generation.
"""

import pytest

from analyze import circular_hue_distance, hsv
from harmony import (
    MIN_SATURATION, MIN_VALUE, HarmonySet, closest_hue, generate_harmonies,
    gradient, monochrome, n_adic, split_complementary,
)


# =============================================================================
# Hue Search Tests
# =============================================================================

class TestClosestHue:
    """Closest candidate by circular hue distance."""

    def test_skips_reference(self):
        assert closest_hue(0, reference=196) == 88
        assert closest_hue(0, reference=88) == 95

    def test_first_found_wins_ties(self):
        assert closest_hue(0, reference=16, candidates=[196, 88]) == 196
        assert closest_hue(0, reference=16, candidates=[88, 196]) == 88

    def test_no_survivor(self):
        # Grays and the reference itself are all filtered out
        assert closest_hue(0, reference=196, candidates=[16, 59, 196]) is None

    @pytest.mark.parametrize("target", range(0, 360, 15))
    def test_matches_are_vivid(self, target):
        match = closest_hue(target, reference=196)
        _, saturation, value = hsv(match)
        assert saturation >= MIN_SATURATION
        assert value >= MIN_VALUE


# =============================================================================
# N-adic Tests
# =============================================================================

class TestNAdic:
    """Evenly spaced hues around the reference."""

    def test_complementary(self):
        colors = n_adic(196, 2)
        assert len(colors) == 2
        assert colors == [196, 30]
        assert circular_hue_distance(hsv(colors[1])[0], 180) == 0

    def test_triadic(self):
        assert n_adic(196, 3) == [196, 28, 18]

    @pytest.mark.parametrize("n", [2, 3, 4, 5, 6])
    def test_sizes(self, n):
        colors = n_adic(46, n)
        assert len(colors) == n
        assert colors[0] == 46

    def test_missing_positions_are_omitted(self):
        assert n_adic(196, 2, candidates=[196, 16]) == [196]

    def test_split_complementary(self):
        assert split_complementary(196) == [196, 29, 24]


# =============================================================================
# Monochrome Tests
# =============================================================================

class TestMonochrome:
    """Same-hue colours ordered darkest first, always with the reference."""

    def test_red(self):
        assert monochrome(196) == [16, 52, 59, 95, 102, 196]

    def test_unique_hue(self):
        colors = monochrome(46)
        assert len(colors) == 6
        assert 46 in colors
        values = [hsv(i)[2] for i in colors]
        assert values == sorted(values)

    def test_widens_tolerance(self):
        # 197 is 12 degrees from red, only reachable after widening
        assert monochrome(196, candidates=[196, 160, 124, 197]) == [124, 160, 196, 197]

    @pytest.mark.parametrize("reference", [0, 7, 15, 232, 255])
    def test_outside_cube(self, reference):
        assert monochrome(reference) == [reference]


# =============================================================================
# Gradient Tests
# =============================================================================

class TestGradient:
    """Sweep of the strongest cube channel."""

    def test_black_sweeps_red(self):
        assert gradient(16) == [16, 52, 88, 124, 160, 196]

    def test_green(self):
        assert gradient(46) == [16, 22, 28, 34, 40, 46]

    def test_blue(self):
        assert gradient(21) == [16, 17, 18, 19, 20, 21]

    def test_green_beats_blue_on_tie(self):
        # (0, 3, 3)
        assert gradient(16 + 18 + 3) == [16 + 3, 16 + 6 + 3, 16 + 12 + 3,
                                         16 + 18 + 3, 16 + 24 + 3, 16 + 30 + 3]

    @pytest.mark.parametrize("reference", [0, 15, 232])
    def test_outside_cube(self, reference):
        assert gradient(reference) == [reference]


# =============================================================================
# All Harmonies
# =============================================================================

class TestGenerateHarmonies:

    def test_display_order_and_sizes(self):
        harmonies = generate_harmonies(196)
        assert [(h.name, len(h)) for h in harmonies] == [
            ('Complementary', 2),
            ('Split-complementary', 3),
            ('Triadic', 3),
            ('Tetradic', 4),
            ('Pentadic', 5),
            ('Hexadic', 6),
            ('Monochrome sequential', 6),
            ('RGB gradient', 6),
        ]
        assert all(h.colors[0] == 196 or 196 in h.colors for h in harmonies)

    def test_degenerate_sets_are_returned(self):
        harmonies = generate_harmonies(196, candidates=[196])
        complementary = harmonies[0]
        assert complementary.colors == (196,)
        assert complementary.is_degenerate

    def test_harmony_set(self):
        harmony = HarmonySet('Triadic', (196, 28, 18))
        assert len(harmony) == 3
        assert not harmony.is_degenerate
