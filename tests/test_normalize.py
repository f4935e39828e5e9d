"""
Tests for radian normalisation.
"""

import unittest

import numpy as np

from unitangle.normalize import is_canonical, normalize, normalize_within_two_turns
from unitangle.scalar import F32, F64, Float


class TestNormalize(unittest.TestCase):
    """Test normalize function."""

    def test_main_range_is_unchanged(self):
        """Test that values already in (-π, π] are returned as is."""
        for kind in Float:
            for value in (kind.ZERO, kind.FRAC_PI_2, -kind.FRAC_PI_3, kind.PI):
                self.assertEqual(normalize(value, kind), value)

    def test_minus_pi_maps_to_pi(self):
        """Test that -π is folded onto π."""
        for kind in Float:
            self.assertEqual(normalize(-kind.PI, kind), kind.PI)

    def test_full_turns_vanish(self):
        """Test that whole turns are removed."""
        self.assertEqual(normalize(F64.TAU, F64), 0.0)
        self.assertEqual(normalize(-F64.TAU, F64), 0.0)
        self.assertAlmostEqual(float(normalize(5 * np.pi / 2, F64)), np.pi / 2)
        self.assertAlmostEqual(float(normalize(-5 * np.pi / 2, F64)), -np.pi / 2)

    def test_result_dtype(self):
        """Test that the result is in the kind's dtype."""
        self.assertIsInstance(normalize(10.0, F32), np.float32)
        self.assertIsInstance(normalize(np.float32(10.0), F64), np.float64)

    def test_non_finite_is_nan(self):
        """Test that NaN and infinities give NaN."""
        for kind in Float:
            for value in (np.nan, np.inf, -np.inf):
                self.assertTrue(np.isnan(normalize(value, kind)))

    def test_huge_values_stay_finite(self):
        """Test that the largest finite values are reduced without overflow."""
        for kind in Float:
            for value in (kind.MAX, kind.MIN):
                result = normalize(value, kind)
                self.assertTrue(np.isfinite(result))
                self.assertTrue(is_canonical(result, kind))

    def test_random_values_land_in_range(self):
        """Test the range invariant on random inputs of many magnitudes."""
        rng = np.random.default_rng(42)
        values = np.concatenate([
            rng.uniform(-10, 10, 200),
            rng.uniform(-1e6, 1e6, 200),
            rng.uniform(-1e30, 1e30, 200),
        ])
        for kind in Float:
            for value in values:
                result = normalize(value, kind)
                self.assertTrue(-kind.PI < result <= kind.PI, (kind, value, result))


class TestNormalizeWithinTwoTurns(unittest.TestCase):
    """Test the single-step reduction."""

    def test_matches_normalize(self):
        """Test that both reductions agree on [-τ, τ]."""
        for kind in Float:
            grid = np.linspace(-kind.TAU, kind.TAU, 1001, dtype=kind.dtype)
            for value in grid:
                self.assertEqual(
                    normalize_within_two_turns(value, kind),
                    normalize(value, kind),
                    (kind, value),
                )

    def test_nan_passes_through(self):
        """Test that NaN is returned unchanged."""
        self.assertTrue(np.isnan(normalize_within_two_turns(np.nan, F64)))

    def test_precondition_is_asserted(self):
        """Test that values beyond one turn trip the assertion."""
        if not __debug__:
            self.skipTest("assertions disabled")
        with self.assertRaises(AssertionError):
            normalize_within_two_turns(10.0, F64)


class TestIsCanonical(unittest.TestCase):
    """Test is_canonical function."""

    def test_bounds(self):
        """Test the open lower and closed upper bound."""
        self.assertTrue(is_canonical(F32.PI, F32))
        self.assertFalse(is_canonical(-F32.PI, F32))
        self.assertTrue(is_canonical(F64.NAN, F64))
        self.assertFalse(is_canonical(4.0, F64))


if __name__ == '__main__':
    unittest.main()
