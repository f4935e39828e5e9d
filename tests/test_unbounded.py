"""
Tests for unbounded angles.
"""

import math
import unittest

import numpy as np

from unitangle import (
    F32,
    Angle32,
    Angle64,
    AngleUnbounded,
    AngleUnbounded32,
    AngleUnbounded64,
)

SUM_INPUTS = [
    -1.093_766_9,
    -2.507_797_2,
    -1.995_534_5,
    -0.704_018_65,
    0.601_837_7,
    -1.887_757_9,
    0.630_587_64,
    -0.860_579_43,
    2.683_119,
    0.664_140_76,
    0.018_360_304,
    0.041_261_05,
    2.733_847_6,
    2.532_730_3,
    -3.082_243_2,
    -1.973_592_4,
    2.883_761_2,
    0.876_528_8,
    -1.492_470_1,
    -1.600_921_4,
]


class TestAngleUnboundedConstruction(unittest.TestCase):
    """Test creating unbounded angles."""

    def test_value_is_kept(self):
        """Test that the radian value is stored as given."""
        self.assertEqual(AngleUnbounded64.from_radians(10.0).to_radians(), 10.0)
        self.assertEqual(AngleUnbounded64.from_turns(2).to_radians(), 2 * math.tau)
        self.assertAlmostEqual(float(AngleUnbounded64.from_degrees(720).to_turns()), 2.0)

    def test_turns_are_distinct(self):
        """Test that values one turn apart are different angles."""
        a = AngleUnbounded64.from_degrees(90)
        b = AngleUnbounded64.from_degrees(450)
        self.assertNotEqual(a, b)
        self.assertEqual(a.to_bounded(), b.to_bounded())

    def test_family_root_has_no_kind(self):
        """Test that the family root cannot be instantiated."""
        with self.assertRaises(TypeError):
            AngleUnbounded(1.0)

    def test_non_finite_input(self):
        """Test that NaN is kept and normalises to NaN."""
        self.assertTrue(AngleUnbounded64.from_radians(np.nan).is_nan())
        self.assertTrue(AngleUnbounded32.from_degrees(np.float32(np.inf)).to_bounded().is_nan())

    def test_stored_dtype(self):
        """Test that the value is stored in the class dtype."""
        self.assertIsInstance(AngleUnbounded32.from_turns(3).to_radians(), np.float32)


class TestAngleUnboundedArithmetic(unittest.TestCase):
    """Test unbounded arithmetic."""

    def test_addition_does_not_wrap(self):
        """Test that sums past π keep going."""
        a = AngleUnbounded64.from_degrees(170) + AngleUnbounded64.from_degrees(20)
        self.assertAlmostEqual(float(a.to_degrees()), 190.0, places=9)

    def test_scaling(self):
        """Test multiplication and division by scalars."""
        a = AngleUnbounded64.QUARTER * 8
        self.assertEqual(a.to_radians(), 4 * math.pi)
        self.assertEqual((a / 8), AngleUnbounded64.QUARTER)
        self.assertEqual(3 * AngleUnbounded32.HALF, AngleUnbounded32.HALF * 3)

    def test_negation(self):
        """Test that negation is plain sign change."""
        self.assertEqual((-AngleUnbounded64.HALF).to_radians(), -math.pi)

    def test_division_by_zero(self):
        """Test that dividing by zero does not raise."""
        self.assertTrue(np.isinf((AngleUnbounded64.QUARTER / 0).to_radians()))
        self.assertTrue((AngleUnbounded64.ZERO / 0).is_nan())

    def test_mixing_families_is_rejected(self):
        """Test that bounded and unbounded angles do not mix."""
        with self.assertRaises(TypeError):
            AngleUnbounded64.QUARTER + Angle64.QUARTER
        with self.assertRaises(TypeError):
            AngleUnbounded64.QUARTER + AngleUnbounded32.QUARTER

    def test_sum_matches_fold(self):
        """Test that summing once agrees with repeated addition."""
        angles = [AngleUnbounded32.from_radians(np.float32(x)) for x in SUM_INPUTS]
        total = AngleUnbounded32.sum(angles)
        folded = AngleUnbounded32.ZERO
        for angle in angles:
            folded = folded + angle
        self.assertLessEqual(abs(float(total.to_radians()) - float(folded.to_radians())), 1e-5)

    def test_sum_does_not_wrap(self):
        """Test that the sum keeps whole turns."""
        total = AngleUnbounded64.sum([AngleUnbounded64.from_turns(1)] * 3)
        self.assertEqual(total.to_radians(), 3 * math.tau)


class TestAngleUnboundedOrdering(unittest.TestCase):
    """Test the total order of unbounded angles."""

    def test_comparisons(self):
        """Test every comparison operator."""
        a = AngleUnbounded64.from_degrees(90)
        b = AngleUnbounded64.from_degrees(450)
        self.assertTrue(a < b)
        self.assertTrue(a <= b)
        self.assertTrue(b > a)
        self.assertTrue(b >= a)
        self.assertTrue(a <= a)
        self.assertFalse(a > a)

    def test_sorting(self):
        """Test sorting a list of angles."""
        angles = [AngleUnbounded32.from_turns(t) for t in (3, -1, 0.5, 2)]
        ordered = sorted(angles)
        self.assertEqual(ordered, [angles[1], angles[2], angles[3], angles[0]])
        self.assertEqual(max(angles), AngleUnbounded32.from_turns(3))

    def test_comparing_other_classes_is_rejected(self):
        """Test that ordering only works within one class."""
        with self.assertRaises(TypeError):
            AngleUnbounded64.ZERO < AngleUnbounded32.QUARTER
        with self.assertRaises(TypeError):
            AngleUnbounded64.ZERO < 1.0
        with self.assertRaises(TypeError):
            AngleUnbounded64.ZERO >= Angle64.ZERO


class TestAngleUnboundedBridge(unittest.TestCase):
    """Test the bridge with bounded angles."""

    def test_to_bounded_matches_bounded_constructors(self):
        """Test that normalising equals constructing a bounded angle directly."""
        rng = np.random.default_rng(11)
        for bounded_cls, unbounded_cls in ((Angle32, AngleUnbounded32), (Angle64, AngleUnbounded64)):
            dtype = bounded_cls.KIND.dtype
            for value in rng.uniform(-1e4, 1e4, 100).astype(dtype):
                for name in ("from_radians", "from_degrees", "from_gradians"):
                    self.assertEqual(
                        getattr(unbounded_cls, name)(value).to_bounded(),
                        getattr(bounded_cls, name)(value),
                        (bounded_cls, name, value),
                    )
            for value in rng.uniform(-0.99, 0.99, 100).astype(dtype):
                self.assertEqual(
                    unbounded_cls.from_turns(value).to_bounded(),
                    bounded_cls.from_turns(value),
                )

    def test_turns_agree_within_rounding(self):
        """Test that large turn counts agree with the bounded constructor."""
        for turns in (1.3, -7.25, 1234.1):
            unbounded = AngleUnbounded64.from_turns(turns).to_bounded()
            bounded = Angle64.from_turns(turns)
            self.assertAlmostEqual(float(unbounded.to_radians()), float(bounded.to_radians()), places=9)

    def test_from_bounded(self):
        """Test that embedding keeps the value."""
        unbounded = AngleUnbounded32.from_bounded(Angle32.QUARTER)
        self.assertIsInstance(unbounded, AngleUnbounded32)
        self.assertEqual(unbounded.to_radians(), F32.FRAC_PI_2)
        self.assertEqual(unbounded.to_bounded(), Angle32.QUARTER)

    def test_from_bounded_rejects_other_types(self):
        """Test that only bounded angles of the same precision are accepted."""
        with self.assertRaises(TypeError):
            AngleUnbounded32.from_bounded(Angle64.QUARTER)
        with self.assertRaises(TypeError):
            AngleUnbounded32.from_bounded(AngleUnbounded32.QUARTER)

    def test_precision(self):
        """Test conversions between precisions."""
        wide = AngleUnbounded32.from_radians(np.float32(10.5)).to_f64()
        self.assertIsInstance(wide, AngleUnbounded64)
        self.assertEqual(wide.to_radians(), 10.5)
        self.assertEqual(wide.to_f32().to_radians(), np.float32(10.5))


if __name__ == '__main__':
    unittest.main()
