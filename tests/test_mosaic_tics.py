from __future__ import annotations

import math
import unittest

import numpy as np

from mosaic_plot import (
    AxisTics,
    DegenerateRangeError,
    InvalidRangeError,
    InvalidSpacingError,
    InvalidTicCeilingError,
    axis_tics_for_count,
    axis_tics_for_interval,
    compute_multiple,
    validate_range,
)
from mosaic_plot.tics import almost_equal, clamp_tic_ceiling, pad_range


def _best_family_count(xmin: float, xmax: float, ntic: int) -> int:
    best = 0
    for m in (2, 5, 10):
        for l in range(-12, 12):
            d = m * 10.0**l
            f = math.ceil(xmin / d) * d
            n = 1 + math.floor((xmax - f) / d)
            if n <= ntic:
                best = max(best, n)
    return best


class IntervalTicsTests(unittest.TestCase):
    def test_first_tic_is_smallest_multiple_inside_range(self) -> None:
        tics = axis_tics_for_interval(-1.3, 1.699, 0.5)
        self.assertEqual(tics.first_major, -1.0)
        self.assertEqual(tics.count_major, 6)
        self.assertAlmostEqual(tics.last_major, 1.5)
        self.assertLessEqual(tics.last_major, tics.xmax)
        self.assertEqual(tics.multiple, 5)

    def test_minor_tics_cover_leading_partial_interval(self) -> None:
        tics = axis_tics_for_interval(-1.3, 1.699, 0.5)
        self.assertAlmostEqual(tics.delta_minor, 0.1)
        self.assertAlmostEqual(tics.first_minor, -1.3, places=9)
        self.assertEqual(tics.count_minor, 30)
        self.assertLess(tics.first_minor - tics.delta_minor, tics.xmin)

    def test_end_point_order_does_not_matter(self) -> None:
        self.assertEqual(axis_tics_for_interval(-1.3, 1.699, 0.5), axis_tics_for_interval(1.699, -1.3, 0.5))

    def test_tic_on_end_point_survives_rounding(self) -> None:
        tics = axis_tics_for_interval(0.1, 0.7, 0.1)
        values = tics.major_values()
        self.assertEqual(tics.count_major, 7)
        np.testing.assert_allclose(values, [0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7])

    def test_interval_larger_than_range_gives_no_major_tics(self) -> None:
        tics = axis_tics_for_interval(0.3, 0.7, 1.0)
        self.assertEqual(tics.count_major, 0)
        self.assertIsNone(tics.last_major)
        self.assertEqual(tics.major_values().size, 0)
        self.assertTrue(np.all(tics.minor_values() >= tics.xmin))
        self.assertTrue(np.all(tics.minor_values() <= tics.xmax))

    def test_coverage_invariant_over_ranges(self) -> None:
        cases = [
            (-1.3, 1.7, 0.5),
            (0.0, 100.0, 25.0),
            (1e-3, 9.7e-3, 2e-3),
            (-250.0, 1234.0, 200.0),
            (3.7, 3.9, 0.05),
            (1e6, 3.2e6, 5e5),
            (-7.0, -2.0, 0.3),
        ]
        for x1, x2, dtic in cases:
            with self.subTest(x1=x1, x2=x2, dtic=dtic):
                tics = axis_tics_for_interval(x1, x2, dtic)
                self.assertGreaterEqual(tics.count_major, 0)
                self.assertGreaterEqual(tics.first_major, tics.xmin)
                self.assertLess(tics.first_major - tics.delta_major, tics.xmin)
                self.assertLessEqual(tics.last_major, tics.xmax)
                self.assertGreater(tics.first_major + tics.count_major * tics.delta_major, tics.xmax)

    def test_degenerate_range_gives_single_tic(self) -> None:
        tics = axis_tics_for_interval(5.0, 5.0, 1.0)
        self.assertEqual(tics.count_major, 1)
        self.assertEqual(tics.first_major, 5.0)
        self.assertEqual(tics.delta_major, 1.0)
        self.assertEqual(tics.count_minor, 1)
        self.assertEqual(tics.first_minor, 5.0)
        for value in tics.as_dict().values():
            self.assertTrue(math.isfinite(value))

    def test_invalid_spacing_is_rejected(self) -> None:
        for dtic in (0.0, -0.5, float("nan"), float("inf")):
            with self.subTest(dtic=dtic):
                with self.assertRaises(InvalidSpacingError):
                    axis_tics_for_interval(0.0, 1.0, dtic)

    def test_non_finite_end_points_are_rejected(self) -> None:
        with self.assertRaises(InvalidRangeError):
            axis_tics_for_interval(float("nan"), 1.0, 0.1)
        with self.assertRaises(InvalidRangeError):
            axis_tics_for_count(0.0, float("inf"), 5)

    def test_range_far_from_zero_terminates(self) -> None:
        tics = axis_tics_for_interval(1e16, 1e16 + 4.0, 1.0)
        self.assertEqual(tics.count_major, 5)
        self.assertEqual(tics.first_major, 1e16)
        self.assertEqual(tics.multiple, 10)
        self.assertEqual(tics.first_minor, 1e16)
        self.assertGreaterEqual(tics.count_minor, tics.count_major)

    def test_minor_lead_in_is_at_most_multiple_minus_one_steps(self) -> None:
        for x1, x2, dtic in ((1e12 + 0.25, 1e12 + 3.0, 1.0), (-1.3, 1.699, 0.5), (123456789.7, 123456800.0, 2.0)):
            with self.subTest(x1=x1, x2=x2, dtic=dtic):
                tics = axis_tics_for_interval(x1, x2, dtic)
                steps = round((tics.first_major - tics.first_minor) / tics.delta_minor)
                self.assertGreaterEqual(steps, 0)
                self.assertLessEqual(steps, tics.multiple - 1)
                self.assertGreaterEqual(tics.first_minor, tics.xmin)

    def test_spacing_too_fine_for_range_is_rejected(self) -> None:
        with self.assertRaises(InvalidSpacingError):
            axis_tics_for_interval(0.0, 1e10, 1e-310)


class CountTicsTests(unittest.TestCase):
    def test_densest_spacing_not_exceeding_ceiling(self) -> None:
        tics = axis_tics_for_count(0.0, 100.0, 5)
        self.assertEqual(tics.delta_major, 50.0)
        self.assertEqual(tics.count_major, 3)
        self.assertEqual(tics.first_major, 0.0)
        self.assertEqual(tics.multiple, 5)
        np.testing.assert_allclose(tics.major_values(), [0.0, 50.0, 100.0])
        self.assertEqual(tics.delta_minor, 10.0)
        self.assertEqual(tics.count_minor, 11)

    def test_ceiling_reached_exactly(self) -> None:
        six = axis_tics_for_count(0.0, 100.0, 6)
        self.assertEqual((six.count_major, six.delta_major, six.multiple), (6, 20.0, 2))
        eleven = axis_tics_for_count(0.0, 100.0, 11)
        self.assertEqual((eleven.count_major, eleven.delta_major, eleven.multiple), (11, 10.0, 10))
        self.assertEqual(eleven.count_minor, 101)

    def test_density_bound_over_ranges(self) -> None:
        cases = [
            (0.0, 100.0, 5),
            (0.0, 100.0, 6),
            (-1.3, 1.7, 7),
            (1e-3, 9.3e-3, 4),
            (-250.0, 1234.0, 10),
            (3.7, 3.9, 5),
            (1e6, 3e6, 8),
            (-7.0, -2.0, 3),
        ]
        for x1, x2, ntic in cases:
            with self.subTest(x1=x1, x2=x2, ntic=ntic):
                tics = axis_tics_for_count(x1, x2, ntic)
                self.assertLessEqual(tics.count_major, ntic)
                self.assertGreaterEqual(tics.count_major, 2)
                self.assertEqual(tics.count_major, _best_family_count(tics.xmin, tics.xmax, ntic))
                self.assertIn(tics.multiple, (2, 5, 10))

    def test_two_tic_fallback_spans_padded_range(self) -> None:
        tics = axis_tics_for_count(1.1, 1.9, 2)
        self.assertEqual(tics.count_major, 2)
        self.assertEqual(tics.first_major, tics.xmin)
        self.assertAlmostEqual(tics.first_major, 1.1, places=5)
        self.assertAlmostEqual(tics.delta_major, 0.8, places=5)
        self.assertEqual(tics.multiple, 1)
        self.assertEqual(tics.count_minor, 2)

    def test_ceiling_below_two_is_clamped(self) -> None:
        self.assertEqual(clamp_tic_ceiling(1), 2)
        self.assertEqual(clamp_tic_ceiling(-3), 2)
        self.assertEqual(clamp_tic_ceiling(7), 7)
        self.assertEqual(axis_tics_for_count(0.0, 100.0, 1), axis_tics_for_count(0.0, 100.0, 2))
        self.assertEqual(axis_tics_for_count(0.0, 100.0, 2).count_major, 2)

    def test_ceiling_below_two_rejected_without_clamp(self) -> None:
        with self.assertRaises(InvalidTicCeilingError):
            clamp_tic_ceiling(1, clamp=False)
        with self.assertRaises(InvalidTicCeilingError):
            axis_tics_for_count(0.0, 1.0, 0, clamp_ceiling=False)

    def test_subnormal_width_falls_back_to_two_tics(self) -> None:
        tics = axis_tics_for_count(0.0, 5e-324, 10)
        self.assertEqual(tics.count_major, 2)
        self.assertEqual(tics.first_major, 0.0)
        self.assertEqual(tics.delta_major, 5e-324)
        self.assertEqual(tics.multiple, 1)
        self.assertEqual(tics.count_minor, 2)

    def test_degenerate_subnormal_range_gives_single_tic(self) -> None:
        tics = axis_tics_for_count(5e-324, 5e-324, 10)
        self.assertEqual(tics.count_major, 1)
        self.assertEqual(tics.first_major, 5e-324)
        self.assertEqual(tics.delta_major, 10.0**-307)
        for value in tics.as_dict().values():
            self.assertTrue(math.isfinite(value))
        self.assertGreater(tics.delta_minor, 0.0)

    def test_degenerate_range_uses_magnitude_spacing(self) -> None:
        self.assertEqual(axis_tics_for_count(5.0, 5.0, 5).delta_major, 1.0)
        self.assertEqual(axis_tics_for_count(250.0, 250.0, 5).delta_major, 100.0)
        self.assertAlmostEqual(axis_tics_for_count(-0.03, -0.03, 5).delta_major, 0.01)
        zero = axis_tics_for_count(0.0, 0.0, 5)
        self.assertEqual((zero.count_major, zero.first_major, zero.delta_major), (1, 0.0, 1.0))

    def test_classmethods_match_functions(self) -> None:
        self.assertEqual(AxisTics.from_count(0.0, 100.0, 5), axis_tics_for_count(0.0, 100.0, 5))
        self.assertEqual(AxisTics.from_interval(0.0, 1.0, 0.2), axis_tics_for_interval(0.0, 1.0, 0.2))


class MultipleTests(unittest.TestCase):
    def test_power_of_ten_multiples(self) -> None:
        self.assertEqual(compute_multiple(20.0), 2)
        self.assertEqual(compute_multiple(0.2), 2)
        self.assertEqual(compute_multiple(10.0), 10)
        self.assertEqual(compute_multiple(1e-3), 10)
        self.assertEqual(compute_multiple(50.0), 5)
        self.assertEqual(compute_multiple(0.5), 5)

    def test_other_spacings_have_no_subdivision(self) -> None:
        self.assertEqual(compute_multiple(25.0), 1)
        self.assertEqual(compute_multiple(3.0), 1)
        self.assertEqual(compute_multiple(0.3), 1)

    def test_non_positive_spacing_rejected(self) -> None:
        with self.assertRaises(InvalidSpacingError):
            compute_multiple(0.0)

    def test_minor_delta_subdivides_major(self) -> None:
        for dtic in (0.5, 20.0, 3.0, 1e-4, 250.0):
            with self.subTest(dtic=dtic):
                tics = axis_tics_for_interval(-13.0, 1700.0, dtic)
                self.assertIn(tics.multiple, (1, 2, 5, 10))
                self.assertAlmostEqual(tics.delta_minor * tics.multiple, tics.delta_major)

    def test_almost_equal_tolerance(self) -> None:
        self.assertTrue(almost_equal(1.0, 1.0 + 1e-15))
        self.assertFalse(almost_equal(1.0, 1.0 + 1e-12))
        self.assertTrue(almost_equal(0.0, 0.0))


class RangeTests(unittest.TestCase):
    def test_validate_range_orders_end_points(self) -> None:
        self.assertEqual(validate_range(2, 1), (1.0, 2.0))

    def test_validate_range_rejects_zero_width(self) -> None:
        with self.assertRaises(DegenerateRangeError):
            validate_range(3.0, 3.0)

    def test_pad_range_widens_both_ends(self) -> None:
        lo, hi = pad_range(10.0, 0.0, epsilon=0.01)
        self.assertAlmostEqual(lo, -0.1)
        self.assertAlmostEqual(hi, 10.1)


if __name__ == "__main__":
    unittest.main()
