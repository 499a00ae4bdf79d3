# -*- coding: utf-8 -*-
"""
Tests for Validator.

Reminder: is_within_range() is True when the value is OUTSIDE [min, max].
"""

import math
import unittest
from decimal import Decimal

from bankaccount import Validator

NAN = float("nan")
INF = float("inf")


class TestValidator(unittest.TestCase):
    def setUp(self):
        self.validator = Validator()

    def test_below_min_is_outside(self):
        for value, lo, hi in [(0.0, 1.0, 10.0), (-1e308, 0.0, 1.0), (0.999, 1.0, 10.0)]:
            with self.subTest(value=value):
                self.assertTrue(self.validator.is_within_range(value, lo, hi))

    def test_above_max_is_outside(self):
        for value, lo, hi in [(11.0, 1.0, 10.0), (1e308, 0.0, 1.0), (10.0001, 1.0, 10.0)]:
            with self.subTest(value=value):
                self.assertTrue(self.validator.is_within_range(value, lo, hi))

    def test_boundaries_are_inside(self):
        self.assertFalse(self.validator.is_within_range(1.0, 1.0, 10.0))
        self.assertFalse(self.validator.is_within_range(10.0, 1.0, 10.0))
        self.assertFalse(self.validator.is_within_range(5.0, 1.0, 10.0))
        self.assertFalse(self.validator.is_within_range(3.0, 3.0, 3.0))

    def test_nan_anywhere_is_inside(self):
        cases = [
            (NAN, 0.0, 100.0),
            (50.0, NAN, 100.0),
            (500.0, 0.0, NAN),
            (NAN, NAN, NAN),
            (-INF, NAN, NAN),
        ]
        for value, lo, hi in cases:
            with self.subTest(value=value, lo=lo, hi=hi):
                self.assertFalse(self.validator.is_within_range(value, lo, hi))

    def test_infinities_are_outside_finite_bounds(self):
        self.assertTrue(self.validator.is_within_range(INF, -1e308, 1e308))
        self.assertTrue(self.validator.is_within_range(-INF, -1e308, 1e308))
        self.assertFalse(self.validator.is_within_range(INF, 0.0, INF))
        self.assertFalse(self.validator.is_within_range(-INF, -INF, 0.0))

    def test_inverted_bounds_not_special_cased(self):
        # min > max: value < min holds for anything below 10
        self.assertTrue(self.validator.is_within_range(5.0, 10.0, 1.0))
        self.assertTrue(self.validator.is_within_range(20.0, 10.0, 1.0))

    def test_accepts_int_and_decimal(self):
        self.assertTrue(self.validator.is_within_range(0, 1, 10))
        self.assertFalse(self.validator.is_within_range(Decimal("1.5"), 1, Decimal("2")))
        self.assertFalse(self.validator.is_within_range(Decimal("NaN"), 0, 1))

    def test_inputs_float_cannot_represent(self):
        self.assertTrue(self.validator.is_within_range(10 ** 400, 0, 1))
        self.assertTrue(self.validator.is_within_range(-(10 ** 400), 0, 1))
        self.assertFalse(self.validator.is_within_range(5, -(10 ** 400), 10 ** 400))
        self.assertFalse(self.validator.is_within_range(Decimal("sNaN"), 0, 1))
        self.assertFalse(self.validator.is_within_range(0.5, Decimal("sNaN"), 1))

    def test_out_of_range_alias_and_call(self):
        for value in (-1.0, 0.0, 0.5, 1.0, 2.0, NAN, INF, -INF):
            with self.subTest(value=value):
                expected = self.validator.is_within_range(value, 0.0, 1.0)
                self.assertIs(self.validator.is_out_of_range(value, 0.0, 1.0), expected)
                self.assertIs(self.validator(value, 0.0, 1.0), expected)

    def test_returns_bool(self):
        self.assertIsInstance(self.validator.is_within_range(math.pi, 0, 1), bool)


if __name__ == '__main__':
    unittest.main(verbosity=2)
