"""
Unit tests for result rounding and number display text.
"""
import math
import unittest

from webcalc.projects.calculator.core.numbers import format_number, to_precision


class TestFormatNumber(unittest.TestCase):

    def test_integers_have_no_fraction(self):
        self.assertEqual(format_number(14.0), "14")
        self.assertEqual(format_number(100.0), "100")
        self.assertEqual(format_number(-7.0), "-7")

    def test_fractions(self):
        self.assertEqual(format_number(0.5), "0.5")
        self.assertEqual(format_number(-2.5), "-2.5")
        self.assertEqual(format_number(123456789.125), "123456789.125")

    def test_negative_zero(self):
        self.assertEqual(format_number(-0.0), "0")

    def test_large_numbers(self):
        self.assertEqual(format_number(1e20), "100000000000000000000")
        self.assertEqual(format_number(1e21), "1e+21")
        self.assertEqual(format_number(1.5e25), "1.5e+25")

    def test_small_numbers(self):
        self.assertEqual(format_number(0.000001), "0.000001")
        self.assertEqual(format_number(1e-7), "1e-7")
        self.assertEqual(format_number(1.5e-7), "1.5e-7")

    def test_non_finite(self):
        self.assertEqual(format_number(math.inf), "Infinity")
        self.assertEqual(format_number(-math.inf), "-Infinity")
        self.assertEqual(format_number(math.nan), "NaN")


class TestToPrecision(unittest.TestCase):

    def test_rounds_to_significant_digits(self):
        self.assertEqual(to_precision(10 / 3), 3.33333333333)
        self.assertEqual(to_precision(2 / 3, 3), 0.667)

    def test_removes_float_artifacts(self):
        self.assertEqual(to_precision(0.1 + 0.2), 0.3)

    def test_non_finite_passes_through(self):
        self.assertEqual(to_precision(math.inf), math.inf)
        self.assertTrue(math.isnan(to_precision(math.nan)))


if __name__ == "__main__":
    unittest.main()
