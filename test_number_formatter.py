import math
import unittest

from number_formatter import ERROR, count_digits, format_number


class TestNumberFormatter(unittest.TestCase):

    def test_float_artifacts_removed(self):
        self.assertEqual(format_number(0.1 + 0.2), "0.3")
        self.assertEqual(format_number(0.3 - 0.1), "0.2")

    def test_integers_have_no_decimal_point(self):
        self.assertEqual(format_number(8.0), "8")
        self.assertEqual(format_number(-7), "-7")
        self.assertEqual(format_number(123456789), "123456789")

    def test_negative_zero_is_zero(self):
        self.assertEqual(format_number(-0.0), "0")

    def test_rounds_to_twelve_significant_digits(self):
        self.assertEqual(format_number(1 / 3), "0.333333333333")
        self.assertEqual(format_number(2 / 3), "0.666666666667")

    def test_more_than_nine_integer_digits_is_exponential(self):
        self.assertEqual(format_number(1e9), "1e+9")
        self.assertEqual(format_number(999999 * 999999), "9.99998000001e+11")
        self.assertEqual(format_number(-1.5e20), "-1.5e+20")

    def test_small_values(self):
        self.assertEqual(format_number(0.0001), "0.0001")
        self.assertEqual(format_number(1e-12), "0.000000000001")
        self.assertEqual(format_number(1.23456789012e-10), "1.23456789012e-10")
        self.assertEqual(format_number(1e-20), "1e-20")

    def test_non_finite_is_error(self):
        self.assertEqual(format_number(math.nan), ERROR)
        self.assertEqual(format_number(math.inf), ERROR)
        self.assertEqual(format_number(-math.inf), ERROR)
        self.assertEqual(format_number("Error"), ERROR)
        self.assertEqual(format_number(None), ERROR)

    def test_output_fits_fifteen_digits(self):
        for value in (math.pi * 1e300, 1 / 7, 123456.789012345678, -2 ** 0.5 * 1e-200):
            self.assertLessEqual(count_digits(format_number(value)), 15)


if __name__ == "__main__":
    unittest.main(verbosity=2)
