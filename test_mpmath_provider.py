import unittest

from function_dispatcher import AngleMode, PythonMathProvider, UnaryFunction, apply_unary
from mpmath_provider import MPMathProvider
from number_formatter import format_number


class TestMPMathProvider(unittest.TestCase):

    def setUp(self):
        self.mp = MPMathProvider(working_digits=30)
        self.py = PythonMathProvider()

    def _both(self, function, x, mode=AngleMode.DEG):
        return (
            format_number(apply_unary(self.mp, function, x, mode)),
            format_number(apply_unary(self.py, function, x, mode)),
        )

    def test_matches_math_provider_after_formatting(self):
        operands = {
            UnaryFunction.SIN: 30, UnaryFunction.COS: 60, UnaryFunction.TAN: 45,
            UnaryFunction.ASIN: 0.5, UnaryFunction.ACOS: 0.5, UnaryFunction.ATAN: 1,
            UnaryFunction.SINH: 1, UnaryFunction.COSH: 1, UnaryFunction.TANH: 0.5,
            UnaryFunction.ASINH: 1, UnaryFunction.ACOSH: 2, UnaryFunction.ATANH: 0.5,
            UnaryFunction.LN: 10, UnaryFunction.LOG10: 1000, UnaryFunction.EXP: 2,
            UnaryFunction.EXP10: 3, UnaryFunction.SQUARE: 12, UnaryFunction.CUBE: 3,
            UnaryFunction.SQRT: 2, UnaryFunction.CBRT: -27,
            UnaryFunction.RECIPROCAL: 8, UnaryFunction.FACTORIAL: 10,
        }
        for function, x in operands.items():
            with self.subTest(function=function.value):
                mp_text, py_text = self._both(function, x)
                self.assertEqual(mp_text, py_text)

    def test_minimum_working_precision(self):
        self.assertEqual(MPMathProvider(working_digits=4).working_digits, 16)

    def test_domain_failures(self):
        cases = [
            (UnaryFunction.SQRT, -5), (UnaryFunction.LN, 0), (UnaryFunction.LOG10, -2),
            (UnaryFunction.ASIN, 2), (UnaryFunction.ACOSH, 0), (UnaryFunction.ATANH, -1),
            (UnaryFunction.FACTORIAL, 1.5), (UnaryFunction.TAN, 270),
        ]
        for function, x in cases:
            with self.subTest(function=function.value):
                with self.assertRaises(ValueError):
                    apply_unary(self.mp, function, x, AngleMode.DEG)

    def test_reciprocal_of_zero(self):
        with self.assertRaises(ZeroDivisionError):
            apply_unary(self.mp, UnaryFunction.RECIPROCAL, 0, AngleMode.RAD)

    def test_overflow(self):
        with self.assertRaises(OverflowError):
            apply_unary(self.mp, UnaryFunction.FACTORIAL, 200, AngleMode.RAD)
        with self.assertRaises(OverflowError):
            apply_unary(self.mp, UnaryFunction.EXP, 1000, AngleMode.RAD)


if __name__ == "__main__":
    unittest.main(verbosity=2)
