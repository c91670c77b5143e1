import math
import unittest

from function_dispatcher import (
    AngleMode,
    BinaryOperator,
    PythonMathProvider,
    UnaryFunction,
    apply_unary,
    calculate,
)


def unary(name, x, mode=AngleMode.DEG, provider=None):
    return apply_unary(provider or PythonMathProvider(), UnaryFunction(name), x, mode)


class TestCalculate(unittest.TestCase):

    def test_basic_arithmetic(self):
        self.assertEqual(calculate(5, 3, BinaryOperator.ADD), 8)
        self.assertEqual(calculate(3, 10, BinaryOperator.SUBTRACT), -7)
        self.assertEqual(calculate(6, 7, BinaryOperator.MULTIPLY), 42)
        self.assertEqual(calculate(10, 4, BinaryOperator.DIVIDE), 2.5)

    def test_integer_division_is_exact(self):
        for a in range(-12, 13):
            for b in (-7, -3, -1, 1, 2, 5, 9):
                self.assertAlmostEqual(calculate(a, b, BinaryOperator.DIVIDE), a / b)

    def test_division_by_zero(self):
        for a in (5, -5, 0, 1e300):
            with self.assertRaises(ZeroDivisionError):
                calculate(a, 0, BinaryOperator.DIVIDE)

    def test_scientific_operators(self):
        self.assertEqual(calculate(2, 10, BinaryOperator.POWER), 1024)
        self.assertAlmostEqual(calculate(27, 3, BinaryOperator.ROOT), 3)
        self.assertAlmostEqual(calculate(-8, 3, BinaryOperator.ROOT), -2)
        self.assertEqual(calculate(3, 4, BinaryOperator.SCI_EXP), 30000)
        self.assertEqual(calculate(1e-6, 310, BinaryOperator.SCI_EXP), 1e304)
        self.assertEqual(calculate(-2.5, -3, BinaryOperator.SCI_EXP), -0.0025)
        self.assertAlmostEqual(calculate(2, 0.5, BinaryOperator.SCI_EXP), 2 * 10 ** 0.5)

    def test_scientific_operator_failures(self):
        with self.assertRaises(ValueError):
            calculate(-8, 2, BinaryOperator.ROOT)
        with self.assertRaises(ValueError):
            calculate(8, 0, BinaryOperator.ROOT)
        with self.assertRaises(ValueError):
            calculate(-8, 0.5, BinaryOperator.POWER)
        with self.assertRaises(OverflowError):
            calculate(10, 400, BinaryOperator.POWER)
        with self.assertRaises(OverflowError):
            calculate(1e308, 10, BinaryOperator.MULTIPLY)
        with self.assertRaises(OverflowError):
            calculate(10, 308, BinaryOperator.SCI_EXP)

    def test_operator_aliases(self):
        self.assertIs(BinaryOperator("*"), BinaryOperator.MULTIPLY)
        self.assertIs(BinaryOperator("/"), BinaryOperator.DIVIDE)
        self.assertIs(BinaryOperator("^"), BinaryOperator.POWER)
        self.assertEqual(BinaryOperator.POWER.symbol, "^")
        self.assertEqual(BinaryOperator.ADD.symbol, "+")


class TestUnaryFunctions(unittest.TestCase):

    def test_trig_degrees(self):
        self.assertAlmostEqual(unary("sin", 30), 0.5, places=12)
        self.assertEqual(unary("sin", 180), 0.0)
        self.assertEqual(unary("cos", 90), 0.0)
        self.assertAlmostEqual(unary("tan", 45 + 180), 1.0, places=12)

    def test_trig_radians(self):
        self.assertAlmostEqual(unary("sin", math.pi / 2, AngleMode.RAD), 1.0, places=12)
        self.assertAlmostEqual(unary("cos", 0, AngleMode.RAD), 1.0)

    def test_inverse_trig_follows_angle_mode(self):
        self.assertAlmostEqual(unary("asin", 0.5), 30, places=10)
        self.assertAlmostEqual(unary("asin", 0.5, AngleMode.RAD), math.pi / 6)
        self.assertAlmostEqual(unary("atan", 1), 45, places=10)

    def test_hyperbolic_ignores_angle_mode(self):
        self.assertEqual(unary("sinh", 1), unary("sinh", 1, AngleMode.RAD))
        self.assertAlmostEqual(unary("acosh", 1), 0)

    def test_direct_transforms(self):
        self.assertAlmostEqual(unary("ln", math.e), 1)
        self.assertAlmostEqual(unary("log10", 1000), 3)
        self.assertAlmostEqual(unary("exp10", 2), 100)
        self.assertEqual(unary("square", -3), 9)
        self.assertEqual(unary("cube", -2), -8)
        self.assertAlmostEqual(unary("cbrt", -27), -3)
        self.assertEqual(unary("reciprocal", 4), 0.25)
        self.assertEqual(unary("factorial", 0), 1)
        self.assertEqual(unary("factorial", 5), 120)

    def test_domain_failures(self):
        cases = [
            ("ln", 0), ("ln", -1), ("log10", 0), ("sqrt", -5),
            ("asin", 2), ("acos", -1.5), ("acosh", 0.5), ("atanh", 1),
            ("factorial", -1), ("factorial", 2.5), ("tan", 90),
        ]
        for name, x in cases:
            with self.subTest(function=name, operand=x):
                with self.assertRaises(ValueError):
                    unary(name, x)

    def test_reciprocal_of_zero(self):
        with self.assertRaises(ZeroDivisionError):
            unary("reciprocal", 0)

    def test_overflow(self):
        with self.assertRaises(OverflowError):
            unary("factorial", 171)
        with self.assertRaises(OverflowError):
            unary("exp", 1000)
        with self.assertRaises(OverflowError):
            unary("square", 1e200)

    def test_inverse_selection(self):
        self.assertIs(UnaryFunction.SIN.inverse, UnaryFunction.ASIN)
        self.assertIs(UnaryFunction.TANH.inverse, UnaryFunction.ATANH)
        self.assertIs(UnaryFunction.LN.inverse, UnaryFunction.LN)


if __name__ == "__main__":
    unittest.main(verbosity=2)
