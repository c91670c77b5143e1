"""
Funciones científicas y operadores binarios de la calculadora.

Este módulo define las enumeraciones de funciones (unarias y binarias),
el modo angular y el proveedor de funciones basado en ``math``. El
proveedor es intercambiable: cualquier objeto con
``build_namespace(angle_mode)`` sirve (ver ``mpmath_provider``).

Contrato de errores:
    - ZeroDivisionError: división por cero, recíproco de cero.
    - ValueError: operando fuera del dominio real.
    - OverflowError: resultado no representable.
"""

import math
from decimal import Decimal
from enum import Enum

MAX_FACTORIAL = 170
MAX_DECIMAL_SCALE = 1000


class AngleMode(Enum):
    DEG = "deg"
    RAD = "rad"

    @property
    def label(self) -> str:
        return self.value.upper()

    def toggled(self) -> "AngleMode":
        return AngleMode.RAD if self is AngleMode.DEG else AngleMode.DEG


class UnaryFunction(Enum):
    """Funciones de un operando; el valor es el nombre que aparece en la traza."""

    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    ASIN = "asin"
    ACOS = "acos"
    ATAN = "atan"
    SINH = "sinh"
    COSH = "cosh"
    TANH = "tanh"
    ASINH = "asinh"
    ACOSH = "acosh"
    ATANH = "atanh"
    LN = "ln"
    LOG10 = "log10"
    EXP = "exp"
    EXP10 = "exp10"
    SQUARE = "square"
    CUBE = "cube"
    SQRT = "sqrt"
    CBRT = "cbrt"
    RECIPROCAL = "reciprocal"
    FACTORIAL = "factorial"

    @property
    def inverse(self) -> "UnaryFunction":
        """Función seleccionada en modo inverso (2nd); las demás no cambian."""
        return _INVERSES.get(self, self)

    @property
    def is_trig(self) -> bool:
        return self in (UnaryFunction.SIN, UnaryFunction.COS, UnaryFunction.TAN)

    @property
    def is_inverse_trig(self) -> bool:
        return self in (UnaryFunction.ASIN, UnaryFunction.ACOS, UnaryFunction.ATAN)


_INVERSES = {
    UnaryFunction.SIN: UnaryFunction.ASIN,
    UnaryFunction.COS: UnaryFunction.ACOS,
    UnaryFunction.TAN: UnaryFunction.ATAN,
    UnaryFunction.SINH: UnaryFunction.ASINH,
    UnaryFunction.COSH: UnaryFunction.ACOSH,
    UnaryFunction.TANH: UnaryFunction.ATANH,
}


class BinaryOperator(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"
    POWER = "pow"
    ROOT = "yroot"
    SCI_EXP = "sciExp"

    @classmethod
    def _missing_(cls, value):
        return _OPERATOR_ALIASES.get(value)

    @property
    def symbol(self) -> str:
        return _OPERATOR_SYMBOLS.get(self, self.value)


_OPERATOR_ALIASES = {
    "*": BinaryOperator.MULTIPLY,
    "x": BinaryOperator.MULTIPLY,
    "/": BinaryOperator.DIVIDE,
    "−": BinaryOperator.SUBTRACT,
    "^": BinaryOperator.POWER,
}

_OPERATOR_SYMBOLS = {
    BinaryOperator.POWER: "^",
    BinaryOperator.SCI_EXP: "E",
}


# ── Operadores binarios ──────────────────────────────────────────

def calculate(a: float, b: float, op: BinaryOperator) -> float:
    """Evalúa ``a op b``.

    Raises:
        ZeroDivisionError: división entre cero exacto.
        ValueError: potencia o raíz sin resultado real.
        OverflowError: resultado no finito.
    """
    if op is BinaryOperator.ADD:
        result = a + b
    elif op is BinaryOperator.SUBTRACT:
        result = a - b
    elif op is BinaryOperator.MULTIPLY:
        result = a * b
    elif op is BinaryOperator.DIVIDE:
        if b == 0:
            raise ZeroDivisionError("División por cero")
        result = a / b
    elif op is BinaryOperator.POWER:
        result = math.pow(a, b)
    elif op is BinaryOperator.ROOT:
        result = _nth_root(a, b)
    elif op is BinaryOperator.SCI_EXP:
        result = _scale_by_power_of_ten(a, b)
    else:
        raise ValueError(f"Operador desconocido: {op}")
    return ensure_finite(result)


def _scale_by_power_of_ten(a: float, b: float) -> float:
    # 10^b por separado desborda aunque a × 10^b sea representable
    if float(b).is_integer() and abs(b) <= MAX_DECIMAL_SCALE:
        return float(Decimal(repr(float(a))).scaleb(int(b)))
    return a * math.pow(10, b)


def _nth_root(a: float, b: float) -> float:
    if b == 0:
        raise ValueError("Raíz de índice cero")
    if a < 0:
        # Solo los índices enteros impares tienen raíz real de un negativo
        if float(b).is_integer() and int(b) % 2 == 1:
            return -math.pow(-a, 1 / b)
        raise ValueError("Raíz par de número negativo")
    return math.pow(a, 1 / b)


def ensure_finite(value: float) -> float:
    if not math.isfinite(value):
        raise OverflowError("Resultado demasiado grande")
    return value


# ── Ayudas compartidas por los proveedores ───────────────────────

def exact_degree_value(function: UnaryFunction, degrees: float):
    """Valor exacto de sin/cos/tan en ángulos notables, o None.

    Evita residuos como sin(180°) = 1.22e-16 y rechaza tan(90°).
    """
    on_axis = degrees % 180 == 0
    quarter = (degrees - 90) % 180 == 0
    if function is UnaryFunction.SIN and on_axis:
        return 0.0
    if function is UnaryFunction.COS and quarter:
        return 0.0
    if function is UnaryFunction.TAN:
        if quarter:
            raise ValueError("tan no definida en múltiplos impares de 90°")
        if on_axis:
            return 0.0
    return None


def factorial_operand(x) -> int:
    if not float(x).is_integer() or x < 0:
        raise ValueError("factorial requiere entero no negativo")
    if x > MAX_FACTORIAL:
        raise OverflowError("factorial demasiado grande")
    return int(x)


def apply_unary(provider, function: UnaryFunction, x: float, angle_mode: AngleMode) -> float:
    """Aplica ``function`` usando el namespace del proveedor."""
    namespace = provider.build_namespace(angle_mode)
    return ensure_finite(float(namespace[function](x)))


class PythonMathProvider:
    """Provee las funciones unarias con el módulo ``math``."""

    def build_namespace(self, angle_mode: AngleMode) -> dict:
        deg = angle_mode is AngleMode.DEG

        def _trig(function, fn):
            def w(x):
                if deg:
                    exact = exact_degree_value(function, x)
                    if exact is not None:
                        return exact
                    x = math.radians(x)
                return fn(x)

            return w

        def _inv_trig(fn):
            def w(x):
                r = fn(x)
                return math.degrees(r) if deg else r

            return w

        def _reciprocal(x):
            if x == 0:
                raise ZeroDivisionError("Recíproco de cero")
            return 1 / x

        return {
            UnaryFunction.SIN: _trig(UnaryFunction.SIN, math.sin),
            UnaryFunction.COS: _trig(UnaryFunction.COS, math.cos),
            UnaryFunction.TAN: _trig(UnaryFunction.TAN, math.tan),
            UnaryFunction.ASIN: _inv_trig(math.asin),
            UnaryFunction.ACOS: _inv_trig(math.acos),
            UnaryFunction.ATAN: _inv_trig(math.atan),
            UnaryFunction.SINH: math.sinh,
            UnaryFunction.COSH: math.cosh,
            UnaryFunction.TANH: math.tanh,
            UnaryFunction.ASINH: math.asinh,
            UnaryFunction.ACOSH: math.acosh,
            UnaryFunction.ATANH: math.atanh,
            UnaryFunction.LN: math.log,
            UnaryFunction.LOG10: math.log10,
            UnaryFunction.EXP: math.exp,
            UnaryFunction.EXP10: lambda x: math.pow(10, x),
            UnaryFunction.SQUARE: lambda x: x * x,
            UnaryFunction.CUBE: lambda x: x * x * x,
            UnaryFunction.SQRT: math.sqrt,
            UnaryFunction.CBRT: lambda x: math.copysign(abs(x) ** (1 / 3), x),
            UnaryFunction.RECIPROCAL: _reciprocal,
            UnaryFunction.FACTORIAL: lambda x: float(math.factorial(factorial_operand(x))),
        }
