"""Proveedor de funciones científicas basado en mpmath."""

from __future__ import annotations

from function_dispatcher import (
    AngleMode,
    UnaryFunction,
    exact_degree_value,
    factorial_operand,
)

try:
    from mpmath import mp
except ImportError as exc:  # pragma: no cover
    raise ImportError(
        "mpmath no está instalado. Instala con: pip install mpmath"
    ) from exc


class MPMathProvider:
    """Evalúa las funciones con mpmath a precisión de trabajo fija.

    Los resultados vuelven como ``float``; la ventaja es que los cálculos
    intermedios (p. ej. tan cerca de un polo, exp10) no acumulan error
    binario antes del redondeo de pantalla.
    """

    def __init__(self, working_digits: int = 30):
        self._working_digits = max(16, working_digits)

    @property
    def working_digits(self) -> int:
        return self._working_digits

    def _wrap(self, fn):
        digits = self._working_digits

        def wrapped(x):
            with mp.workdps(digits):
                return self._to_real(fn(mp.mpf(x)))

        return wrapped

    @staticmethod
    def _to_real(value) -> float:
        if isinstance(value, mp.mpc):
            if value.imag != 0:
                raise ValueError("Resultado fuera del dominio real")
            value = value.real
        if mp.isnan(value):
            raise ValueError("Resultado indefinido")
        if mp.isinf(value):
            raise OverflowError("Resultado demasiado grande")
        return float(value)

    def _trig(self, function, fn, deg):
        wrapped = self._wrap(lambda x: fn(mp.radians(x) if deg else x))

        def w(x):
            if deg:
                exact = exact_degree_value(function, x)
                if exact is not None:
                    return exact
            return wrapped(x)

        return w

    def _inv_trig(self, fn, deg, bounded=True):
        def checked(x):
            if bounded and abs(x) > 1:
                raise ValueError("Argumento fuera de [-1, 1]")
            r = fn(x)
            return mp.degrees(r) if deg else r

        return self._wrap(checked)

    @staticmethod
    def _ln(x):
        if x <= 0:
            raise ValueError("Logaritmo de número no positivo")
        return mp.log(x)

    @staticmethod
    def _log10(x):
        if x <= 0:
            raise ValueError("Logaritmo de número no positivo")
        return mp.log10(x)

    @staticmethod
    def _sqrt(x):
        if x < 0:
            raise ValueError("Raíz cuadrada de número negativo")
        return mp.sqrt(x)

    @staticmethod
    def _cbrt(x):
        # mp.cbrt devuelve la raíz principal compleja para negativos
        root = mp.cbrt(abs(x))
        return -root if x < 0 else root

    @staticmethod
    def _reciprocal(x):
        if x == 0:
            raise ZeroDivisionError("Recíproco de cero")
        return 1 / x

    @staticmethod
    def _acosh(x):
        if x < 1:
            raise ValueError("acosh requiere x >= 1")
        return mp.acosh(x)

    @staticmethod
    def _atanh(x):
        if abs(x) >= 1:
            raise ValueError("atanh requiere |x| < 1")
        return mp.atanh(x)

    @staticmethod
    def _factorial(x):
        return mp.factorial(factorial_operand(x))

    def build_namespace(self, angle_mode: AngleMode) -> dict:
        deg = angle_mode is AngleMode.DEG
        return {
            UnaryFunction.SIN: self._trig(UnaryFunction.SIN, mp.sin, deg),
            UnaryFunction.COS: self._trig(UnaryFunction.COS, mp.cos, deg),
            UnaryFunction.TAN: self._trig(UnaryFunction.TAN, mp.tan, deg),
            UnaryFunction.ASIN: self._inv_trig(mp.asin, deg),
            UnaryFunction.ACOS: self._inv_trig(mp.acos, deg),
            UnaryFunction.ATAN: self._inv_trig(mp.atan, deg, bounded=False),
            UnaryFunction.SINH: self._wrap(mp.sinh),
            UnaryFunction.COSH: self._wrap(mp.cosh),
            UnaryFunction.TANH: self._wrap(mp.tanh),
            UnaryFunction.ASINH: self._wrap(mp.asinh),
            UnaryFunction.ACOSH: self._wrap(self._acosh),
            UnaryFunction.ATANH: self._wrap(self._atanh),
            UnaryFunction.LN: self._wrap(self._ln),
            UnaryFunction.LOG10: self._wrap(self._log10),
            UnaryFunction.EXP: self._wrap(mp.exp),
            UnaryFunction.EXP10: self._wrap(lambda x: mp.power(10, x)),
            UnaryFunction.SQUARE: self._wrap(lambda x: x * x),
            UnaryFunction.CUBE: self._wrap(lambda x: x * x * x),
            UnaryFunction.SQRT: self._wrap(self._sqrt),
            UnaryFunction.CBRT: self._wrap(self._cbrt),
            UnaryFunction.RECIPROCAL: self._wrap(self._reciprocal),
            UnaryFunction.FACTORIAL: self._wrap(self._factorial),
        }
