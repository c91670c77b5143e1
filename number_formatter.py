"""
Formato de resultados para la pantalla de la calculadora.

Convierte un valor numérico en la cadena canónica que se muestra:
redondeo a 12 cifras significativas, notación exponencial cuando el
número no cabe en el ancho fijo y el centinela "Error" para todo
valor no finito.
"""

import math
from decimal import Decimal

ERROR = "Error"

SIGNIFICANT_DIGITS = 12
MAX_INTEGER_DIGITS = 9
MAX_DIGITS = 15


def format_number(value) -> str:
    """Devuelve la representación de pantalla de ``value``.

    Acepta números o cadenas numéricas; cualquier cosa que no sea un
    número finito (NaN, ±inf, el propio centinela) produce ``"Error"``.
    """
    try:
        number = float(value)
    except (TypeError, ValueError):
        return ERROR

    if not math.isfinite(number):
        return ERROR

    rounded = float(f"{number:.{SIGNIFICANT_DIGITS}g}")
    if rounded == 0:
        return "0"

    if abs(rounded) >= 10 ** MAX_INTEGER_DIGITS:
        return _exponential(rounded)

    plain = _plain(rounded)
    if count_digits(plain) > MAX_DIGITS:
        return _exponential(rounded)
    return plain


def count_digits(text: str) -> int:
    """Cantidad de caracteres numéricos (sin signo, punto ni exponente)."""
    return sum(1 for c in text if c.isdigit())


# ── Representaciones ─────────────────────────────────────────────

def _plain(value: float) -> str:
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _exponential(value: float) -> str:
    mantissa, exponent = f"{value:.{SIGNIFICANT_DIGITS - 1}e}".split("e")
    if "." in mantissa:
        mantissa = mantissa.rstrip("0").rstrip(".")
    return f"{mantissa}e{int(exponent):+d}"
