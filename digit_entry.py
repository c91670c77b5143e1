"""Edición del número en pantalla a partir de pulsaciones de teclas."""

from number_formatter import MAX_DIGITS, count_digits


def append_digit(current: str, digit: str) -> str:
    """Agrega un dígito; el cero inicial se reemplaza y el tope es 15 dígitos."""
    if current == "0":
        return digit
    if current == "-0":
        return "-" + digit
    if count_digits(current) >= MAX_DIGITS:
        return current
    return current + digit


def append_decimal(current: str) -> str:
    if "." in current or "e" in current.lower():
        return current
    return current + "."


def remove_last(current: str) -> str:
    text = current[:-1]
    if text in ("", "-", "-0"):
        return "0"
    return text


def toggle_sign(current: str) -> str:
    # El cero no tiene signo
    if to_number(current) == 0:
        return current
    if current.startswith("-"):
        return current[1:]
    return "-" + current


def to_number(current: str) -> float:
    return float(current)
