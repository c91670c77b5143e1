"""Traducción de teclas a acciones del motor."""

from calculator_actions import (
    Backspace,
    Clear,
    DecimalPoint,
    Digit,
    Equals,
    Operator,
    ParenClose,
    ParenOpen,
    Percent,
)

# Acepta tanto keysym de tkinter como el carácter tecleado
KEY_ACTIONS = {
    "Return": Equals(),
    "KP_Enter": Equals(),
    "Enter": Equals(),
    "=": Equals(),
    "Escape": Clear(),
    "BackSpace": Backspace(),
    "Backspace": Backspace(),
    ".": DecimalPoint(),
    "period": DecimalPoint(),
    "KP_Decimal": DecimalPoint(),
    "+": Operator("+"),
    "-": Operator("-"),
    "*": Operator("×"),
    "/": Operator("÷"),
    "^": Operator("pow"),
    "%": Percent(),
    "(": ParenOpen(),
    ")": ParenClose(),
}


def action_for_key(key: str):
    """Devuelve la acción asociada a ``key`` o None si la tecla no se usa."""
    if not key:
        return None
    if key.startswith("KP_") and len(key) == 4:
        key = key[3:]
    if len(key) == 1 and key in "0123456789":
        return Digit(key)
    return KEY_ACTIONS.get(key)
