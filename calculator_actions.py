"""
Acciones que acepta el motor de la calculadora.

Cada pulsación ya clasificada por la interfaz se representa con una de
estas clases; ``CalculatorEngine.dispatch`` las enruta por tipo.
"""

import math
from dataclasses import dataclass
from enum import Enum

from function_dispatcher import BinaryOperator, UnaryFunction


class ConstantName(Enum):
    PI = "pi"
    E = "e"
    RAND = "rand"

    @classmethod
    def _missing_(cls, value):
        return {"π": cls.PI}.get(value)


CONSTANT_VALUES = {
    ConstantName.PI: math.pi,
    ConstantName.E: math.e,
}


class MemoryAction(Enum):
    CLEAR = "mc"
    ADD = "m+"
    SUBTRACT = "m-"
    RECALL = "mr"


# ── Variantes ────────────────────────────────────────────────────

@dataclass(frozen=True)
class Digit:
    value: str

    def __post_init__(self):
        value = str(self.value)
        if len(value) != 1 or value not in "0123456789":
            raise ValueError(f"Dígito inválido: {self.value!r}")
        object.__setattr__(self, "value", value)


@dataclass(frozen=True)
class DecimalPoint:
    pass


@dataclass(frozen=True)
class Backspace:
    pass


@dataclass(frozen=True)
class Clear:
    pass


@dataclass(frozen=True)
class ToggleSign:
    pass


@dataclass(frozen=True)
class Percent:
    pass


@dataclass(frozen=True)
class Operator:
    op: BinaryOperator

    def __post_init__(self):
        object.__setattr__(self, "op", BinaryOperator(self.op))


@dataclass(frozen=True)
class Equals:
    pass


@dataclass(frozen=True)
class Unary:
    function: UnaryFunction

    def __post_init__(self):
        object.__setattr__(self, "function", UnaryFunction(self.function))


@dataclass(frozen=True)
class Constant:
    name: ConstantName

    def __post_init__(self):
        object.__setattr__(self, "name", ConstantName(self.name))


@dataclass(frozen=True)
class Memory:
    action: MemoryAction

    def __post_init__(self):
        object.__setattr__(self, "action", MemoryAction(self.action))


@dataclass(frozen=True)
class ToggleAngleMode:
    pass


@dataclass(frozen=True)
class ToggleSecond:
    pass


@dataclass(frozen=True)
class ParenOpen:
    pass


@dataclass(frozen=True)
class ParenClose:
    pass


Action = (
    Digit | DecimalPoint | Backspace | Clear | ToggleSign | Percent
    | Operator | Equals | Unary | Constant | Memory
    | ToggleAngleMode | ToggleSecond | ParenOpen | ParenClose
)
