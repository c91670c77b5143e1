"""
Motor de cálculo para la calculadora científica.

Este módulo provee la clase CalculatorEngine: una máquina de estados
que recibe acciones discretas (dígitos, operadores, funciones, memoria,
paréntesis) y las reduce a un valor en pantalla con ejecución inmediata.
La interfaz gráfica solo envía acciones y dibuja el DisplayState que
devuelve cada una.

Contrato de interfaz:
    - dispatch(action) -> DisplayState
    - digit, decimal_point, backspace, clear, sign, percent, operator,
      equals, unary, constant, memory, toggle_angle_mode, toggle_second,
      paren_open, paren_close -> DisplayState
    - display_value(), expression_trace(), angle_mode_label(),
      is_second_mode_active()
"""

import logging
import random
from dataclasses import dataclass, field

from calculator_actions import (
    CONSTANT_VALUES,
    Action,
    Backspace,
    Clear,
    Constant,
    ConstantName,
    DecimalPoint,
    Digit,
    Equals,
    Memory,
    MemoryAction,
    Operator,
    ParenClose,
    ParenOpen,
    Percent,
    ToggleAngleMode,
    ToggleSecond,
    ToggleSign,
    Unary,
)
from digit_entry import append_decimal, append_digit, remove_last, to_number, toggle_sign
from function_dispatcher import (
    AngleMode,
    BinaryOperator,
    PythonMathProvider,
    UnaryFunction,
    apply_unary,
    calculate,
    ensure_finite,
)
from number_formatter import ERROR, SIGNIFICANT_DIGITS, format_number

logger = logging.getLogger(__name__)

CALCULATION_ERRORS = (ZeroDivisionError, ValueError, OverflowError)


@dataclass
class Frame:
    """Contexto exterior guardado al abrir un paréntesis."""

    previous_value: float | None
    operator: BinaryOperator | None
    last_expression: str


@dataclass
class EngineState:
    current_value: str = "0"
    previous_value: float | None = None
    operator: BinaryOperator | None = None
    should_reset_display: bool = False
    just_evaluated: bool = False
    # True tras pulsar un operador y hasta que llega su operando derecho
    awaiting_operand: bool = False
    last_expression: str = ""
    angle_mode: AngleMode = AngleMode.DEG
    is_second_mode: bool = False
    memory: float = 0.0
    paren_stack: list[Frame] = field(default_factory=list)

    @property
    def is_error(self) -> bool:
        return self.current_value == ERROR


@dataclass(frozen=True)
class DisplayState:
    value: str
    expression: str
    angle_mode: str
    second_mode: bool
    memory_set: bool
    paren_depth: int


class CalculatorEngine:
    """Reduce una secuencia de acciones a un valor en pantalla."""

    def __init__(self, provider=None, random_source=None):
        self._provider = provider if provider is not None else PythonMathProvider()
        self._random = random_source if random_source is not None else random.random
        self.state = EngineState()
        self._handlers = {
            Digit: lambda a: self.digit(a.value),
            DecimalPoint: lambda a: self.decimal_point(),
            Backspace: lambda a: self.backspace(),
            Clear: lambda a: self.clear(),
            ToggleSign: lambda a: self.sign(),
            Percent: lambda a: self.percent(),
            Operator: lambda a: self.operator(a.op),
            Equals: lambda a: self.equals(),
            Unary: lambda a: self.unary(a.function),
            Constant: lambda a: self.constant(a.name),
            Memory: lambda a: self.memory(a.action),
            ToggleAngleMode: lambda a: self.toggle_angle_mode(),
            ToggleSecond: lambda a: self.toggle_second(),
            ParenOpen: lambda a: self.paren_open(),
            ParenClose: lambda a: self.paren_close(),
        }

    # ── Enrutado ─────────────────────────────────────────────────

    def dispatch(self, action: Action) -> DisplayState:
        handler = self._handlers.get(type(action))
        if handler is None:
            raise TypeError(f"Acción desconocida: {action!r}")
        return handler(action)

    def reset(self) -> DisplayState:
        """Reinicia la sesión completa, incluidas memoria y modos."""
        self.state = EngineState()
        return self.view()

    # ── Entrada de dígitos ───────────────────────────────────────

    def digit(self, d) -> DisplayState:
        d = Digit(d).value
        s = self.state
        if s.is_error:
            self._reset_computation()
        elif s.just_evaluated:
            self._start_fresh()

        if s.should_reset_display:
            s.current_value = d
            s.should_reset_display = False
        else:
            s.current_value = append_digit(s.current_value, d)
        s.awaiting_operand = False
        return self.view()

    def decimal_point(self) -> DisplayState:
        s = self.state
        if s.is_error:
            return self.view()
        if s.just_evaluated:
            self._start_fresh()

        if s.should_reset_display:
            s.current_value = "0."
            s.should_reset_display = False
        else:
            s.current_value = append_decimal(s.current_value)
        s.awaiting_operand = False
        return self.view()

    def backspace(self) -> DisplayState:
        s = self.state
        # Un resultado calculado no se edita
        if s.is_error or s.should_reset_display:
            return self.view()
        s.current_value = remove_last(s.current_value)
        return self.view()

    def sign(self) -> DisplayState:
        s = self.state
        # Tras un operador la pantalla aún muestra el operando izquierdo
        if not s.is_error and not s.awaiting_operand:
            s.current_value = toggle_sign(s.current_value)
        return self.view()

    def clear(self) -> DisplayState:
        self._reset_computation()
        return self.view()

    # ── Operadores binarios ──────────────────────────────────────

    def operator(self, op) -> DisplayState:
        op = BinaryOperator(op)
        s = self.state
        if s.is_error:
            return self.view()

        if s.operator is None:
            s.previous_value = to_number(s.current_value)
        elif not s.awaiting_operand:
            try:
                result = self._evaluate_pending()
            except CALCULATION_ERRORS as exc:
                self._fail(exc)
                return self.view()
            s.current_value = format_number(result)
            s.previous_value = to_number(s.current_value)

        s.operator = op
        s.last_expression = f"{format_number(s.previous_value)} {op.symbol}"
        s.should_reset_display = True
        s.awaiting_operand = True
        s.just_evaluated = False
        return self.view()

    def equals(self) -> DisplayState:
        s = self.state
        if s.is_error:
            return self.view()

        while s.paren_stack:
            if not self._close_group():
                return self.view()

        if s.operator is None:
            return self.view()

        right = to_number(s.current_value)
        s.last_expression = (
            f"{format_number(s.previous_value)} {s.operator.symbol} "
            f"{format_number(right)} ="
        )
        try:
            result = self._evaluate_pending()
        except CALCULATION_ERRORS as exc:
            self._fail(exc)
            return self.view()

        s.current_value = format_number(result)
        s.previous_value = None
        s.operator = None
        s.just_evaluated = True
        s.should_reset_display = True
        s.awaiting_operand = False
        return self.view()

    def percent(self) -> DisplayState:
        s = self.state
        if s.is_error:
            return self.view()

        value = to_number(s.current_value)
        if s.operator is not None and s.previous_value is not None:
            # Porcentaje del operando izquierdo: 200 - 25% = 150
            result = s.previous_value * (value / 100)
        else:
            result = value / 100
        s.current_value = format_number(result)
        s.should_reset_display = True
        s.awaiting_operand = False
        return self.view()

    # ── Funciones unarias ────────────────────────────────────────

    def unary(self, function) -> DisplayState:
        function = UnaryFunction(function)
        s = self.state
        if s.is_error:
            return self.view()

        selected = function.inverse if s.is_second_mode else function
        s.is_second_mode = False

        operand = to_number(s.current_value)
        s.last_expression = f"{selected.value}({format_number(operand)})"
        try:
            result = apply_unary(self._provider, selected, operand, s.angle_mode)
        except CALCULATION_ERRORS as exc:
            self._fail(exc)
            return self.view()

        s.current_value = format_number(result)
        s.should_reset_display = True
        s.awaiting_operand = False
        return self.view()

    # ── Constantes y memoria ─────────────────────────────────────

    def constant(self, name) -> DisplayState:
        name = ConstantName(name)
        if name is ConstantName.RAND:
            text = format_number(self._random())
            # El redondeo a 12 cifras no debe alcanzar 1
            if float(text) >= 1:
                text = "0." + "9" * SIGNIFICANT_DIGITS
        else:
            text = format_number(CONSTANT_VALUES[name])
        self._load_operand(text)
        return self.view()

    def memory(self, action) -> DisplayState:
        action = MemoryAction(action)
        s = self.state
        if action is MemoryAction.CLEAR:
            if not s.is_error:
                s.memory = 0.0
        elif action is MemoryAction.RECALL:
            self._load_operand(format_number(s.memory))
        elif not s.is_error:
            value = to_number(s.current_value)
            if action is MemoryAction.SUBTRACT:
                value = -value
            try:
                s.memory = ensure_finite(s.memory + value)
            except OverflowError as exc:
                self._fail(exc)
                return self.view()
            s.should_reset_display = True
        return self.view()

    # ── Modos ────────────────────────────────────────────────────

    def toggle_angle_mode(self) -> DisplayState:
        if self.state.is_error:
            return self.view()
        self.state.angle_mode = self.state.angle_mode.toggled()
        return self.view()

    def toggle_second(self) -> DisplayState:
        if self.state.is_error:
            return self.view()
        self.state.is_second_mode = not self.state.is_second_mode
        return self.view()

    # ── Paréntesis ───────────────────────────────────────────────

    def paren_open(self) -> DisplayState:
        s = self.state
        if s.is_error:
            return self.view()
        if s.just_evaluated:
            self._start_fresh()

        s.paren_stack.append(Frame(s.previous_value, s.operator, s.last_expression))
        s.previous_value = None
        s.operator = None
        s.should_reset_display = True
        s.awaiting_operand = False
        return self.view()

    def paren_close(self) -> DisplayState:
        s = self.state
        # Un ')' sin su '(' se ignora
        if s.is_error or not s.paren_stack:
            return self.view()
        self._close_group()
        return self.view()

    def _close_group(self) -> bool:
        s = self.state
        if s.operator is not None and not s.awaiting_operand:
            try:
                result = self._evaluate_pending()
            except CALCULATION_ERRORS as exc:
                self._fail(exc)
                return False
            s.current_value = format_number(result)

        frame = s.paren_stack.pop()
        s.previous_value = frame.previous_value
        s.operator = frame.operator
        s.last_expression = frame.last_expression
        s.should_reset_display = True
        s.awaiting_operand = False
        s.just_evaluated = False
        return True

    # ── Consultas ────────────────────────────────────────────────

    def display_value(self) -> str:
        return self.state.current_value

    def expression_trace(self) -> str:
        return self.state.last_expression

    def angle_mode_label(self) -> str:
        return self.state.angle_mode.label

    def is_second_mode_active(self) -> bool:
        return self.state.is_second_mode

    def view(self) -> DisplayState:
        s = self.state
        return DisplayState(
            value=s.current_value,
            expression=s.last_expression,
            angle_mode=s.angle_mode.label,
            second_mode=s.is_second_mode,
            memory_set=s.memory != 0,
            paren_depth=len(s.paren_stack),
        )

    # ── Transiciones internas ────────────────────────────────────

    def _evaluate_pending(self) -> float:
        s = self.state
        return calculate(s.previous_value, to_number(s.current_value), s.operator)

    def _load_operand(self, text: str):
        s = self.state
        if s.is_error:
            self._reset_computation()
        elif s.just_evaluated:
            self._start_fresh()
        s.current_value = text
        s.should_reset_display = True
        s.awaiting_operand = False

    def _start_fresh(self):
        s = self.state
        s.previous_value = None
        s.operator = None
        s.last_expression = ""
        s.just_evaluated = False

    def _reset_computation(self):
        # Memoria y modos sobreviven al borrado
        s = self.state
        s.current_value = "0"
        s.previous_value = None
        s.operator = None
        s.should_reset_display = False
        s.just_evaluated = False
        s.awaiting_operand = False
        s.last_expression = ""
        s.paren_stack.clear()

    def _fail(self, exc: Exception):
        logger.debug("Cálculo fallido (%s): %s", type(exc).__name__, exc)
        s = self.state
        s.current_value = ERROR
        s.previous_value = None
        s.operator = None
        s.should_reset_display = False
        s.just_evaluated = False
        s.awaiting_operand = False
        s.paren_stack.clear()
