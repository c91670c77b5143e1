"""
Interfaz gráfica de la calculadora científica.

Usa tkinter. La interfaz no calcula nada: traduce cada botón o tecla
en una acción, la envía al motor y dibuja el DisplayState devuelto.
"""

import tkinter as tk
from tkinter import font as tkfont

from calculator_actions import (
    Backspace,
    Clear,
    Constant,
    DecimalPoint,
    Digit,
    Equals,
    Memory,
    Operator,
    ParenClose,
    ParenOpen,
    Percent,
    ToggleAngleMode,
    ToggleSecond,
    ToggleSign,
    Unary,
)
from calculator_engine import CalculatorEngine, DisplayState
from function_dispatcher import UnaryFunction
from key_bindings import action_for_key


class CalculatorApp:
    """Ventana principal de la calculadora científica."""

    # ── Paleta de colores ────────────────────────────────────────
    C = {
        "bg":         "#1E1E2E",
        "display_bg": "#181825",
        "num":        "#313244",
        "num_fg":     "#CDD6F4",
        "op":         "#F38BA8",
        "op_fg":      "#1E1E2E",
        "func":       "#45475A",
        "func_fg":    "#CDD6F4",
        "special":    "#585B70",
        "special_fg": "#CDD6F4",
        "equals":     "#89B4FA",
        "equals_fg":  "#1E1E2E",
        "toggle_on":  "#A6E3A1",
        "toggle_off": "#585B70",
        "expr_fg":    "#BAC2DE",
        "result_fg":  "#A6E3A1",
    }

    # ── Funciones científicas ────────────────────────────────────
    #  (texto_normal, texto_inv, función); el motor elige la inversa

    SCIENCE_BUTTONS = [
        [("sin", "sin⁻¹", UnaryFunction.SIN),
         ("cos", "cos⁻¹", UnaryFunction.COS),
         ("tan", "tan⁻¹", UnaryFunction.TAN),
         ("sinh", "sinh⁻¹", UnaryFunction.SINH),
         ("cosh", "cosh⁻¹", UnaryFunction.COSH),
         ("tanh", "tanh⁻¹", UnaryFunction.TANH)],

        [("ln", "ln", UnaryFunction.LN),
         ("log", "log", UnaryFunction.LOG10),
         ("eˣ", "eˣ", UnaryFunction.EXP),
         ("10ˣ", "10ˣ", UnaryFunction.EXP10),
         ("x²", "x²", UnaryFunction.SQUARE),
         ("x³", "x³", UnaryFunction.CUBE)],

        [("√", "√", UnaryFunction.SQRT),
         ("∛", "∛", UnaryFunction.CBRT),
         ("1/x", "1/x", UnaryFunction.RECIPROCAL),
         ("x!", "x!", UnaryFunction.FACTORIAL)],
    ]

    # ── Teclado principal ────────────────────────────────────────
    #  Cada fila es una lista de (texto, acción, tipo_color)

    KEYPAD = [
        [("mc", Memory("mc"), "special"), ("mr", Memory("mr"), "special"),
         ("m+", Memory("m+"), "special"), ("m−", Memory("m-"), "special"),
         ("(", ParenOpen(), "func"), (")", ParenClose(), "func")],

        [("xʸ", Operator("pow"), "func"), ("ʸ√x", Operator("yroot"), "func"),
         ("EE", Operator("sciExp"), "func"), ("π", Constant("pi"), "func"),
         ("e", Constant("e"), "func"), ("Rand", Constant("rand"), "func")],

        [("AC", Clear(), "special"), ("⌫", Backspace(), "special"),
         ("%", Percent(), "func"), ("÷", Operator("÷"), "op")],

        [("7", Digit("7"), "num"), ("8", Digit("8"), "num"),
         ("9", Digit("9"), "num"), ("×", Operator("×"), "op")],

        [("4", Digit("4"), "num"), ("5", Digit("5"), "num"),
         ("6", Digit("6"), "num"), ("−", Operator("-"), "op")],

        [("1", Digit("1"), "num"), ("2", Digit("2"), "num"),
         ("3", Digit("3"), "num"), ("+", Operator("+"), "op")],

        [("±", ToggleSign(), "func"), ("0", Digit("0"), "num"),
         (".", DecimalPoint(), "num"), ("=", Equals(), "equals")],
    ]

    # ────────────────────────────────────────────────────────────

    def __init__(self, root: tk.Tk, engine=None):
        self.root = root
        self.root.title("Calculadora Científica")
        self.root.configure(bg=self.C["bg"])
        self.root.resizable(False, False)

        self.engine = engine if engine is not None else CalculatorEngine()

        self._init_fonts()
        self._create_display()
        self._create_toggle_bar()
        self._create_science_panel()
        self._create_keypad()
        self._bind_keyboard()

        self._render(self.engine.view())

    # ── Fuentes ──────────────────────────────────────────────────

    def _init_fonts(self):
        self._f_expr   = tkfont.Font(family="Consolas", size=14)
        self._f_result = tkfont.Font(family="Consolas", size=26, weight="bold")
        self._f_btn    = tkfont.Font(family="Segoe UI", size=15)
        self._f_func   = tkfont.Font(family="Segoe UI", size=12)
        self._f_small  = tkfont.Font(family="Segoe UI", size=11)

    # ── Pantalla ─────────────────────────────────────────────────

    def _create_display(self):
        frame = tk.Frame(self.root, bg=self.C["display_bg"], padx=12, pady=8)
        frame.pack(fill="x", padx=6, pady=(6, 2))

        self.expr_var = tk.StringVar()
        tk.Label(
            frame, textvariable=self.expr_var, anchor="e",
            font=self._f_expr, bg=self.C["display_bg"], fg=self.C["expr_fg"],
        ).pack(fill="x", pady=(4, 0))

        self.result_var = tk.StringVar(value="0")
        tk.Label(
            frame, textvariable=self.result_var, anchor="e",
            font=self._f_result, bg=self.C["display_bg"], fg=self.C["result_fg"],
        ).pack(fill="x", pady=(2, 4))

    # ── Barra de toggles (DEG/RAD · 2nd · memoria) ───────────────

    def _create_toggle_bar(self):
        frame = tk.Frame(self.root, bg=self.C["bg"])
        frame.pack(fill="x", padx=6, pady=(2, 2))

        self.angle_btn = tk.Button(
            frame, text="DEG", font=self._f_small, width=6,
            bg=self.C["op"], fg=self.C["op_fg"], relief="flat",
            command=lambda: self._on_action(ToggleAngleMode()),
        )
        self.angle_btn.pack(side="left", padx=(0, 4))

        self.inv_btn = tk.Button(
            frame, text="2nd", font=self._f_small, width=6,
            bg=self.C["toggle_off"], fg=self.C["special_fg"], relief="flat",
            command=lambda: self._on_action(ToggleSecond()),
        )
        self.inv_btn.pack(side="left")

        self.memory_label = tk.Label(
            frame, text="", font=self._f_small,
            bg=self.C["bg"], fg=self.C["expr_fg"],
        )
        self.memory_label.pack(side="right")

    # ── Panel de funciones científicas ───────────────────────────

    def _create_science_panel(self):
        frame = tk.Frame(self.root, bg=self.C["bg"])
        frame.pack(fill="x", padx=6, pady=2)
        max_cols = max(len(row) for row in self.SCIENCE_BUTTONS)
        for col in range(max_cols):
            frame.columnconfigure(col, weight=1, uniform="sci")

        self._sci_buttons: list[tuple[tk.Button, str, str]] = []

        for r, row_def in enumerate(self.SCIENCE_BUTTONS):
            for col, (text_norm, text_inv, function) in enumerate(row_def):
                btn = tk.Button(
                    frame, text=text_norm, font=self._f_func,
                    bg=self.C["func"], fg=self.C["func_fg"],
                    activebackground=self.C["special"], relief="flat",
                    command=lambda f=function: self._on_action(Unary(f)),
                )
                btn.grid(row=r, column=col, sticky="nsew", padx=2, pady=2,
                         ipady=4)
                self._sci_buttons.append((btn, text_norm, text_inv))

    # ── Teclado numérico / operadores ────────────────────────────

    def _create_keypad(self):
        frame = tk.Frame(self.root, bg=self.C["bg"])
        frame.pack(fill="both", expand=True, padx=6, pady=(2, 6))

        max_cols = max(len(row) for row in self.KEYPAD)
        for c in range(max_cols):
            frame.columnconfigure(c, weight=1, uniform="key")

        for r, row_def in enumerate(self.KEYPAD):
            spans = self._compute_spans(len(row_def), max_cols)
            col_pos = 0
            for idx, (text, action, kind) in enumerate(row_def):
                btn = tk.Button(
                    frame, text=text, font=self._f_btn,
                    bg=self.C[kind], fg=self.C[f"{kind}_fg"],
                    activebackground=self.C["special"], relief="flat",
                    command=lambda a=action: self._on_action(a),
                )
                btn.grid(row=r, column=col_pos, columnspan=spans[idx],
                         sticky="nsew", padx=2, pady=2, ipady=8)
                col_pos += spans[idx]

        for r in range(len(self.KEYPAD)):
            frame.rowconfigure(r, weight=1)

    @staticmethod
    def _compute_spans(cols_in_row: int, max_cols: int) -> list[int]:
        """Reparte max_cols entre cols_in_row botones."""
        base, extra = divmod(max_cols, cols_in_row)
        spans = [base] * cols_in_row
        # Asignar columnas extra al último botón (generalmente '=')
        spans[-1] += extra
        return spans

    # ── Atajos de teclado ────────────────────────────────────────

    def _bind_keyboard(self):
        self.root.bind("<Key>", self._on_keypress)

    def _on_keypress(self, event):
        action = action_for_key(event.keysym) or action_for_key(event.char)
        if action is not None:
            self._on_action(action)
            return "break"
        return None

    # ── Acciones ─────────────────────────────────────────────────

    def _on_action(self, action):
        self._render(self.engine.dispatch(action))

    def _render(self, view: DisplayState):
        self.result_var.set(view.value)
        expression = view.expression
        if view.paren_depth:
            expression = f"{expression}  ({view.paren_depth}"
        self.expr_var.set(expression)

        if view.angle_mode == "DEG":
            self.angle_btn.config(text="DEG", bg=self.C["op"], fg=self.C["op_fg"])
        else:
            self.angle_btn.config(text="RAD", bg=self.C["toggle_on"], fg=self.C["bg"])

        if view.second_mode:
            self.inv_btn.config(bg=self.C["toggle_on"], fg=self.C["bg"])
        else:
            self.inv_btn.config(bg=self.C["toggle_off"], fg=self.C["special_fg"])
        for btn, text_norm, text_inv in self._sci_buttons:
            btn.config(text=text_inv if view.second_mode else text_norm)

        self.memory_label.config(text="M" if view.memory_set else "")
