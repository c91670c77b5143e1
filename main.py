"""Punto de entrada de la calculadora científica."""

import logging
import tkinter as tk

from calculator_engine import CalculatorEngine
from calculator_ui import CalculatorApp


USE_ARBITRARY_PRECISION = True
AP_WORKING_DIGITS = 30
LOG_LEVEL = logging.WARNING


def main():
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    root = tk.Tk()
    root.geometry("460x720")
    root.minsize(420, 660)
    provider = None
    if USE_ARBITRARY_PRECISION:
        from mpmath_provider import MPMathProvider

        provider = MPMathProvider(working_digits=AP_WORKING_DIGITS)
    CalculatorApp(root, engine=CalculatorEngine(provider=provider))
    root.mainloop()


if __name__ == "__main__":
    main()
