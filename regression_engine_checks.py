from calculator_engine import CalculatorEngine
from mpmath_provider import MPMathProvider
import sys


def _press(engine: CalculatorEngine, keys: str) -> CalculatorEngine:
	"""Teclea una secuencia separada por espacios: '12 + 3 ='."""
	for key in keys.split():
		if key.isdigit():
			for d in key:
				engine.digit(d)
		elif key == ".":
			engine.decimal_point()
		elif key == "=":
			engine.equals()
		elif key == "%":
			engine.percent()
		elif key == "(":
			engine.paren_open()
		elif key == ")":
			engine.paren_close()
		elif key == "C":
			engine.clear()
		elif key == "±":
			engine.sign()
		elif key == "2nd":
			engine.toggle_second()
		elif key == "DRG":
			engine.toggle_angle_mode()
		elif key in ("pi", "e", "rand"):
			engine.constant(key)
		elif key in ("mc", "m+", "m-", "mr"):
			engine.memory(key)
		elif key in ("+", "-", "×", "÷", "pow", "yroot", "sciExp"):
			engine.operator(key)
		else:
			engine.unary(key)
	return engine


def _run(keys: str, provider=None) -> tuple[str, str]:
	engine = _press(CalculatorEngine(provider=provider), keys)
	return engine.display_value(), engine.expression_trace()


SCENARIOS = [
	("0 . 1 + 0 . 2 =", "0.3"),
	("0 . 3 - 0 . 1 =", "0.2"),
	("5 + 3 - 2 =", "6"),
	("5 + × 3 =", "15"),
	("200 - 25 % =", "150"),
	("100 + 10 % =", "110"),
	("50 %", "0.5"),
	("5 ÷ 0 =", "Error"),
	("( 2 + 3 ) × 4 =", "20"),
	("3 × ( 4 + 5 ) =", "27"),
	("( ( 2 + 3 ) ) × 2 =", "10"),
	("2 × ( 3 + ( 4 × 5 ) ) =", "46"),
	("27 yroot 3 =", "3"),
	("8 ± yroot 3 =", "-2"),
	("2 pow 10 =", "1024"),
	("3 sciExp 4 =", "30000"),
	("5 ± sqrt", "Error"),
	("27 ± cbrt", "-3"),
	("30 sin", "0.5"),
	("180 sin", "0"),
	("90 tan", "Error"),
	("2nd 0 . 5 sin", "30"),
	("DRG 0 cos", "1"),
	("170 factorial", "7.25741561531e+306"),
	("171 factorial", "Error"),
	("0 factorial", "1"),
	("999999 × 999999 =", "9.99998000001e+11"),
	("2 × pi =", "6.28318530718"),
]


def run_regressions() -> None:
	checks: list[tuple[str, bool]] = []
	expected_actual: list[tuple[str, str, str]] = []

	for keys, expected in SCENARIOS:
		actual, _ = _run(keys)
		expected_actual.append((keys, expected, actual))
		checks.append((f"math: {keys}", actual == expected))

		actual_mp, _ = _run(keys, provider=MPMathProvider())
		checks.append((f"mpmath: {keys}", actual_mp == expected))

	_, trace = _run("5 + 3 =")
	checks.append(("completed trace reads '5 + 3 ='", trace == "5 + 3 ="))

	_, trace = _run("2nd 0 . 5 sin")
	checks.append(("inverse trace names the inverse function", trace == "asin(0.5)"))

	engine = _press(CalculatorEngine(), "5 ÷ 0 = C")
	checks.append((
		"clear after error shows 0 with empty trace",
		engine.display_value() == "0" and engine.expression_trace() == "",
	))
	_press(engine, "7")
	checks.append(("digit after clear starts a new number", engine.display_value() == "7"))

	engine = _press(CalculatorEngine(), "9 m+ DRG C")
	checks.append((
		"clear keeps memory and angle mode",
		engine.state.memory == 9 and engine.angle_mode_label() == "RAD",
	))

	engine = _press(CalculatorEngine(), "1234567890123456")
	checks.append(("entry capped at 15 digits", engine.display_value() == "123456789012345"))

	engine = _press(CalculatorEngine(), "5 + 3 = = =")
	checks.append(("repeated equals keeps display stable", engine.display_value() == "8"))

	print("Expected vs actual")
	for label, expected, actual in expected_actual:
		print(f"  {label:<28} expected={expected:<22} actual={actual}")

	failed = [name for name, ok in checks if not ok]
	print(f"\nChecks passed: {len(checks) - len(failed)}/{len(checks)}")
	for name in failed:
		print(f"  FAIL: {name}")

	if failed:
		sys.exit(1)


if __name__ == "__main__":
	run_regressions()
