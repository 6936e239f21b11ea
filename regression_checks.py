from calculator_engine import CalculatorEngine
from keypad import press
import sys


def _run(keys: str) -> tuple[str, str]:
	engine = press(CalculatorEngine(), keys)
	return engine.expression, engine.result


def inspect_sequence(keys: str) -> None:
	"""Imprime expresión y resultado después de cada tecla."""
	engine = CalculatorEngine()

	print("Sequence inspection")
	print(f"keys:           {keys}")
	for i, label in enumerate(keys, start=1):
		press(engine, label)
		mode = "displaying" if engine.is_displaying else "entering"
		print(f"  {i:>2}. {label!r:<5} {mode:<10} expr={engine.expression!r} result={engine.result!r}")


# (teclas, expresión esperada, resultado esperado)
SEQUENCES = [
	("6+3=", "6+3", "9"),
	("7÷2=", "7÷2", "3.5"),
	("5÷0=", "5÷0", ""),
	("5÷0.0=", "5÷0.0", ""),
	("5+=", "5+", "Error"),
	("4×=", "4×", "Error"),
	(".+1=", ".+1", "Error"),
	("1.2.3+1=", "1.2.3+1", "Error"),
	("+5=", "5", ""),
	("5=", "5", ""),
	("=", "", ""),
	("6+3=-", "9-", ""),
	("6+3=-1=", "9-1", "8"),
	("6+3=2", "2", ""),
	("6+3=C", "", ""),
	("5++", "5+", ""),
	("5+-×÷", "5+", ""),
	("3-7=", "3-7", "-4"),
	("3-7=+", "-4", ""),
	("3-7=+5=", "-45", "Error"),
	("0.1+0.2=", "0.1+0.2", "0.30000000000000004"),
	("2×2=", "2×2", "4"),
	("100000×100000=", "100000×100000", "10000000000"),
	("1÷3=", "1÷3", "0.3333333333333333"),
	("1÷100000=", "1÷100000", "1e-05"),
	("5+=+1=", "Error+1", "Error"),
	("6+3==", "6+3", "9"),
]


def run_regressions() -> None:
	checks: list[tuple[str, bool]] = []
	expected_actual: list[tuple[str, str, str]] = []

	for keys, expected_expr, expected_result in SEQUENCES:
		expression, result = _run(keys)
		ok = expression == expected_expr and result == expected_result
		checks.append((f"{keys} -> {expected_expr!r} / {expected_result!r}", ok))
		if not ok:
			expected_actual.append((
				keys,
				f"{expected_expr!r} / {expected_result!r}",
				f"{expression!r} / {result!r}",
			))

	engine = press(CalculatorEngine(), "123")
	checks.append(("digits without operator stay in expression", engine.expression == "123" and engine.result == ""))
	checks.append(("digits without operator keep entering mode", not engine.is_displaying))

	engine = press(CalculatorEngine(), "6+3=")
	checks.append(("evaluate switches to displaying mode", engine.is_displaying))
	press(engine, "C")
	checks.append(("clear returns to entering mode", not engine.is_displaying))

	failed = [name for name, ok in checks if not ok]
	for name, ok in checks:
		print(f"{name}: {'OK' if ok else 'FAIL'}")

	if expected_actual:
		print("\nExpected vs Actual:")
		for label, expected, actual in expected_actual:
			print(f"- {label}: FAIL")
			print(f"  expected: {expected}")
			print(f"  actual:   {actual}")

	if failed:
		print("\nFAILED CHECKS:")
		for name in failed:
			print(f"- {name}")
		raise SystemExit(1)

	print("\nAll regression checks passed.")


if __name__ == "__main__":
	# Uso rápido:
	#   python regression_checks.py
	#   python regression_checks.py --inspect "6+3=-1="
	if "--inspect" in sys.argv:
		try:
			keys = sys.argv[sys.argv.index("--inspect") + 1]
		except (ValueError, IndexError):
			raise SystemExit("Missing key sequence after --inspect")
		inspect_sequence(keys)
	else:
		run_regressions()
