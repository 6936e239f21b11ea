"""Parseo y evaluación de una única operación binaria para la calculadora.

Las tres clases de fallo se distinguen con excepciones propias de este
módulo; el motor decide cómo reflejarlas en su estado:

    - IncompleteExpressionError: la expresión no tiene la forma
      operando-operador-operando (se ignora en silencio).
    - ZeroDivisionError: divisor exactamente cero (se ignora en silencio).
    - ValueError: operando no numérico (se muestra "Error").
"""

from __future__ import annotations

import math
import re
from enum import Enum


class IncompleteExpressionError(ValueError):
    """La expresión no contiene exactamente una operación evaluable."""


class Operator(Enum):
    """Operadores binarios, en el orden de prioridad de búsqueda."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def from_symbol(cls, symbol: str) -> Operator | None:
        for operator in cls:
            if operator.value == symbol:
                return operator
        return None

    def apply(self, left: float, right: float) -> float:
        if self is Operator.ADD:
            return left + right
        if self is Operator.SUBTRACT:
            return left - right
        if self is Operator.MULTIPLY:
            return left * right
        return left / right


OPERATOR_SYMBOLS = tuple(operator.symbol for operator in Operator)


def contains_operator(text: str) -> bool:
    return any(symbol in text for symbol in OPERATOR_SYMBOLS)


# ── Operandos ────────────────────────────────────────────────────

_OPERAND_RE = re.compile(
    r"^(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:e[+\-]?[0-9]+)?$"
)
# Textos no finitos que format_result puede producir y que vuelven
# como operando al continuar desde un resultado.
_NON_FINITE = {"inf", "nan"}


def parse_operand(text: str) -> float:
    """Convierte un operando decimal a float.

    Raises:
        ValueError: operando vacío o no numérico.
    """
    if text in _NON_FINITE or _OPERAND_RE.fullmatch(text):
        return float(text)
    raise ValueError(f"Operando no numérico: {text!r}")


def split_expression(expression: str) -> tuple[str, Operator, str]:
    """Separa la expresión en el primer operador encontrado por prioridad.

    Raises:
        IncompleteExpressionError: sin operador o más de dos partes.
    """
    for operator in Operator:
        if operator.symbol not in expression:
            continue
        parts = expression.split(operator.symbol)
        if len(parts) != 2:
            raise IncompleteExpressionError(
                f"Se esperaban 2 partes y hay {len(parts)}"
            )
        return parts[0], operator, parts[1]
    raise IncompleteExpressionError("La expresión no contiene operador")


# ── Formato ──────────────────────────────────────────────────────

def format_result(value: float) -> str:
    """Enteros sin ".0"; el resto con la conversión por defecto de float."""
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


# ── Evaluador ────────────────────────────────────────────────────

class FormulaEvaluator:
    """Evalúa operando-operador-operando y devuelve el texto del resultado."""

    def evaluate(self, left: str, operator: Operator, right: str) -> str:
        """Evalúa una operación ya separada.

        Raises:
            ZeroDivisionError: división con divisor exactamente cero.
            ValueError: algún operando no es numérico.
        """
        if operator is Operator.DIVIDE:
            # El divisor se valida antes que el dividendo.
            divisor = parse_operand(right)
            if divisor == 0:
                raise ZeroDivisionError("División por cero")
            dividend = parse_operand(left)
            return format_result(operator.apply(dividend, divisor))

        return format_result(
            operator.apply(parse_operand(left), parse_operand(right))
        )

    def evaluate_text(self, expression: str) -> str:
        """Evalúa una expresión en texto plano, buscando su operador."""
        left, operator, right = split_expression(expression)
        return self.evaluate(left, operator, right)
