"""
Motor de estado de la calculadora.

Este módulo provee la clase CalculatorEngine, que acumula las pulsaciones
en una expresión de una sola operación binaria y la evalúa. La pantalla
solo invoca las cuatro operaciones y lee los dos textos observables.

Contrato de interfaz:
    - append_token(token: str)       '0'-'9' | '.'
    - apply_operator(op: str)        '+' | '-' | '×' | '÷'
    - clear()
    - evaluate()
    - expression / result: propiedades de solo lectura (str)

Ninguna operación lanza excepciones para entradas del contrato: los
fallos quedan reflejados en el estado (sin cambios, o result == "Error").
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional, Union

from formula_evaluator import (
    FormulaEvaluator,
    IncompleteExpressionError,
    Operator,
    contains_operator,
)

logger = logging.getLogger(__name__)

DIGIT_TOKENS = frozenset("0123456789.")
ERROR_MARKER = "Error"


# ── Estados ──────────────────────────────────────────────────────

@dataclass(frozen=True)
class EnteringState:
    """El usuario está escribiendo la expresión."""

    left: str = ""
    operator: Optional[Operator] = None
    right: str = ""

    @property
    def expression(self) -> str:
        if self.operator is None:
            return self.left
        return f"{self.left}{self.operator.symbol}{self.right}"


@dataclass(frozen=True)
class DisplayingState:
    """Hay un resultado (o "Error") en pantalla."""

    entry: EnteringState
    result: str

    @property
    def expression(self) -> str:
        return self.entry.expression


CalculatorState = Union[EnteringState, DisplayingState]


class CalculatorEngine:
    """Máquina de estados expresión/resultado de una sola operación."""

    def __init__(self, evaluator: FormulaEvaluator | None = None):
        self._evaluator = evaluator if evaluator is not None else FormulaEvaluator()
        self._state: CalculatorState = EnteringState()

    # ── Estado observable ────────────────────────────────────────

    @property
    def state(self) -> CalculatorState:
        return self._state

    @property
    def expression(self) -> str:
        return self._state.expression

    @property
    def result(self) -> str:
        if isinstance(self._state, DisplayingState):
            return self._state.result
        return ""

    @property
    def is_displaying(self) -> bool:
        return isinstance(self._state, DisplayingState)

    def get_expression(self) -> str:
        return self.expression

    def get_result(self) -> str:
        return self.result

    # ── Entrada ──────────────────────────────────────────────────

    def append_token(self, token: str):
        """Agrega un dígito o punto decimal.

        Con un resultado en pantalla empieza un cálculo nuevo con el token.
        No se valida la cantidad de puntos por operando.
        """
        if token not in DIGIT_TOKENS:
            logger.warning("Token fuera de contrato ignorado: %r", token)
            return

        state = self._state
        if isinstance(state, DisplayingState):
            logger.debug("Nuevo cálculo a partir de %r", token)
            self._state = EnteringState(left=token)
        elif state.operator is None:
            self._state = replace(state, left=state.left + token)
        else:
            self._state = replace(state, right=state.right + token)

    def apply_operator(self, op: str | Operator):
        """Fija el operador de la expresión.

        Con un resultado en pantalla, el resultado pasa a ser el operando
        izquierdo. Se ignora si la expresión está vacía o ya tiene operador.
        """
        operator = op if isinstance(op, Operator) else Operator.from_symbol(op)
        if operator is None:
            logger.warning("Operador fuera de contrato ignorado: %r", op)
            return

        state = self._state
        if isinstance(state, DisplayingState):
            logger.debug("Continuando desde el resultado %r", state.result)
            state = EnteringState(left=state.result)
            self._state = state

        # Un resultado negativo o con exponente ya trae un símbolo.
        if (
            not state.expression
            or state.operator is not None
            or contains_operator(state.left)
        ):
            logger.debug("Operador %r rechazado en %r", operator.symbol,
                         state.expression)
            return

        self._state = replace(state, operator=operator)

    def clear(self):
        self._state = EnteringState()

    # ── Evaluación ───────────────────────────────────────────────

    def evaluate(self):
        """Evalúa la expresión y pasa a mostrar el resultado.

        Estructura incompleta y división por cero no cambian el estado;
        un operando no numérico muestra "Error". La expresión se conserva.
        """
        state = self._state
        entry = state.entry if isinstance(state, DisplayingState) else state

        try:
            if entry.operator is None:
                result = self._evaluator.evaluate_text(entry.expression)
            else:
                result = self._evaluator.evaluate(
                    entry.left, entry.operator, entry.right
                )
        except IncompleteExpressionError as exc:
            logger.debug("Evaluación ignorada: %s", exc)
            return
        except ZeroDivisionError:
            logger.debug("División por cero ignorada en %r", entry.expression)
            return
        except ValueError as exc:
            logger.debug("Evaluación fallida: %s", exc)
            result = ERROR_MARKER

        self._state = DisplayingState(entry=entry, result=result)
