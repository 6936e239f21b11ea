"""Teclado de la calculadora y despacho de acciones al motor.

No depende de tkinter: la ventana y las comprobaciones de regresión
comparten la misma tabla de teclas.
"""

from calculator_engine import CalculatorEngine


#  Cada fila es una lista de (texto, acción, tipo_color)
#  tipo_color: "num", "op", "equals"

KEYPAD = [
    [("7", "append:7", "num"), ("8", "append:8", "num"),
     ("9", "append:9", "num"), ("÷", "operator:÷", "op")],

    [("4", "append:4", "num"), ("5", "append:5", "num"),
     ("6", "append:6", "num"), ("×", "operator:×", "op")],

    [("1", "append:1", "num"), ("2", "append:2", "num"),
     ("3", "append:3", "num"), ("-", "operator:-", "op")],

    [(".", "append:.", "num"), ("0", "append:0", "num"),
     ("C", "clear", "op"), ("+", "operator:+", "op")],

    [("=", "equals", "equals")],
]

ACTIONS_BY_LABEL = {
    text: action for row in KEYPAD for text, action, _kind in row
}


def action_for_label(label: str) -> str:
    try:
        return ACTIONS_BY_LABEL[label]
    except KeyError:
        raise ValueError(f"Tecla desconocida: {label!r}") from None


def dispatch(engine: CalculatorEngine, action: str) -> None:
    """Traduce una acción del teclado a la operación del motor."""
    if action == "clear":
        engine.clear()
    elif action == "equals":
        engine.evaluate()
    elif action.startswith("append:"):
        engine.append_token(action[7:])
    elif action.startswith("operator:"):
        engine.apply_operator(action[9:])
    else:
        raise ValueError(f"Acción desconocida: {action!r}")


def press(engine: CalculatorEngine, labels) -> CalculatorEngine:
    """Pulsa en orden las teclas indicadas por su texto ("6+3=")."""
    for label in labels:
        dispatch(engine, action_for_label(label))
    return engine
