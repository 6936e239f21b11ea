import pytest

from calculator_engine import CalculatorEngine
from keypad import KEYPAD, action_for_label, dispatch, press


def test_keypad_layout():
    labels = [[text for text, _action, _kind in row] for row in KEYPAD]
    assert labels == [
        ["7", "8", "9", "÷"],
        ["4", "5", "6", "×"],
        ["1", "2", "3", "-"],
        [".", "0", "C", "+"],
        ["="],
    ]


def test_every_key_dispatches():
    engine = CalculatorEngine()
    for row in KEYPAD:
        for _text, action, _kind in row:
            dispatch(engine, action)


def test_dispatch_routes_to_engine():
    engine = CalculatorEngine()
    dispatch(engine, "append:7")
    dispatch(engine, "operator:÷")
    dispatch(engine, "append:2")
    assert engine.expression == "7÷2"
    dispatch(engine, "equals")
    assert engine.result == "3.5"
    dispatch(engine, "clear")
    assert engine.expression == ""
    assert engine.result == ""


def test_unknown_action_raises():
    with pytest.raises(ValueError):
        dispatch(CalculatorEngine(), "percent")


def test_unknown_label_raises():
    with pytest.raises(ValueError):
        action_for_label("%")


def test_press_sequence():
    engine = press(CalculatorEngine(), "6+3=-1=")
    assert engine.expression == "9-1"
    assert engine.result == "8"
