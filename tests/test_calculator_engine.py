import logging

import pytest

from calculator_engine import (
    CalculatorEngine,
    DisplayingState,
    EnteringState,
)
from formula_evaluator import Operator


def _type(engine, text):
    for char in text:
        if char in "+-×÷":
            engine.apply_operator(char)
        else:
            engine.append_token(char)
    return engine


@pytest.fixture
def engine():
    return CalculatorEngine()


def test_initial_state_is_empty(engine):
    assert engine.expression == ""
    assert engine.result == ""
    assert engine.state == EnteringState()
    assert not engine.is_displaying


def test_digits_concatenate_without_result(engine):
    for token in "1203.5":
        engine.append_token(token)
        assert engine.result == ""
    assert engine.get_expression() == "1203.5"
    assert engine.get_result() == ""


def test_repeated_decimal_points_are_accepted(engine):
    _type(engine, "1..2")
    assert engine.expression == "1..2"


def test_operator_on_empty_expression_is_ignored(engine):
    engine.apply_operator("+")
    assert engine.expression == ""


def test_second_operator_is_ignored(engine):
    _type(engine, "5+")
    engine.apply_operator("+")
    engine.apply_operator("÷")
    assert engine.expression == "5+"
    _type(engine, "2")
    engine.apply_operator("-")
    assert engine.expression == "5+2"


def test_apply_operator_accepts_enum_member(engine):
    _type(engine, "8")
    engine.apply_operator(Operator.DIVIDE)
    assert engine.expression == "8÷"
    assert engine.state == EnteringState("8", Operator.DIVIDE, "")


@pytest.mark.parametrize(
    "typed, expected",
    [
        ("6+3", "9"),
        ("7÷2", "3.5"),
        ("9-12", "-3"),
        ("2.5×2", "5"),
        ("0.1+0.2", "0.30000000000000004"),
        ("5+", "Error"),
        ("4×", "Error"),
        (".+1", "Error"),
        ("1.2.3+1", "Error"),
    ],
)
def test_evaluate(engine, typed, expected):
    _type(engine, typed)
    engine.evaluate()
    assert engine.result == expected
    assert engine.expression == typed
    assert engine.is_displaying


@pytest.mark.parametrize("typed", ["5÷0", "5÷0.0", "5÷00"])
def test_division_by_zero_is_silent(engine, typed):
    _type(engine, typed)
    engine.evaluate()
    assert engine.result == ""
    assert engine.expression == typed
    assert not engine.is_displaying
    _type(engine, "2")
    assert engine.expression == typed + "2"


@pytest.mark.parametrize("typed", ["", "5", "12.5"])
def test_evaluate_without_operator_is_noop(engine, typed):
    _type(engine, typed)
    engine.evaluate()
    assert engine.result == ""
    assert engine.expression == typed


def test_operator_after_result_continues(engine):
    _type(engine, "6+3")
    engine.evaluate()
    engine.apply_operator("-")
    assert engine.expression == "9-"
    assert engine.result == ""
    _type(engine, "1")
    engine.evaluate()
    assert engine.result == "8"


def test_digit_after_result_starts_over(engine):
    _type(engine, "6+3")
    engine.evaluate()
    engine.append_token("2")
    assert engine.expression == "2"
    assert engine.result == ""
    assert engine.state == EnteringState(left="2")


def test_negative_result_rejects_operator(engine):
    _type(engine, "3-7")
    engine.evaluate()
    assert engine.result == "-4"
    engine.apply_operator("+")
    assert engine.expression == "-4"
    assert engine.result == ""
    _type(engine, "5")
    engine.evaluate()
    assert engine.expression == "-45"
    assert engine.result == "Error"


def test_error_result_continues_as_operand(engine):
    _type(engine, "5+")
    engine.evaluate()
    engine.apply_operator("+")
    _type(engine, "1")
    assert engine.expression == "Error+1"
    engine.evaluate()
    assert engine.result == "Error"


def test_evaluate_twice_keeps_result(engine):
    _type(engine, "6+3")
    engine.evaluate()
    first = engine.state
    engine.evaluate()
    assert engine.state == first
    assert isinstance(first, DisplayingState)
    assert first.entry == EnteringState("6", Operator.ADD, "3")


@pytest.mark.parametrize("typed", ["", "12", "5+", "6+3"])
def test_clear_resets_from_any_state(engine, typed):
    _type(engine, typed)
    engine.evaluate()
    engine.clear()
    assert engine.expression == ""
    assert engine.result == ""
    assert engine.state == EnteringState()


def test_out_of_contract_input_is_ignored(engine, caplog):
    _type(engine, "5")
    with caplog.at_level(logging.WARNING, logger="calculator_engine"):
        engine.append_token("a")
        engine.append_token("12")
        engine.apply_operator("*")
    assert engine.expression == "5"
    assert len(caplog.records) == 3
