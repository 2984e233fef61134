import math

import pytest

import treecalc.constants as cst
from treecalc.calculator import Calculator
from treecalc.extra.exceptions import (InvalidCharacterError, InvalidParenthesisError, InvalidTokenError,
                                       LexerError, TreeBuildError)
from treecalc.extra.types import Application, Literal


@pytest.mark.parametrize("expression, expected",
                         [
                             ("1 + 2 * 3", 7.0),
                             ("2 * 3 + 1", 7.0),
                             ("3(4+5)", 27.0),
                             ("(1+2)3", 27.0),
                             ("(1 + 2) * (3 + 4)", 21.0),
                             (".5 * 4", 2.0),
                             ("2^-1", 0.5),
                             ("-(2+3)", -5.0),
                             ("2--3", 5.0),
                             ("((((7))))", 7.0),
                             (cst.DEFAULT_EXPRESSION, 109.0),
                         ])
def test_calc_ok(expression, expected):
    assert Calculator().calc(expression) == expected


@pytest.mark.parametrize("expression, expected",
                         [
                             ("1 - 2 - 3", 2.0),
                             ("8 / 4 / 2", 4.0),
                             ("2^3^2", 512.0),
                             ("(1+2)-3", -3.0),
                         ])
def test_calc_documents_existing_behavior(expression, expected):
    assert Calculator().calc(expression) == expected


def test_division_by_zero_is_infinite():
    assert Calculator().calc("1/0") == math.inf


@pytest.mark.parametrize("expression", ["0/0", "(-8)^(1/3)"])
def test_invalid_operation_is_nan(expression):
    assert math.isnan(Calculator().calc(expression))


@pytest.mark.parametrize("expression, exception",
                         [
                             ("(1+2", InvalidParenthesisError),
                             ("()", InvalidParenthesisError),
                             ("1 & 2", InvalidCharacterError),
                             ("(1)(2)", InvalidTokenError),
                             ("2*", InvalidTokenError),
                             ("", InvalidTokenError),
                         ])
def test_calc_invalid_expressions(expression, exception):
    with pytest.raises(exception):
        Calculator().calc(expression)


def test_lexer_error_leaves_no_tokens():
    calc = Calculator()
    with pytest.raises(LexerError):
        calc.calc("1 $ 2")
    assert calc.tokens is None
    assert calc.tree is None


def test_build_error_keeps_tokens():
    calc = Calculator()
    with pytest.raises(TreeBuildError):
        calc.calc("(1)(2)")
    assert calc.tokens is not None and len(calc.tokens) == 2
    assert calc.tree is None


def test_evaluate_tree():
    calc = Calculator()
    calc.calc("1 + 2")
    assert isinstance(calc.tree, Application)
    assert calc.evaluate(calc.tree) == 3.0
    assert calc.evaluate(Literal(2.5)) == 2.5
