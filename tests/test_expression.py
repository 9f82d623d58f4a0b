import pytest

from kalkulator import (
    DivisionByZeroError,
    EmptyExpressionError,
    EvaluationOptions,
    Expression,
    ExpressionState,
    InvalidNumberError,
    MismatchedParenthesisError,
    NotComputedError,
    NotConvertedError,
    UnknownCharacterError,
    calculate,
)
from kalkulator.tokens import Number, Operator


def test_convert_then_compute():
    expr = Expression("3+4*2")

    postfix = expr.infix_to_postfix()
    result = expr.compute_expression()

    assert postfix == (Number('3', 3), Number('4', 4), Number('2', 2), Operator('*'), Operator('+'))
    assert result == 11.0
    assert expr.get_result() == 11.0
    assert expr.state is ExpressionState.EVALUATED


def test_exponent_binds_tighter_than_addition():
    expr = Expression("3+4^2")
    expr.infix_to_postfix()
    expr.compute_expression()

    assert expr.get_result() == 19.0


def test_factorial_and_grouping():
    expr = Expression("5!/(2+3)")
    expr.infix_to_postfix()
    expr.compute_expression()

    assert expr.get_result() == 24.0


def test_new_expression_starts_in_created_state():
    expr = Expression("1+1")

    assert expr.state is ExpressionState.CREATED
    assert expr.text == "1+1"


def test_compute_before_convert_fails():
    expr = Expression("1+1")

    with pytest.raises(NotConvertedError):
        expr.compute_expression()


def test_get_postfix_before_convert_fails():
    with pytest.raises(NotConvertedError):
        Expression("1+1").get_postfix()


def test_get_result_before_compute_fails():
    expr = Expression("1+1")
    with pytest.raises(NotComputedError):
        expr.get_result()

    expr.infix_to_postfix()
    with pytest.raises(NotComputedError):
        expr.get_result()


def test_show_postfix():
    expr = Expression("(1+2)*3!")
    expr.infix_to_postfix()

    assert expr.show_postfix() == "1 2 + 3 ! *"
    assert expr.state is ExpressionState.CONVERTED


def test_recompute_is_stable():
    expr = Expression("2^0.5*3")
    expr.infix_to_postfix()

    first = expr.compute_expression()
    second = expr.compute_expression()

    assert first == second == expr.get_result()


def test_reconvert_clears_result():
    expr = Expression("2*2")
    expr.infix_to_postfix()
    expr.compute_expression()

    expr.infix_to_postfix()

    assert expr.state is ExpressionState.CONVERTED
    with pytest.raises(NotComputedError):
        expr.get_result()


@pytest.mark.parametrize(
    'text, error',
    [
        ("", EmptyExpressionError),
        ("   ", EmptyExpressionError),
        ("(2+3", MismatchedParenthesisError),
        ("2+3)", MismatchedParenthesisError),
        ("2+@3", UnknownCharacterError),
    ],
)
def test_conversion_errors_leave_expression_unconverted(text, error):
    expr = Expression(text)

    with pytest.raises(error):
        expr.infix_to_postfix()

    assert expr.state is ExpressionState.CREATED
    with pytest.raises(NotConvertedError):
        expr.compute_expression()


def test_evaluation_error_keeps_postfix():
    expr = Expression("4/0")
    expr.infix_to_postfix()

    with pytest.raises(DivisionByZeroError):
        expr.compute_expression()

    assert expr.state is ExpressionState.CONVERTED
    assert expr.show_postfix() == "4 0 /"
    with pytest.raises(NotComputedError):
        expr.get_result()


def test_expressions_are_independent():
    first = Expression("1+1")
    second = Expression("2*3")
    first.infix_to_postfix()
    second.infix_to_postfix()

    assert first.compute_expression() == 2.0
    assert second.compute_expression() == 6.0
    assert first.get_result() == 2.0


def test_calculate_runs_all_stages():
    assert calculate("3+4*2/(1-5)+2*3") == 7.0


def test_calculate_passes_options():
    assert calculate("171!", EvaluationOptions(strict=False)) == float("inf")


def test_repr_mentions_state():
    assert repr(Expression("1")) == "Expression(text='1', state=created)"


@pytest.mark.parametrize('suffix', ['', '-1', '!'])
def test_out_of_range_literal_fails_during_conversion(suffix):
    with pytest.raises(InvalidNumberError):
        calculate('1' * 400 + suffix)
