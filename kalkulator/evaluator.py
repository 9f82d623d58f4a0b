"""Stack machine that reduces a postfix token sequence to a single float."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence

import numpy as np

from .errors import (
    DivisionByZeroError,
    InsufficientOperandsError,
    InvalidFactorialOperandError,
    MalformedExpressionError,
    NumericOverflowError,
    UndefinedResultError,
)
from .logging_utils import debug_log_call
from .tokens import Number, Operator, OperatorKind, Token

logger = logging.getLogger(__name__)

BinaryFunc = Callable[[np.float64, np.float64], np.float64]

_BINARY: Dict[str, BinaryFunc] = {
    '+': np.add,
    '-': np.subtract,
    '*': np.multiply,
    '/': np.divide,
    '^': np.power,
}


@dataclass
class EvaluationOptions:
    """Knobs for postfix evaluation."""

    # raise on inf/nan produced from finite operands instead of returning it
    strict: bool = True


def factorial(value: float) -> np.float64:
    """Return ``value!`` as an iterative float64 product.

    Only finite, non-negative integral values are accepted. The product saturates
    at ``inf`` once it no longer fits in a float64 (from ``171!`` on).
    """
    value = float(value)
    if not np.isfinite(value) or value < 0 or not value.is_integer():
        raise InvalidFactorialOperandError(value)
    result = np.float64(1.0)
    with np.errstate(over="ignore"):
        for i in range(2, int(value) + 1):
            result = result * np.float64(i)
            if np.isinf(result):
                break
    return result


def _check_result(
    symbol: str,
    operands: Sequence[np.float64],
    result: np.float64,
    position: int,
    options: EvaluationOptions,
) -> None:
    if not options.strict or np.isfinite(result):
        return
    if not all(np.isfinite(x) for x in operands):
        return
    if np.isnan(result):
        raise UndefinedResultError(symbol, position)
    if symbol == '^' and operands[0] == 0.0:
        raise DivisionByZeroError(position)
    raise NumericOverflowError(symbol, position)


def _apply_binary(op: Operator, a: np.float64, b: np.float64, options: EvaluationOptions) -> np.float64:
    if op.symbol == '/' and b == 0.0:
        raise DivisionByZeroError(op.position)
    with np.errstate(all="ignore"):
        result = _BINARY[op.symbol](a, b)
    _check_result(op.symbol, (a, b), result, op.position, options)
    return result


def _apply_unary(op: Operator, a: np.float64, options: EvaluationOptions) -> np.float64:
    try:
        result = factorial(a)
    except InvalidFactorialOperandError as exc:
        raise InvalidFactorialOperandError(exc.value, op.position) from None
    _check_result(op.symbol, (a,), result, op.position, options)
    return result


@debug_log_call(logger)
def evaluate(postfix: Sequence[Token], options: Optional[EvaluationOptions] = None) -> float:
    options = options or EvaluationOptions()
    stack: List[np.float64] = []

    for tok in postfix:
        if isinstance(tok, Number):
            stack.append(np.float64(tok.value))
        elif isinstance(tok, Operator):
            if len(stack) < tok.arity:
                raise InsufficientOperandsError(tok.symbol, tok.position)
            if tok.kind is OperatorKind.UNARY:
                a = stack.pop()
                stack.append(_apply_unary(tok, a, options))
            else:
                b = stack.pop()
                a = stack.pop()
                stack.append(_apply_binary(tok, a, b, options))
        else:
            raise MalformedExpressionError(
                len(stack), f"malformed postfix expression: unexpected {tok} token"
            )

    if len(stack) != 1:
        raise MalformedExpressionError(len(stack))
    return float(stack[0])
