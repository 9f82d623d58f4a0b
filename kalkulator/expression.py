"""Stateful façade sequencing tokenization, postfix conversion and evaluation."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Tuple

from .errors import NotComputedError, NotConvertedError
from .evaluator import EvaluationOptions, evaluate
from .lexer import tokenize
from .parser import to_postfix
from .printer import format_postfix
from .tokens import Token

logger = logging.getLogger(__name__)


class ExpressionState(Enum):
    CREATED = "created"
    CONVERTED = "converted"
    EVALUATED = "evaluated"


class Expression:
    """An arithmetic expression together with its postfix form and result.

    ``infix_to_postfix`` must run before ``compute_expression``; calls made out of
    order raise ``NotConvertedError`` or ``NotComputedError``.
    """

    def __init__(self, text: str, options: Optional[EvaluationOptions] = None):
        self.text = text
        self.options = options or EvaluationOptions()
        self._state = ExpressionState.CREATED
        self._postfix: Tuple[Token, ...] = ()
        self._result: Optional[float] = None

    def __repr__(self) -> str:
        return f"Expression(text={self.text!r}, state={self._state.value})"

    @property
    def state(self) -> ExpressionState:
        return self._state

    def _transition(self, state: ExpressionState) -> None:
        if state is not self._state:
            logger.debug("Expression %r: %s -> %s", self.text, self._state.value, state.value)
        self._state = state

    def infix_to_postfix(self) -> Tuple[Token, ...]:
        self._postfix = ()
        self._result = None
        self._transition(ExpressionState.CREATED)

        postfix = tuple(to_postfix(tokenize(self.text)))

        self._postfix = postfix
        self._transition(ExpressionState.CONVERTED)
        return postfix

    def compute_expression(self) -> float:
        if self._state is ExpressionState.CREATED:
            raise NotConvertedError()

        self._result = None
        self._transition(ExpressionState.CONVERTED)

        result = evaluate(self._postfix, self.options)

        self._result = result
        self._transition(ExpressionState.EVALUATED)
        return result

    def get_postfix(self) -> Tuple[Token, ...]:
        if self._state is ExpressionState.CREATED:
            raise NotConvertedError()
        return self._postfix

    def get_result(self) -> float:
        if self._state is not ExpressionState.EVALUATED or self._result is None:
            raise NotComputedError()
        return self._result

    def show_postfix(self) -> str:
        return format_postfix(self.get_postfix())


def calculate(text: str, options: Optional[EvaluationOptions] = None) -> float:
    """Evaluate ``text`` in one step and return the numeric result."""

    expr = Expression(text, options)
    expr.infix_to_postfix()
    return expr.compute_expression()
