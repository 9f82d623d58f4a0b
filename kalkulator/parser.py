import logging
from typing import List, Sequence, Union

from .errors import EmptyExpressionError, MismatchedParenthesisError
from .logging_utils import debug_log_call
from .tokens import Associativity, LeftParen, Number, Operator, RightParen, Token

logger = logging.getLogger(__name__)

StackEntry = Union[Operator, LeftParen]


def _should_pop(top: StackEntry, op: Operator) -> bool:
    if not isinstance(top, Operator):
        return False
    if top.precedence > op.precedence:
        return True
    return top.precedence == op.precedence and op.associativity is Associativity.LEFT


@debug_log_call(logger)
def to_postfix(tokens: Sequence[Token]) -> List[Token]:
    """Convert infix ``tokens`` to postfix order with the shunting-yard algorithm.

    Parentheses are consumed here and never reach the output.
    """
    if not tokens:
        raise EmptyExpressionError()

    output: List[Token] = []
    stack: List[StackEntry] = []

    for tok in tokens:
        if isinstance(tok, Number):
            output.append(tok)
        elif isinstance(tok, Operator):
            while stack and _should_pop(stack[-1], tok):
                output.append(stack.pop())
            stack.append(tok)
        elif isinstance(tok, LeftParen):
            stack.append(tok)
        elif isinstance(tok, RightParen):
            while True:
                if not stack:
                    raise MismatchedParenthesisError(tok.position)
                top = stack.pop()
                if isinstance(top, LeftParen):
                    break
                output.append(top)
        else:
            raise TypeError(f"unexpected token {tok!r}")

    while stack:
        top = stack.pop()
        if isinstance(top, LeftParen):
            raise MismatchedParenthesisError(top.position)
        output.append(top)

    logger.debug("postfix conversion produced %d token(s) from %d", len(output), len(tokens))
    return output
