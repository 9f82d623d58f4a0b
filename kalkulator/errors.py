"""Exception hierarchy raised by the expression pipeline."""

from __future__ import annotations

from typing import Optional


class KalkulatorError(Exception):
    """Base class for every error raised while processing an expression."""

    kind = "Error"
    position: Optional[int] = None


class LexError(KalkulatorError):
    pass


class ParseError(KalkulatorError):
    pass


class EvalError(KalkulatorError):
    pass


class UnknownCharacterError(LexError):
    kind = "UnknownCharacter"

    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(f"unknown character {char!r} at position {position}")


class InvalidNumberError(LexError):
    kind = "InvalidNumber"

    def __init__(self, text: str, position: int):
        self.text = text
        self.position = position
        super().__init__(f"invalid number {text!r} at position {position}")


class EmptyExpressionError(ParseError):
    kind = "EmptyExpression"

    def __init__(self) -> None:
        super().__init__("empty expression")


class MismatchedParenthesisError(ParseError):
    kind = "MismatchedParenthesis"

    def __init__(self, position: int):
        self.position = position
        super().__init__(f"mismatched parenthesis at position {position}")


class InsufficientOperandsError(EvalError):
    kind = "InsufficientOperands"

    def __init__(self, symbol: str, position: Optional[int] = None):
        self.symbol = symbol
        self.position = position
        super().__init__(f"insufficient operands for {symbol!r}")


class MalformedExpressionError(EvalError):
    kind = "MalformedExpression"

    def __init__(self, remaining: int, detail: Optional[str] = None):
        self.remaining = remaining
        message = detail or f"malformed postfix expression: {remaining} value(s) left on the stack"
        super().__init__(message)


class DivisionByZeroError(EvalError):
    kind = "DivisionByZero"

    def __init__(self, position: Optional[int] = None):
        self.position = position
        super().__init__("division by zero")


class InvalidFactorialOperandError(EvalError):
    kind = "InvalidFactorialOperand"

    def __init__(self, value: float, position: Optional[int] = None):
        self.value = value
        self.position = position
        super().__init__(
            f"factorial is only defined for non-negative integers, got {value!r}"
        )


class NumericOverflowError(EvalError):
    kind = "Overflow"

    def __init__(self, symbol: str, position: Optional[int] = None):
        self.symbol = symbol
        self.position = position
        super().__init__(f"overflow in {symbol!r}")


class UndefinedResultError(EvalError):
    kind = "UndefinedResult"

    def __init__(self, symbol: str, position: Optional[int] = None):
        self.symbol = symbol
        self.position = position
        super().__init__(f"result of {symbol!r} is undefined for these operands")


class NotConvertedError(EvalError):
    kind = "NotConverted"

    def __init__(self) -> None:
        super().__init__("expression has not been converted to postfix")


class NotComputedError(EvalError):
    kind = "NotComputed"

    def __init__(self) -> None:
        super().__init__("expression has not been computed")
