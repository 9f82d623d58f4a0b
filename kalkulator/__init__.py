from .tokens import (
    OPERATORS,
    Associativity,
    LeftParen,
    Number,
    Operator,
    OperatorKind,
    OperatorSpec,
    RightParen,
    Token,
)
from .errors import (
    KalkulatorError,
    LexError,
    ParseError,
    EvalError,
    UnknownCharacterError,
    InvalidNumberError,
    EmptyExpressionError,
    MismatchedParenthesisError,
    InsufficientOperandsError,
    MalformedExpressionError,
    DivisionByZeroError,
    InvalidFactorialOperandError,
    NumericOverflowError,
    UndefinedResultError,
    NotConvertedError,
    NotComputedError,
)
from .lexer import tokenize
from .parser import to_postfix
from .evaluator import EvaluationOptions, evaluate, factorial
from .expression import Expression, ExpressionState, calculate
from .printer import format_error, format_number, format_postfix, format_token
from .reference import GRAMMAR, OPERATOR_TABLE, get_operator_reference

__all__ = [
    'OPERATORS',
    'Associativity',
    'LeftParen',
    'Number',
    'Operator',
    'OperatorKind',
    'OperatorSpec',
    'RightParen',
    'Token',
    'KalkulatorError',
    'LexError',
    'ParseError',
    'EvalError',
    'UnknownCharacterError',
    'InvalidNumberError',
    'EmptyExpressionError',
    'MismatchedParenthesisError',
    'InsufficientOperandsError',
    'MalformedExpressionError',
    'DivisionByZeroError',
    'InvalidFactorialOperandError',
    'NumericOverflowError',
    'UndefinedResultError',
    'NotConvertedError',
    'NotComputedError',
    'tokenize',
    'to_postfix',
    'evaluate',
    'factorial',
    'EvaluationOptions',
    'Expression',
    'ExpressionState',
    'calculate',
    'format_error',
    'format_number',
    'format_postfix',
    'format_token',
    'GRAMMAR',
    'OPERATOR_TABLE',
    'get_operator_reference',
]
