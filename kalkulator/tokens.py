from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


class OperatorKind(Enum):
    BINARY = 2
    UNARY = 1


@dataclass(frozen=True)
class OperatorSpec:
    """Static description of an operator symbol."""

    symbol: str
    precedence: int
    associativity: Associativity
    kind: OperatorKind
    description: str

    @property
    def arity(self) -> int:
        return self.kind.value


OPERATORS: Mapping[str, OperatorSpec] = MappingProxyType(
    {
        '+': OperatorSpec('+', 1, Associativity.LEFT, OperatorKind.BINARY, 'addition'),
        '-': OperatorSpec('-', 1, Associativity.LEFT, OperatorKind.BINARY, 'subtraction'),
        '*': OperatorSpec('*', 2, Associativity.LEFT, OperatorKind.BINARY, 'multiplication'),
        '/': OperatorSpec('/', 2, Associativity.LEFT, OperatorKind.BINARY, 'division'),
        '^': OperatorSpec('^', 3, Associativity.RIGHT, OperatorKind.BINARY, 'exponentiation'),
        # postfix, single operand
        '!': OperatorSpec('!', 4, Associativity.LEFT, OperatorKind.UNARY, 'factorial'),
    }
)


@dataclass(frozen=True)
class Number:
    """Numeric literal keeping the text it was written as.

    Equality follows the spelling of the literal (``text``) as well as its value,
    so ``Number('3', 3.0) != Number('3.0', 3.0)``; compare ``float(token)`` for
    numeric equality. ``position`` never takes part in comparisons.
    """

    text: str
    value: float
    position: int = field(default=0, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))

    def __float__(self) -> float:
        return float(self.value)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Operator:
    symbol: str
    position: int = field(default=0, compare=False)

    def __post_init__(self) -> None:
        if self.symbol not in OPERATORS:
            raise ValueError(f"unknown operator symbol {self.symbol!r}")

    @property
    def spec(self) -> OperatorSpec:
        return OPERATORS[self.symbol]

    @property
    def precedence(self) -> int:
        return self.spec.precedence

    @property
    def associativity(self) -> Associativity:
        return self.spec.associativity

    @property
    def kind(self) -> OperatorKind:
        return self.spec.kind

    @property
    def arity(self) -> int:
        return self.spec.arity

    def __str__(self) -> str:
        return self.symbol


@dataclass(frozen=True)
class LeftParen:
    position: int = field(default=0, compare=False)

    def __str__(self) -> str:
        return '('


@dataclass(frozen=True)
class RightParen:
    position: int = field(default=0, compare=False)

    def __str__(self) -> str:
        return ')'


Token = Union[Number, Operator, LeftParen, RightParen]
