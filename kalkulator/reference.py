"""Reference text describing the operators and grammar accepted by kalkulator."""

from textwrap import dedent

from .tokens import OPERATORS, OperatorKind


def _operator_table() -> str:
    header = f"{'op':<4}{'name':<16}{'precedence':<12}{'associativity':<15}arity"
    rows = [header, "-" * len(header)]
    for spec in sorted(OPERATORS.values(), key=lambda s: (s.precedence, s.symbol)):
        arity = "unary (postfix)" if spec.kind is OperatorKind.UNARY else "binary"
        rows.append(
            f"{spec.symbol:<4}{spec.description:<16}{spec.precedence:<12}"
            f"{spec.associativity.value:<15}{arity}"
        )
    return "\n".join(rows)


OPERATOR_TABLE = _operator_table()

GRAMMAR = dedent(
"""
Expr     := Operand { BinOp Operand }
Operand  := Primary { '!' }
Primary  := NUMBER | '(' Expr ')'
BinOp    := '+' | '-' | '*' | '/' | '^'
NUMBER   := DIGITS [ '.' [ DIGITS ] ] | '.' DIGITS

Notes:
- Higher precedence binds tighter; '^' groups right to left, the rest left to right.
- '-' is always binary subtraction: write (0-3) instead of -3.
- Factorial accepts non-negative integral values only (3! and 3.0! but not 3.5!).
"""
).strip()


def get_operator_reference(include_grammar: bool = True) -> str:
    parts = ["SUPPORTED OPERATORS", OPERATOR_TABLE]
    if include_grammar:
        parts.extend(["", "GRAMMAR", GRAMMAR])
    return "\n".join(parts)
