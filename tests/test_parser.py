import pytest

from kalkulator.errors import EmptyExpressionError, MismatchedParenthesisError
from kalkulator.lexer import tokenize
from kalkulator.parser import to_postfix
from kalkulator.printer import format_postfix
from kalkulator.tokens import LeftParen, RightParen


def postfix_of(text):
    return format_postfix(to_postfix(tokenize(text)))


@pytest.mark.parametrize(
    'text, expected',
    [
        ('3+4*2', '3 4 2 * +'),
        ('3+4^2', '3 4 2 ^ +'),
        ('1-2-3', '1 2 - 3 -'),
        ('8/4/2', '8 4 / 2 /'),
        ('2^3^2', '2 3 2 ^ ^'),
        ('(1+2)*3', '1 2 + 3 *'),
        ('5!/(2+3)', '5 ! 2 3 + /'),
        ('2^3!', '2 3 ! ^'),
        ('3!!', '3 ! !'),
        ('3+4*2/(1-5)+2*3', '3 4 2 * 1 5 - / + 2 3 * +'),
        ('((7))', '7'),
    ],
)
def test_to_postfix_respects_precedence_and_associativity(text, expected):
    assert postfix_of(text) == expected


def test_to_postfix_drops_parentheses():
    postfix = to_postfix(tokenize("(1+(2*3))"))

    assert not any(isinstance(tok, (LeftParen, RightParen)) for tok in postfix)


def test_to_postfix_rejects_empty_input():
    with pytest.raises(EmptyExpressionError):
        to_postfix([])


@pytest.mark.parametrize('text, position', [('(2+3', 0), ('2+3)', 3), ('1+(2*(3)', 2), (')(', 0)])
def test_to_postfix_reports_mismatched_parenthesis(text, position):
    with pytest.raises(MismatchedParenthesisError) as exc:
        to_postfix(tokenize(text))

    assert exc.value.position == position


def test_to_postfix_does_not_validate_operand_counts():
    assert postfix_of('-3+2') == '3 - 2 +'
    assert postfix_of('()') == ''
