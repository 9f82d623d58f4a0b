import logging
import math
import re
from typing import List

from .errors import InvalidNumberError, UnknownCharacterError
from .logging_utils import debug_log_call
from .tokens import OPERATORS, LeftParen, Number, Operator, RightParen, Token

logger = logging.getLogger(__name__)

PARENS = {
    '(': LeftParen,
    ')': RightParen,
}

_digits_re = re.compile(r'[0-9.]+')
_num_re = re.compile(r'\d+(?:\.\d*)?|\.\d+')


@debug_log_call(logger)
def tokenize(text: str) -> List[Token]:
    tokens: List[Token] = []
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch.isspace():
            i += 1
            continue
        m = _digits_re.match(text, i)
        if m:
            raw = m.group(0)
            if not _num_re.fullmatch(raw):
                raise InvalidNumberError(raw, i)
            value = float(raw)
            # literals beyond float64 range would enter evaluation as inf
            if not math.isfinite(value):
                raise InvalidNumberError(raw, i)
            tokens.append(Number(raw, value, i))
            i = m.end()
            continue
        if ch in OPERATORS:
            tokens.append(Operator(ch, i))
            i += 1
            continue
        if ch in PARENS:
            tokens.append(PARENS[ch](i))
            i += 1
            continue
        raise UnknownCharacterError(ch, i)
    return tokens
