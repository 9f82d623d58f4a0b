import math
from typing import Iterable, Optional

from .errors import KalkulatorError
from .tokens import Token

_INTEGRAL_LIMIT = 1e16


def format_token(token: Token) -> str:
    return str(token)


def format_postfix(tokens: Iterable[Token]) -> str:
    """Render a token sequence as space separated text, e.g. ``3 4 2 * +``."""
    return " ".join(format_token(tok) for tok in tokens)


def format_number(value: float) -> str:
    value = float(value)
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer() and abs(value) < _INTEGRAL_LIMIT:
        return str(int(value))
    return repr(value)


def _pointer(text: str, position: Optional[int]) -> Optional[str]:
    if position is None or not text or "\n" in text:
        return None
    col = min(max(position, 0), len(text))
    caret_line = " " * col + "^"
    return f"    {text.rstrip()}\n    {caret_line}"


def format_error(err: KalkulatorError, text: Optional[str] = None) -> str:
    message = str(err)
    snippet = _pointer(text or "", err.position)
    if snippet is None:
        return message
    return f"{message}\n{snippet}"
