from __future__ import annotations

import logging
import reprlib
from functools import wraps
from typing import Any, Callable, Mapping, Optional, Sequence, TypeVar, cast

from .errors import KalkulatorError
from .printer import format_number, format_postfix
from .tokens import LeftParen, Number, Operator, RightParen

F = TypeVar("F", bound=Callable[..., Any])

_TOKEN_TYPES = (Number, Operator, LeftParen, RightParen)

_repr = reprlib.Repr()
_repr.maxother = 160
_repr.maxstring = 80
_repr.maxlist = 10
_repr.maxtuple = 10


def _is_token_sequence(value: Any) -> bool:
    return (
        isinstance(value, (list, tuple))
        and bool(value)
        and all(isinstance(item, _TOKEN_TYPES) for item in value)
    )


def _safe_repr(value: Any, *, max_items: int = 32, max_length: int = 400) -> str:
    if _is_token_sequence(value):
        shown = format_postfix(value[:max_items])
        if len(value) > max_items:
            shown += " ..."
        return f"<{len(value)} token(s): {shown}>"
    if isinstance(value, float):
        return format_number(value)

    rendered = _repr.repr(value)
    if len(rendered) > max_length:
        return rendered[:max_length] + "... (truncated)"
    return rendered


def _format_inputs(args: Sequence[Any], kwargs: Mapping[str, Any]) -> str:
    # first positional argument is the stage input; anything else is an option
    if not args and not kwargs:
        return "no input"
    parts = [_safe_repr(args[0])] if args else []
    extras = [_safe_repr(arg) for arg in args[1:]]
    extras.extend(f"{key}={_safe_repr(value)}" for key, value in kwargs.items())
    if extras:
        parts.append("with " + ", ".join(extras))
    return " ".join(parts)


def debug_log_call(logger: logging.Logger, *, name: Optional[str] = None) -> Callable[[F], F]:
    """Return a decorator tracing one pipeline stage at DEBUG level.

    The stage input and its output are logged in calculator notation (postfix
    text for token lists, plain numbers for results). Expression errors are
    logged with their kind only; any other exception is logged with traceback.
    Exceptions always propagate.
    """

    def decorator(func: F) -> F:
        if getattr(func, "_debug_logging_wrapped", False):
            return func

        stage = name or getattr(func, "__qualname__", getattr(func, "__name__", "<callable>"))

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("%s <- %s", stage, _format_inputs(args, kwargs))
            try:
                result = func(*args, **kwargs)
            except KalkulatorError as err:
                logger.debug("%s failed: %s (%s)", stage, err.kind, err)
                raise
            except Exception:
                if logger.isEnabledFor(logging.DEBUG):
                    logger.exception("Unexpected error in %s", stage)
                raise
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("%s -> %s", stage, _safe_repr(result))
            return result

        setattr(wrapper, "_debug_logging_wrapped", True)
        return cast(F, wrapper)

    return decorator
