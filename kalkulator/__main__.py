import argparse
import logging
import sys
from typing import Optional, Sequence

from kalkulator import (
    EvaluationOptions,
    Expression,
    KalkulatorError,
    format_error,
    format_number,
    get_operator_reference,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kalkulator",
        description="kalkulator: a command line calculator",
    )
    parser.add_argument(
        "-e",
        "--expr",
        help="The mathematical expression to process",
    )
    parser.add_argument(
        "-p",
        "--postfix",
        dest="to_postfix",
        action="store_true",
        help="Only convert the expression to postfix notation, without evaluating it",
    )
    parser.add_argument(
        "--list-operators",
        action="store_true",
        help="List the supported operators and exit",
    )
    parser.add_argument(
        "--non-strict",
        action="store_true",
        help="Return inf/nan instead of failing on overflow or undefined results",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    if args.list_operators:
        print(get_operator_reference())
        return

    if args.expr is None:
        parser.error("the following arguments are required: -e/--expr")

    text = args.expr.strip()
    expr = Expression(text, EvaluationOptions(strict=not args.non_strict))
    logger.info("Processing expression %r", text)

    try:
        expr.infix_to_postfix()
        if args.to_postfix:
            print(f"Postfix: [{expr.show_postfix()}]")
            return
        expr.compute_expression()
    except KalkulatorError as err:
        logger.debug("Expression %r failed with %s", text, err.kind)
        print(f"Error processing expression: {format_error(err, text)}", file=sys.stderr)
        raise SystemExit(1)

    print(f"Result = {format_number(expr.get_result())}")


if __name__ == "__main__":
    main(sys.argv[1:])
