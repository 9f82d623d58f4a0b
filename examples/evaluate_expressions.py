"""Example pipeline: convert expressions to postfix and evaluate them."""

from kalkulator import Expression, KalkulatorError, format_number

EXPRESSIONS = [
    "3+4*2",
    "3+4^2",
    "5!/(2+3)",
    "(2*3)! + 2! + 2^3",
    "3+4*2/(1-5)+2*3",
    "2^3^2",
    "4/0",
    "(2+3",
]


def main() -> None:
    for text in EXPRESSIONS:
        expr = Expression(text)
        print(text)
        try:
            expr.infix_to_postfix()
            print(f"  postfix: {expr.show_postfix()}")
            expr.compute_expression()
            print(f"  result:  {format_number(expr.get_result())}")
        except KalkulatorError as err:
            print(f"  error:   {err.kind}: {err}")


if __name__ == "__main__":
    main()
