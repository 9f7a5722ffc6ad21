"""Command-line front end: ``bigcalc <number> <operator> <number>``."""

from __future__ import annotations

import sys
from typing import Sequence

from bigcalc.arithmetic import add, divide, multiply, subtract
from bigcalc.digits import (
    Comparison,
    ValidationError,
    compare,
    format_digits,
    order_operands,
    parse_digits,
    validate_arguments,
)

EXIT_FAILURE = 255


def run(argv: Sequence[str]) -> str:
    """Evaluate an ``operand operator operand`` list and return the text to print."""
    first_text, operator, second_text = validate_arguments(argv)
    first = parse_digits(first_text)
    second = parse_digits(second_text)

    if operator == "+":
        return f"Addition Result: {format_digits(add(first, second))}\n"
    if operator == "-":
        larger, smaller, negative = order_operands(first, second)
        sign = "-" if negative else ""
        return f"Subtraction result: {sign}{format_digits(subtract(larger, smaller))}\n"
    if operator == "x":
        return f"Multiplication result:{format_digits(multiply(first, second))}\n"

    quotient = format_digits(divide(first, second))
    if second != [1] and compare(first, second) is Comparison.GREATER:
        return f"Division result :{quotient}\n"
    return f"{quotient}\n" * 2


def main(argv: Sequence[str] | None = None) -> int:
    """Run the calculator on ``argv`` (default: the process arguments) and return an exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        output = run(args)
    except ValidationError:
        print("ERROR", end="")
        return EXIT_FAILURE
    except (ZeroDivisionError, ValueError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_FAILURE
    print(output, end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())