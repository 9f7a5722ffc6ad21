"""Digit sequences: parsing, validation, comparison and formatting."""

from __future__ import annotations

from enum import Enum
from typing import Sequence

OPERATORS = frozenset("+-x/")
_DIGITS = frozenset("0123456789")


class ValidationError(ValueError):
    """Raised when command-line operands or operators are malformed."""


class Comparison(Enum):
    """Outcome of comparing two digit sequences."""

    GREATER = "greater"
    LESS = "less"
    EQUAL = "equal"


def parse_digits(text: str) -> list[int]:
    """Turn a string of ASCII decimal digits into a list of digits, most significant first."""
    if not set(text) <= _DIGITS:
        raise ValidationError(f"not a decimal number: {text!r}")
    return [int(ch) for ch in text]


def validate_arguments(argv: Sequence[str]) -> tuple[str, str, str]:
    """Check an ``operand operator operand`` argument list and return it as a tuple."""
    if len(argv) != 3:
        raise ValidationError("expected: <operand> <operator> <operand>")
    first, operator, second = argv
    for operand in (first, second):
        if not set(operand) <= _DIGITS:
            raise ValidationError(f"not a decimal number: {operand!r}")
    if len(operator) != 1 or operator not in OPERATORS:
        raise ValidationError(f"unknown operator: {operator!r}")
    return first, operator, second


def compare(first: Sequence[int], second: Sequence[int]) -> Comparison:
    """Compare two digit sequences; a longer sequence is always the greater one."""
    if len(first) != len(second):
        return Comparison.GREATER if len(first) > len(second) else Comparison.LESS
    for a, b in zip(first, second):
        if a != b:
            return Comparison.GREATER if a > b else Comparison.LESS
    return Comparison.EQUAL


def order_operands(
    first: Sequence[int], second: Sequence[int]
) -> tuple[list[int], list[int], bool]:
    """Return ``(larger, smaller, negative)`` where ``negative`` tells if the operands were swapped."""
    if compare(first, second) is Comparison.LESS:
        return list(second), list(first), True
    return list(first), list(second), False


def strip_leading_zeros(digits: Sequence[int]) -> list[int]:
    """Drop leading zeros, keeping at least one digit of a non-empty sequence."""
    result = list(digits)
    start = 0
    while start < len(result) - 1 and result[start] == 0:
        start += 1
    return result[start:]


def format_digits(digits: Sequence[int]) -> str:
    """Render a digit sequence as a string."""
    return "".join(str(d) for d in digits)