"""Arithmetic on decimal digit sequences, most significant digit first."""

from __future__ import annotations

from itertools import zip_longest
from typing import Sequence

from bigcalc.digits import Comparison, compare, strip_leading_zeros

_SUBTRACT_GUARD_MESSAGE = "subtrahend is larger than minuend"


def add(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Add two digit sequences; the result is as long as the longer operand plus any carry."""
    result = []
    carry = 0
    for a, b in zip_longest(reversed(first), reversed(second), fillvalue=0):
        carry, digit = divmod(a + b + carry, 10)
        result.append(digit)
    if carry:
        result.append(carry)
    result.reverse()
    return result


def subtract(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Subtract ``second`` from ``first``, which must not be the smaller value."""
    result = []
    borrow = 0
    for a, b in zip_longest(reversed(first), reversed(second), fillvalue=0):
        diff = a - b - borrow
        borrow = 1 if diff < 0 else 0
        result.append(diff + 10 * borrow)
    if borrow:
        raise ValueError(_SUBTRACT_GUARD_MESSAGE)
    result.reverse()
    return strip_leading_zeros(result)


def multiply(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Multiply two digit sequences by summing shifted partial products."""
    if not first or not second or list(first) == [0] or list(second) == [0]:
        return [0]
    total: list[int] = []
    for shift, factor in enumerate(reversed(second)):
        partial = []
        carry = 0
        for digit in reversed(first):
            carry, low = divmod(digit * factor + carry, 10)
            partial.append(low)
        if carry:
            partial.append(carry)
        partial.reverse()
        partial.extend([0] * shift)
        total = add(total, partial)
    return strip_leading_zeros(total)


def divide(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Integer quotient by repeated subtraction.

    A divisor of exactly ``1`` returns the dividend unchanged. Operand sizes
    are compared by length, so leading zeros take part in the comparison.
    """
    if list(second) == [1]:
        return list(first)
    order = compare(first, second)
    if order is Comparison.EQUAL:
        return [1]
    if order is Comparison.LESS:
        return [0]
    if not any(second):
        raise ZeroDivisionError("division by zero")
    remainder = list(first)
    count = 0
    while compare(remainder, second) is Comparison.GREATER:
        remainder = subtract(remainder, second)
        count += 1
    if compare(remainder, second) is Comparison.EQUAL:
        count += 1
    return [int(ch) for ch in str(count)]