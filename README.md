# bigcalc

A small command-line calculator for non-negative integers of any length.
Each operand is handled as a list of decimal digits. Addition,
subtraction, multiplication and division are done digit by digit, so
machine word sizes do not limit how large the numbers can be.

## Installation

```
pip install .
```

## Usage

```
bigcalc OPERAND OPERATOR OPERAND
```

You can also run `python -m bigcalc.cli OPERAND OPERATOR OPERAND`.

Both operands may contain decimal digits only. The operator is one of
the following:

| Operator | Meaning                      |
|----------|------------------------------|
| `+`      | addition                     |
| `-`      | subtraction                  |
| `x`      | multiplication               |
| `/`      | integer division (quotient)  |

Use `x` for multiplication, because most shells expand `*`.

Examples:

```
$ bigcalc 99999999999999999999 + 1
Addition Result: 100000000000000000000

$ bigcalc 12 - 345
Subtraction result: -333

$ bigcalc 123456789 x 987654321
Multiplication result:121932631112635269

$ bigcalc 100 / 7
Division result :14
```

Notes on division:

- The quotient is found by repeated subtraction, so it can be slow when
  the quotient is very large.
- Sizes are compared by digit count first, so leading zeros count.
- The `Division result :` line is printed only when the dividend is
  greater than the divisor and the divisor is not exactly `1`. In the
  other cases the result is printed on its own, twice:
  - if the divisor is `1`, the result is the dividend;
  - if the operands are equal, the result is `1`;
  - if the dividend is smaller, the result is `0`.
- A dividend larger than a divisor made of zeros only is a division by
  zero. The command then prints `ERROR: division by zero` to standard
  error.

If the arguments are invalid, the command prints `ERROR` with no trailing
newline. Invalid arguments are:

- the wrong number of arguments;
- an operand that is not made of digits;
- an unknown operator.

On any error the command exits with status 255. Otherwise it exits with
status 0.

## Library use

The arithmetic is also available from Python. It works on lists of
digits, with the most significant digit first:

```python
from bigcalc.digits import parse_digits, format_digits
from bigcalc.arithmetic import add, subtract, multiply, divide

a = parse_digits("123456789012345678901234567890")
b = parse_digits("987654321")

print(format_digits(add(a, b)))
print(format_digits(multiply(a, b)))
print(format_digits(subtract(a, b)))
print(format_digits(divide(a, b)))
```

### `bigcalc.digits`

- `parse_digits(text)` turns a digit string into a list of digits. It
  raises `ValidationError`, a subclass of `ValueError`, on any other
  character.
- `validate_arguments(argv)` checks a three-item `operand operator
  operand` list and returns it as a tuple.
- `compare(first, second)` returns `Comparison.GREATER`,
  `Comparison.LESS` or `Comparison.EQUAL`. A longer list always counts as
  greater.
- `order_operands(first, second)` returns `(larger, smaller, negative)`.
- `strip_leading_zeros(digits)` removes leading zeros but keeps at least
  one digit.
- `format_digits(digits)` joins digits back into a string.

### `bigcalc.arithmetic`

- `add(first, second)` adds two digit lists.
- `subtract(first, second)` subtracts `second` from `first`. It raises
  `ValueError` if `second` is the larger value.
- `multiply(first, second)` multiplies two digit lists.
- `divide(first, second)` returns the integer quotient, following the
  rules in the notes on division above. It raises `ZeroDivisionError` in
  the division-by-zero case described there.

### `bigcalc.cli`

- `run(argv)` takes the three command-line arguments and returns the text
  the command would print.
- `main(argv=None)` prints that text and returns the exit status.

## Limitations

- Operands must be non-negative whole numbers. There is no support for
  signs, decimal points or exponents on input.
- Division gives only the quotient, never the remainder.
- Each run evaluates exactly one operation. There are no expressions, no
  chained operations and no interactive mode.

## Running the tests

```
pip install ".[test]"
pytest
```