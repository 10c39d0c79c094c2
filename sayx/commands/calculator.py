"""The `calc` command: one binary operation per run.

The expression is read from the input stream on its own line, in the form
`<number> <operator> <number>` (spaces optional). Supported operators are
+ - * and /. Numbers are read the way strtod() reads them: decimal with an
optional exponent, hexadecimal floats such as 0x1.8p1, and inf, infinity
or nan in any case.
"""

from __future__ import annotations

import operator
import re
from typing import Callable

from sayx.errors import CommandError
from sayx.models import ShellContext
from sayx.panel import print_border, print_header, print_line

_HEX = r"0x(?:[0-9a-f]+(?:\.[0-9a-f]*)?|\.[0-9a-f]+)(?:p[-+]?\d+)?"
_DECIMAL = r"(?:\d+(?:\.\d*)?|\.\d+)(?:e[-+]?\d+)?"
_SPECIAL = r"inf(?:inity)?|nan"
_NUMBER = rf"[-+]?(?:{_HEX}|{_DECIMAL}|{_SPECIAL})"
_EXPRESSION_RE = re.compile(rf"^\s*({_NUMBER})\s*(\S)\s*({_NUMBER})\s*$", re.IGNORECASE)

OPERATORS: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


class InvalidOperator(ValueError):
    """The operator is not one of OPERATORS."""


def _to_float(token: str) -> float:
    if "x" in token.lower():
        return float.fromhex(token)
    return float(token)


def parse_expression(text: str) -> tuple[float, str, float]:
    """Split '5 + 3' into (5.0, '+', 3.0).

    Raises:
        ValueError: If the text is not number, operator, number.
    """
    m = _EXPRESSION_RE.match(text)
    if not m:
        raise ValueError(f"not an expression: {text!r}")
    return _to_float(m.group(1)), m.group(2), _to_float(m.group(3))


def evaluate(left: float, op: str, right: float) -> float:
    """Apply a single operator.

    Raises:
        InvalidOperator: If `op` is unknown.
        ZeroDivisionError: On division by zero.
    """
    fn = OPERATORS.get(op)
    if fn is None:
        raise InvalidOperator(op)
    return fn(left, right)


def calculate(text: str) -> float:
    """Parse and evaluate one expression line."""
    left, op, right = parse_expression(text)
    return evaluate(left, op, right)


def calculator(ctx: ShellContext, argument: str = "") -> None:
    print_header(ctx.console, "Calculator")
    print_line(ctx.console, "Enter expression (e.g., 5 + 3):")

    # End-of-input leaves an empty string, which does not parse
    try:
        expression = ctx.stdin.readline()
    except (OSError, UnicodeDecodeError) as e:
        raise CommandError(f"Error reading input: {e}") from e
    try:
        result = calculate(expression)
    except InvalidOperator as e:
        raise CommandError("Error: Invalid operator.") from e
    except ZeroDivisionError as e:
        raise CommandError("Error: Division by zero.") from e
    except ValueError as e:
        raise CommandError("Error: Invalid input.") from e

    print_line(ctx.console, f"Result: {result:.2f}")
    print_border(ctx.console)
