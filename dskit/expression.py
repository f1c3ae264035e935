"""Operator-precedence evaluation of single-digit arithmetic expressions ending in '#'."""

from __future__ import annotations

import argparse
import sys

OPERATORS = "+-*/()#"
TERMINATOR = "#"

_ROWS = {
    "+": ">><<<>>",
    "-": ">><<<>>",
    "*": ">>>><>>",
    "/": ">>>><>>",
    "(": "<<<<<= ",
    ")": ">>>> >>",
    "#": "<<<<< =",
}
_PRIORITY = {top: dict(zip(OPERATORS, row)) for top, row in _ROWS.items()}


def is_operator(ch: str) -> bool:
    """True when ``ch`` is one of the operator symbols."""
    return len(ch) == 1 and ch in OPERATORS


def precede(top: str, current: str) -> str:
    """Compare the stacked operator with the incoming one.

    Returns '<', '>', '=' or ' ' when the pair cannot follow each other.
    """
    if not is_operator(top) or not is_operator(current):
        raise ValueError(f"not an operator pair: {top!r}, {current!r}")
    return _PRIORITY[top][current]


def operate(a: float, theta: str, b: float) -> int:
    """Apply ``theta`` to ``a`` and ``b``; the result is truncated to an integer."""
    if theta == "+":
        result = a + b
    elif theta == "-":
        result = a - b
    elif theta == "*":
        result = a * b
    elif theta == "/":
        result = a / b
    else:
        raise ValueError(f"unknown operator {theta!r}")
    return int(result)


def evaluate(expression: str) -> int:
    """Evaluate an expression of single digits and operators terminated by '#'."""
    chars = iter(expression)

    def next_char() -> str:
        try:
            return next(chars)
        except StopIteration:
            raise ValueError(f"expression must end with {TERMINATOR!r}") from None

    operators = [TERMINATOR]
    operands: list[int] = []
    ch = next_char()
    while ch != TERMINATOR or operators[-1] != TERMINATOR:
        if not is_operator(ch):
            if ch not in "0123456789":
                raise ValueError(f"unexpected character {ch!r}")
            operands.append(int(ch))
            ch = next_char()
            continue
        relation = precede(operators[-1], ch)
        if relation == "<":
            operators.append(ch)
            ch = next_char()
        elif relation == "=":
            operators.pop()
            ch = next_char()
        elif relation == ">":
            theta = operators.pop()
            if len(operands) < 2:
                raise ValueError(f"missing operand for {theta!r}")
            b = operands.pop()
            a = operands.pop()
            operands.append(operate(a, theta, b))
        else:
            raise ValueError(f"{ch!r} cannot follow {operators[-1]!r}")
    return operands[-1] if operands else 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Evaluate an arithmetic expression terminated by '#'."
    )
    parser.add_argument("expression", nargs="?", help="e.g. 4+2*3-9/3#")
    args = parser.parse_args(argv)
    expression = args.expression
    if expression is None:
        expression = sys.stdin.readline().strip()
    try:
        value = evaluate(expression)
    except (ValueError, ZeroDivisionError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(f"Result: {value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())