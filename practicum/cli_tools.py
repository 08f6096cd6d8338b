"""Circle measures, a command-line calculator and a line counter."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable

PI = 3.14
_LEADING_FLOAT = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def circle(radius: float) -> tuple[float, float]:
    """Return ``(perimeter, area)`` of a circle, using pi as 3.14."""
    if radius < 0:
        raise ValueError("Invalid input data!")
    return 2 * PI * radius, PI * radius * radius


def calculate(a: float, operation: str, b: float) -> float:
    """Apply ``+``, ``-``, ``x``/``*`` or ``/``, chosen by the first character."""
    op = operation[:1]
    if op == "+":
        return a + b
    if op == "-":
        return a - b
    if op in ("x", "*"):
        return a * b
    if op == "/":
        if b == 0:
            raise ZeroDivisionError(
                "Division by 0 is UNDEFINED mathemathical operation!"
            )
        return a / b
    raise ValueError("Invalid operation. Supported operations are +, -, x, /")


def count_matching_lines(lines: Iterable[str], target: str) -> int:
    """Count the lines equal to ``target``, ignoring a trailing newline."""
    return sum(1 for line in lines if line.removesuffix("\n") == target)


def _atof(text: str) -> float:
    match = _LEADING_FLOAT.match(text)
    return float(match.group()) if match else 0.0


def circle_main(argv: list[str] | None = None) -> int:
    """Print perimeter and area for each radius read from standard input."""
    argparse.ArgumentParser(description="Circle perimeter and area.").parse_args(argv)
    print("Enter circle radius (Ctrl+D to stop):")
    for line in sys.stdin:
        for token in line.split():
            try:
                radius = float(token)
            except ValueError:
                return 0
            try:
                perimeter, area = circle(radius)
            except ValueError as exc:
                print(f"Error: {exc}", file=sys.stderr)
            else:
                print(f"P = {perimeter:.2f}, S = {area:.2f}")
    return 0


def calculator_main(argv: list[str] | None = None) -> int:
    """Evaluate ``number1 operation number2`` given as three arguments."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 3:
        print("Usage: calculator [number1] [operation] [number2]", file=sys.stderr)
        return 1
    try:
        result = calculate(_atof(args[0]), args[1], _atof(args[2]))
    except (ValueError, ZeroDivisionError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"Result: {result:.2f}")
    return 0


def count_main(argv: list[str] | None = None) -> int:
    """Count lines of standard input equal to the single argument."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("Usage: count [string_to_count]", file=sys.stderr)
        return 1
    print("Enter 'Ctrl+D' if you want to stop the program.")
    print(f"Count = {count_matching_lines(sys.stdin, args[0])}")
    return 0