"""Infix to postfix conversion and evaluation of logical expressions."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

MAX_STACK_SIZE = 100

_PRECEDENCE = {"!": 3, "&": 2, "|": 1}
_DIGITS = frozenset("0123456789")
_OPERATORS = frozenset("!&|")
_BINARY = frozenset("&|")


def operator_precedence(op: str) -> int:
    """Return the precedence of ``!``, ``&`` or ``|``; higher binds tighter."""
    try:
        return _PRECEDENCE[op]
    except KeyError:
        raise ValueError(f"Unknown operator '{op}' found") from None


def infix_to_postfix(tokens: Iterable[str]) -> str:
    """Convert infix tokens to postfix order with the shunting-yard algorithm.

    Digits are operands; ``!``, ``&`` and ``|`` are operators; parentheses
    group. Any other token is skipped. Operators still waiting at the end,
    including an unmatched ``(``, are appended to the result.
    """
    operators: list[str] = []
    output: list[str] = []
    for token in tokens:
        if token in _DIGITS:
            output.append(token)
        elif token == "(":
            operators.append(token)
        elif token == ")":
            if not operators:
                raise ValueError("Parenthesis mismatch found.")
            while operators[-1] != "(":
                output.append(operators.pop())
                if not operators:
                    raise ValueError("Parenthesis mismatch found.")
            operators.pop()
        elif token in _OPERATORS:
            precedence = operator_precedence(token)
            while (
                operators
                and operators[-1] != "("
                and operator_precedence(operators[-1]) > precedence
            ):
                output.append(operators.pop())
            operators.append(token)
    output.extend(reversed(operators))
    return "".join(output)


def evaluate_postfix(tokens: Iterable[str]) -> int:
    """Evaluate a postfix logical expression over digit operands.

    ``!`` negates, ``&`` and ``|`` combine the two topmost values and yield
    0 or 1. The stack holds at most ``MAX_STACK_SIZE`` values.
    """
    stack: list[int] = []

    def push(value: int) -> None:
        if len(stack) >= MAX_STACK_SIZE:
            raise OverflowError("Exceed stack capacity.")
        stack.append(value)

    for token in tokens:
        if token in _DIGITS:
            push(int(token))
        elif token == "!":
            if not stack:
                raise ValueError("Missing operand for '!'.")
            push(int(not stack.pop()))
        elif token in _BINARY:
            if len(stack) < 2:
                raise ValueError(f"Missing operands for '{token}'.")
            right = stack.pop()
            left = stack.pop()
            result = (left and right) if token == "&" else (left or right)
            push(int(bool(result)))
        else:
            raise ValueError(f"Unknown token '{token}' found")

    if len(stack) != 1:
        raise ValueError("Postfix evaluation error")
    return stack[0]


def synthesis_by_one(inputs: Sequence[int]) -> str:
    """Build the parenthesised minterm for one row of input values.

    Variables are named ``a``, ``b``, ... in order; a zero input is negated
    with ``!``, and an ``&`` is written before every variable except the last.
    """
    values = list(inputs)
    last = len(values) - 1
    parts = ["("]
    for index, value in enumerate(values):
        if index != last:
            parts.append("&")
        if value == 0:
            parts.append("!")
        parts.append(chr(ord("a") + index))
    parts.append(")")
    return "".join(parts)