"""Small integer exercises: arithmetic, digits and divisibility."""

from __future__ import annotations

import math

_UINT64_MODULUS = 2**64


def _truncated(a: int, b: int) -> tuple[int, int]:
    """Quotient rounded toward zero and the remainder that goes with it."""
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - quotient * b


def add(a: int, b: int) -> int:
    """Return the sum of two numbers."""
    return a + b


def is_even(n: int) -> bool:
    """Return True when ``n`` is even."""
    return n % 2 == 0


def reverse_digits(n: int) -> str:
    """Return the digits of ``n`` from last to first.

    Each step yields the remainder of division by ten, rounded toward zero,
    so a negative number gives negative digits and zero gives no digits.
    """
    parts = []
    while n != 0:
        n, digit = _truncated(n, 10)
        parts.append(str(digit))
    return "".join(parts)


def factorial(n: int) -> int:
    """Return ``n!`` kept within an unsigned 64-bit counter."""
    if n < 0:
        raise ValueError("The factorial is NOT defined for negative numbers.")
    return math.factorial(n) % _UINT64_MODULUS


def swap(a, b):
    """Return the two values in exchanged order."""
    return b, a


def divides_exactly(a: int, b: int) -> bool:
    """Return True when ``b`` divides ``a`` without remainder."""
    if b == 0:
        raise ZeroDivisionError("Division by zero is not possible.")
    return a % b == 0


def difference(a, b):
    """Return ``a - b``."""
    return a - b


def largest_of_three(a, b, c):
    """Return the largest of three values, preferring the earliest on ties."""
    return max(a, b, c)


def digit_sum(n: int) -> int:
    """Return the sum of the decimal digits of ``|n|``."""
    return sum(int(ch) for ch in str(abs(n)))


def product_of_three(a, b, c):
    """Return the product of three numbers."""
    return a * b * c


def classify_sign(n) -> str:
    """Return ``"positive"``, ``"negative"`` or ``"zero"``."""
    if n > 0:
        return "positive"
    if n < 0:
        return "negative"
    return "zero"


def square(n):
    """Return ``n`` squared."""
    return n * n


def sum_to(n: int) -> int:
    """Return the sum of the whole numbers from 1 to ``n`` (0 when ``n < 1``)."""
    return sum(range(1, n + 1))


def divisibility_3_5(n: int) -> str:
    """Describe whether ``n`` is divisible by 3, by 5, by both or by neither."""
    by_three = n % 3 == 0
    by_five = n % 5 == 0
    if by_three and by_five:
        return "This number is divisible by both 3 and 5."
    if by_three:
        return "The number is divisible only by 3."
    if by_five:
        return "The number is divisible only by 5."
    return "The number is neither divisible by 3 nor by 5."


def truncated_divmod(a: int, b: int) -> tuple[int, int]:
    """Return quotient and remainder with the quotient rounded toward zero."""
    if b == 0:
        raise ZeroDivisionError("Division by zero is not possible.")
    return _truncated(a, b)


def reversed_reciprocal(n: int) -> str:
    """Return ``"0."`` followed by the digits of ``n`` reversed as a number."""
    if n == 0:
        raise ValueError("The following operation is not defined for zero.")
    reversed_number = 0
    remaining = n
    while remaining != 0:
        remaining, digit = _truncated(remaining, 10)
        reversed_number = reversed_number * 10 + digit
    return f"0.{reversed_number}"


def divisors_among(n: int) -> tuple[int, ...]:
    """Return which of 2, 3 and 5 divide ``n``, in ascending order."""
    return tuple(d for d in (2, 3, 5) if n % d == 0)