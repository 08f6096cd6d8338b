"""Radix output, logical XOR and a three-input logic function."""

from __future__ import annotations

_WORD_BITS = 32
_WORD_MASK = (1 << _WORD_BITS) - 1


def radix_strings(n: int) -> dict[str, str]:
    """Return ``n`` as a 32-bit binary word, octal and lower-case hexadecimal.

    Negative numbers are shown as their unsigned 32-bit two's complement.
    """
    word = n & _WORD_MASK
    return {
        "BIN": format(word, f"0{_WORD_BITS}b"),
        "OCT": format(word, "o"),
        "HEX": format(word, "x"),
    }


def logical_xor(a: int, b: int) -> int:
    """Return 1 when exactly one of ``a`` and ``b`` is non-zero, else 0."""
    return int(bool(a) != bool(b))


def xor_pairs(text: str) -> list[tuple[int, int, int]]:
    """Read whitespace-separated integer pairs and XOR each pair.

    Returns ``(a, b, xor(a, b))`` for every pair in order.
    """
    try:
        values = [int(token) for token in text.split()]
    except ValueError:
        raise ValueError("Error while reading the numbers from file.") from None
    if len(values) % 2:
        raise ValueError("Error while reading the numbers from file.")
    pairs = zip(values[::2], values[1::2])
    return [(a, b, logical_xor(a, b)) for a, b in pairs]


def function_by_ones(a: int, b: int, c: int) -> int:
    """Evaluate F(a, b, c) written as a sum of its true minterms."""
    return int(
        (not a and not b and not c)
        or (not a and b and not c)
        or (not a and b and c)
        or (a and b and c)
    )


def function_by_zeros(a: int, b: int, c: int) -> int:
    """Evaluate F(a, b, c) as the negation of its false minterms."""
    return int(
        not (
            (not a and not b and c)
            or (a and not b and not c)
            or (a and not b and c)
            or (a and b and not c)
        )
    )


def function_minimized(a: int, b: int, c: int) -> int:
    """Evaluate the minimised form of F(a, b, c)."""
    return int((not a and not c) or (not a and b and c) or (a and b and c))