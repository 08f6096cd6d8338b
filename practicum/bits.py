"""Number bases, IEEE 754 single precision layout and bitwise operations."""

from __future__ import annotations

import enum
import itertools
import struct

WORD_BITS = 32
_WORD_MASK = (1 << WORD_BITS) - 1
_INT32_MIN = -(1 << (WORD_BITS - 1))
_INT32_MAX = (1 << (WORD_BITS - 1)) - 1
_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_MANTISSA_BITS = 23
_EXPONENT_BITS = 8


class BitOp(enum.Enum):
    """Operations offered by the bitwise calculator menu."""

    AND = 1
    OR = 2
    XOR = 3
    LEFT_SHIFT = 4
    RIGHT_SHIFT = 5


def _to_int32(value: int) -> int:
    value &= _WORD_MASK
    return value - (1 << WORD_BITS) if value > _INT32_MAX else value


def to_binary(n: int) -> str:
    """Return the binary digits of ``n``; zero and negative numbers give ``"0"``."""
    return format(n, "b") if n > 0 else "0"


def to_octal(n: int) -> str:
    """Return ``n`` in octal, negative values shown as unsigned 32-bit words."""
    return format(n & _WORD_MASK if n < 0 else n, "o")


def to_hex(n: int) -> str:
    """Return ``n`` in upper-case hexadecimal, negative values as 32-bit words."""
    return format(n & _WORD_MASK if n < 0 else n, "X")


def from_base(text: str, base: int) -> int:
    """Parse the leading number of ``text`` in ``base`` as a 32-bit signed int.

    Leading whitespace and a sign are accepted, a ``0x`` prefix in base 16,
    and parsing stops at the first character that is not a digit.
    """
    if not 2 <= base <= len(_DIGITS):
        raise ValueError(f"Unsupported base: {base}")
    valid = _DIGITS[:base]
    rest = text.lstrip()
    sign = 1
    if rest[:1] in ("+", "-"):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    if base == 16 and rest[:2].lower() == "0x" and rest[2:3].lower() in valid and rest[2:3]:
        rest = rest[2:]
    digits = "".join(itertools.takewhile(lambda ch: ch.lower() in valid, rest))
    if not digits:
        raise ValueError(f"No base-{base} number in {text!r}")
    value = sign * int(digits, base)
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise OverflowError(f"{text!r} is out of range for a 32-bit integer")
    return value


def ieee754_parts(x: float) -> tuple[int, str, str]:
    """Return sign bit, 8 exponent bits and 23 mantissa bits of ``x`` as a float32."""
    (bits,) = struct.unpack(">I", struct.pack(">f", x))
    sign = (bits >> (WORD_BITS - 1)) & 0x1
    exponent = (bits >> _MANTISSA_BITS) & 0xFF
    mantissa = bits & 0x7FFFFF
    return (
        sign,
        format(exponent, f"0{_EXPONENT_BITS}b"),
        format(mantissa, f"0{_MANTISSA_BITS}b"),
    )


def _parse_bits(binary: str) -> int:
    if len(binary) > WORD_BITS:
        raise ValueError(f"At most {WORD_BITS} bits are supported")
    if any(ch not in "01" for ch in binary):
        raise ValueError(f"Not a binary string: {binary!r}")
    return int(binary, 2) if binary else 0


def _format_bits(value: int, length: int) -> str:
    return format(value & _WORD_MASK, f"0{WORD_BITS}b")[WORD_BITS - length:] if length else ""


def invert_bits(binary: str) -> str:
    """Return the bitwise NOT of a binary string, keeping its length."""
    return _format_bits(~_parse_bits(binary), len(binary))


def bitwise_strings(first: str, second: str) -> dict[str, str]:
    """Combine two binary strings, zero-padded to equal length.

    Returns the ``"AND"``, ``"OR"`` and ``"XOR"`` of both and the ``"NOT"``
    of the first, each as a binary string of the common length.
    """
    length = max(len(first), len(second))
    first = first.rjust(length, "0")
    second = second.rjust(length, "0")
    a = _parse_bits(first)
    b = _parse_bits(second)
    return {
        "AND": _format_bits(a & b, length),
        "OR": _format_bits(a | b, length),
        "XOR": _format_bits(a ^ b, length),
        "NOT": invert_bits(first),
    }


def apply_bit_op(op: BitOp | int, a: int, b: int) -> int:
    """Apply a bitwise operation to 32-bit ints; for shifts ``b`` is the count."""
    try:
        operation = BitOp(op)
    except ValueError:
        raise ValueError("Invalid operation!") from None
    if operation is BitOp.AND:
        return _to_int32(a & b)
    if operation is BitOp.OR:
        return _to_int32(a | b)
    if operation is BitOp.XOR:
        return _to_int32(a ^ b)
    if b < 0:
        raise ValueError("Shift count must not be negative.")
    if operation is BitOp.LEFT_SHIFT:
        return _to_int32(a << b)
    return _to_int32(a) >> b


def and_or_not(a: bool, b: bool, c: bool) -> bool:
    """Return ``(A AND B) OR NOT C``."""
    return bool((a and b) or not c)


def _bit_mask(position: int) -> int:
    if position < 1:
        raise ValueError("Bit positions start at 1.")
    return 1 << (position - 1)


def set_bit(number: int, position: int) -> int:
    """Return ``number`` with the bit at 1-based ``position`` set to 1."""
    return number | _bit_mask(position)


def clear_bit(number: int, position: int) -> int:
    """Return ``number`` with the bit at 1-based ``position`` cleared to 0."""
    return number & ~_bit_mask(position)