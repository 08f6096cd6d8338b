"""Body mass index, barrel volumes, maxima of number triples and an XOR swap."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

_READ_ERROR = "Error while reading the numbers from file."


@dataclass(frozen=True)
class BodyMassIndex:
    """Body mass in kilograms and height in metres."""

    mass: float
    height: float

    def _check(self) -> None:
        if self.mass <= 0:
            raise ValueError("Body mass must be positive number")
        if self.height <= 0:
            raise ValueError("Body height must be positive number")

    def low_precision(self) -> float:
        """Return the classic index: mass divided by height squared."""
        self._check()
        return self.mass / self.height**2

    def high_precision(self) -> float:
        """Return the refined index: 1.3 * mass / height ** 2.5."""
        self._check()
        return 1.3 * (self.mass / self.height**2.5)


@dataclass(frozen=True)
class VerticalCylinder:
    """An upright barrel given by radius and height in metres."""

    radius: float
    height: float

    def volume(self) -> float:
        """Return the volume in cubic metres."""
        if self.radius <= 0 or self.height <= 0:
            raise ValueError("Barrel radius and height must be positive numbers")
        return math.pi * self.radius * self.radius * self.height


@dataclass(frozen=True)
class HorizontalCylinder:
    """A barrel lying on its side, filled up to ``filled_height`` metres."""

    radius: float
    length: float
    filled_height: float

    def volume(self) -> float:
        """Return the volume of the liquid in cubic metres."""
        if self.radius <= 0 or self.length <= 0 or self.filled_height <= 0:
            raise ValueError(
                "Barrel radius, length, and filled height must be positive numbers"
            )
        if self.filled_height > 2 * self.radius:
            raise ValueError("Barrel filled height cannot exceed its diameter")
        r, h = self.radius, self.filled_height
        radius_minus_height = r - h
        sector = math.acos(radius_minus_height / r) * r * r
        triangle = radius_minus_height * math.sqrt(2 * r * h - h * h)
        return (sector - triangle) * self.length


def _parse_numbers(numbers: str | Iterable[float]) -> list[float]:
    items = numbers.split() if isinstance(numbers, str) else list(numbers)
    try:
        return [float(item) for item in items]
    except (TypeError, ValueError):
        raise ValueError(_READ_ERROR) from None


def max_per_triple(numbers: str | Iterable[float]) -> list[float]:
    """Return the largest number of each consecutive group of three.

    ``numbers`` is whitespace-separated text or an iterable of numbers;
    an incomplete final group is an error.
    """
    values = _parse_numbers(numbers)
    if len(values) % 3:
        raise ValueError(_READ_ERROR)
    groups = zip(*[iter(values)] * 3)
    return [max(group) for group in groups]


def max_per_triple_file(path: str | Path) -> list[float]:
    """Read numbers from a text file and return the maximum of each triple."""
    return max_per_triple(Path(path).read_text())


def xor_swap(a: int, b: int) -> tuple[int, int]:
    """Exchange two integers with three XOR operations."""
    a ^= b
    b ^= a
    a ^= b
    return a, b