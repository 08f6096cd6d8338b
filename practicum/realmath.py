"""Exercises on real numbers: means, geometry, prices and ratios."""

from __future__ import annotations

import math
from collections.abc import Iterable

VAT_RATE = 0.20
PERCENT = 100
TRIANGLE_AREA_FACTOR = 0.5
DAYS_IN_WEEK = 7
GRADE_COUNT = 4
MIN_GRADE = 2.0
MAX_GRADE = 6.0


def _require_non_negative(*values: float, message: str) -> None:
    if any(v < 0 for v in values):
        raise ValueError(message)


def average_of_three(a: float, b: float, c: float) -> float:
    """Return the arithmetic mean of three numbers."""
    return (a + b + c) / 3.0


def rectangle_area_perimeter(width: float, height: float) -> tuple[float, float]:
    """Return ``(area, perimeter)`` of a rectangle."""
    return width * height, 2 * (width + height)


def cube_volume(edge: float) -> float:
    """Return the volume of a cube with the given edge length."""
    return edge * edge * edge


def mean(values: Iterable[float]) -> float:
    """Return the arithmetic mean of a non-empty collection of numbers."""
    items = list(values)
    if not items:
        raise ValueError("The number must be positive.")
    return math.fsum(items) / len(items)


def deviations(a: float, b: float, c: float) -> tuple[float, tuple[float, float, float]]:
    """Return the mean of three numbers and each number's deviation from it."""
    average = average_of_three(a, b, c)
    return average, (a - average, b - average, c - average)


def square_root(x: float) -> float:
    """Return the square root of a non-negative number."""
    if x < 0:
        raise ValueError("The square root is not defined for negative numbers.")
    return math.sqrt(x)


def geometric_mean(a: float, b: float) -> float:
    """Return the geometric mean of two positive numbers."""
    if a <= 0 or b <= 0:
        raise ValueError("Please, enter only positive numbers.")
    return math.sqrt(a * b)


def reciprocal(x: float) -> float:
    """Return ``1 / x``."""
    if x == 0:
        raise ZeroDivisionError("The reciprocal is not defined for zero.")
    return 1.0 / x


def range_of_three(a: float, b: float, c: float) -> float:
    """Return the difference between the largest and smallest of three numbers."""
    return max(a, b, c) - min(a, b, c)


def weekly_average(temperatures: Iterable[float]) -> float:
    """Return the mean of exactly seven daily temperatures."""
    readings = list(temperatures)
    if len(readings) != DAYS_IN_WEEK:
        raise ValueError(f"Expected temperatures for {DAYS_IN_WEEK} days, got {len(readings)}.")
    return math.fsum(readings) / DAYS_IN_WEEK


def price_with_vat(price: float) -> float:
    """Return the price with VAT added."""
    _require_non_negative(price, message="The input must be a positive number.")
    return price + price * VAT_RATE


def triangle_area(base: float, height: float) -> float:
    """Return the area of a triangle from its base and height."""
    _require_non_negative(base, height, message="Both input values must be positive numbers.")
    return TRIANGLE_AREA_FACTOR * base * height


def percentage_of(a: float, b: float) -> float:
    """Return what percentage ``a`` is of ``b``."""
    _require_non_negative(a, b, message="Only positive values for A and B are allowed.")
    if b == 0:
        raise ZeroDivisionError("Division by zero is not possible.")
    return (a / b) * PERCENT


def change_due(price: float, paid: float) -> float:
    """Return the change owed when ``paid`` covers ``price``."""
    _require_non_negative(price, paid, message="Both input values must be positive numbers.")
    if paid < price:
        raise ValueError("The amount paid is less than the price of the product.")
    return paid - price


def grades_geometric_mean(grades: Iterable[float]) -> float:
    """Return the square root of the product of four grades in [2.0, 6.0]."""
    values = list(grades)
    if len(values) != GRADE_COUNT:
        raise ValueError(f"Expected {GRADE_COUNT} grades, got {len(values)}.")
    if not all(MIN_GRADE <= g <= MAX_GRADE for g in values):
        raise ValueError("All input values must be in range [2.0, 6.0].")
    return math.sqrt(math.prod(values))


def slope(x1: float, y1: float, x2: float, y2: float) -> float:
    """Return the slope of the line through two points."""
    if x2 - x1 == 0:
        raise ValueError("Straight is vertical, slope is undefined.")
    return (y2 - y1) / (x2 - x1)


def can_form_triangle(a: float, b: float, c: float) -> bool:
    """Return True when three positive lengths satisfy the triangle inequality."""
    if not (a > 0 and b > 0 and c > 0):
        raise ValueError("All input values must be positive numbers and other than 0")
    return a + b > c and a + c > b and b + c > a


def difference_of_squares(a: float, b: float) -> float:
    """Return ``(a + b) * (a - b)``."""
    return (a + b) * (a - b)