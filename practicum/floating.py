"""Compensated versus plain summation and floating-point comparison rules."""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass, field

_EPSILON = sys.float_info.epsilon
_STEPS = 10
_RANGE_LIMIT = 10**12


def kahan_sum(start: float, to_add: float = 0.1) -> float:
    """Add ``to_add`` ten times to ``start`` with Kahan compensation."""
    total = start
    error = 0.0
    for _ in range(_STEPS):
        value = to_add - error
        new_total = total + value
        error = (new_total - total) - value
        total = new_total
    return total


def plain_sum(start: float, to_add: float = 0.1) -> float:
    """Add ``to_add`` ten times to ``start`` with ordinary addition."""
    total = start
    for _ in range(_STEPS):
        total += to_add
    return total


def equal_exact(f1: float, f2: float) -> bool:
    """Return True when the two numbers are identical."""
    return f1 == f2


def equal_static(f1: float, f2: float) -> bool:
    """Return True when the numbers differ by at most machine epsilon."""
    return abs(f1 - f2) <= _EPSILON


def equal_dynamic(f1: float, f2: float) -> bool:
    """Return True when the difference is within epsilon scaled by the larger value."""
    return abs(f1 - f2) <= _EPSILON * max(f1, f2)


_CHECKS = {"exact": equal_exact, "static": equal_static, "dynamic": equal_dynamic}


@dataclass(frozen=True)
class ComparisonReport:
    """Both sums of one start value and how each compares with the expected total."""

    value: float
    expected: float
    kahan: float
    plain: float
    kahan_checks: dict[str, bool] = field(default_factory=dict)
    plain_checks: dict[str, bool] = field(default_factory=dict)


def compare_sums(value: float) -> ComparisonReport:
    """Sum 0.1 ten times onto ``value`` both ways and compare with ``value + 1``."""
    expected = value + 1.0
    kahan = kahan_sum(value)
    plain = plain_sum(value)
    return ComparisonReport(
        value=value,
        expected=expected,
        kahan=kahan,
        plain=plain,
        kahan_checks={name: check(expected, kahan) for name, check in _CHECKS.items()},
        plain_checks={name: check(expected, plain) for name, check in _CHECKS.items()},
    )


def _fixed(x: float) -> str:
    return f"{x:.64f}"


def _render(report: ComparisonReport, number: int) -> str:
    labels = {
        "exact": "Exact compare test:   ",
        "static": "Static compare test:  ",
        "dynamic": "Dynamic compare test: ",
    }
    lines = [
        f"============= Run comparison test #{number} =============",
        f"Expected number:  {_fixed(report.expected)}",
        f"Kahan sum number: {_fixed(report.kahan)}",
        f"Plain sum number: {_fixed(report.plain)}",
    ]
    for title, total, checks in (
        ("KAHAN", report.kahan, report.kahan_checks),
        ("PLAIN", report.plain, report.plain_checks),
    ):
        lines.append(f">>> {title} SUM TESTS:")
        for name, label in labels.items():
            if checks[name]:
                lines.append(f"{label}[PASSED]")
            else:
                diff = abs(report.expected - total)
                lines.append(f"{label}[FAILED WITH DIFF] {_fixed(diff)}")
    return "\n".join(lines) + "\n\n"


def main(argv: list[str] | None = None) -> int:
    """Compare both summations for random values in doubling ranges."""
    parser = argparse.ArgumentParser(description="Compare Kahan and plain summation.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    start = 0
    bound = 1
    number = 1
    while bound < _RANGE_LIMIT:
        value = rng.randint(start, bound) + rng.random()
        sys.stdout.write(_render(compare_sums(value), number))
        number += 1
        start = bound
        bound *= 2
    return 0