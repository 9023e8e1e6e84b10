"""streamstats.core.numeric

IEEE-style float helpers.

Python raises on ``x / 0.0``, ``math.log(0.0)`` and ``math.sqrt(-1.0)``.
Statistics in this package report numeric degeneracy as NaN/Inf instead, so
every division, logarithm and root that can see a degenerate argument goes
through one of these helpers.
"""

from __future__ import annotations

import math

NAN = float("nan")

# Smallest positive (subnormal) double.
SMALLEST_POSITIVE = math.ulp(0.0)


def div(num: float, den: float) -> float:
    """num / den with IEEE semantics for a zero denominator."""
    if den == 0:
        if num == 0 or math.isnan(num):
            return NAN
        return math.copysign(math.inf, num) * math.copysign(1.0, den)
    return num / den


def log(x: float) -> float:
    """Natural log; -inf at 0 and NaN for negative or NaN input."""
    if x > 0:
        return math.log(x)
    if x == 0:
        return -math.inf
    return NAN


def sqrt(x: float) -> float:
    """Square root; NaN for negative or NaN input."""
    if x >= 0:
        return math.sqrt(x)
    return NAN


def root(x: float, k: int) -> float:
    """Real k-th root ``x ** (1/k)``; NaN when undefined."""
    if k <= 0 or math.isnan(x):
        return NAN
    if x < 0:
        # Only the trivial root of a negative base is real here.
        return x if k == 1 else NAN
    return math.pow(x, 1.0 / k)


def xlogx(x: float) -> float:
    """x * ln(x); NaN for x <= 0 (0 * -inf)."""
    if x > 0:
        return x * math.log(x)
    return NAN
