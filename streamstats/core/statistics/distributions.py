"""streamstats.core.statistics.distributions

Distribution helpers (no SciPy).

Implemented:
- Standard normal PPF and CDF via stdlib ``statistics.NormalDist``

These are the only distribution functions the sample statistics consume:
the PPF generates expected normal order statistics for the Shapiro-Wilk
coefficients and the CDF turns the transformed W statistic into a p-value.
Both are pure and reentrant.
"""

from __future__ import annotations

import math
from statistics import NormalDist
from typing import Iterable

import numpy as np


_NORMAL = NormalDist()


def normal_ppf(p: float) -> float:
    """Standard normal quantile (inverse CDF).

    Args:
        p: probability in (0, 1)

    Returns:
        z such that P(Z <= z) = p
    """
    if not (0.0 < p < 1.0):
        raise ValueError("p must be in (0,1)")
    return float(_NORMAL.inv_cdf(p))


def normal_cdf(x: float) -> float:
    """Standard normal CDF.

    Defined for all reals, including +/-inf. NaN propagates.
    """
    if math.isnan(x):
        return float("nan")
    return float(_NORMAL.cdf(x))


def expected_order_statistics(n: int) -> np.ndarray:
    """Blom approximation of the expected standard normal order statistics.

    m_i = Phi^{-1}((i - 3/8) / (n + 1/4)),  i = 1..n

    Args:
        n: sample size (>0)

    Returns:
        ascending vector of length n
    """
    if n <= 0:
        raise ValueError("n must be positive")
    return np.array([normal_ppf(p) for p in _blom_positions(n)], dtype=float)


def _blom_positions(n: int) -> Iterable[float]:
    denom = float(n) + 0.25
    return (((i + 1) - 0.375) / denom for i in range(n))
