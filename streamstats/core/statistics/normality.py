"""streamstats.core.statistics.normality

Shapiro-Wilk test for normality (Royston's algorithm AS R94).

Statistic:
    W = (sum_i a_i x_(i))^2 / sum_i (x_i - mean)^2

where x_(i) are the sorted values and a_i are coefficients built from the
expected normal order statistics m_i:
    m_i = Phi^{-1}((i - 3/8) / (n + 1/4))

Royston replaces the one or two outermost coefficients with polynomial
approximations in u = 1/sqrt(n) and rescales the interior ones so that
sum a_i^2 = 1.

Significance:
    n == 3    exact: p = (6/pi) (asin(sqrt(W)) - asin(sqrt(3/4)))
    4..11     y = -ln(gamma - ln(1 - W)), normal with polynomial m(n), s(n)
    >= 12     y = ln(1 - W), normal with polynomial m(ln n), s(ln n)

References:
- Royston, P. (1995) Remark AS R94: A remark on algorithm AS 181: The W-test
  for normality. Applied Statistics 44(4), 547-551.

The leptokurtic case (excess kurtosis > 3) would call for the Shapiro-Francia
variant; it is not implemented and leaves the normalized order statistics as
coefficients.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Optional, Sequence

import numpy as np

from .. import numeric
from .distributions import expected_order_statistics, normal_cdf
from ..results.summary import ShapiroWilkResult

if TYPE_CHECKING:
    from ..models.sample import OrderedSample

logger = logging.getLogger(__name__)

# Polynomials in u = 1/sqrt(n), highest power first (u^5 .. u^1).
_C1 = (-2.706056, 4.434685, -2.071190, -0.147981, 0.221157)
_C2 = (-3.582633, 5.682633, -1.752461, -0.293762, 0.042981)

# Significance, n <= 11 (polynomials in n, lowest power first)
_G = (-2.273, 0.459)
_C3 = (0.5440, -0.39978, 0.025054, -6.714e-4)
_C4 = (1.3822, -0.77857, 0.062767, -2.0322e-3)

# Significance, n >= 12 (polynomials in ln n, lowest power first)
_C5 = (-1.5861, -0.31082, -0.083751, 0.0038915)
_C6 = (-0.4803, -0.082676, 0.0030302)

_SIX_OVER_PI = 6.0 / math.pi
_ASIN_SQRT_3_4 = math.pi / 3.0

# Accuracy of the approximations degrades past this size.
LARGE_SAMPLE_WARNING = 5000

LEPTOKURTIC_THRESHOLD = 3.0


def _poly_high_first(coeffs: Sequence[float], u: float, constant: float) -> float:
    """c[0] u^5 + ... + c[4] u + constant (Horner)."""
    acc = 0.0
    for c in coeffs:
        acc = (acc + c) * u
    return acc + constant


def _poly(coeffs: Sequence[float], x: float) -> float:
    """c[0] + c[1] x + c[2] x^2 + ... (Horner)."""
    acc = 0.0
    for c in reversed(coeffs):
        acc = acc * x + c
    return acc


def shapiro_wilk_coefficients(n: int, leptokurtic: bool = False) -> np.ndarray:
    """Shapiro-Wilk coefficients a_1..a_n for a sample of size n.

    Args:
        n: sample size (>= 3)
        leptokurtic: skip Royston's polynomial correction

    Returns:
        vector a with a_i = -a_(n+1-i) and sum a_i^2 = 1, aligned with the
        ascending order statistics (negative first half)
    """
    if n < 3:
        raise ValueError("Shapiro-Wilk needs at least 3 values")

    m = expected_order_statistics(n)
    summ2 = float(np.sum(m * m))
    ssumm2 = math.sqrt(summ2)
    a = m / ssumm2

    if leptokurtic:
        logger.debug("Leptokurtic sample (n=%d): polynomial correction not applied", n)
        return a

    if n == 3:
        a[0] = -math.sqrt(0.5)
        a[1] = 0.0
        a[2] = math.sqrt(0.5)
        return a

    u = 1.0 / math.sqrt(n)
    a[-1] = _poly_high_first(_C1, u, m[-1] / ssumm2)
    a[0] = -a[-1]

    if n <= 5:
        phi = (summ2 - 2.0 * m[-1] ** 2) / (1.0 - 2.0 * a[-1] ** 2)
        a[1:-1] = m[1:-1] / math.sqrt(phi)
        return a

    if n >= LARGE_SAMPLE_WARNING:
        logger.warning(
            "Sample size %d too large, Shapiro-Wilk statistic might be inaccurate", n
        )

    a[-2] = _poly_high_first(_C2, u, m[-2] / ssumm2)
    a[1] = -a[-2]

    phi = (summ2 - 2.0 * m[-1] ** 2 - 2.0 * m[-2] ** 2) / (
        1.0 - 2.0 * a[-1] ** 2 - 2.0 * a[-2] ** 2
    )
    a[2:-2] = m[2:-2] / math.sqrt(phi)
    return a


def shapiro_wilk_statistic(
    sample: "OrderedSample", leptokurtic: Optional[bool] = None
) -> float:
    """W statistic of the sample; NaN for fewer than 3 values.

    The denominator is var() * (n - 1), the sum of squared deviations taken
    from the maintained power sums.

    Args:
        sample: ordered sample
        leptokurtic: coefficient branch to use; decided from the sample's
            kurtosis when None
    """
    n = sample.count
    if n < 3:
        return numeric.NAN

    ssq = sample.var() * (n - 1)
    if not ssq > 0:
        # No spread: W is 0/0
        return numeric.NAN

    if leptokurtic is None:
        leptokurtic = sample.kurtosis() > LEPTOKURTIC_THRESHOLD
    a = shapiro_wilk_coefficients(n, leptokurtic=leptokurtic)
    x = np.asarray(sample.values, dtype=float)

    num = float(np.dot(a, x)) ** 2
    return num / ssq


def shapiro_wilk_significance(n: int, w: float) -> float:
    """p-value of W for a sample of size n.

    Args:
        n: sample size
        w: W statistic

    Returns:
        p-value; NaN for n < 3 or NaN W; the smallest positive float when W
        falls outside the domain of the small-sample transform
    """
    if n < 3 or math.isnan(w):
        return numeric.NAN

    if n == 3:
        pw = _SIX_OVER_PI * (math.asin(min(numeric.sqrt(w), 1.0)) - _ASIN_SQRT_3_4)
        return max(pw, 0.0)

    an = float(n)
    # W can exceed 1 by rounding only
    y = numeric.log(max(1.0 - w, 0.0))

    if n <= 11:
        gamma = _poly(_G, an)
        if y >= gamma:
            return numeric.SMALLEST_POSITIVE
        y = -numeric.log(gamma - y)
        m = _poly(_C3, an)
        s = math.exp(_poly(_C4, an))
    else:
        xx = math.log(an)
        m = _poly(_C5, xx)
        s = math.exp(_poly(_C6, xx))

    # Upper tail taken as the lower tail of -z so small p-values keep precision
    return normal_cdf(-(y - m) / s)


def shapiro_wilk_test(sample: "OrderedSample", alpha: float = 0.05) -> ShapiroWilkResult:
    """Run the Shapiro-Wilk test.

    Decision:
        normality is rejected when p < alpha

    Args:
        sample: ordered sample (>= 3 values for a defined result)
        alpha: significance level

    Returns:
        ShapiroWilkResult; statistic and p-value are NaN (and passed False)
        for fewer than 3 values
    """
    if not (0.0 < alpha < 1.0):
        raise ValueError("alpha must be in (0,1)")

    n = sample.count
    k = sample.kurtosis()
    leptokurtic = bool(k > LEPTOKURTIC_THRESHOLD)
    w = shapiro_wilk_statistic(sample, leptokurtic=leptokurtic)
    p_value = shapiro_wilk_significance(n, w)

    return ShapiroWilkResult(
        statistic=w,
        p_value=p_value,
        sample_size=n,
        alpha=alpha,
        passed=bool(p_value >= alpha),
        leptokurtic=leptokurtic,
        kurtosis=k,
    )
