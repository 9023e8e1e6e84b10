"""streamstats.core.statistics.moments

Moment-based statistics of an ordered sample.

Mean and variance come straight from the maintained power sums (O(1)):
    mean = S1 / n
    var  = (S2 - S1^2 / n) / (n - 1)          (Bessel corrected)

Kurtosis needs the deviations from the mean and is a two-pass O(n) scan.
Skewness offers three measures built on quantiles, mode or median.

All functions read the sample and never mutate it. Degenerate inputs give
NaN/Inf rather than raising.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

import numpy as np

from .. import numeric

if TYPE_CHECKING:
    from ..models.sample import OrderedSample


class SkewnessMeasure(Enum):
    """Selectable skewness formulas."""
    YULE = "yule"                       # quantile based
    PEARSON_FIRST = "pearson_first"     # mode based
    PEARSON_SECOND = "pearson_second"   # median based

    @classmethod
    def from_string(cls, s: str) -> "SkewnessMeasure":
        """Create SkewnessMeasure from string (case-insensitive)."""
        s_lower = s.lower().strip().replace("-", "_")
        for measure in cls:
            if measure.value == s_lower:
                return measure
        raise ValueError(f"Unknown skewness measure: {s}")


def mean(sample: "OrderedSample") -> float:
    """Arithmetic mean from the first power sum; 0 for an empty sample."""
    n = sample.count
    if n == 0:
        return 0.0
    return float(sample.power_sums[0]) / n


def var(sample: "OrderedSample") -> float:
    """Bessel-corrected sample variance from the first two power sums.

    0 for an empty sample, NaN for a single value (0/0).
    """
    n = sample.count
    if n == 0:
        return 0.0
    s1 = float(sample.power_sums[0])
    s2 = float(sample.power_sums[1])
    return numeric.div(s2 - s1 * s1 / n, n - 1)


def stddev(sample: "OrderedSample") -> float:
    """Square root of var(); NaN when the variance is negative or NaN."""
    return numeric.sqrt(var(sample))


def kurtosis(sample: "OrderedSample") -> float:
    """Unbiased estimator of the excess kurtosis.

    With k2 = sum (x - mean)^2, k4 = sum (x - mean)^4 and s^2 = k2 / (n - 1):

        G2 = (n+1) n / ((n-1)(n-2)(n-3)) * k4 / s^4
             - 3 (n-1)^2 / ((n-2)(n-3))

    Returns NaN for n <= 3 and for a sample without spread.
    """
    n = sample.count
    if n <= 3:
        return numeric.NAN

    dev = np.asarray(sample.values, dtype=float) - mean(sample)
    sq = dev * dev
    k2 = float(np.sum(sq))
    k4 = float(np.sum(sq * sq))
    s2 = k2 / (n - 1)

    scale = (n + 1) * n / ((n - 1) * (n - 2) * (n - 3))
    correction = 3.0 * (n - 1) ** 2 / ((n - 2) * (n - 3))
    return scale * numeric.div(k4, s2 * s2) - correction


def skewness(sample: "OrderedSample", measure: SkewnessMeasure = SkewnessMeasure.YULE) -> float:
    """Skewness of the sample under the selected measure.

    Yule:            (q3 + q1 - 2 median) / (q3 - q1)            O(1)
    Pearson first:   (mean - mode) / stddev                      O(n)
    Pearson second:  3 (mean - median / stddev)                  O(1)

    The Pearson second form divides the median by the standard deviation
    before subtracting it from the mean.
    """
    if isinstance(measure, str):
        measure = SkewnessMeasure.from_string(measure)

    if measure is SkewnessMeasure.YULE:
        q1 = sample.quantile(0.25)
        q3 = sample.quantile(0.75)
        return numeric.div(q3 + q1 - 2.0 * sample.median(), q3 - q1)

    if measure is SkewnessMeasure.PEARSON_FIRST:
        return numeric.div(mean(sample) - sample.mode(recompute=True), stddev(sample))

    if measure is SkewnessMeasure.PEARSON_SECOND:
        return 3.0 * (mean(sample) - numeric.div(sample.median(), stddev(sample)))

    raise ValueError(f"Unsupported skewness measure: {measure}")
