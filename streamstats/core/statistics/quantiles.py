"""streamstats.core.statistics.quantiles

Rank-based statistics of an ordered sample.

The sample is kept ascending, so the k-th smallest value sits at index k and
every quantile is a single index lookup:
    quantile(q) = values[floor(q * n)]

No interpolation and no clamping: q outside [0, 1) addresses a rank outside
the sample and raises IndexError.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Tuple

from ..results.summary import Summary

if TYPE_CHECKING:
    from ..models.sample import OrderedSample


def quantile(sample: "OrderedSample", q: float) -> float:
    """Value at rank floor(q * count)."""
    return sample.at(int(math.floor(q * sample.count)))


def median(sample: "OrderedSample") -> float:
    return quantile(sample, 0.5)


def minimum(sample: "OrderedSample") -> float:
    """Smallest value, 0 for an empty sample."""
    if sample.count == 0:
        return 0.0
    return sample.at(0)


def maximum(sample: "OrderedSample") -> float:
    """Largest value, 0 for an empty sample."""
    if sample.count == 0:
        return 0.0
    return sample.at(sample.count - 1)


def iqr(sample: "OrderedSample") -> float:
    """Interquartile range q(.75) - q(.25)."""
    return quantile(sample, 0.75) - quantile(sample, 0.25)


def midhinge(sample: "OrderedSample") -> float:
    """Mean of the first and third quartiles."""
    return (quantile(sample, 0.25) + quantile(sample, 0.75)) / 2.0


def trimean(sample: "OrderedSample") -> float:
    """Tukey's trimean: (median + midhinge) / 2."""
    return (median(sample) + midhinge(sample)) / 2.0


def five_number_summary(sample: "OrderedSample") -> Tuple[float, float, float, float, float]:
    """(min, q1, median, q3, max)."""
    return (
        minimum(sample),
        quantile(sample, 0.25),
        median(sample),
        quantile(sample, 0.75),
        maximum(sample),
    )


def summary(sample: "OrderedSample") -> Summary:
    """Descriptive snapshot of the sample.

    Raises:
        IndexError: if the sample is empty (no quartiles exist)
    """
    return Summary(
        count=sample.count,
        mean=sample.mean(),
        stddev=sample.stddev(),
        min=minimum(sample),
        max=maximum(sample),
        median=median(sample),
        q1=quantile(sample, 0.25),
        q3=quantile(sample, 0.75),
    )
