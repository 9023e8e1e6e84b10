"""Value-mapping transforms for the ordered sample.

Every transform maps each stored value through a function and then
re-synchronizes the incremental aggregates from scratch, which is the only
path that keeps them consistent after a bulk mutation.

Supported transforms:
- center: subtract the mean
- reduce: divide by the standard deviation (expects centered data)
- sigmoid: logistic squash 1 / (1 + e^-x)

Each can run in place (returns None) or on an independent copy (returns the
copy). ``entropy`` standardizes a copy and sums v * ln(v) over it.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Callable, Optional

from .. import numeric

if TYPE_CHECKING:
    from ..models.sample import OrderedSample

logger = logging.getLogger(__name__)


def apply_transform(
    sample: "OrderedSample",
    f: Callable[[float], float],
    update_aggregates: bool = True,
) -> None:
    """Replace every value x with f(x), in place.

    Power sums are adjusted per value when ``update_aggregates`` is set.
    Accumulators are always recomputed from the new values afterwards.
    A non-monotone ``f`` costs one extra sort at the end.

    Args:
        sample: sample to mutate
        f: value mapping
        update_aggregates: adjust the power sums for each replaced value
    """
    for i in range(sample.count):
        sample.replace_at(i, f(sample.at(i)), update_aggregates)

    if not sample.is_sorted():
        logger.debug("Transform did not preserve order, re-sorting %d values", sample.count)
        sample.resort()

    sample.resync_aggregates()


def _on_target(sample: "OrderedSample", inplace: bool) -> "OrderedSample":
    return sample if inplace else sample.copy()


def center(sample: "OrderedSample", inplace: bool = True) -> Optional["OrderedSample"]:
    """Subtract the current mean from every value.

    Returns:
        None when ``inplace``, otherwise the centered copy
    """
    mu = sample.mean()
    target = _on_target(sample, inplace)
    apply_transform(target, lambda v: v - mu, True)
    return None if inplace else target


def reduce(sample: "OrderedSample", inplace: bool = True) -> Optional["OrderedSample"]:
    """Divide every value by the current standard deviation.

    Only yields standard scores on data that was centered first. A zero or
    undefined standard deviation gives NaN/Inf values.

    Returns:
        None when ``inplace``, otherwise the reduced copy
    """
    s = sample.stddev()
    target = _on_target(sample, inplace)
    apply_transform(target, lambda v: numeric.div(v, s), True)
    return None if inplace else target


def _logistic(x: float) -> float:
    if math.isnan(x):
        return x
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    # exp(-x) overflows for very negative x
    z = math.exp(x)
    return z / (1.0 + z)


def sigmoid(sample: "OrderedSample", inplace: bool = True) -> Optional["OrderedSample"]:
    """Map every value through the logistic function into (0, 1).

    Returns:
        None for an empty sample or when ``inplace``, otherwise the copy
    """
    if sample.count == 0:
        return None
    target = _on_target(sample, inplace)
    apply_transform(target, _logistic, True)
    return None if inplace else target


def entropy(sample: "OrderedSample") -> float:
    """Sum of v * ln(v) over the standardized values of the sample.

    The standardized values are used directly in place of probabilities, so
    any v <= 0 makes the result NaN. NaN for an empty sample.
    """
    if sample.count == 0:
        return numeric.NAN

    centered = center(sample, inplace=False)
    reduced = reduce(centered, inplace=False)
    return sum(numeric.xlogx(v) for v in reduced.values)
