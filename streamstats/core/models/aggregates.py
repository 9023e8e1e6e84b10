"""Incremental aggregates for the ordered sample.

An aggregate is a statistic that can be folded one value at a time
(``incorporate``) and turned into a result on demand (``summarize``).
Supported kinds:
- GEOMETRIC: running product, summarized as its count-th root
- HARMONIC: running sum of reciprocals, summarized as that sum over the count

Each OrderedSample owns one Accumulator per enabled kind; nothing is shared
between samples.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable

from .. import numeric


class AggregateKind(Enum):
    """Closed set of incremental aggregate kinds."""
    GEOMETRIC = "geometric"
    HARMONIC = "harmonic"

    @classmethod
    def from_string(cls, s: str) -> "AggregateKind":
        """Create AggregateKind from string (case-insensitive)."""
        s_lower = s.lower().strip()
        for kind in cls:
            if kind.value == s_lower:
                return kind
        raise ValueError(f"Unknown aggregate kind: {s}")

    def incorporate(self, running: float, x: float) -> float:
        """Fold one new value into the running aggregate.

        Geometric:
            a running value of exactly 0 means "not started" and is replaced
            by x, otherwise running * x.
        Harmonic:
            NaN for x <= 0, otherwise running + 1/x.
        """
        if self is AggregateKind.GEOMETRIC:
            if running == 0:
                return x
            return running * x
        if self is AggregateKind.HARMONIC:
            if x <= 0:
                return numeric.NAN
            return running + 1.0 / x
        raise ValueError(f"Unsupported aggregate kind: {self}")

    def accumulate(self, values: Iterable[float]) -> float:
        """Running value recomputed from scratch over ``values``.

        Short-circuits on the first absorbing state: a zero product for
        GEOMETRIC, NaN for HARMONIC.
        """
        agg = 0.0
        for v in values:
            agg = self.incorporate(agg, v)
            if self is AggregateKind.GEOMETRIC and agg == 0:
                return 0.0
            if self is AggregateKind.HARMONIC and math.isnan(agg):
                return agg
        return agg

    def summarize(self, running: float, count: int) -> float:
        """Turn a running value over ``count`` samples into the statistic."""
        if count <= 0:
            return numeric.NAN
        if self is AggregateKind.GEOMETRIC:
            return numeric.root(running, count)
        if self is AggregateKind.HARMONIC:
            return running / count
        raise ValueError(f"Unsupported aggregate kind: {self}")


@dataclass
class Accumulator:
    """
    Running value of one aggregate kind.

    Attributes:
        kind: Which aggregate this is
        value: Current running value (0 before the first value)
    """

    kind: AggregateKind
    value: float = 0.0

    def incorporate(self, x: float) -> None:
        self.value = self.kind.incorporate(self.value, x)

    def resync(self, values: Iterable[float]) -> None:
        """Replace the running value with one computed from scratch."""
        self.value = self.kind.accumulate(values)

    def summarize(self, count: int) -> float:
        return self.kind.summarize(self.value, count)

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "value": self.value}
