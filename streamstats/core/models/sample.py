"""
OrderedSample: an always-sorted sample with incrementally maintained aggregates.

The OrderedSample is the main container, holding:
- The values, ascending, duplicates allowed (index = rank)
- Power sums S_k = sum x^k for k = 1..degree
- One accumulator per enabled incremental aggregate (geometric, harmonic)
- A cached run-length mode

It provides methods for:
- Inserting, changing and removing values while keeping the order
- Moment statistics (mean, variance, kurtosis, skewness)
- Rank statistics (quantiles, median, quartile summaries)
- Transforms (center, reduce, sigmoid, entropy)
- The Shapiro-Wilk normality test
- Serialization to/from dictionary/JSON

Not thread-safe: mutations of one sample must be serialized by the caller.
"""

import bisect
import json
import logging
from dataclasses import dataclass, field, replace
from typing import Dict, List, Any, Callable, Iterable, Iterator, Optional, Tuple

import numpy as np

from .. import numeric
from .aggregates import Accumulator, AggregateKind
from .mode import ModeTracker
from .options import SampleOptions
from ..statistics import moments, quantiles, normality
from ..statistics.moments import SkewnessMeasure
from ..transforms import mapping
from ..results.summary import Summary, ShapiroWilkResult

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class OrderedSample:
    """
    Sorted sample of real numbers with power sums and incremental aggregates.

    Attributes:
        options: Configuration (degree, enabled aggregates)
        power_sums: power_sums[k-1] = sum of x^k over all values, k = 1..degree
        aggregates: Accumulators of the enabled aggregate kinds
        mode_tracker: Cached result of the last mode scan
    """

    options: SampleOptions = field(default_factory=SampleOptions)
    power_sums: np.ndarray = field(init=False)
    aggregates: List[Accumulator] = field(init=False)
    mode_tracker: ModeTracker = field(init=False, default_factory=ModeTracker)
    _values: List[float] = field(init=False, default_factory=list)

    def __post_init__(self):
        """Allocate power sums and register the enabled aggregates."""
        if isinstance(self.options, dict):
            self.options = SampleOptions.from_dict(self.options)
        self._exponents = np.arange(1, self.options.degree + 1, dtype=float)
        self.power_sums = np.zeros(self.options.degree, dtype=float)
        self.aggregates = [Accumulator(kind) for kind in self.options.enabled_kinds]

    @classmethod
    def create(
        cls,
        degree: int = 2,
        enable_harmonic: bool = False,
        enable_geometric: bool = False,
        values: Optional[Iterable[float]] = None,
    ) -> 'OrderedSample':
        """
        Build a sample from option fields and optional initial values.

        Raises:
            ConfigurationError: If degree < 2
        """
        sample = cls(SampleOptions(
            degree=degree,
            enable_harmonic=enable_harmonic,
            enable_geometric=enable_geometric,
        ))
        if values is not None:
            sample.insert_many(values)
        return sample

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def degree(self) -> int:
        return self.options.degree

    @property
    def count(self) -> int:
        return len(self._values)

    @property
    def values(self) -> Tuple[float, ...]:
        """Read-only ascending view of the stored values."""
        return tuple(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[float]:
        return iter(tuple(self._values))

    def _powers(self, x: float) -> np.ndarray:
        return np.power(x, self._exponents)

    def _accumulator(self, kind: AggregateKind) -> Optional[Accumulator]:
        for acc in self.aggregates:
            if acc.kind is kind:
                return acc
        return None

    def is_sorted(self) -> bool:
        v = self._values
        return all(v[i] <= v[i + 1] for i in range(len(v) - 1))

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def insert(self, x: float) -> None:
        """
        Insert a value at its sorted rank.

        Updates the power sums and every accumulator, then places the value
        at the leftmost rank that keeps the sequence ascending.
        """
        x = float(x)
        self.power_sums += self._powers(x)
        for acc in self.aggregates:
            acc.incorporate(x)

        index = bisect.bisect_left(self._values, x)
        self._values.insert(index, x)
        self.mode_tracker.invalidate()

    def insert_many(self, xs: Iterable[float]) -> None:
        """Insert each value in the given order."""
        for x in xs:
            self.insert(x)

    def at(self, index: int) -> float:
        """
        Value at sorted rank ``index``.

        Raises:
            IndexError: If index is outside [0, count)
        """
        if not 0 <= index < len(self._values):
            raise IndexError(f"Rank {index} out of range for sample of size {len(self._values)}")
        return self._values[index]

    def replace_at(self, index: int, new_value: float, update_aggregates: bool = True) -> None:
        """
        Overwrite the value at ``index`` without restoring order.

        Only the power sums are adjusted (when ``update_aggregates``);
        accumulators and the mode cache are not.
        """
        old = self.at(index)
        new_value = float(new_value)
        if update_aggregates:
            self.power_sums += self._powers(new_value) - self._powers(old)
        self._values[index] = new_value
        self.mode_tracker.invalidate()

    def change(self, index: int, new_value: float, update_aggregates: bool = True) -> None:
        """
        Replace the value at ``index``.

        When the new value does not fit between its neighbours it is moved to
        its sorted rank, so ranks of other values may shift by one.

        Raises:
            IndexError: If index is outside [0, count)
        """
        self.replace_at(index, new_value, update_aggregates)

        v = self._values
        value = v[index]
        if (index > 0 and v[index - 1] > value) or (index < len(v) - 1 and v[index + 1] < value):
            del v[index]
            target = bisect.bisect_left(v, value)
            v.insert(target, value)
            logger.debug("Value at rank %d moved to rank %d to keep the sample sorted", index, target)

    def remove(self, index: int) -> float:
        """
        Remove the value at ``index`` and return it.

        Power sums lose the value's contribution; accumulators are not
        adjusted.

        Raises:
            IndexError: If index is outside [0, count)
        """
        old = self.at(index)
        self.power_sums -= self._powers(old)
        del self._values[index]
        self.mode_tracker.invalidate()
        return old

    def resort(self) -> None:
        self._values.sort()
        self.mode_tracker.invalidate()

    def resync_aggregates(self) -> None:
        """Recompute every accumulator from the stored values."""
        for acc in self.aggregates:
            acc.resync(self._values)

    def copy(self) -> 'OrderedSample':
        """Independent deep copy of the sample."""
        clone = OrderedSample(replace(self.options))
        clone._values = list(self._values)
        clone.power_sums = self.power_sums.copy()
        clone.aggregates = [Accumulator(acc.kind, acc.value) for acc in self.aggregates]
        clone.mode_tracker = replace(self.mode_tracker)
        return clone

    # ------------------------------------------------------------------
    # Moment statistics
    # ------------------------------------------------------------------

    def mean(self) -> float:
        return moments.mean(self)

    def var(self) -> float:
        return moments.var(self)

    def stddev(self) -> float:
        return moments.stddev(self)

    def kurtosis(self) -> float:
        return moments.kurtosis(self)

    def skewness(self, measure: SkewnessMeasure = SkewnessMeasure.YULE) -> float:
        return moments.skewness(self, measure)

    # ------------------------------------------------------------------
    # Rank statistics
    # ------------------------------------------------------------------

    def quantile(self, q: float) -> float:
        return quantiles.quantile(self, q)

    def median(self) -> float:
        return quantiles.median(self)

    def min(self) -> float:
        return quantiles.minimum(self)

    def max(self) -> float:
        return quantiles.maximum(self)

    def iqr(self) -> float:
        return quantiles.iqr(self)

    def midhinge(self) -> float:
        return quantiles.midhinge(self)

    def trimean(self) -> float:
        return quantiles.trimean(self)

    def five_number_summary(self) -> Tuple[float, float, float, float, float]:
        return quantiles.five_number_summary(self)

    def summary(self) -> Summary:
        return quantiles.summary(self)

    # ------------------------------------------------------------------
    # Aggregates and mode
    # ------------------------------------------------------------------

    def _aggregate_mean(self, kind: AggregateKind, recompute: bool) -> float:
        acc = self._accumulator(kind)
        if acc is None:
            return numeric.NAN
        if recompute:
            return kind.summarize(kind.accumulate(self._values), self.count)
        return acc.summarize(self.count)

    def geometric_mean(self, recompute: bool = False) -> float:
        """
        Count-th root of the product of the values.

        NaN when the geometric aggregate is disabled. Without ``recompute``
        the running product is used, which does not see change/remove.
        """
        return self._aggregate_mean(AggregateKind.GEOMETRIC, recompute)

    def harmonic_mean(self, recompute: bool = False) -> float:
        """
        Sum of the reciprocals divided by the count.

        NaN when the harmonic aggregate is disabled or any value is <= 0.
        Without ``recompute`` the running sum is used, which does not see
        change/remove.
        """
        return self._aggregate_mean(AggregateKind.HARMONIC, recompute)

    def mode(self, recompute: bool = False) -> float:
        """
        Most frequent value.

        Without ``recompute`` the result of the last scan is returned, which
        is stale after any mutation (NaN if no scan has run yet).
        ``mode_is_current`` tells whether that cached result still matches
        the values; it is informational and never triggers a scan.
        """
        if recompute:
            return self.mode_tracker.recompute(self._values)
        return self.mode_tracker.best_value

    @property
    def mode_is_current(self) -> bool:
        """True when no mutation happened since the last mode scan."""
        return self.mode_tracker.fresh

    # ------------------------------------------------------------------
    # Transforms
    # ------------------------------------------------------------------

    def apply(self, f: Callable[[float], float], update_aggregates: bool = True) -> None:
        mapping.apply_transform(self, f, update_aggregates)

    def center(self, inplace: bool = True) -> Optional['OrderedSample']:
        return mapping.center(self, inplace)

    def reduce(self, inplace: bool = True) -> Optional['OrderedSample']:
        return mapping.reduce(self, inplace)

    def sigmoid(self, inplace: bool = True) -> Optional['OrderedSample']:
        return mapping.sigmoid(self, inplace)

    def entropy(self) -> float:
        return mapping.entropy(self)

    # ------------------------------------------------------------------
    # Normality
    # ------------------------------------------------------------------

    def shapiro_wilk_statistic(self) -> float:
        return normality.shapiro_wilk_statistic(self)

    def shapiro_wilk_test(self, alpha: float = 0.05) -> ShapiroWilkResult:
        return normality.shapiro_wilk_test(self, alpha)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize sample to dictionary.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return {
            "options": self.options.to_dict(),
            "degree": self.degree,
            "count": self.count,
            "power_sums": [float(s) for s in self.power_sums],
            "aggregates": [acc.to_dict() for acc in self.aggregates],
            "values": list(self._values),
        }

    def to_json(self, indent: int = 2) -> str:
        """Serialize sample to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'OrderedSample':
        """
        Create a sample from a dictionary.

        Values are re-inserted, so power sums and accumulators are rebuilt
        from the values rather than trusted.

        Raises:
            ConfigurationError: If the options are invalid
            ValueError: If values are missing or not numeric
        """
        options_data = data.get("options", {"degree": data.get("degree", 2)})
        sample = cls(SampleOptions.from_dict(options_data))
        if "values" not in data:
            raise ValueError("Sample data has no 'values'")
        sample.insert_many(float(v) for v in data["values"])
        return sample

    @classmethod
    def from_json(cls, text: str) -> 'OrderedSample':
        """Create a sample from a JSON string."""
        return cls.from_dict(json.loads(text))

    def __repr__(self) -> str:
        """Return string representation of the sample."""
        kinds = ",".join(acc.kind.value for acc in self.aggregates) or "none"
        return f"OrderedSample(n={self.count}, degree={self.degree}, aggregates={kinds})"
