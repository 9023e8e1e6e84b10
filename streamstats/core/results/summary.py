"""
Result classes for sample statistics.

This module defines the output data structures: the descriptive summary of a
sample and the result of the Shapiro-Wilk normality test.
"""

import json
import math
from dataclasses import dataclass
from typing import Dict, Any, Optional


def _json_safe_value(value: Any) -> Any:
    """Convert non-JSON-safe floats (nan/inf) to None."""
    if value is None:
        return None
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
    return value


def _optional_float(value: Any) -> float:
    """Inverse of _json_safe_value for floats: None becomes NaN."""
    if value is None:
        return float("nan")
    return float(value)


@dataclass
class Summary:
    """
    Fixed-field descriptive snapshot of a sample.

    Attributes:
        count: Number of values in the sample
        mean: Arithmetic mean
        stddev: Bessel-corrected standard deviation
        min: Smallest value
        max: Largest value
        median: Quantile 0.5
        q1: Quantile 0.25
        q3: Quantile 0.75
    """

    count: int
    mean: float
    stddev: float
    min: float
    max: float
    median: float
    q1: float
    q3: float

    @property
    def iqr(self) -> float:
        """Interquartile range q3 - q1."""
        return self.q3 - self.q1

    def to_dict(self) -> Dict[str, Any]:
        """Serialize summary to dictionary (nan/inf become None)."""
        return {
            "count": self.count,
            "mean": _json_safe_value(self.mean),
            "stddev": _json_safe_value(self.stddev),
            "min": _json_safe_value(self.min),
            "max": _json_safe_value(self.max),
            "median": _json_safe_value(self.median),
            "q1": _json_safe_value(self.q1),
            "q3": _json_safe_value(self.q3),
        }

    def to_json(self, indent: int = 2) -> str:
        """Serialize summary to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Summary':
        """Create Summary from dictionary."""
        return cls(
            count=int(data.get("count", data.get("length", 0))),
            mean=_optional_float(data.get("mean")),
            stddev=_optional_float(data.get("stddev")),
            min=_optional_float(data.get("min")),
            max=_optional_float(data.get("max")),
            median=_optional_float(data.get("median")),
            q1=_optional_float(data.get("q1")),
            q3=_optional_float(data.get("q3")),
        )

    def __str__(self) -> str:
        lines = [
            f"count   {self.count}",
            f"mean    {self.mean:.6g}",
            f"stddev  {self.stddev:.6g}",
            f"min     {self.min:.6g}",
            f"q1      {self.q1:.6g}",
            f"median  {self.median:.6g}",
            f"q3      {self.q3:.6g}",
            f"max     {self.max:.6g}",
        ]
        return "\n".join(lines)


@dataclass
class ShapiroWilkResult:
    """
    Result of the Shapiro-Wilk test for normality.

    Small values of W (and of the p-value) are evidence against normality.

    Attributes:
        statistic: W statistic in (0, 1], NaN when undefined
        p_value: Significance of W (upper tail of the normalizing transform)
        sample_size: Number of values tested
        alpha: Significance level used for the decision
        passed: True if normality is not rejected (p_value >= alpha)
        leptokurtic: True if the sample kurtosis selected the uncorrected weights
    """

    statistic: float
    p_value: float
    sample_size: int
    alpha: float
    passed: bool
    leptokurtic: bool = False
    kurtosis: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize Shapiro-Wilk test result to dictionary."""
        return {
            "test_name": "shapiro_wilk",
            "statistic": _json_safe_value(self.statistic),
            "p_value": _json_safe_value(self.p_value),
            "sample_size": self.sample_size,
            "alpha": self.alpha,
            "passed": self.passed,
            "leptokurtic": self.leptokurtic,
            "kurtosis": _json_safe_value(self.kurtosis),
        }
