"""
streamstats - Streaming sample statistics

An always-sorted sample of real numbers that maintains power sums and
incremental aggregates as values arrive, answers rank queries by index, and
runs the Shapiro-Wilk normality test on top.

Conventions:
- Values: float64, stored ascending, duplicates allowed (index = rank)
- Power sums: power_sums[k-1] = sum of x^k, k = 1..degree
- Variance: Bessel corrected (divides by n - 1)
- Quantiles: values[floor(q * n)], no interpolation
- Degenerate numerics: NaN/Inf sentinels, never exceptions
"""

__version__ = "1.0.0"
__author__ = "streamstats"

from .core.models import OrderedSample, SampleOptions, ConfigurationError, AggregateKind
from .core.results import Summary, ShapiroWilkResult
from .core.statistics import SkewnessMeasure, shapiro_wilk_significance, shapiro_wilk_statistic

__all__ = [
    # Version
    "__version__",

    # Models
    "OrderedSample",
    "SampleOptions",
    "ConfigurationError",
    "AggregateKind",

    # Results
    "Summary",
    "ShapiroWilkResult",

    # Statistics
    "SkewnessMeasure",
    "shapiro_wilk_statistic",
    "shapiro_wilk_significance",
]
