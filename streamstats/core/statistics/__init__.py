"""Statistics over an ordered sample.

This package contains the read-only statistics computed from an
OrderedSample:
- Distribution functions (standard normal PPF/CDF)
- Moment statistics (mean, variance, kurtosis, skewness)
- Rank statistics (quantiles, quartile summaries)
- Shapiro-Wilk normality test (AS R94)

No SciPy dependency is required.
"""

from .distributions import normal_ppf, normal_cdf, expected_order_statistics
from .moments import SkewnessMeasure, mean, var, stddev, kurtosis, skewness
from .quantiles import (
    quantile,
    median,
    minimum,
    maximum,
    iqr,
    midhinge,
    trimean,
    five_number_summary,
    summary,
)
from .normality import (
    shapiro_wilk_coefficients,
    shapiro_wilk_statistic,
    shapiro_wilk_significance,
    shapiro_wilk_test,
)

__all__ = [
    "normal_ppf",
    "normal_cdf",
    "expected_order_statistics",
    "SkewnessMeasure",
    "mean",
    "var",
    "stddev",
    "kurtosis",
    "skewness",
    "quantile",
    "median",
    "minimum",
    "maximum",
    "iqr",
    "midhinge",
    "trimean",
    "five_number_summary",
    "summary",
    "shapiro_wilk_coefficients",
    "shapiro_wilk_statistic",
    "shapiro_wilk_significance",
    "shapiro_wilk_test",
]
