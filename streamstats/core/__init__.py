"""
Core module for streaming sample statistics.

This module contains pure Python implementations (numpy for vector work).
It can be used standalone or embedded in other applications.
"""

from .models import (
    SampleOptions,
    ConfigurationError,
    AggregateKind,
    Accumulator,
    ModeTracker,
    OrderedSample,
)

from .results import Summary, ShapiroWilkResult

from .statistics import (
    SkewnessMeasure,
    normal_ppf,
    normal_cdf,
    shapiro_wilk_coefficients,
    shapiro_wilk_statistic,
    shapiro_wilk_significance,
    shapiro_wilk_test,
)

from .transforms import apply_transform, center, reduce, sigmoid, entropy

__all__ = [
    # Models
    "SampleOptions",
    "ConfigurationError",
    "AggregateKind",
    "Accumulator",
    "ModeTracker",
    "OrderedSample",

    # Results
    "Summary",
    "ShapiroWilkResult",

    # Statistics
    "SkewnessMeasure",
    "normal_ppf",
    "normal_cdf",
    "shapiro_wilk_coefficients",
    "shapiro_wilk_statistic",
    "shapiro_wilk_significance",
    "shapiro_wilk_test",

    # Transforms
    "apply_transform",
    "center",
    "reduce",
    "sigmoid",
    "entropy",
]
