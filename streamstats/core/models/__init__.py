"""
Data models for the ordered sample.

This module provides the core data structures:
- SampleOptions: Configuration of a sample
- AggregateKind / Accumulator: Incremental aggregates (geometric, harmonic)
- ModeTracker: Run-length mode cache
- OrderedSample: Sorted container with power sums and aggregates
"""

from .options import SampleOptions, ConfigurationError
from .aggregates import AggregateKind, Accumulator
from .mode import ModeTracker
from .sample import OrderedSample

__all__ = [
    # Options
    "SampleOptions",
    "ConfigurationError",

    # Aggregates
    "AggregateKind",
    "Accumulator",

    # Mode
    "ModeTracker",

    # Sample
    "OrderedSample",
]
