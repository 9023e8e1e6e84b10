"""
Sample options for the ordered sample.

This module defines the configuration of an OrderedSample: how many power
sums are maintained and which incremental aggregates are enabled.
"""

from dataclasses import dataclass
from typing import Dict, Any, List

from .aggregates import AggregateKind


class ConfigurationError(ValueError):
    """Raised when a sample is initialized with invalid parameters."""


@dataclass
class SampleOptions:
    """
    Configuration options for an ordered sample.

    Attributes:
        degree: Highest moment order maintained as a power sum (default: 2)
        enable_harmonic: Track the running sum of reciprocals (default: False)
        enable_geometric: Track the running product (default: False)
    """

    degree: int = 2
    enable_harmonic: bool = False
    enable_geometric: bool = False

    def __post_init__(self):
        """Validate options after initialization."""
        if isinstance(self.degree, bool) or not isinstance(self.degree, int):
            raise ConfigurationError(f"degree must be an integer, got {self.degree!r}")

        if self.degree < 2:
            raise ConfigurationError(f"degree must be at least 2, got {self.degree}")

        self.enable_harmonic = bool(self.enable_harmonic)
        self.enable_geometric = bool(self.enable_geometric)

    @property
    def enabled_kinds(self) -> List[AggregateKind]:
        """Aggregate kinds to register, in a stable order."""
        kinds = []
        if self.enable_geometric:
            kinds.append(AggregateKind.GEOMETRIC)
        if self.enable_harmonic:
            kinds.append(AggregateKind.HARMONIC)
        return kinds

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize options to dictionary.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return {
            "degree": self.degree,
            "enable_harmonic": self.enable_harmonic,
            "enable_geometric": self.enable_geometric,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SampleOptions':
        """
        Create options from dictionary.

        Missing keys fall back to defaults.
        """
        return cls(
            degree=int(data.get("degree", 2)),
            enable_harmonic=_parse_bool(data.get("enable_harmonic", data.get("harmonic", False))),
            enable_geometric=_parse_bool(data.get("enable_geometric", data.get("geometric", False))),
        )


def _parse_bool(value: Any) -> bool:
    """Parse a value to boolean, handling string representations."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.lower() in ('true', '1', 'yes', 'y')
    return bool(value)
