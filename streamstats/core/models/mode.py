"""
Run-length mode tracking over a sorted sequence.

Equal values are adjacent in a sorted sequence, so the most frequent value is
the one with the longest run. No frequency table is needed.
"""

from dataclasses import dataclass
from typing import Sequence

from .. import numeric


@dataclass
class ModeTracker:
    """
    Cached result of the last run-length scan.

    Attributes:
        best_value: Value of the longest run seen (NaN before any scan)
        best_count: Length of that run
        current_value: Value of the run being scanned
        current_count: Length of the run being scanned
        fresh: True only right after a scan, cleared by any mutation;
            informational, surfaced as OrderedSample.mode_is_current
    """

    best_value: float = numeric.NAN
    best_count: int = 0
    current_value: float = numeric.NAN
    current_count: int = 0
    fresh: bool = False

    def invalidate(self) -> None:
        self.fresh = False

    def recompute(self, values: Sequence[float]) -> float:
        """
        Scan ``values`` (ascending) once and return the mode.

        A run replaces the best run only with a strictly greater count, so
        ties go to the smallest value.
        """
        self.best_value, self.best_count = numeric.NAN, 0
        self.current_value, self.current_count = numeric.NAN, 0

        for v in values:
            if self.current_count and v == self.current_value:
                self.current_count += 1
                continue
            if self.current_count > self.best_count:
                self.best_value, self.best_count = self.current_value, self.current_count
            self.current_value, self.current_count = v, 1

        if self.current_count > self.best_count:
            self.best_value, self.best_count = self.current_value, self.current_count

        self.fresh = True
        return self.best_value
