"""Result data structures for sample statistics."""

from .summary import Summary, ShapiroWilkResult

__all__ = ["Summary", "ShapiroWilkResult"]
