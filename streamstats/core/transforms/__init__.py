"""Value-mapping transforms (center, reduce, sigmoid) and entropy."""

from .mapping import apply_transform, center, reduce, sigmoid, entropy

__all__ = [
    "apply_transform",
    "center",
    "reduce",
    "sigmoid",
    "entropy",
]
