"""String helpers: first-character case conversion and coalescing."""

from .case import to_lower_initial, to_upper_initial
from .coalesce import coalesce

__all__ = ["coalesce", "to_lower_initial", "to_upper_initial"]
