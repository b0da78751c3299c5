"""
Common helper utilities.

Sub-packages:
- errorsx: error context wrapping, enriched errors and cause chain helpers
- stringsx: first-character case conversion and string coalescing
- uuidx: random UUID generation
"""

from .errorsx import EnrichedError, ErrorContext
from .stringsx import coalesce, to_lower_initial, to_upper_initial
from .uuidx import generate_new_v4

__all__ = [
    "EnrichedError",
    "ErrorContext",
    "coalesce",
    "generate_new_v4",
    "to_lower_initial",
    "to_upper_initial",
]
