"""
First-character case conversion.

Only the leading character changes. Python applies full Unicode case
mapping, so a single leading character may expand into several
(e.g. "ß" upper-cases to "SS").
"""

from __future__ import annotations


def to_lower_initial(s: str) -> str:
    """Return ``s`` with its first character lower-cased."""
    if not s:
        return s
    return s[0].lower() + s[1:]


def to_upper_initial(s: str) -> str:
    """Return ``s`` with its first character upper-cased."""
    if not s:
        return s
    return s[0].upper() + s[1:]
