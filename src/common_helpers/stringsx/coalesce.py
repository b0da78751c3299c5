"""String coalescing."""

from __future__ import annotations

from collections.abc import Iterable


def coalesce(words: Iterable[str | None]) -> str:
    """
    Return the first non-empty string in ``words``.

    Args:
        words: Candidate strings in priority order. ``None`` entries are skipped.

    Returns:
        The first non-empty string, or ``""`` when every candidate is empty.
    """
    for word in words:
        if word:
            return word
    return ""
