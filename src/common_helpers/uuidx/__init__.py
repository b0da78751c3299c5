"""UUID helpers."""

from .generator import generate_new_v4

__all__ = ["generate_new_v4"]
