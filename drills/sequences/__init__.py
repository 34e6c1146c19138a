"""Sequence relationship helpers."""

from .sublist import Comparison, contains, sublist

__all__ = ["Comparison", "contains", "sublist"]
