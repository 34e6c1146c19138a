"""Sublist classification.

Decides whether the first sequence is equal to, a sublist of, a superlist of,
or unequal to the second. Containment means an unbroken run of consecutive
elements; elements are compared with ``==`` only.

Empty sequences:
- both empty: EQUAL
- first empty: SUBLIST
- second empty: SUPERLIST
"""

from enum import Enum
from typing import List, Sequence, TypeVar

T = TypeVar("T")


class Comparison(Enum):
    """Relationship of the first sequence to the second."""

    EQUAL = "equal"
    SUBLIST = "sublist"
    SUPERLIST = "superlist"
    UNEQUAL = "unequal"


def contains(haystack: Sequence[T], needle: Sequence[T]) -> bool:
    """Check if ``needle`` appears as a contiguous run inside ``haystack``.

    An empty needle is contained in every sequence.
    """
    outer: List[T] = list(haystack)
    inner: List[T] = list(needle)
    n = len(inner)
    return any(outer[i : i + n] == inner for i in range(len(outer) - n + 1))


def sublist(first: Sequence[T], second: Sequence[T]) -> Comparison:
    """Classify how ``first`` relates to ``second``.

    Args:
        first: Any sequence of equality-comparable elements
        second: Any sequence of equality-comparable elements

    Returns:
        Comparison.EQUAL, SUBLIST, SUPERLIST or UNEQUAL
    """
    first, second = list(first), list(second)

    if first == second:
        return Comparison.EQUAL
    if len(first) < len(second) and contains(second, first):
        return Comparison.SUBLIST
    if len(first) > len(second) and contains(first, second):
        return Comparison.SUPERLIST
    return Comparison.UNEQUAL
