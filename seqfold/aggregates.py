"""Aggregates over a whole sequence.

max and min return None for an empty sequence. When several elements tie,
the one seen first is returned.
"""

from seqfold.fold import fold
from seqfold.types import SupportsGreaterThan, SupportsLessThan
from typing import Optional, Sequence, TypeVar

_GT = TypeVar('_GT', bound=SupportsGreaterThan)
_LT = TypeVar('_LT', bound=SupportsLessThan)


def max(items: Sequence[_GT]) -> Optional[_GT]:
    """Return the largest element, or None if items is empty."""
    if not items:
        return None

    # a is the element being visited, b the best so far
    def larger(a: _GT, b: _GT) -> _GT:
        return a if a > b else b

    return fold(items[0], items[1:], larger)


def min(items: Sequence[_LT]) -> Optional[_LT]:
    """Return the smallest element, or None if items is empty."""
    if not items:
        return None

    def smaller(a: _LT, b: _LT) -> _LT:
        return a if a < b else b

    return fold(items[0], items[1:], smaller)


def len(items: Sequence[object]) -> int:
    return fold(0, items, lambda _, count: count + 1)
