"""The fold primitive and the tail-append helper.

Everything else in seqfold is built out of these two functions. `fold` is
the only place in the library that walks a sequence.
"""

from seqfold.logging import get_logger
from seqfold.types import Combine, _A, _B
from typing import Iterable, List, Sequence

_logger = get_logger(__name__)


def fold(accum: _B, items: Iterable[_A], combine: Combine[_A, _B]) -> _B:
    """Reduce items from left to right, starting from accum.

    combine is called as combine(element, accumulator), so

        fold(a0, [x1, x2, x3], f) == f(x3, f(x2, f(x1, a0)))

    If items is empty, accum itself is returned. The fold never
    short-circuits."""
    # Stack depth must not grow with the input.
    visited = 0
    for item in items:
        accum = combine(item, accum)
        visited += 1
    _logger.debug('folded {} element(s)', visited)
    return accum


def append(x: _A, items: Sequence[_A]) -> List[_A]:
    """Return a new list of items with x after the last element."""
    return [*items, x]
