"""Order-preserving combinators built on fold and append."""

from seqfold.fold import append, fold
from seqfold.types import Partition, Predicate, _A, _B
from typing import Callable, List, Sequence


def map(items: Sequence[_A], f: Callable[[_A], _B]) -> List[_B]:
    """Apply f to each element, in order, collecting the results."""
    def combine(item: _A, accum: List[_B]) -> List[_B]:
        return append(f(item), accum)

    return fold([], items, combine)


def filter(items: Sequence[_A], pred: Predicate[_A]) -> List[_A]:
    """Keep the elements for which pred holds, in their original order."""
    def combine(item: _A, accum: List[_A]) -> List[_A]:
        if pred(item):
            return append(item, accum)
        return accum

    return fold([], items, combine)


def split_by(items: Sequence[_A], pred: Predicate[_A]) -> Partition[_A]:
    """Split items into (satisfying pred, not satisfying pred).

    Both halves keep the relative order the elements had in items."""

    def splitter(item: _A, halves: Partition[_A]) -> Partition[_A]:
        left, right = halves
        if pred(item):
            return append(item, left), right
        return left, append(item, right)

    initial: Partition[_A] = ([], [])
    return fold(initial, items, splitter)
