from seqfold.fold import fold
from seqfold.transform import split_by
from seqfold.types import SupportsLessThan
from typing import List, Sequence, TypeVar

_LT = TypeVar('_LT', bound=SupportsLessThan)


def insertion_sort(items: Sequence[_LT]) -> List[_LT]:
    """Sort items into non-decreasing order using only <.

    Each element is inserted after everything already placed that is less
    than it, which puts it in front of any equal elements placed earlier.
    So equal elements come out in the reverse of their input order; the sort
    is not stable.

    This is quadratic. That's fine."""

    def insert(x: _LT, placed: List[_LT]) -> List[_LT]:
        less, more = split_by(placed, lambda a: a < x)
        return less + [x] + more

    return fold([], items, insert)
