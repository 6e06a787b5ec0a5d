from seqfold.transform import filter
from seqfold.types import Predicate, _A
from typing import Sequence


def any(items: Sequence[_A], pred: Predicate[_A]) -> bool:
    """Return whether pred holds for at least one element.

    Unlike the builtin, every element is tested; there is no
    short-circuiting."""
    return bool(filter(items, pred))


def all(items: Sequence[_A], pred: Predicate[_A]) -> bool:
    """Return whether pred holds for every element (True when empty)."""
    return not any(items, lambda x: not pred(x))
