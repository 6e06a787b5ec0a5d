from typing import Any, Callable, List, Tuple, TypeVar
from typing_extensions import Protocol, TypeAlias

_A = TypeVar('_A')
_B = TypeVar('_B')


class SupportsLessThan(Protocol):
    def __lt__(self, other: Any) -> bool:
        pass


class SupportsGreaterThan(Protocol):
    def __gt__(self, other: Any) -> bool:
        pass


Predicate: TypeAlias = Callable[[_A], bool]
# Element first, accumulator second.
Combine: TypeAlias = Callable[[_A, _B], _B]
Partition: TypeAlias = Tuple[List[_A], List[_A]]
