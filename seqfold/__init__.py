"""Sequence combinators derived from a single left fold.

Several names here shadow builtins (map, filter, any, all, max, min, len),
so prefer `import seqfold` and qualified access over star imports.
"""

from seqfold.aggregates import len, max, min
from seqfold.fold import append, fold
from seqfold.quantifiers import all, any
from seqfold.sort import insertion_sort
from seqfold.transform import filter, map, split_by
from seqfold._version import version

__all__ = [
    'fold',
    'append',
    'map',
    'filter',
    'split_by',
    'any',
    'all',
    'max',
    'min',
    'len',
    'insertion_sort',
    'version',
]
