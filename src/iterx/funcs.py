"""Free-function form of every combinator.

These functions accept any iterable, take ownership of it, and return plain Python values:
iterators, tuples, `Option` and the named tuples from `iterx`.
The methods of `Iter` delegate to them.
"""

from collections.abc import Iterable

from ._adapters import chunk, find_indices, flatten_array, group_by
from ._peekable import Peekable
from ._reducers import (
    equal,
    find_index,
    is_sorted,
    is_sorted_desc,
    minmax,
    nth,
    partition,
    split_at,
    unzip,
)


def to_peekable[T](data: Iterable[T]) -> Peekable[T]:
    """Wrap `data` into a `Peekable`.

    Args:
        data (Iterable[T]): The iterable to wrap.

    Returns:
        Peekable[T]: A new peekable iterator over `data`.
    """
    return Peekable(data)


__all__ = [
    "chunk",
    "equal",
    "find_index",
    "find_indices",
    "flatten_array",
    "group_by",
    "is_sorted",
    "is_sorted_desc",
    "minmax",
    "nth",
    "partition",
    "split_at",
    "to_peekable",
    "unzip",
]
