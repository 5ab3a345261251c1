"""Eager reductions, each consuming its input in a single pass."""

from __future__ import annotations

import itertools
import logging
import operator
from collections.abc import Callable, Iterable, Iterator
from typing import Final

import more_itertools as mit

from ._core import Compare, Equal, natural_cmp
from ._results import NONE, Option, Some
from ._types import MinMax, Partitioned, Split, Unzipped

logger = logging.getLogger(__name__)

_MISSING: Final = object()


def _check_index(name: str, n: int) -> None:
    if n < 0:
        logger.debug("rejected %s index %r", name, n)
        msg = f"{name} index must be non-negative, got {n}"
        raise ValueError(msg)


def equal[T](left: Iterable[T], right: Iterable[T], eq: Equal[T] = operator.eq) -> bool:
    """Check that two iterables yield equal elements, in the same order, and have the same length.

    Both inputs are read in lockstep and the comparison stops at the first difference,
    leaving them partially consumed.

    Args:
        left (Iterable[T]): First iterable.
        right (Iterable[T]): Second iterable.
        eq (Equal[T]): Equality function, called as `eq(left_item, right_item)`. Defaults to `==`.

    Returns:
        bool: `True` if both inputs end together and every pair compared equal.

    Example:
    ```python
    >>> from iterx import funcs
    >>> funcs.equal([1, 2, 3], iter((1, 2, 3)))
    True
    >>> funcs.equal([1, 2, 3], [1, 2])
    False
    >>> funcs.equal(["a", "B"], ["A", "b"], lambda x, y: x.lower() == y.lower())
    True

    ```
    """
    for a, b in itertools.zip_longest(left, right, fillvalue=_MISSING):
        if a is _MISSING or b is _MISSING or not eq(a, b):
            return False
    return True


def find_index[T](data: Iterable[T], predicate: Callable[[T], bool]) -> Option[int]:
    """Return the zero-based index of the first element satisfying `predicate`.

    The input is consumed up to and including the match.

    Args:
        data (Iterable[T]): The elements to scan.
        predicate (Callable[[T], bool]): Condition to test.

    Returns:
        Option[int]: The index of the first match, or `NONE`.

    Example:
    ```python
    >>> from iterx import funcs
    >>> funcs.find_index([1, 3, 4, 6], lambda x: x % 2 == 0)
    Some(value=2)
    >>> funcs.find_index([], lambda x: True)
    NONE

    ```
    """
    return Option.from_(mit.first(mit.locate(data, predicate), None))


def is_sorted[T](data: Iterable[T], compare: Compare[T] = natural_cmp) -> bool:
    """Check that `data` is in ascending order.

    Equal neighbours are allowed. The scan stops at the first pair where `compare(previous, current)` is positive.

    Args:
        data (Iterable[T]): The elements to check.
        compare (Compare[T]): Three-way comparison. Defaults to the natural ordering.

    Returns:
        bool: `True` if no element is greater than its successor. Empty and single element inputs are sorted.

    Example:
    ```python
    >>> from iterx import funcs
    >>> funcs.is_sorted([1, 2, 2, 4])
    True
    >>> funcs.is_sorted([1, 4, 2, 3])
    False
    >>> funcs.is_sorted([])
    True

    ```
    """
    # compare is always called as compare(prev, cur)
    return not any(compare(prev, cur) > 0 for prev, cur in itertools.pairwise(data))


def is_sorted_desc[T](data: Iterable[T], compare: Compare[T] = natural_cmp) -> bool:
    """Check that `data` is in descending order.

    Equal neighbours are allowed. The scan stops at the first pair where `compare(previous, current)` is negative.

    Args:
        data (Iterable[T]): The elements to check.
        compare (Compare[T]): Three-way comparison. Defaults to the natural ordering.

    Returns:
        bool: `True` if no element is less than its successor.

    Example:
    ```python
    >>> from iterx import funcs
    >>> funcs.is_sorted_desc([4, 3, 2, 1])
    True
    >>> funcs.is_sorted_desc([4, 5])
    False

    ```
    """
    # compare is always called as compare(prev, cur)
    return not any(compare(prev, cur) < 0 for prev, cur in itertools.pairwise(data))


def minmax[T](data: Iterable[T], compare: Compare[T] = natural_cmp) -> Option[MinMax[T]]:
    """Return the smallest and largest elements in a single pass.

    The bounds are seeded from the first two elements with one comparison, the first one being the minimum unless it compares greater.
    Afterwards, the minimum only moves on a strictly smaller element, and the maximum on a strictly greater one.

    Args:
        data (Iterable[T]): The elements to scan.
        compare (Compare[T]): Three-way comparison. Defaults to the natural ordering.

    Returns:
        Option[MinMax[T]]: `MinMax(min, max)`, or `NONE` if `data` is empty.

    Example:
    ```python
    >>> from iterx import funcs
    >>> funcs.minmax([8, 4, 6, 9])
    Some(value=MinMax(min=4, max=9))
    >>> funcs.minmax([7])
    Some(value=MinMax(min=7, max=7))
    >>> funcs.minmax([])
    NONE

    ```
    """
    iterator = iter(data)
    first = next(iterator, _MISSING)
    if first is _MISSING:
        return NONE
    second = next(iterator, _MISSING)
    if second is _MISSING:
        return Some(MinMax(first, first))
    low, high = (second, first) if compare(first, second) > 0 else (first, second)
    for item in iterator:
        if compare(item, low) < 0:
            low = item
        if compare(item, high) > 0:
            high = item
    return Some(MinMax(low, high))


def nth[T](data: Iterable[T], n: int) -> Option[T]:
    """Skip `n` elements and return the next one.

    At most `n + 1` elements are consumed.

    Args:
        data (Iterable[T]): The elements to read.
        n (int): Zero-based position of the wanted element.

    Returns:
        Option[T]: The element at position `n`, or `NONE` if `data` is shorter.

    Raises:
        ValueError: If `n` is negative.

    Example:
    ```python
    >>> from iterx import funcs
    >>> funcs.nth("abc", 1)
    Some(value='b')
    >>> funcs.nth("abc", 3)
    NONE

    ```
    """
    _check_index("nth", n)
    value = mit.nth(data, n, _MISSING)
    return NONE if value is _MISSING else Some(value)


def partition[T](
    data: Iterable[T], predicate: Callable[[T], bool]
) -> Partitioned[tuple[T, ...]]:
    """Route every element to one of two tuples depending on `predicate`.

    Relative order is preserved within each side.

    Args:
        data (Iterable[T]): The elements to route.
        predicate (Callable[[T], bool]): Condition deciding the side of each element.

    Returns:
        Partitioned[tuple[T, ...]]: `Partitioned(matching, rest)`.

    Example:
    ```python
    >>> from iterx import funcs
    >>> funcs.partition(range(6), lambda x: x % 3 == 0)
    Partitioned(matching=(0, 3), rest=(1, 2, 4, 5))

    ```
    """
    matching: list[T] = []
    rest: list[T] = []
    for item in data:
        (matching if predicate(item) else rest).append(item)
    return Partitioned(tuple(matching), tuple(rest))


def split_at[T](data: Iterable[T], n: int) -> Split[tuple[T, ...], Iterator[T]]:
    """Materialize the first `n` elements, and keep the remainder lazy.

    Args:
        data (Iterable[T]): The elements to split.
        n (int): Number of leading elements to materialize.

    Returns:
        Split[tuple[T, ...], Iterator[T]]: `Split(left, right)`, where `right` is the source iterator itself, positioned after `left`.

    Raises:
        ValueError: If `n` is negative.

    Example:
    ```python
    >>> from iterx import funcs
    >>> left, right = funcs.split_at([1, 2, 3, 4, 5], 3)
    >>> left
    (1, 2, 3)
    >>> list(right)
    [4, 5]

    ```
    """
    _check_index("split_at", n)
    iterator = iter(data)
    return Split(tuple(itertools.islice(iterator, n)), iterator)


def unzip[T, U](data: Iterable[tuple[T, U]]) -> Unzipped[tuple[T, ...], tuple[U, ...]]:
    """Turn an iterable of pairs into a pair of tuples.

    Args:
        data (Iterable[tuple[T, U]]): The pairs to split.

    Returns:
        Unzipped[tuple[T, ...], tuple[U, ...]]: `Unzipped(left, right)`.

    Example:
    ```python
    >>> from iterx import funcs
    >>> funcs.unzip([(1, "a"), (2, "b")])
    Unzipped(left=(1, 2), right=('a', 'b'))
    >>> funcs.unzip([])
    Unzipped(left=(), right=())

    ```
    """
    left: list[T] = []
    right: list[U] = []
    for first, second in data:
        left.append(first)
        right.append(second)
    return Unzipped(tuple(left), tuple(right))
