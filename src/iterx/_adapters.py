"""Lazy, stateful iterator adapters.

Each adapter owns the iterator it reads from and keeps its own state between pulls.
No adapter reads its source before the first call to `__next__`.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Final

from ._types import Group

logger = logging.getLogger(__name__)

_MISSING: Final = object()


class _Adapter[T, R](Iterator[R]):
    _inner: Iterator[T]
    _done: bool

    __slots__ = ("_done", "_inner")

    def __init__(self, data: Iterable[T]) -> None:
        self._inner = iter(data)
        self._done = False

    def __iter__(self) -> Iterator[R]:
        return self

    def __repr__(self) -> str:
        state = "exhausted" if self._done else "active"
        return f"{self.__class__.__name__}({state})"

    def _exhaust(self) -> None:
        self._done = True
        logger.debug("%s exhausted", self.__class__.__name__)


class Chunks[T](_Adapter[T, tuple[T, ...]]):
    """Yield tuples of up to `size` consecutive elements.

    The buffer is reused across pulls and cleared after each snapshot, so it never holds more than `size` elements.
    """

    __slots__ = ("_buffer", "_size")

    def __init__(self, data: Iterable[T], size: int) -> None:
        if size < 1:
            logger.debug("rejected chunk size %r", size)
            msg = f"chunk size must be at least 1, got {size}"
            raise ValueError(msg)
        super().__init__(data)
        self._size = size
        self._buffer: list[T] = []

    def __next__(self) -> tuple[T, ...]:
        if not self._done:
            try:
                self._buffer.extend(itertools.islice(self._inner, self._size))
            except BaseException:
                self._buffer.clear()
                raise
            if self._buffer:
                chunk = tuple(self._buffer)
                self._buffer.clear()
                return chunk
            self._exhaust()
        raise StopIteration


class GroupBy[T, K](_Adapter[T, Group[tuple[T, ...], K]]):
    """Yield runs of consecutive elements whose keys are equal.

    The key of a run is computed once, from its first element.
    Every later element joins the run when its own key equals that first key.
    """

    __slots__ = ("_key", "_predicate", "_run")

    def __init__(self, data: Iterable[T], predicate: Callable[[T], K]) -> None:
        super().__init__(data)
        self._predicate = predicate
        self._run: list[T] = []
        self._key: Any = _MISSING

    def _seed(self, item: T, key: K) -> None:
        self._run.clear()
        self._run.append(item)
        self._key = key

    def _flush(self) -> Group[tuple[T, ...], K]:
        return Group(tuple(self._run), self._key)

    def __next__(self) -> Group[tuple[T, ...], K]:
        if self._done:
            raise StopIteration
        if not self._run:
            first = next(self._inner, _MISSING)
            if first is _MISSING:
                self._exhaust()
                raise StopIteration
            self._seed(first, self._predicate(first))
        for item in self._inner:
            key = self._predicate(item)
            if key == self._key:
                self._run.append(item)
                continue
            group = self._flush()
            self._seed(item, key)
            return group
        group = self._flush()
        self._run.clear()
        return group


class FindIndices[T](_Adapter[T, int]):
    """Yield the position of every element satisfying a predicate.

    The running index counts every element examined, across pulls.
    """

    __slots__ = ("_index", "_predicate")

    def __init__(self, data: Iterable[T], predicate: Callable[[T], bool]) -> None:
        super().__init__(data)
        self._predicate = predicate
        self._index = 0

    def __next__(self) -> int:
        if self._done:
            raise StopIteration
        for item in self._inner:
            index = self._index
            self._index += 1
            if self._predicate(item):
                return index
        self._exhaust()
        raise StopIteration


def chunk[T](data: Iterable[T], size: int) -> Iterator[tuple[T, ...]]:
    """Lazily split `data` into tuples of `size` elements.

    The last chunk is shorter when the length of `data` is not a multiple of `size`.
    No empty chunk is ever produced.

    Args:
        data (Iterable[T]): The elements to split.
        size (int): Number of elements per chunk, at least 1.

    Returns:
        Iterator[tuple[T, ...]]: An iterator of chunks.

    Raises:
        ValueError: If `size` is lower than 1. This is raised at call time, before any element is read.

    Example:
    ```python
    >>> from iterx import funcs
    >>> list(funcs.chunk(range(7), 3))
    [(0, 1, 2), (3, 4, 5), (6,)]
    >>> list(funcs.chunk([], 3))
    []
    >>> funcs.chunk([1], 0)
    Traceback (most recent call last):
        ...
    ValueError: chunk size must be at least 1, got 0

    ```
    """
    return Chunks(data, size)


def group_by[T, K](
    data: Iterable[T], predicate: Callable[[T], K]
) -> Iterator[Group[tuple[T, ...], K]]:
    """Lazily group consecutive elements sharing the same predicate result.

    This is not a full partition: the same key can appear in several, non adjacent, groups.

    Args:
        data (Iterable[T]): The elements to group.
        predicate (Callable[[T], K]): Function computing the key of each element. Called once per element.

    Returns:
        Iterator[Group[tuple[T, ...], K]]: An iterator of `Group(values, key)`.

    Example:
    ```python
    >>> from iterx import funcs
    >>> for group in funcs.group_by([1, 3, 5, 2, 4, 7, 9], lambda x: x % 2 == 0):
    ...     print(group)
    Group(values=(1, 3, 5), key=False)
    Group(values=(2, 4), key=True)
    Group(values=(7, 9), key=False)

    ```
    """
    return GroupBy(data, predicate)


def find_indices[T](data: Iterable[T], predicate: Callable[[T], bool]) -> Iterator[int]:
    """Lazily yield the zero-based index of every element satisfying `predicate`.

    Args:
        data (Iterable[T]): The elements to scan.
        predicate (Callable[[T], bool]): Condition to test.

    Returns:
        Iterator[int]: An iterator of indices, in increasing order.

    Example:
    ```python
    >>> from iterx import funcs
    >>> list(funcs.find_indices("abcabc", lambda c: c == "b"))
    [1, 4]

    ```
    """
    return FindIndices(data, predicate)


def flatten_array[T](data: Iterable[Iterable[T]]) -> Iterator[T]:
    """Lazily flatten one level of nesting.

    Empty inner iterables are skipped.

    Args:
        data (Iterable[Iterable[T]]): An iterable of iterables.

    Returns:
        Iterator[T]: An iterator over the inner elements.

    Example:
    ```python
    >>> from iterx import funcs
    >>> list(funcs.flatten_array([[1, 2], [], (3,)]))
    [1, 2, 3]

    ```
    """
    return itertools.chain.from_iterable(data)
