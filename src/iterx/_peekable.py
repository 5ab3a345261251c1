from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from ._core import Equal, Pipeable
from ._results import NONE, Option, Some


class Peekable[T](Pipeable, Iterator[T]):
    """An iterator with a single slot of lookahead.

    `Peekable` owns the iterator it wraps: once wrapped, the original iterator must not be advanced directly,
    or the peeked value and the source would disagree.

    - `peek()` pulls at most one value from the source and keeps it in the slot.
    - `next()` (or the builtin `next()`) hands out the slot content first, then reads the source directly.
    - Exhaustion is never cached in the slot: peeking an exhausted source simply asks it again.

    Args:
        data (Iterable[T]): The iterable to wrap.

    Example:
    ```python
    >>> import iterx as ix
    >>> it = ix.Peekable([1, 2])
    >>> it.peek()
    Some(value=1)
    >>> it.peek()
    Some(value=1)
    >>> it.next()
    Some(value=1)
    >>> it.next()
    Some(value=2)
    >>> it.peek()
    NONE
    >>> it.has_next()
    False

    ```
    """

    _inner: Iterator[T]
    _peeked: Option[T]

    __slots__ = ("_inner", "_peeked")

    def __init__(self, data: Iterable[T]) -> None:
        self._inner = iter(data)
        self._peeked = NONE

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(peeked={self._peeked!r})"

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if self._peeked.is_some():
            value = self._peeked.unwrap()
            self._peeked = NONE
            return value
        return next(self._inner)

    def __bool__(self) -> bool:
        return self.has_next()

    def next(self) -> Option[T]:
        """Consume and return the next element.

        Returns:
            Option[T]: The peeked element if there is one, else the next element of the source, or `NONE` once exhausted.
        """
        if self._peeked.is_some():
            peeked = self._peeked
            self._peeked = NONE
            return peeked
        for value in self._inner:
            return Some(value)
        return NONE

    def peek(self) -> Option[T]:
        """Return the next element without consuming it.

        Repeated calls return the same value until `next()` is called.

        Returns:
            Option[T]: The upcoming element, or `NONE` if the source is exhausted.

        Example:
        ```python
        >>> import iterx as ix
        >>> it = ix.Peekable(["a"])
        >>> it.peek().unwrap()
        'a'
        >>> list(it)
        ['a']
        >>> it.peek()
        NONE

        ```
        """
        if self._peeked.is_none():
            for value in self._inner:
                self._peeked = Some(value)
                break
        return self._peeked

    def has_next(self) -> bool:
        """Check whether another element is available.

        This may pull one element from the source into the peek slot.

        Returns:
            bool: `True` if `next()` would return `Some`.
        """
        return self.peek().is_some()

    def is_next(self, value: T, eq: Equal[T] = operator.eq) -> bool:
        """Check whether the upcoming element equals `value`.

        This may pull one element from the source into the peek slot.

        Args:
            value (T): The value to compare against.
            eq (Equal[T]): Equality function, called as `eq(upcoming, value)`. Defaults to `==`.

        Returns:
            bool: `True` if an element is available and equal to `value`, `False` otherwise.

        Example:
        ```python
        >>> import iterx as ix
        >>> it = ix.Peekable(["Ab", "c"])
        >>> it.is_next("ab")
        False
        >>> it.is_next("ab", lambda x, y: x.lower() == y.lower())
        True

        ```
        """
        peeked = self.peek()
        return peeked.is_some() and eq(peeked.unwrap(), value)

    def next_if(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Consume and return the next element only if `predicate` holds for it.

        When the predicate fails, the element stays in the peek slot.

        Args:
            predicate (Callable[[T], bool]): Condition the upcoming element must satisfy.

        Returns:
            Option[T]: The consumed element, or `NONE` if exhausted or the predicate failed.

        Example:
        ```python
        >>> import iterx as ix
        >>> it = ix.Peekable([0, 1, 2, 3])
        >>> it.next_if(lambda x: x == 0)
        Some(value=0)
        >>> it.next_if(lambda x: x == 0)
        NONE
        >>> it.next()
        Some(value=1)

        ```
        """
        peeked = self.peek()
        if peeked.is_some() and predicate(peeked.unwrap()):
            return self.next()
        return NONE

    def next_if_eq(self, expected: Any) -> Option[T]:
        """Consume and return the next element only if it equals `expected`.

        Args:
            expected (Any): The value the upcoming element must be equal to.

        Returns:
            Option[T]: The consumed element, or `NONE`.
        """
        return self.next_if(lambda value: value == expected)
