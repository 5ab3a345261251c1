from __future__ import annotations

import itertools
import operator
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Concatenate, overload

import cytoolz as cz

from . import _adapters, _reducers
from ._core import CommonBase, Compare, Equal, get_config, natural_cmp
from ._peekable import Peekable
from ._results import NONE, Option, Some
from ._types import Group, MinMax, Partitioned, Split, Unzipped


def convert_data[T](data: Iterable[T] | T, *more_data: T) -> Iterable[T]:
    return data if cz.itertoolz.isiterable(data) else (data, *more_data)


class CommonMethods[T](CommonBase[Iterable[T]]):
    _inner: Iterable[T]

    __slots__ = ()

    def __iter__(self) -> Iterator[T]:
        return iter(self._inner)

    def _lazy[**P, U](
        self,
        factory: Callable[Concatenate[Iterable[T], P], Iterator[U]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Iter[U]:
        def _(data: Iterable[T]) -> Iter[U]:
            return Iter(factory(data, *args, **kwargs))

        return self.into(_)

    def eq(self, other: Iterable[T], eq: Equal[T] = operator.eq) -> bool:
        """Check if two Iterables yield equal elements, in the same order.

        Note:
            This will consume any `Iter` instances involved in the comparison (**self** and/or **other**).
            The comparison stops at the first difference.

        Args:
            other (Iterable[T]): The iterable to compare against.
            eq (Equal[T]): Equality function. Defaults to `==`.

        Returns:
            bool: True if both yield the same number of pairwise equal elements, False otherwise.

        Example:
        ```python
        >>> import iterx as ix
        >>> ix.Iter((1, 2, 3)).eq(ix.Iter((1, 2, 3)))
        True
        >>> ix.Iter((1, 2, 3)).eq(ix.Seq((1, 2)))
        False
        >>> ix.Seq((1.0, 2.0)).eq([1.05, 1.98], lambda a, b: abs(a - b) < 0.1)
        True

        ```
        """
        return self.into(_reducers.equal, other, eq)

    def find_index(self, predicate: Callable[[T], bool]) -> Option[int]:
        """Return the index of the first element satisfying `predicate`.

        Args:
            predicate (Callable[[T], bool]): Function to evaluate each item.

        Returns:
            Option[int]: The zero-based index, or `NONE` if no element matches.

        Example:
        ```python
        >>> import iterx as ix
        >>> ix.Seq(("a", "b", "c")).find_index(lambda x: x == "c")
        Some(value=2)
        >>> ix.Seq(("a", "b")).find_index(lambda x: x == "z").unwrap_or(-1)
        -1

        ```
        """
        return self.into(_reducers.find_index, predicate)

    def is_sorted(self, compare: Compare[T] = natural_cmp) -> bool:
        """Returns True if the items are in ascending order.

        Equal neighbours do not break the order.

        Args:
            compare (Compare[T]): Three-way comparison. Defaults to the natural ordering.

        Returns:
            bool: True if sorted, False otherwise.

        Example:
        ```python
        >>> import iterx as ix
        >>> ix.Seq((1, 2, 2, 3)).is_sorted()
        True
        >>> ix.Seq(("aa", "b")).is_sorted(lambda x, y: len(x) - len(y))
        False

        ```
        """
        return self.into(_reducers.is_sorted, compare)

    def is_sorted_desc(self, compare: Compare[T] = natural_cmp) -> bool:
        """Returns True if the items are in descending order.

        Args:
            compare (Compare[T]): Three-way comparison. Defaults to the natural ordering.

        Returns:
            bool: True if sorted in descending order, False otherwise.

        Example:
        ```python
        >>> import iterx as ix
        >>> ix.Seq((4, 3, 3, 1)).is_sorted_desc()
        True

        ```
        """
        return self.into(_reducers.is_sorted_desc, compare)

    def minmax(self, compare: Compare[T] = natural_cmp) -> Option[MinMax[T]]:
        """Return the minimum and the maximum in a single pass.

        Args:
            compare (Compare[T]): Three-way comparison. Defaults to the natural ordering.

        Returns:
            Option[MinMax[T]]: `MinMax(min, max)`, or `NONE` if empty.

        Example:
        ```python
        >>> import iterx as ix
        >>> ix.Seq((8, 4, 6, 9)).minmax().unwrap()
        MinMax(min=4, max=9)
        >>> ix.Seq(()).minmax()
        NONE

        ```
        """
        return self.into(_reducers.minmax, compare)

    def nth(self, index: int) -> Option[T]:
        """Return the item at index.

        Args:
            index (int): The zero-based index of the item to retrieve.

        Returns:
            Option[T]: The item, or `NONE` if there are not enough items.

        Example:
        ```python
        >>> import iterx as ix
        >>> ix.Seq((10, 20)).nth(1)
        Some(value=20)
        >>> ix.Seq((10, 20)).nth(2)
        NONE

        ```
        """
        return self.into(_reducers.nth, index)

    def partition(self, predicate: Callable[[T], bool]) -> Partitioned[Seq[T]]:
        """Split the elements in two `Seq`, depending on `predicate`.

        Args:
            predicate (Callable[[T], bool]): Function to evaluate each item.

        Returns:
            Partitioned[Seq[T]]: The matching elements, then the others, both in original order.

        Example:
        ```python
        >>> import iterx as ix
        >>> evens, odds = ix.Seq((1, 2, 3, 4, 5)).partition(lambda x: x % 2 == 0)
        >>> evens
        Seq(2, 4)
        >>> odds
        Seq(1, 3, 5)

        ```
        """
        matching, rest = self.into(_reducers.partition, predicate)
        return Partitioned(Seq(matching), Seq(rest))

    def split_at(self, n: int) -> Split[Seq[T], Iter[T]]:
        """Collect the first `n` elements, and keep the rest as a lazy `Iter`.

        Args:
            n (int): Number of elements to collect.

        Returns:
            Split[Seq[T], Iter[T]]: The collected head, then the remaining elements.

        Example:
        ```python
        >>> import iterx as ix
        >>> head, tail = ix.Iter((1, 2, 3, 4, 5)).split_at(3)
        >>> head
        Seq(1, 2, 3)
        >>> tail.collect()
        Seq(4, 5)
        >>> head, tail = ix.Iter((1, 2)).split_at(5)
        >>> head, tail.collect()
        (Seq(1, 2), Seq())

        ```
        """
        left, right = self.into(_reducers.split_at, n)
        return Split(Seq(left), Iter(right))

    def unzip[U, V](self: CommonMethods[tuple[U, V]]) -> Unzipped[Seq[U], Seq[V]]:
        """Converts an iterable of pairs into a pair of `Seq`.

        This function is, in some sense, the opposite of zip.

        Returns:
            Unzipped[Seq[U], Seq[V]]: The first elements, then the second elements.

        Example:
        ```python
        >>> import iterx as ix
        >>> unzipped = ix.Seq(((1, "a"), (2, "b"), (3, "c"))).unzip()
        >>> unzipped.left
        Seq(1, 2, 3)
        >>> unzipped.right
        Seq('a', 'b', 'c')

        ```
        """
        left, right = self.into(_reducers.unzip)
        return Unzipped(Seq(left), Seq(right))


class Iter[T](CommonMethods[T], Iterator[T]):
    """A wrapper around Python's `Iterator` Protocol, providing chainable combinators.

    - An `Iterator` is an object representing a stream of data; once exhausted, it cannot be reused or reset.
    - `Iter` instances are single-use, and take ownership of the data they wrap: don't advance the source separately.

    Lazy methods return a new `Iter`, and do no work until pulled.
    Eager methods consume the `Iter` and return their result directly.

    If you need to reuse the data, consider collecting it into a `Seq` first with `.collect()`.

    Args:
        data (Iterable[T]): Any object that can be iterated over.
    """

    _inner: Iterator[T]

    __slots__ = ()

    def __init__(self, data: Iterable[T]) -> None:
        self._inner = iter(data)

    def __next__(self) -> T:
        return next(self._inner)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(<{self._inner.__class__.__name__}>)"

    @overload
    @staticmethod
    def from_[U](data: Iterable[U]) -> Iter[U]: ...
    @overload
    @staticmethod
    def from_[U](data: U, *more_data: U) -> Iter[U]: ...
    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> Iter[U]:
        """Create an iterator from any Iterable, or from unpacked values.

        Args:
            data (Iterable[U] | U): Iterable to convert into an iterator, or a single value.
            *more_data (U): Additional values to include if 'data' is not an Iterable.

        Returns:
            Iter[U]: A new Iter instance containing the provided data.

        Example:
        ```python
        >>> import iterx as ix
        >>> ix.Iter.from_(1, 2, 3).collect()
        Seq(1, 2, 3)

        ```
        """
        return Iter(convert_data(data, *more_data))

    def next(self) -> Option[T]:
        """Return the next element in the iterator.

        Returns:
            Option[T]: The next element, or `NONE` if the iterator is exhausted.

        Example:
        ```python
        >>> import iterx as ix
        >>> it = ix.Iter([1, None])
        >>> it.next()
        Some(value=1)
        >>> it.next()
        Some(value=None)
        >>> it.next()
        NONE

        ```
        """
        for value in self._inner:
            return Some(value)
        return NONE

    def collect(self) -> Seq[T]:
        """Collect the remaining elements into a `Seq`.

        Returns:
            Seq[T]: The collected elements.
        """
        return Seq(tuple(self._inner))

    def map[R](self, func: Callable[[T], R]) -> Iter[R]:
        """Apply a function to each element.

        Args:
            func (Callable[[T], R]): Function to apply to each element.

        Returns:
            Iter[R]: An iterator of transformed elements.

        Example:
        ```python
        >>> import iterx as ix
        >>> ix.Iter([1, 2]).map(lambda x: x + 1).collect()
        Seq(2, 3)

        ```
        """
        return self._lazy(lambda data: map(func, data))

    def filter(self, func: Callable[[T], bool]) -> Iter[T]:
        """Keep the elements for which `func` returns True.

        Args:
            func (Callable[[T], bool]): Function to evaluate each item.

        Returns:
            Iter[T]: An iterator of the kept elements.
        """
        return self._lazy(lambda data: filter(func, data))

    def take(self, n: int) -> Iter[T]:
        """Yield at most the first `n` elements.

        Args:
            n (int): Number of elements to take.

        Returns:
            Iter[T]: An iterator over the first `n` elements.

        Example:
        ```python
        >>> import iterx as ix
        >>> ix.Iter(range(10)).take(3).collect()
        Seq(0, 1, 2)

        ```
        """
        return self._lazy(itertools.islice, n)

    def chunk(self, size: int) -> Iter[Seq[T]]:
        """Yield `Seq` of `size` consecutive elements.

        The last chunk is shorter if there are not enough elements. No empty chunk is ever yielded.

        Args:
            size (int): Number of elements in each chunk. Must be at least 1.

        Returns:
            Iter[Seq[T]]: An iterator of chunks.

        Raises:
            ValueError: If `size` is lower than 1, immediately.

        Example:
        ```python
        >>> import iterx as ix
        >>> ix.Iter(range(8)).chunk(3).collect()
        Seq(Seq(0, 1, 2), Seq(3, 4, 5), Seq(6, 7))
        >>> ix.Iter(range(8)).chunk(0)
        Traceback (most recent call last):
            ...
        ValueError: chunk size must be at least 1, got 0

        ```
        """
        return self._lazy(_adapters.chunk, size).map(Seq)

    def find_indices(self, predicate: Callable[[T], bool]) -> Iter[int]:
        """Yield the index of every element satisfying `predicate`.

        Args:
            predicate (Callable[[T], bool]): Function to evaluate each item.

        Returns:
            Iter[int]: An iterator of zero-based indices.

        Example:
        ```python
        >>> import iterx as ix
        >>> ix.Iter([0, 5, 2, 7, 9]).find_indices(lambda x: x > 4).collect()
        Seq(1, 3, 4)

        ```
        """
        return self._lazy(_adapters.find_indices, predicate)

    def flatten[U](self: Iter[Iterable[U]]) -> Iter[U]:
        """Flatten one level of nesting.

        Returns:
            Iter[U]: An iterator of flattened elements.

        Example:
        ```python
        >>> import iterx as ix
        >>> ix.Iter([[1, 2], [], [3]]).flatten().collect()
        Seq(1, 2, 3)

        ```
        """
        return self._lazy(_adapters.flatten_array)

    def group_by[K](self, predicate: Callable[[T], K]) -> Iter[Group[Seq[T], K]]:
        """Group consecutive elements sharing the same `predicate` result.

        Args:
            predicate (Callable[[T], K]): Function computing the key of each element.

        Returns:
            Iter[Group[Seq[T], K]]: An iterator of `Group(values, key)`.

        Example:
        ```python
        >>> import iterx as ix
        >>> for group in ix.Iter([1, 3, 5, 2, 4, 7, 9]).group_by(lambda x: x % 2 == 0):
        ...     print(group.values, group.key)
        Seq(1, 3, 5) False
        Seq(2, 4) True
        Seq(7, 9) False

        ```
        """

        def _to_seq(group: Group[tuple[T, ...], K]) -> Group[Seq[T], K]:
            return Group(Seq(group.values), group.key)

        return self._lazy(_adapters.group_by, predicate).map(_to_seq)

    def peekable(self) -> Peekable[T]:
        """Wrap the iterator with one element of lookahead.

        Returns:
            Peekable[T]: A `Peekable` owning this iterator.

        Example:
        ```python
        >>> import iterx as ix
        >>> it = ix.Iter([1, 2]).peekable()
        >>> it.peek()
        Some(value=1)
        >>> it.next()
        Some(value=1)

        ```
        """
        return self.into(Peekable)


class Seq[T](CommonMethods[T], Sequence[T]):
    """`Seq` represent an in memory Sequence.

    Implements the `Sequence` Protocol from `collections.abc`, so it can be used as a standard immutable sequence.

    It is the return type of `Iter.collect()` and of every eager method producing elements.
    Unlike `Iter`, it can be iterated any number of times.

    Args:
        data (tuple[T, ...]): The data to initialize the Seq with.
    """

    _inner: tuple[T, ...]

    __slots__ = ()

    def __init__(self, data: tuple[T, ...]) -> None:
        self._inner = data

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().iter_repr(self._inner)})"

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> Seq[T]: ...
    def __getitem__(self, index: int | slice) -> T | Seq[T]:
        if isinstance(index, slice):
            return Seq(self._inner[index])
        return self._inner[index]

    def __len__(self) -> int:
        return len(self._inner)

    @overload
    @staticmethod
    def from_[U](data: Iterable[U]) -> Seq[U]: ...
    @overload
    @staticmethod
    def from_[U](data: U, *more_data: U) -> Seq[U]: ...
    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> Seq[U]:
        """Create a `Seq` from an `Iterable` or unpacked values.

        Args:
            data (Iterable[U] | U): Iterable to convert into a sequence, or a single value.
            *more_data (U): Unpacked items to include in the sequence, if 'data' is not an Iterable.

        Returns:
            Seq[U]: A new Seq instance containing the provided data.

        Example:
        ```python
        >>> import iterx as ix
        >>> ix.Seq.from_(1, 2, 3)
        Seq(1, 2, 3)
        >>> ix.Seq.from_([4, 5])
        Seq(4, 5)

        ```
        """
        converted = convert_data(data, *more_data)
        return Seq(converted if isinstance(converted, tuple) else tuple(converted))

    def iter(self) -> Iter[T]:
        """Get an iterator over the sequence.

        Call this to switch to lazy evaluation.

        Returns:
            Iter[T]: An `Iter` instance wrapping an iterator over the sequence.
        """
        return Iter(self._inner)
