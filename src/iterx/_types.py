from __future__ import annotations

from typing import NamedTuple


class Group[S, K](NamedTuple):
    """A run of consecutive elements sharing the same key.

    See `group_by()` for details.
    """

    values: S
    """The elements of the run, in their original order."""
    key: K
    """The key computed from the first element of the run."""


class MinMax[T](NamedTuple):
    """The smallest and largest elements of an iterable.

    See `minmax()` for details.
    """

    min: T
    max: T


class Partitioned[S](NamedTuple):
    """The two halves produced by `partition()`."""

    matching: S
    """Elements for which the predicate held."""
    rest: S
    """Elements for which the predicate did not hold."""


class Split[S, I](NamedTuple):
    """The two halves produced by `split_at()`."""

    left: S
    """The materialized leading elements."""
    right: I
    """The remaining elements, still lazy."""


class Unzipped[L, R](NamedTuple):
    """The two sides produced by `unzip()`."""

    left: L
    """The first elements of the pairs."""
    right: R
    """The second elements of the pairs."""
