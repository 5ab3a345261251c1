from __future__ import annotations

from collections.abc import Callable
from enum import IntEnum
from typing import Any


class Ordering(IntEnum):
    """Result of a three-way comparison.

    Any callable returning an `int` can be used where a comparison is expected, only the sign is read.
    `Ordering` members are plain integers, so they satisfy that contract too.
    """

    LESS = -1
    EQUAL = 0
    GREATER = 1


type Compare[T] = Callable[[T, T], int]
"""Three-way comparison, negative for less, zero for equal, positive for greater."""
type Equal[T] = Callable[[T, T], bool]
"""Equality test between two elements."""


def natural_cmp(left: Any, right: Any) -> Ordering:
    """Compare two values with their own `<` and `>` operators.

    Args:
        left (Any): Left operand.
        right (Any): Right operand.

    Returns:
        Ordering: How `left` orders relative to `right`.

    Example:
    ```python
    >>> from iterx import natural_cmp
    >>> natural_cmp(1, 2)
    <Ordering.LESS: -1>
    >>> natural_cmp("b", "b")
    <Ordering.EQUAL: 0>

    ```
    """
    if left < right:
        return Ordering.LESS
    if left > right:
        return Ordering.GREATER
    return Ordering.EQUAL
