"""Shared fixtures for iterx tests."""

from collections.abc import Callable, Iterable, Iterator

import pytest


class CountingIterator[T](Iterator[T]):
    """Iterator recording how many times it was pulled, including the pull signaling exhaustion."""

    def __init__(self, data: Iterable[T]) -> None:
        self._inner = iter(data)
        self.pulls = 0

    def __next__(self) -> T:
        self.pulls += 1
        return next(self._inner)


@pytest.fixture
def counting() -> Callable[[Iterable[object]], CountingIterator[object]]:
    """Factory wrapping an iterable into a `CountingIterator`."""
    return CountingIterator
