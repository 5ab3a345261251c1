"""Tests for chunk."""

import math
from collections.abc import Callable, Iterator
from typing import Any

import pytest

import iterx as ix
from iterx import funcs


@pytest.mark.parametrize("size", [1, 2, 3, 4, 7, 10])
@pytest.mark.parametrize("length", [0, 1, 6, 7, 9])
def test_chunk_sizes_and_concatenation(size: int, length: int) -> None:
    """Test the number and sizes of chunks, and that they rebuild the input."""
    data = list(range(length))
    chunks = list(funcs.chunk(data, size))
    assert len(chunks) == math.ceil(length / size)
    assert all(len(c) == size for c in chunks[:-1])
    if chunks:
        assert len(chunks[-1]) == (length % size or size)
    assert [x for c in chunks for x in c] == data


def test_chunk_never_yields_empty() -> None:
    """Test an exactly divisible input ends without an empty chunk."""
    assert list(funcs.chunk([1, 2, 3, 4], 2)) == [(1, 2), (3, 4)]


@pytest.mark.parametrize("size", [0, -1])
def test_chunk_invalid_size_raises_at_call(size: int) -> None:
    """Test an invalid size fails immediately, before any pull."""
    with pytest.raises(ValueError, match="chunk size must be at least 1"):
        funcs.chunk([1, 2, 3], size)
    with pytest.raises(ValueError, match="chunk size must be at least 1"):
        ix.Iter([1, 2, 3]).chunk(size)


def test_chunk_is_lazy(counting: Callable[..., Any]) -> None:
    """Test chunk only pulls what each chunk needs."""
    source = counting(range(10))
    chunks = funcs.chunk(source, 3)
    assert source.pulls == 0
    assert next(chunks) == (0, 1, 2)
    assert source.pulls == 3  # noqa: PLR2004


def test_chunk_stays_exhausted(counting: Callable[..., Any]) -> None:
    """Test chunk keeps signaling exhaustion without asking the source again."""
    source = counting([1])
    chunks = funcs.chunk(source, 2)
    assert next(chunks) == (1,)
    assert next(chunks, None) is None
    pulls = source.pulls
    assert next(chunks, None) is None
    assert source.pulls == pulls


def test_chunks_are_independent_snapshots() -> None:
    """Test a yielded chunk is not altered by later pulls."""
    chunks = funcs.chunk("abcde", 2)
    first = next(chunks)
    second = next(chunks)
    assert first == ("a", "b")
    assert second == ("c", "d")


def test_iter_chunk_yields_seq() -> None:
    """Test the Iter method wraps each chunk in a Seq."""
    chunks = ix.Iter(range(5)).chunk(2).collect()
    assert all(isinstance(c, ix.Seq) for c in chunks)
    assert [c.inner() for c in chunks] == [(0, 1), (2, 3), (4,)]


def test_chunk_of_infinite_iterator() -> None:
    """Test chunk can be chained on an unbounded source."""
    chunks = ix.Iter(iter(int, 1)).chunk(4).take(2).collect()
    assert [c.inner() for c in chunks] == [(0, 0, 0, 0), (0, 0, 0, 0)]


def test_chunk_drops_partial_chunk_on_source_error() -> None:
    """Test a source failing mid-chunk does not leak its partial chunk into the next one."""

    def flaky() -> Iterator[int]:
        yield from (1, 2, 3)
        msg = "boom"
        raise RuntimeError(msg)

    class Resumable(Iterator[int]):
        def __init__(self) -> None:
            self._failing = flaky()
            self._rest = iter((5, 6, 7))

        def __next__(self) -> int:
            if self._failing is not None:
                try:
                    return next(self._failing)
                except RuntimeError:
                    self._failing = None
                    raise
            return next(self._rest)

    chunks = funcs.chunk(Resumable(), 2)
    assert next(chunks) == (1, 2)
    with pytest.raises(RuntimeError, match="boom"):
        next(chunks)
    rest = list(chunks)
    assert rest == [(5, 6), (7,)]
    assert all(len(c) <= 2 for c in rest)  # noqa: PLR2004
