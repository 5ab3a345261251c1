"""Tests for the eager reductions."""

from collections.abc import Callable
from typing import Any

import pytest

import iterx as ix
from iterx import funcs


class TestEqual:
    """Tests for equal."""

    def test_same_content(self) -> None:
        """Test two iterators over identical content are equal."""
        data = [1, 2, 3]
        assert funcs.equal(iter(data), iter(data))
        assert funcs.equal([], [])

    @pytest.mark.parametrize(
        ("left", "right"),
        [([1, 2, 3], [1, 2]), ([1, 2], [1, 2, 3]), ([], [1]), ([1], [])],
    )
    def test_length_mismatch(self, left: list[int], right: list[int]) -> None:
        """Test differing lengths are never equal, even with a shared prefix."""
        assert not funcs.equal(left, right)

    def test_order_sensitive(self) -> None:
        """Test the same elements in another order are not equal."""
        assert not funcs.equal([1, 2], [2, 1])

    def test_custom_equality(self) -> None:
        """Test a custom equality function is used for each pair."""
        assert funcs.equal("abc", "ABC", lambda a, b: a.upper() == b.upper())

    def test_short_circuit(self, counting: Callable[..., Any]) -> None:
        """Test the comparison stops at the first mismatch."""
        left = counting([1, 9, 3, 4])
        right = counting([1, 2, 3, 4])
        assert not funcs.equal(left, right)
        assert next(left) == 3  # noqa: PLR2004
        assert next(right) == 3  # noqa: PLR2004

    def test_iter_eq(self) -> None:
        """Test the method form."""
        assert ix.Iter("ab").eq("ab")
        assert not ix.Seq((1,)).eq(ix.Iter(()))


class TestPartition:
    """Tests for partition."""

    def test_routes_and_keeps_order(self) -> None:
        """Test every element lands on exactly one side, in order."""
        data = [5, 2, 8, 1, 4, 7]
        matching, rest = funcs.partition(data, lambda x: x > 4)  # noqa: PLR2004
        assert matching == (5, 8, 7)
        assert rest == (2, 1, 4)
        assert len(matching) + len(rest) == len(data)

    def test_empty(self) -> None:
        """Test an empty input gives two empty sides."""
        assert funcs.partition([], bool) == ((), ())

    def test_results_are_restartable(self) -> None:
        """Test the Seq results can be iterated more than once."""
        result = ix.Iter(range(4)).partition(lambda x: x < 2)  # noqa: PLR2004
        assert list(result.matching) == [0, 1]
        assert list(result.matching) == [0, 1]
        assert result.rest.iter().collect().inner() == (2, 3)


class TestUnzip:
    """Tests for unzip."""

    def test_unzip_and_rezip(self) -> None:
        """Test both sides have the input length and zip back to the input."""
        pairs = [(1, "a"), (2, "b"), (3, "c")]
        left, right = funcs.unzip(pairs)
        assert left == (1, 2, 3)
        assert right == ("a", "b", "c")
        assert list(zip(left, right, strict=True)) == pairs

    def test_empty(self) -> None:
        """Test an empty input gives two empty sides."""
        assert funcs.unzip([]) == ((), ())

    def test_iter_unzip(self) -> None:
        """Test the method form returns Seq."""
        result = ix.Iter(iter([(1, 2), (3, 4)])).unzip()
        assert result.left.inner() == (1, 3)
        assert result.right.inner() == (2, 4)


class TestMinMax:
    """Tests for minmax."""

    def test_empty(self) -> None:
        """Test an empty input has no bounds."""
        assert funcs.minmax([]) == ix.NONE

    def test_single(self) -> None:
        """Test a single element is both bounds."""
        assert funcs.minmax([3]) == ix.Some((3, 3))

    def test_many(self) -> None:
        """Test the example from the docs."""
        assert funcs.minmax([8, 4, 6, 9]).unwrap() == ix.MinMax(4, 9)

    def test_custom_compare(self) -> None:
        """Test a custom three-way comparison."""
        result = funcs.minmax(["ccc", "a", "bb"], lambda x, y: len(x) - len(y))
        assert result.unwrap() == ("a", "ccc")

    def test_ties_keep_initial_bounds(self) -> None:
        """Test equal elements never replace the bounds seeded from the first pair."""
        data = [(1, "first"), (1, "second"), (1, "third")]

        def _by_number(x: tuple[int, str], y: tuple[int, str]) -> int:
            return x[0] - y[0]

        low, high = funcs.minmax(data, _by_number).unwrap()
        assert low == (1, "first")
        assert high == (1, "second")

    def test_first_pair_descending(self) -> None:
        """Test the first pair is swapped when the first element is greater."""
        assert funcs.minmax([2, 1]).unwrap() == (1, 2)

    def test_ordering_enum_compare(self) -> None:
        """Test a comparison returning Ordering members."""

        def _reverse(x: int, y: int) -> ix.Ordering:
            return ix.natural_cmp(y, x)

        assert ix.Seq((3, 1, 2)).minmax(_reverse).unwrap() == (3, 1)


class TestIsSorted:
    """Tests for is_sorted and is_sorted_desc."""

    @pytest.mark.parametrize(
        ("data", "expected"),
        [([1, 2, 3, 4], True), ([1, 4, 2, 3], False), ([], True), ([5], True), ([1, 1, 2], True)],
    )
    def test_is_sorted(self, data: list[int], *, expected: bool) -> None:
        """Test ascending checks, ties allowed."""
        assert funcs.is_sorted(data) is expected

    @pytest.mark.parametrize(
        ("data", "expected"),
        [([4, 3, 2, 1], True), ([4, 5, 1], False), ([], True), ([5], True), ([2, 2, 1], True)],
    )
    def test_is_sorted_desc(self, data: list[int], *, expected: bool) -> None:
        """Test descending checks, ties allowed."""
        assert funcs.is_sorted_desc(data) is expected

    def test_compare_argument_order(self) -> None:
        """Test the comparison receives the previous element first."""
        calls: list[tuple[int, int]] = []

        def _cmp(x: int, y: int) -> int:
            calls.append((x, y))
            return x - y

        funcs.is_sorted([1, 2, 3], _cmp)
        assert calls == [(1, 2), (2, 3)]
        calls.clear()
        funcs.is_sorted_desc([3, 2, 1], _cmp)
        assert calls == [(3, 2), (2, 1)]

    def test_stops_early(self, counting: Callable[..., Any]) -> None:
        """Test the scan stops at the first out-of-order pair."""
        source = counting([1, 3, 2, 4, 5])
        assert not funcs.is_sorted(source)
        assert next(source) == 4  # noqa: PLR2004


class TestNth:
    """Tests for nth."""

    def test_nth(self) -> None:
        """Test nth returns the element at the given position."""
        assert funcs.nth("abcd", 0) == ix.Some("a")
        assert funcs.nth("abcd", 3) == ix.Some("d")

    def test_out_of_range(self) -> None:
        """Test nth past the end returns NONE."""
        assert funcs.nth("abcd", 4) == ix.NONE
        assert funcs.nth([], 0) == ix.NONE

    def test_consumes_n_plus_one(self, counting: Callable[..., Any]) -> None:
        """Test nth pulls exactly n + 1 elements."""
        source = counting(range(10))
        funcs.nth(source, 2)
        assert source.pulls == 3  # noqa: PLR2004

    def test_negative(self) -> None:
        """Test a negative index is a programmer error."""
        with pytest.raises(ValueError, match="non-negative"):
            funcs.nth([1], -1)


class TestSplitAt:
    """Tests for split_at."""

    def test_split(self) -> None:
        """Test the head is materialized and the tail continues the source."""
        left, right = funcs.split_at([1, 2, 3, 4, 5], 3)
        assert left == (1, 2, 3)
        assert list(right) == [4, 5]

    def test_short_input(self) -> None:
        """Test splitting past the end leaves an exhausted tail."""
        left, right = funcs.split_at([1, 2], 5)
        assert left == (1, 2)
        assert list(right) == []

    def test_right_is_source(self, counting: Callable[..., Any]) -> None:
        """Test the tail is the source iterator itself, not a copy."""
        source = counting(range(100))
        left, right = funcs.split_at(source, 2)
        assert right is source
        assert source.pulls == 2  # noqa: PLR2004
        assert left == (0, 1)

    def test_negative(self) -> None:
        """Test a negative index is a programmer error."""
        with pytest.raises(ValueError, match="non-negative"):
            ix.Iter([1]).split_at(-2)
