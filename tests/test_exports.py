"""Tests for the public namespace."""

import iterx as ix
from iterx import _core


def test_all_names_resolve() -> None:
    """Test every exported name exists on the package."""
    for name in ix.__all__:
        assert hasattr(ix, name), name


def test_core_exports_are_public() -> None:
    """Test every comparison helper exported by the core is reachable from the package."""
    internal = {"CommonBase"}
    assert set(_core.__all__) - internal <= set(ix.__all__)


def test_natural_cmp_orders_values() -> None:
    """Test the default comparison returns Ordering members."""
    assert ix.natural_cmp(1, 2) is ix.Ordering.LESS
    assert ix.natural_cmp("b", "b") is ix.Ordering.EQUAL
    assert ix.natural_cmp((2,), (1, 5)) is ix.Ordering.GREATER
